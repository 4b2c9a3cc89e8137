"""Elbow routing for dependency connectors."""

from typing import Dict, Optional, Tuple

from ..models.layout import DependencyEdge

DEFAULT_GEOMETRY = {
    'header_height': 64,
    'row_height': 56,
    'elbow_offset': 10,
}


def row_center(row_index: int, header_height: float, row_height: float) -> float:
    """Vertical centre of a task row, below the header."""
    return header_height + row_index * row_height + row_height / 2


def edge_points(
    edge: DependencyEdge,
    timeline_width_px: float,
    geometry: Optional[Dict[str, float]] = None,
) -> Tuple[Tuple[float, float], ...]:
    """Corner points of the connector: out of the predecessor, down, into the successor."""
    geometry = {**DEFAULT_GEOMETRY, **(geometry or {})}
    header_height = geometry['header_height']
    row_height = geometry['row_height']
    elbow = geometry['elbow_offset']

    start_x = edge.start_fraction * timeline_width_px
    start_y = row_center(edge.from_row, header_height, row_height)
    end_x = edge.end_fraction * timeline_width_px
    end_y = row_center(edge.to_row, header_height, row_height)

    return (
        (start_x, start_y),
        (start_x + elbow, start_y),
        (start_x + elbow, end_y),
        (end_x, end_y),
    )


def route_edge(
    edge: DependencyEdge,
    timeline_width_px: float,
    geometry: Optional[Dict[str, float]] = None,
) -> str:
    """SVG path data for the connector, e.g. "M 10 92 L 20 92 L 20 148 L 40 148"."""
    points = edge_points(edge, timeline_width_px, geometry)
    head, *rest = points
    parts = [f"M {_fmt(head[0])} {_fmt(head[1])}"]
    parts.extend(f"L {_fmt(x)} {_fmt(y)}" for x, y in rest)
    return " ".join(parts)


def _fmt(value: float) -> str:
    """Drop trailing zeros so whole pixels print as integers."""
    return f"{value:.2f}".rstrip('0').rstrip('.')
