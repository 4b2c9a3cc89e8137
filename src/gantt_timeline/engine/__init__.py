"""Timeline layout engine."""

from .connectors import edge_points, route_edge, row_center
from .store import TaskStore
from .timeline import (
    TimelineEngine,
    build_headers,
    compute_bounds,
    compute_critical_chain,
    compute_dependency_edges,
    header_widths,
    layout_tasks,
)

__all__ = [
    'TimelineEngine', 'TaskStore',
    'build_headers', 'compute_bounds', 'compute_critical_chain', 'compute_dependency_edges',
    'header_widths', 'layout_tasks',
    'edge_points', 'route_edge', 'row_center',
]
