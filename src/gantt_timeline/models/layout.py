"""Derived, view-only geometry produced by the timeline engine."""

from dataclasses import dataclass, field, asdict
from datetime import date
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional

from ..errors import InvalidGranularityError
from ..utils.datetime_utils import days_between


class Granularity(Enum):
    """Header band unit."""

    MONTH = 'month'
    WEEK = 'week'

    @classmethod
    def parse(cls, value) -> 'Granularity':
        """Accept a member or a case-insensitive name ("Month", "week")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidGranularityError(value) from None


@dataclass(frozen=True)
class TimelineBounds:
    """Visible window of the chart."""

    start: date
    end: date

    @property
    def total_days(self) -> int:
        return days_between(self.start, self.end)


@dataclass(frozen=True)
class HeaderBand:
    """One month or week column group in the chart header."""

    key: str
    label: str
    span_days: int


@dataclass
class TaskLayout:
    """Horizontal placement of a task bar as fractions of the timeline width."""

    task_id: str
    row_index: int
    offset_fraction: float
    width_fraction: float
    is_critical: bool = False
    needs_attention: bool = False

    @property
    def end_fraction(self) -> float:
        return self.offset_fraction + self.width_fraction


@dataclass
class DependencyEdge:
    """Connector from a predecessor bar's end to a successor bar's start."""

    from_task_id: str
    to_task_id: str
    from_row: int
    to_row: int
    start_fraction: float
    end_fraction: float
    path: Optional[str] = None


@dataclass
class ChainResult:
    """Critical chain membership and, when empty, the reason why."""

    task_ids: FrozenSet[str]
    policy_name: str
    ordered_ids: List[str] = field(default_factory=list)
    degenerate_reason: Optional[str] = None

    def __contains__(self, task_id: str) -> bool:
        return task_id in self.task_ids

    def __len__(self) -> int:
        return len(self.task_ids)


@dataclass
class TimelineView:
    """Complete renderable output for one project."""

    project_id: Optional[str]
    granularity: Granularity
    bounds: TimelineBounds
    headers: List[HeaderBand]
    layouts: List[TaskLayout]
    chain: ChainResult
    edges: List[DependencyEdge]
    timeline_width_px: float
    version: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert view to dictionary for JSON export."""
        data = asdict(self)
        data['granularity'] = self.granularity.value
        data['bounds']['total_days'] = self.bounds.total_days
        data['chain']['task_ids'] = sorted(self.chain.task_ids)
        return data

    def to_human_readable(self) -> str:
        """Generate human-readable report format."""
        lines = [
            f"=== Timeline: project {self.project_id} ===",
            f"Granularity: {self.granularity.value}",
            f"Window: {self.bounds.start} -> {self.bounds.end} ({self.bounds.total_days} days)",
            f"Width: {self.timeline_width_px:.0f}px",
            f"Version: {self.version}",
            "",
            "Headers:",
        ]

        for band in self.headers:
            lines.append(f"  {band.label}: {band.span_days} days")

        lines.extend([
            "",
            "Tasks:",
        ])

        for layout in self.layouts:
            marker = '*' if layout.is_critical else ' '
            lines.append(
                f"  {marker} [{layout.row_index}] {layout.task_id}: "
                f"offset {layout.offset_fraction:.3f}, width {layout.width_fraction:.3f}"
            )
            if layout.needs_attention:
                lines.append("      Critical task is delayed")

        lines.extend([
            "",
            f"Critical chain ({self.chain.policy_name}):",
        ])
        if self.chain.ordered_ids:
            lines.append(f"  {' -> '.join(self.chain.ordered_ids)}")
        if self.chain.degenerate_reason:
            lines.append(f"  Empty: {self.chain.degenerate_reason}")

        lines.extend([
            "",
            "Dependencies:",
        ])

        for edge in self.edges:
            lines.append(f"  {edge.from_task_id} (row {edge.from_row}) -> {edge.to_task_id} (row {edge.to_row})")

        lines.append("=" * 50)

        return "\n".join(lines)
