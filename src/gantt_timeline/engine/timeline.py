"""Core timeline layout engine."""

import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence, Set

from ..models.layout import (
    DependencyEdge,
    Granularity,
    HeaderBand,
    TaskLayout,
    TimelineBounds,
    TimelineView,
)
from ..models.task import Task, TaskStatus
from ..policies import CriticalChainPolicy, FirstPredecessorPolicy, get_policy
from ..utils.config import get_default_config
from ..utils.datetime_utils import (
    add_days,
    days_between,
    days_in_month,
    first_of_month,
    month_label,
    next_month,
)
from ..validation import validate_acyclic, validate_ranges
from .connectors import route_edge

logger = logging.getLogger(__name__)


def compute_bounds(
    tasks: Sequence[Task],
    today: Optional[date] = None,
    padding_days: int = 7,
    default_window_days: int = 60,
) -> TimelineBounds:
    """Visible window: task span padded on both sides, or a default window when empty."""
    if not tasks:
        today = today or date.today()
        return TimelineBounds(first_of_month(today), add_days(today, default_window_days))

    min_start = min(task.start_date for task in tasks)
    max_end = max(task.end_date for task in tasks)
    return TimelineBounds(add_days(min_start, -padding_days), add_days(max_end, padding_days))


def build_headers(
    bounds: TimelineBounds,
    granularity=Granularity.MONTH,
    locale: str = 'es',
    week_label_prefix: str = 'S',
) -> List[HeaderBand]:
    """Header bands covering the window; the last band may run past bounds.end."""
    granularity = Granularity.parse(granularity)
    headers: List[HeaderBand] = []
    seen_keys = set()
    current = bounds.start

    while current <= bounds.end:
        if granularity is Granularity.MONTH:
            key = f"{current.year}-{current.month:02d}"
            if key not in seen_keys:
                seen_keys.add(key)
                headers.append(HeaderBand(
                    key=key,
                    label=month_label(current, locale),
                    span_days=days_in_month(current.year, current.month),
                ))
            current = next_month(current)
        else:
            headers.append(HeaderBand(
                key=f"W{current.isoformat()}",
                label=f"{week_label_prefix}{len(headers) + 1}",
                span_days=7,
            ))
            current = add_days(current, 7)

    return headers


def header_widths(headers: Sequence[HeaderBand], total_days: int) -> List[float]:
    """Scale band spans so that together they fill exactly total_days."""
    span_total = sum(band.span_days for band in headers)
    if span_total == 0:
        return []
    scale = total_days / span_total
    return [band.span_days * scale for band in headers]


def layout_tasks(
    tasks: Sequence[Task],
    bounds: TimelineBounds,
    critical_ids: Iterable[str] = (),
) -> List[TaskLayout]:
    """Place each bar as fractions of the window.

    Values are not clamped: a task outside the bounds yields fractions
    outside [0, 1] and the renderer clips it.
    """
    total_days = bounds.total_days
    critical = set(critical_ids)
    layouts = []

    for row_index, task in enumerate(tasks):
        offset_days = days_between(bounds.start, task.start_date)
        is_critical = task.task_id in critical
        layouts.append(TaskLayout(
            task_id=task.task_id,
            row_index=row_index,
            offset_fraction=offset_days / total_days,
            width_fraction=task.duration_days / total_days,
            is_critical=is_critical,
            needs_attention=is_critical and task.status is TaskStatus.DELAYED,
        ))

    return layouts


def compute_critical_chain(
    tasks: Sequence[Task],
    policy: Optional[CriticalChainPolicy] = None,
) -> Set[str]:
    """Ids of the highlighted chain (first-predecessor walk unless a policy is given)."""
    policy = policy or FirstPredecessorPolicy({})
    return set(policy.compute_chain(tasks).task_ids)


def compute_dependency_edges(
    tasks: Sequence[Task],
    bounds: TimelineBounds,
) -> List[DependencyEdge]:
    """One edge per (dependency, task) pair whose endpoints are both in the list.

    Rows are positions in the given task list. Dependencies on tasks outside
    the list are dropped without error.
    """
    total_days = bounds.total_days
    rows = {task.task_id: index for index, task in enumerate(tasks)}
    by_id = {task.task_id: task for task in tasks}
    edges = []

    for index, task in enumerate(tasks):
        for dep_id in task.dependencies:
            predecessor = by_id.get(dep_id)
            if predecessor is None:
                logger.debug("Dropping dangling dependency %s -> %s", dep_id, task.task_id)
                continue
            edges.append(DependencyEdge(
                from_task_id=dep_id,
                to_task_id=task.task_id,
                from_row=rows[dep_id],
                to_row=index,
                start_fraction=days_between(bounds.start, predecessor.end_date) / total_days,
                end_fraction=days_between(bounds.start, task.start_date) / total_days,
            ))

    return edges


class TimelineEngine:
    """Runs the full bounds -> headers -> layouts -> chain -> edges pipeline."""

    def __init__(self, config: Optional[dict] = None, policy: Optional[CriticalChainPolicy] = None):
        """Initialize engine with configuration and an optional chain policy."""
        self.config = config or get_default_config()
        self.timeline_config = self.config.get('timeline', {})
        self.geometry = self.config.get('geometry', {})
        self.chain_config = self.config.get('critical_chain', {})
        self.locale = self.config.get('locale', 'es')
        self.padding_days = self.timeline_config.get('padding_days', 7)
        self.default_window_days = self.timeline_config.get('default_window_days', 60)
        self.week_label_prefix = self.timeline_config.get('week_label_prefix', 'S')
        self.reject_cycles = self.chain_config.get('reject_cycles', True)
        self.policy = policy or get_policy(self.chain_config.get('policy', 'first-predecessor'), self.config)

    def compute(
        self,
        project_id: Optional[str],
        tasks: Sequence[Task],
        granularity=None,
        today: Optional[date] = None,
        version: int = 0,
    ) -> TimelineView:
        """Compute the renderable view for one project's tasks."""
        granularity = Granularity.parse(granularity or self.timeline_config.get('granularity', 'month'))
        project_tasks = self.filter_tasks(tasks, project_id)

        validate_ranges(project_tasks)
        if self.reject_cycles:
            validate_acyclic(project_tasks)

        bounds = compute_bounds(project_tasks, today, self.padding_days, self.default_window_days)
        headers = build_headers(bounds, granularity, self.locale, self.week_label_prefix)

        chain = self.policy.compute_chain(project_tasks)
        layouts = layout_tasks(project_tasks, bounds, chain.task_ids)
        edges = compute_dependency_edges(project_tasks, bounds)

        width_px = self.timeline_width_px(bounds, granularity)
        for edge in edges:
            edge.path = route_edge(edge, width_px, self.geometry)

        logger.info(
            "Timeline for project %s: %d tasks, %d headers, %d critical, %d edges",
            project_id, len(project_tasks), len(headers), len(chain), len(edges),
        )

        return TimelineView(
            project_id=project_id,
            granularity=granularity,
            bounds=bounds,
            headers=headers,
            layouts=layouts,
            chain=chain,
            edges=edges,
            timeline_width_px=width_px,
            version=version,
        )

    def timeline_width_px(self, bounds: TimelineBounds, granularity) -> float:
        """Minimum chart width: pixels per day depend on the header unit."""
        granularity = Granularity.parse(granularity)
        px_per_day = self.geometry.get('px_per_day', {}).get(granularity.value, 30)
        return float(bounds.total_days * px_per_day)

    @staticmethod
    def filter_tasks(tasks: Sequence[Task], project_id: Optional[str]) -> List[Task]:
        """Tasks of one project in their original order (all tasks when project_id is None)."""
        if project_id is None:
            return list(tasks)
        return [task for task in tasks if task.project_id == project_id]
