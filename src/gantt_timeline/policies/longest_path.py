"""Zero-float critical path policy."""

import logging
from typing import Dict, Sequence

from ..validation import topological_order
from ..models.layout import ChainResult
from ..models.task import Task
from ..utils.datetime_utils import days_between
from .base import CriticalChainPolicy

logger = logging.getLogger(__name__)


class LongestPathPolicy(CriticalChainPolicy):
    """Forward/backward pass over the dependency DAG; zero-float tasks are critical.

    Durations are inclusive day counts. A task never starts earlier than its
    own planned start date, so gaps in the plan create float. Requires an
    acyclic graph (DependencyCycleError otherwise).
    """

    def compute_chain(self, tasks: Sequence[Task]) -> ChainResult:
        """Compute earliest/latest start per task and flag tasks with no float."""
        if not tasks:
            return ChainResult(frozenset(), self.get_policy_name(), degenerate_reason="no tasks")

        task_map = {task.task_id: task for task in tasks}
        order = topological_order(tasks)
        successors = self.build_successors(tasks)
        origin = min(task.start_date for task in tasks)

        earliest_start: Dict[str, int] = {}
        earliest_finish: Dict[str, int] = {}
        for task_id in order:
            task = task_map[task_id]
            start = days_between(origin, task.start_date)
            for dep_id in task.dependencies:
                if dep_id in earliest_finish:
                    start = max(start, earliest_finish[dep_id])
            earliest_start[task_id] = start
            earliest_finish[task_id] = start + task.duration_days

        project_finish = max(earliest_finish.values())

        latest_start: Dict[str, int] = {}
        for task_id in reversed(order):
            succ_starts = [latest_start[s] for s in successors.get(task_id, []) if s in latest_start]
            latest_finish = min(succ_starts) if succ_starts else project_finish
            latest_start[task_id] = latest_finish - task_map[task_id].duration_days

        total_float = {task_id: latest_start[task_id] - earliest_start[task_id] for task_id in order}
        critical = sorted(
            (task_id for task_id in order if total_float[task_id] == 0),
            key=lambda task_id: (earliest_start[task_id], task_id),
        )

        logger.debug("Longest-path float: %s", total_float)
        return ChainResult(frozenset(critical), self.get_policy_name(), ordered_ids=critical)

    def get_policy_name(self) -> str:
        """Return policy name."""
        return "LONGEST-PATH"
