"""First-predecessor backward walk from the latest end task."""

import logging
from typing import Sequence

from ..models.layout import ChainResult
from ..models.task import Task
from .base import CriticalChainPolicy

logger = logging.getLogger(__name__)


class FirstPredecessorPolicy(CriticalChainPolicy):
    """Default policy: one linear chain following dependencies[0] backward.

    This is an approximation, not the critical path method. It ignores
    durations along the chain, parallel paths and float. Only the first
    listed predecessor of each task is followed.
    """

    def compute_chain(self, tasks: Sequence[Task]) -> ChainResult:
        """Walk back from the end task that finishes last."""
        if not tasks:
            return ChainResult(frozenset(), self.get_policy_name(), degenerate_reason="no tasks")

        task_map = {task.task_id: task for task in tasks}
        successors = self.build_successors(tasks)

        # End tasks: nothing in the set depends on them
        end_tasks = [task for task in tasks if not successors.get(task.task_id)]
        if not end_tasks:
            reason = "no end tasks: every task is a predecessor of another (dependency cycle)"
            logger.warning("Critical chain is empty: %s", reason)
            return ChainResult(frozenset(), self.get_policy_name(), degenerate_reason=reason)

        # Latest end date wins; equal end dates resolve to the greatest task id
        last_task = max(end_tasks, key=lambda t: (t.end_date, t.task_id))

        visited = []
        seen = set()
        current = last_task
        while current is not None:
            if current.task_id in seen:
                logger.warning("Critical chain walk stopped at repeated task %s", current.task_id)
                break
            visited.append(current.task_id)
            seen.add(current.task_id)
            if not current.dependencies:
                break
            # Predecessors outside the filtered set end the walk
            current = task_map.get(current.dependencies[0])

        visited.reverse()
        logger.debug("First-predecessor chain: %s", visited)
        return ChainResult(frozenset(visited), self.get_policy_name(), ordered_ids=visited)

    def get_policy_name(self) -> str:
        """Return policy name."""
        return "FIRST-PREDECESSOR"
