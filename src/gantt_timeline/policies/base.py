"""Base critical chain policy interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from ..models.layout import ChainResult
from ..models.task import Task


class CriticalChainPolicy(ABC):
    """Abstract base class for critical chain policies."""

    def __init__(self, config: dict):
        """Initialize policy with configuration."""
        self.config = config

    @abstractmethod
    def compute_chain(self, tasks: Sequence[Task]) -> ChainResult:
        """Select the critical task ids among an already filtered task set."""
        pass

    @abstractmethod
    def get_policy_name(self) -> str:
        """Return the name of this policy."""
        pass

    @staticmethod
    def build_successors(tasks: Sequence[Task]) -> Dict[str, List[str]]:
        """Map each task id to the ids of tasks that list it as a dependency."""
        successors: Dict[str, List[str]] = {task.task_id: [] for task in tasks}
        for task in tasks:
            for dep_id in task.dependencies:
                successors.setdefault(dep_id, []).append(task.task_id)
        return successors
