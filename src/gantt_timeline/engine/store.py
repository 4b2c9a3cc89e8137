"""Versioned in-memory task store with an explicit reschedule command."""

import logging
from dataclasses import replace
from datetime import date
from typing import Iterable, List, Optional, Tuple

from ..errors import InvalidTaskRange, MalformedTaskDate, UnknownTaskError
from ..models.layout import TaskLayout, TimelineView
from ..models.task import Task
from ..utils.datetime_utils import parse_iso_date
from ..validation import validate_acyclic, validate_ranges
from .timeline import TimelineEngine

logger = logging.getLogger(__name__)


class TaskStore:
    """Owns the task list; every accepted change produces a new version."""

    def __init__(self, tasks: Iterable[Task], engine: Optional[TimelineEngine] = None):
        """Initialize store with tasks, validating each project's graph."""
        self._tasks: Tuple[Task, ...] = tuple(tasks)
        self.engine = engine or TimelineEngine()
        self.version = 0

        validate_ranges(self._tasks)
        if self.engine.reject_cycles:
            for project_id in self.project_ids():
                validate_acyclic(self.tasks_for_project(project_id))

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return self._tasks

    def get(self, task_id: str) -> Task:
        """Return a task by id."""
        for task in self._tasks:
            if task.task_id == task_id:
                return task
        raise UnknownTaskError(task_id)

    def tasks_for_project(self, project_id: str) -> List[Task]:
        """Tasks of one project in store order."""
        return TimelineEngine.filter_tasks(self._tasks, project_id)

    def project_ids(self) -> List[str]:
        """Distinct project ids in first-seen order."""
        seen = []
        for task in self._tasks:
            if task.project_id not in seen:
                seen.append(task.project_id)
        return seen

    def view(self, project_id: str, granularity=None, today: Optional[date] = None) -> TimelineView:
        """Compute the current timeline view of a project."""
        return self.engine.compute(project_id, self._tasks, granularity, today=today, version=self.version)

    def reschedule_task(self, task_id: str, new_start, new_end) -> List[TaskLayout]:
        """Move a task to new dates and return the recomputed layouts of its project.

        Dates may be date objects or YYYY-MM-DD strings. The store is left
        unchanged when validation fails.
        """
        current = self.get(task_id)
        start = parse_iso_date(new_start)
        if start is None:
            raise MalformedTaskDate(task_id, 'startDate', new_start)
        end = parse_iso_date(new_end)
        if end is None:
            raise MalformedTaskDate(task_id, 'endDate', new_end)
        if end < start:
            raise InvalidTaskRange(task_id, start, end)

        updated = replace(current, start_date=start, end_date=end)
        tasks = tuple(updated if task.task_id == task_id else task for task in self._tasks)

        self._tasks = tasks
        self.version += 1
        logger.info(
            "Rescheduled %s to %s..%s (version %d)", task_id, start, end, self.version,
        )
        return self.view(current.project_id).layouts
