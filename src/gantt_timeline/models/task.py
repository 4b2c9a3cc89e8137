"""Task data model and ingestion."""

import json
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml

from ..errors import (
    InvalidDependencies,
    InvalidTaskRange,
    MalformedTaskDate,
    UnknownTaskStatus,
    UnsupportedFileFormat,
)
from ..utils.datetime_utils import days_between, parse_iso_date


class TaskStatus(Enum):
    """Lifecycle state of a task, with its dashboard label and bar colour."""

    NOT_STARTED = ('NotStarted', 'No Iniciada', 'gray')
    IN_PROGRESS = ('InProgress', 'En Progreso', 'green')
    AT_RISK = ('AtRisk', 'En Riesgo', 'yellow')
    DELAYED = ('Delayed', 'Retrasada', 'red')
    COMPLETED = ('Completed', 'Completada', 'blue')

    def __init__(self, code: str, label: str, color: str):
        self.code = code
        self.label = label
        self.color = color

    @classmethod
    def parse(cls, value: Any) -> 'TaskStatus':
        """Accept an enum member, its code ("AtRisk") or its label ("En Riesgo")."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for status in cls:
            if text in (status.code, status.label, status.name):
                return status
        raise UnknownTaskStatus(value)


@dataclass(frozen=True)
class Task:
    """A scheduled unit of work inside a project."""

    task_id: str
    project_id: str
    name: str
    start_date: date
    end_date: date
    status: TaskStatus = TaskStatus.NOT_STARTED
    dependencies: List[str] = field(default_factory=list)
    assignee: Optional[str] = None

    @property
    def duration_days(self) -> int:
        """Inclusive length in days (a task starting and ending the same day lasts 1)."""
        return days_between(self.start_date, self.end_date) + 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the ingestion format."""
        return {
            'id': self.task_id,
            'projectId': self.project_id,
            'name': self.name,
            'assignee': self.assignee,
            'startDate': self.start_date.isoformat(),
            'endDate': self.end_date.isoformat(),
            'status': self.status.code,
            'dependencies': list(self.dependencies),
        }


def task_from_dict(data: Dict[str, Any]) -> Task:
    """Build a Task from a dashboard record, rejecting unparsable or inverted dates."""
    task_id = str(data.get('id', data.get('task_id', '')))

    dates = {}
    for key, alt in (('startDate', 'start_date'), ('endDate', 'end_date')):
        raw = data.get(key, data.get(alt))
        parsed = parse_iso_date(raw)
        if parsed is None:
            raise MalformedTaskDate(task_id, key, raw)
        dates[key] = parsed

    if dates['endDate'] < dates['startDate']:
        raise InvalidTaskRange(task_id, dates['startDate'], dates['endDate'])

    dependencies = data.get('dependencies')
    if dependencies is None:
        dependencies = []
    elif not isinstance(dependencies, (list, tuple)):
        raise InvalidDependencies(task_id, dependencies)

    return Task(
        task_id=task_id,
        project_id=str(data.get('projectId', data.get('project_id', ''))),
        name=data.get('name', ''),
        start_date=dates['startDate'],
        end_date=dates['endDate'],
        status=TaskStatus.parse(data.get('status', TaskStatus.NOT_STARTED)),
        dependencies=[str(dep) for dep in dependencies],
        assignee=data.get('assignee'),
    )


def tasks_from_records(records: Iterable[Dict[str, Any]]) -> List[Task]:
    """Convert a sequence of raw records into tasks."""
    return [task_from_dict(record) for record in records]


def load_tasks(tasks_path: str) -> List[Task]:
    """Load tasks from a JSON or YAML file holding a list (or a {"tasks": [...]} mapping)."""
    path = Path(tasks_path)

    if not path.exists():
        raise FileNotFoundError(f"Task file not found: {tasks_path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            raw = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            raw = json.load(f)
        else:
            raise UnsupportedFileFormat("task", path.suffix)

    if isinstance(raw, dict):
        raw = raw.get('tasks', [])
    return tasks_from_records(raw or [])
