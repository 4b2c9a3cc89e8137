"""Task input and layout output models."""

from .task import Task, TaskStatus, load_tasks, task_from_dict, tasks_from_records
from .layout import (
    ChainResult,
    DependencyEdge,
    Granularity,
    HeaderBand,
    TaskLayout,
    TimelineBounds,
    TimelineView,
)

__all__ = [
    'Task', 'TaskStatus', 'load_tasks', 'task_from_dict', 'tasks_from_records',
    'ChainResult', 'DependencyEdge', 'Granularity', 'HeaderBand', 'TaskLayout',
    'TimelineBounds', 'TimelineView',
]
