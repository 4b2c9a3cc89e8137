"""Gantt timeline layout engine: bounds, header bands, bar placement, critical chain and connectors."""

from .engine import TaskStore, TimelineEngine
from .errors import (
    DependencyCycleError,
    InvalidGranularityError,
    InvalidTaskRange,
    MalformedTaskDate,
    TimelineError,
    UnknownTaskError,
)
from .models import Granularity, Task, TaskStatus, TimelineView, load_tasks

__version__ = "0.1.0"

__all__ = [
    'TaskStore', 'TimelineEngine',
    'DependencyCycleError', 'InvalidGranularityError', 'InvalidTaskRange',
    'MalformedTaskDate', 'TimelineError', 'UnknownTaskError',
    'Granularity', 'Task', 'TaskStatus', 'TimelineView', 'load_tasks',
]
