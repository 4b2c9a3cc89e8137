"""Exceptions raised at ingestion and command boundaries."""

from typing import List, Optional


class TimelineError(Exception):
    """Base class for timeline engine errors."""
    pass


class MalformedTaskDate(TimelineError, ValueError):
    """A task date could not be parsed as a calendar date."""

    def __init__(self, task_id: str, field: str, value):
        self.task_id = task_id
        self.field = field
        self.value = value
        super().__init__(f"Task {task_id}: {field} {value!r} is not a YYYY-MM-DD date")


class InvalidTaskRange(TimelineError, ValueError):
    """A task ends before it starts."""

    def __init__(self, task_id: str, start, end):
        self.task_id = task_id
        self.start = start
        self.end = end
        super().__init__(f"Task {task_id}: end date {end} is before start date {start}")


class DependencyCycleError(TimelineError):
    """The dependency graph contains a cycle."""

    def __init__(self, cycle: List[str]):
        self.cycle = cycle
        super().__init__(f"Dependency cycle detected: {' -> '.join(cycle)}")


class UnknownTaskError(TimelineError, KeyError):
    """A command referenced a task id the store does not hold."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(task_id)

    def __str__(self) -> str:
        return f"Unknown task: {self.task_id}"


class InvalidGranularityError(TimelineError, ValueError):
    """Header granularity is neither month nor week."""

    def __init__(self, value: Optional[str]):
        self.value = value
        super().__init__(f"Unsupported granularity: {value!r} (expected 'month' or 'week')")


class UnknownTaskStatus(TimelineError, ValueError):
    """A task status matches no known code or label."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown task status: {value!r}")


class InvalidDependencies(TimelineError, ValueError):
    """A task's dependencies are not a list of task ids."""

    def __init__(self, task_id: str, value):
        self.task_id = task_id
        self.value = value
        super().__init__(f"Task {task_id}: dependencies must be a list of task ids, got {value!r}")


class UnsupportedFileFormat(TimelineError, ValueError):
    """A config or task file has a suffix other than YAML or JSON."""

    def __init__(self, kind: str, suffix: str):
        self.kind = kind
        self.suffix = suffix
        super().__init__(f"Unsupported {kind} file format: {suffix}")


class UnknownPolicyError(TimelineError, ValueError):
    """No critical chain policy is registered under this name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown critical chain policy: {name}")
