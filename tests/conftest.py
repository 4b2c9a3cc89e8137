from datetime import date
from pathlib import Path

import pytest

from gantt_timeline.engine import TimelineEngine
from gantt_timeline.models import Task, TaskStatus, load_tasks
from gantt_timeline.utils.config import get_default_config

SAMPLE_TASKS = Path(__file__).resolve().parent.parent / "data" / "sample_tasks.json"


def make_task(task_id, start, end, deps=(), project_id="P1", status=TaskStatus.NOT_STARTED):
    """Build a task from ISO date strings."""
    return Task(
        task_id=task_id,
        project_id=project_id,
        name=f"Task {task_id}",
        start_date=date.fromisoformat(start),
        end_date=date.fromisoformat(end),
        status=status,
        dependencies=list(deps),
    )


@pytest.fixture
def sample_tasks():
    """Dashboard mock tasks for projects P001 and P002."""
    return load_tasks(str(SAMPLE_TASKS))


@pytest.fixture
def config():
    return get_default_config()


@pytest.fixture
def engine(config):
    return TimelineEngine(config)


@pytest.fixture
def two_task_chain():
    return [
        make_task("T1", "2024-01-01", "2024-01-05"),
        make_task("T2", "2024-01-06", "2024-01-10", deps=["T1"]),
    ]
