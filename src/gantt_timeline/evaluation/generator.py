"""Synthetic schedule generator for demos and property checks."""

import random
from dataclasses import replace
from datetime import date, timedelta
from typing import List

from ..models.task import Task, TaskStatus


class TaskGenerator:
    """Generates deterministic, acyclic task sets."""

    def __init__(self, seed: int = 42, config: dict = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}

    def generate_tasks(
        self,
        count: int,
        start_date: date,
        project_id: str = "P900",
        max_duration_days: int = 20,
    ) -> List[Task]:
        """Generate tasks whose dependencies only point at earlier tasks."""
        tasks: List[Task] = []
        statuses = list(TaskStatus)

        for i in range(count):
            task_id = f"T{i + 1:03d}"

            # Some tasks have dependencies (create chains)
            dependencies = []
            if i > 0 and self.random.random() < 0.7:
                dep_count = self.random.randint(1, min(3, i))
                dependencies = [tasks[idx].task_id for idx in self.random.sample(range(i), dep_count)]

            # Start after the latest predecessor ends, with a little slack
            if dependencies:
                latest = max(t.end_date for t in tasks if t.task_id in dependencies)
                start = latest + timedelta(days=self.random.randint(1, 5))
            else:
                start = start_date + timedelta(days=self.random.randint(0, 14))

            duration = self.random.randint(1, max_duration_days)
            end = start + timedelta(days=duration - 1)

            tasks.append(Task(
                task_id=task_id,
                project_id=project_id,
                name=f"Task {i + 1}",
                start_date=start,
                end_date=end,
                status=self.random.choice(statuses),
                dependencies=dependencies,
            ))

        return tasks

    def generate_with_dangling(self, count: int, start_date: date, project_id: str = "P900") -> List[Task]:
        """Generate tasks where some dependencies reference ids outside the set."""
        tasks = self.generate_tasks(count, start_date, project_id)
        result = []
        for task in tasks:
            if self.random.random() < 0.3:
                dangling = f"X{self.random.randint(100, 999)}"
                task = replace(task, dependencies=task.dependencies + [dangling])
            result.append(task)
        return result
