"""Ingestion checks for task sets: date ranges and dependency acyclicity."""

from collections import defaultdict, deque
from typing import Dict, List, Sequence

from .errors import DependencyCycleError, InvalidTaskRange
from .models.task import Task


def validate_ranges(tasks: Sequence[Task]) -> None:
    """Raise InvalidTaskRange for the first task ending before it starts."""
    for task in tasks:
        if task.end_date < task.start_date:
            raise InvalidTaskRange(task.task_id, task.start_date, task.end_date)


def topological_order(tasks: Sequence[Task]) -> List[str]:
    """Return task ids with every predecessor before its successors.

    Only dependencies present in the task set are considered. Ties keep the
    input order. Raises DependencyCycleError when no such order exists.
    """
    ids = [task.task_id for task in tasks]
    known = set(ids)
    in_degree: Dict[str, int] = {task_id: 0 for task_id in ids}
    successors: Dict[str, List[str]] = defaultdict(list)

    for task in tasks:
        for dep_id in task.dependencies:
            if dep_id in known:
                successors[dep_id].append(task.task_id)
                in_degree[task.task_id] += 1

    queue = deque(task_id for task_id in ids if in_degree[task_id] == 0)
    order = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for succ in successors[current]:
            in_degree[succ] -= 1
            if in_degree[succ] == 0:
                queue.append(succ)

    if len(order) < len(ids):
        raise DependencyCycleError(find_cycle(tasks))
    return order


def find_cycle(tasks: Sequence[Task]) -> List[str]:
    """Return one dependency cycle as [a, b, ..., a], or [] if the graph is acyclic."""
    by_id = {task.task_id: task for task in tasks}
    state: Dict[str, int] = {}  # 1 = on stack, 2 = done

    for root in by_id:
        if root in state:
            continue
        stack = [(root, iter(by_id[root].dependencies))]
        path = [root]
        state[root] = 1
        while stack:
            node, deps = stack[-1]
            advanced = False
            for dep_id in deps:
                if dep_id not in by_id:
                    continue
                if state.get(dep_id) == 1:
                    # Walked against the dependency direction; reverse to read as precedence
                    cycle = path[path.index(dep_id):] + [dep_id]
                    return list(reversed(cycle))
                if dep_id not in state:
                    state[dep_id] = 1
                    path.append(dep_id)
                    stack.append((dep_id, iter(by_id[dep_id].dependencies)))
                    advanced = True
                    break
            if not advanced:
                state[node] = 2
                path.pop()
                stack.pop()
    return []


def validate_acyclic(tasks: Sequence[Task]) -> None:
    """Raise DependencyCycleError if the dependencies form a cycle."""
    topological_order(tasks)
