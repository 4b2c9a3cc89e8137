import pytest

from gantt_timeline.errors import DependencyCycleError, InvalidTaskRange
from gantt_timeline.models import Task
from gantt_timeline.validation import find_cycle, topological_order, validate_acyclic, validate_ranges

from conftest import make_task


def test_topological_order_puts_predecessors_first(sample_tasks) -> None:
    tasks = [t for t in sample_tasks if t.project_id == "P002"]
    order = topological_order(tasks)

    position = {task_id: index for index, task_id in enumerate(order)}
    for task in tasks:
        for dep_id in task.dependencies:
            assert position[dep_id] < position[task.task_id]


def test_topological_order_ignores_dangling_dependencies() -> None:
    tasks = [make_task("A", "2024-01-01", "2024-01-02", deps=["MISSING"])]
    assert topological_order(tasks) == ["A"]


def test_three_task_cycle_is_reported_in_precedence_order() -> None:
    tasks = [
        make_task("A", "2024-01-01", "2024-01-02", deps=["C"]),
        make_task("B", "2024-01-01", "2024-01-02", deps=["A"]),
        make_task("C", "2024-01-01", "2024-01-02", deps=["B"]),
        make_task("D", "2024-01-01", "2024-01-02"),
    ]

    cycle = find_cycle(tasks)
    assert cycle == ["A", "B", "C", "A"]

    with pytest.raises(DependencyCycleError) as excinfo:
        validate_acyclic(tasks)
    assert excinfo.value.cycle == cycle
    assert "A -> B -> C -> A" in str(excinfo.value)


def test_self_dependency_is_a_cycle() -> None:
    tasks = [make_task("A", "2024-01-01", "2024-01-02", deps=["A"])]
    assert find_cycle(tasks) == ["A", "A"]


def test_acyclic_graph_has_no_cycle(sample_tasks) -> None:
    assert find_cycle(sample_tasks) == []
    validate_acyclic(sample_tasks)


def test_validate_ranges_catches_directly_built_tasks() -> None:
    task = make_task("A", "2024-01-02", "2024-01-02")
    bad = Task(
        task_id="B",
        project_id="P1",
        name="Backwards",
        start_date=task.end_date,
        end_date=task.start_date.replace(day=1),
    )
    with pytest.raises(InvalidTaskRange):
        validate_ranges([task, bad])
