"""Layout invariants checked over generated schedules."""

from datetime import date

import pytest

from gantt_timeline.engine import TimelineEngine
from gantt_timeline.evaluation import TaskGenerator
from gantt_timeline.models import Granularity
from gantt_timeline.validation import validate_acyclic

SEEDS = [1, 7, 42, 2024]


@pytest.fixture(params=SEEDS)
def generated(request):
    generator = TaskGenerator(seed=request.param)
    return generator.generate_with_dangling(30, date(2024, 6, 1))


def test_generated_tasks_are_acyclic(generated) -> None:
    validate_acyclic(generated)


@pytest.mark.parametrize("granularity", [Granularity.MONTH, Granularity.WEEK])
def test_view_invariants(generated, granularity) -> None:
    view = TimelineEngine().compute("P900", generated, granularity)
    by_id = {task.task_id: task for task in generated}

    assert view.bounds.end > view.bounds.start
    assert sum(h.span_days for h in view.headers) >= view.bounds.total_days

    for layout in view.layouts:
        assert layout.offset_fraction >= 0
        assert layout.end_fraction <= 1 + 1e-9

    for edge in view.edges:
        assert edge.from_task_id in by_id
        assert edge.to_task_id in by_id
        assert edge.from_task_id in by_id[edge.to_task_id].dependencies

    chain = view.chain.ordered_ids
    assert chain
    for previous, current in zip(chain, chain[1:]):
        assert by_id[current].dependencies[0] == previous


def test_generator_is_deterministic() -> None:
    first = TaskGenerator(seed=3).generate_tasks(10, date(2024, 1, 1))
    second = TaskGenerator(seed=3).generate_tasks(10, date(2024, 1, 1))
    assert first == second
