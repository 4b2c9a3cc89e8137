from datetime import date

import pytest

from gantt_timeline.engine import (
    build_headers,
    compute_bounds,
    compute_critical_chain,
    compute_dependency_edges,
    header_widths,
    layout_tasks,
    route_edge,
)
from gantt_timeline.errors import DependencyCycleError
from gantt_timeline.models import Granularity, TaskStatus, TimelineBounds

from conftest import make_task


def test_bounds_pad_seven_days_each_side(two_task_chain) -> None:
    bounds = compute_bounds(two_task_chain)

    assert bounds.start == date(2023, 12, 25)
    assert bounds.end == date(2024, 1, 17)
    assert bounds.total_days == 23


def test_bounds_default_window_when_empty() -> None:
    bounds = compute_bounds([], today=date(2024, 3, 15))

    assert bounds.start == date(2024, 3, 1)
    assert bounds.end == date(2024, 5, 14)
    assert bounds.end > bounds.start


def test_bounds_single_day_task_is_not_degenerate() -> None:
    bounds = compute_bounds([make_task("A", "2024-05-05", "2024-05-05")])
    assert bounds.total_days == 14


def test_month_headers_for_sample_project(sample_tasks) -> None:
    tasks = [t for t in sample_tasks if t.project_id == "P001"]
    bounds = compute_bounds(tasks)

    headers = build_headers(bounds, Granularity.MONTH)

    assert bounds.start == date(2024, 8, 25)
    assert bounds.end == date(2024, 12, 27)
    assert [h.label for h in headers] == [
        "agosto '24", "septiembre '24", "octubre '24", "noviembre '24", "diciembre '24",
    ]
    assert [h.span_days for h in headers] == [31, 30, 31, 30, 31]
    assert sum(h.span_days for h in headers) >= bounds.total_days


def test_month_headers_english_locale() -> None:
    bounds = TimelineBounds(date(2024, 1, 31), date(2024, 3, 2))
    headers = build_headers(bounds, "month", locale="en")

    # Walking from the 31st must not skip February
    assert [h.label for h in headers] == ["January '24", "February '24", "March '24"]
    assert [h.span_days for h in headers] == [31, 29, 31]


def test_week_headers_are_sequential_seven_day_bands() -> None:
    bounds = TimelineBounds(date(2024, 8, 25), date(2024, 12, 27))
    headers = build_headers(bounds, Granularity.WEEK)

    assert len(headers) == 18
    assert headers[0].label == "S1"
    assert headers[-1].label == "S18"
    assert all(h.span_days == 7 for h in headers)
    assert sum(h.span_days for h in headers) >= bounds.total_days


def test_header_widths_fill_the_window() -> None:
    bounds = TimelineBounds(date(2024, 8, 25), date(2024, 12, 27))
    headers = build_headers(bounds, Granularity.MONTH)

    widths = header_widths(headers, bounds.total_days)

    assert sum(widths) == pytest.approx(bounds.total_days)
    assert header_widths([], 10) == []


def test_layout_fractions(two_task_chain) -> None:
    bounds = compute_bounds(two_task_chain)
    layouts = layout_tasks(two_task_chain, bounds, {"T1", "T2"})

    first, second = layouts
    assert first.offset_fraction == pytest.approx(7 / 23)
    assert first.width_fraction == pytest.approx(5 / 23)
    assert second.offset_fraction == pytest.approx(12 / 23)
    assert second.row_index == 1
    assert first.is_critical and second.is_critical


def test_layout_is_not_clamped_outside_bounds() -> None:
    bounds = TimelineBounds(date(2024, 1, 10), date(2024, 1, 20))
    layouts = layout_tasks([make_task("A", "2024-01-01", "2024-01-30")], bounds)

    assert layouts[0].offset_fraction < 0
    assert layouts[0].end_fraction > 1


def test_needs_attention_only_for_delayed_critical_tasks() -> None:
    tasks = [
        make_task("A", "2024-01-01", "2024-01-05", status=TaskStatus.DELAYED),
        make_task("B", "2024-01-06", "2024-01-09", deps=["A"], status=TaskStatus.DELAYED),
        make_task("C", "2024-01-01", "2024-01-02", status=TaskStatus.DELAYED),
    ]
    bounds = compute_bounds(tasks)
    layouts = layout_tasks(tasks, bounds, compute_critical_chain(tasks))

    assert [l.needs_attention for l in layouts] == [True, True, False]


def test_critical_chain_two_tasks(two_task_chain) -> None:
    assert compute_critical_chain(two_task_chain) == {"T1", "T2"}


def test_edges_resolve_rows_and_drop_dangling() -> None:
    tasks = [
        make_task("A", "2024-01-01", "2024-01-05"),
        make_task("B", "2024-01-06", "2024-01-10", deps=["A", "OTHER-PROJECT"]),
    ]
    bounds = compute_bounds(tasks)

    edges = compute_dependency_edges(tasks, bounds)

    assert len(edges) == 1
    edge = edges[0]
    assert (edge.from_task_id, edge.to_task_id) == ("A", "B")
    assert (edge.from_row, edge.to_row) == (0, 1)
    assert edge.start_fraction == pytest.approx(11 / 23)
    assert edge.end_fraction == pytest.approx(12 / 23)


def test_edge_route_is_an_elbow(two_task_chain) -> None:
    bounds = compute_bounds(two_task_chain)
    edge = compute_dependency_edges(two_task_chain, bounds)[0]

    path = route_edge(edge, timeline_width_px=230)

    assert path == "M 110 92 L 120 92 L 120 148 L 120 148"


def test_engine_pipeline_for_sample_project(engine, sample_tasks) -> None:
    view = engine.compute("P001", sample_tasks, "month")

    assert [l.task_id for l in view.layouts] == [f"T10{i}" for i in range(1, 9)]
    assert view.chain.task_ids == {"T101", "T102", "T103", "T105", "T106", "T107", "T108"}
    assert view.chain.ordered_ids[0] == "T101"
    assert view.chain.ordered_ids[-1] == "T108"
    attention = [l.task_id for l in view.layouts if l.needs_attention]
    assert attention == ["T105"]
    # T102 feeds T103 and T104; T105 waits on both
    assert len(view.edges) == 8
    assert all(edge.path.startswith("M ") for edge in view.edges)
    assert view.timeline_width_px == view.bounds.total_days * 30


def test_engine_week_width(engine, sample_tasks) -> None:
    view = engine.compute("P002", sample_tasks, Granularity.WEEK)

    assert view.timeline_width_px == view.bounds.total_days * 50
    assert view.headers[0].label == "S1"


def test_engine_empty_project(engine, sample_tasks) -> None:
    view = engine.compute("P999", sample_tasks, today=date(2024, 3, 15))

    assert view.bounds.start == date(2024, 3, 1)
    assert len(view.headers) == 3
    assert view.layouts == []
    assert view.edges == []
    assert len(view.chain) == 0


def test_engine_rejects_cycles(engine) -> None:
    tasks = [
        make_task("A", "2024-01-01", "2024-01-02", deps=["B"]),
        make_task("B", "2024-01-03", "2024-01-04", deps=["A"]),
    ]
    with pytest.raises(DependencyCycleError):
        engine.compute("P1", tasks)


def test_view_exports(engine, sample_tasks) -> None:
    view = engine.compute("P001", sample_tasks)

    data = view.to_dict()
    assert data["granularity"] == "month"
    assert data["bounds"]["total_days"] == 124
    assert data["chain"]["task_ids"] == sorted(view.chain.task_ids)

    text = view.to_human_readable()
    assert "Timeline: project P001" in text
    assert "Critical task is delayed" in text
    assert "T101 -> T102 -> T103 -> T105" in text
