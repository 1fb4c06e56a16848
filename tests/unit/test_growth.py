from collections.abc import Callable

import pytest

from herogrowth.models.entity import Entity
from herogrowth.models.growth import GrowthPoint
from herogrowth.models.growtherror import MalformedInputError
from herogrowth.pipeline.growth import build_series, percentage_increase, summarize, top_n


@pytest.mark.parametrize("current", [-50, 0, 0.5, 100, 1e9])
def test_percentage_increase_zero_previous_is_zero(current: float) -> None:
    assert percentage_increase(current, 0) == 0


def test_percentage_increase_values() -> None:
    assert percentage_increase(150, 100) == 50
    assert percentage_increase(100, 100) == 0
    assert percentage_increase(50, 100) == -50


def test_build_series_yields_one_point_per_adjacent_pair(make_entity: Callable[..., Entity]) -> None:
    entity = make_entity(
        records=[
            {"level": 4, "hitpoints": 100},
            {"level": 5, "hitpoints": 120},
            {"level": 6, "hitpoints": 90},
            {"level": 7, "hitpoints": 90},
        ]
    )

    series = build_series(entity.records, "hitpoints")

    assert len(series) == len(entity.records) - 1
    assert [p.level for p in series] == [5, 6, 7]
    assert series[0].value == pytest.approx(20)
    assert series[1].value == pytest.approx(-25)
    assert series[1].previous_value == 120
    assert series[1].actual_value == 90


def test_build_series_short_input_is_empty(make_entity: Callable[..., Entity]) -> None:
    assert build_series([], "hitpoints") == []
    assert build_series(make_entity(records=[{"level": 1, "hitpoints": 5}]).records, "hitpoints") == []


def test_build_series_skips_pairs_with_gaps(make_entity: Callable[..., Entity]) -> None:
    records = make_entity(
        records=[{"level": 1, "hitpoints": 100}, {"level": 2, "hitpoints": 110}, {"level": 3, "hitpoints": 121}]
    ).records

    series = build_series([records[0], None, records[1], records[2]], "hitpoints")

    assert [p.level for p in series] == [3]


@pytest.mark.parametrize("bad_value", [None, "100", True, float("nan"), float("inf"), float("-inf")])
def test_build_series_rejects_malformed_values(make_entity: Callable[..., Entity], bad_value: object) -> None:
    entity = make_entity(records=[{"level": 1, "hitpoints": 100}, {"level": 2, "hitpoints": bad_value}])

    with pytest.raises(MalformedInputError) as exc_info:
        build_series(entity.records, "hitpoints", entity_name=entity.name)

    assert exc_info.value.entity == "Archer Queen"
    assert exc_info.value.level == 2
    assert exc_info.value.statistic == "hitpoints"


def test_build_series_rejects_missing_statistic(make_entity: Callable[..., Entity]) -> None:
    entity = make_entity(records=[{"level": 1, "hitpoints": 100}, {"level": 2, "hitpoints": 120}])

    with pytest.raises(MalformedInputError) as exc_info:
        build_series(entity.records, "healthRecovery", entity_name=entity.name)

    assert exc_info.value.level == 2
    assert "healthRecovery" in exc_info.value.message


def test_summarize_empty_is_none() -> None:
    assert summarize([]) is None


def test_summarize_single_point(make_points: Callable[..., list[GrowthPoint]]) -> None:
    summary = summarize(make_points([(7, 4.5)]))

    assert summary is not None
    assert summary.avg == summary.max == summary.min == 4.5
    assert summary.max_level == summary.min_level == 7


def test_summarize_ties_report_first_occurrence(make_points: Callable[..., list[GrowthPoint]]) -> None:
    summary = summarize(make_points([(2, 5), (3, 5)]))

    assert summary is not None
    assert summary.max_level == 2
    assert summary.min_level == 2


def test_summarize_first_occurrence_follows_sequence_order(make_points: Callable[..., list[GrowthPoint]]) -> None:
    summary = summarize(make_points([(9, 0), (3, 2), (4, 0), (2, 2)]))

    assert summary is not None
    assert summary.avg == 1
    assert summary.max_level == 3
    assert summary.min_level == 9


def test_top_n_is_stable_and_descending(make_points: Callable[..., list[GrowthPoint]]) -> None:
    points = make_points([(2, 1.0), (3, 4.0), (4, 2.0), (5, 4.0), (6, 2.0)])
    original = list(points)

    top = top_n(points, 3)

    assert [(p.level, p.value) for p in top] == [(3, 4.0), (5, 4.0), (4, 2.0)]
    assert points == original


def test_top_n_bounds(make_points: Callable[..., list[GrowthPoint]]) -> None:
    points = make_points([(2, 1.0), (3, 4.0), (4, 2.0), (5, 4.0), (6, 2.0)])

    assert top_n(points, 0) == []
    assert len(top_n(points, 100)) == 5
    with pytest.raises(ValueError):
        top_n(points, -1)
