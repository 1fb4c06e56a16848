"""Pure growth calculations over per-level hero statistics."""

import math
from collections.abc import Sequence
from numbers import Real

from herogrowth.models.entity import LevelRecord
from herogrowth.models.growth import GrowthPoint, Summary
from herogrowth.models.growtherror import MalformedInputError


def percentage_increase(current: float, previous: float) -> float:
    """
    Percentage change from ``previous`` to ``current``.

    A zero ``previous`` yields 0 whatever ``current`` is, so growth out of a
    zero base is reported as no growth.
    """
    if previous == 0:
        return 0.0
    return ((current - previous) / previous) * 100


def _stat_value(record: LevelRecord, statistic: str, entity_name: str | None) -> float:
    value = record.get(statistic)
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise MalformedInputError(entity_name, record.level, statistic, value)
    return value


def build_series(
    records: Sequence[LevelRecord | None],
    statistic: str,
    entity_name: str | None = None,
) -> list[GrowthPoint]:
    """
    Build one growth point per adjacent pair of level records.

    Parameters:
    -----------
    records : Sequence[LevelRecord | None]
        Records ordered ascending by level. Gaps (``None``) skip the pairs
        they take part in.
    statistic : str
        Name of the statistic to read from each record.
    entity_name : str, optional
        Used only to name the hero in ``MalformedInputError``.

    Returns:
    --------
    list[GrowthPoint]
        Points in input order, each carrying the level of the later record.
    """
    points = []
    for i in range(1, len(records)):
        current, previous = records[i], records[i - 1]
        if current is None or previous is None:
            continue

        current_value = _stat_value(current, statistic, entity_name)
        previous_value = _stat_value(previous, statistic, entity_name)
        points.append(
            GrowthPoint(
                level=current.level,
                value=percentage_increase(current_value, previous_value),
                previous_value=previous_value,
                actual_value=current_value,
            )
        )
    return points


def summarize(points: Sequence[GrowthPoint]) -> Summary | None:
    """Average, max and min growth; extremes report the level of their first occurrence."""
    if not points:
        return None

    values = [point.value for point in points]
    max_value = max(values)
    min_value = min(values)
    return Summary(
        avg=sum(values) / len(values),
        max=max_value,
        min=min_value,
        max_level=next(point.level for point in points if point.value == max_value),
        min_level=next(point.level for point in points if point.value == min_value),
    )


def top_n(points: Sequence[GrowthPoint], n: int) -> list[GrowthPoint]:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    # sorted() is stable with reverse=True: equal values keep input order
    return sorted(points, key=lambda point: point.value, reverse=True)[:n]
