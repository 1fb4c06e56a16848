from collections.abc import Mapping, Sequence

from herogrowth.config import setup_logging
from herogrowth.constants import DEFAULT_STAT_COLORS, DEFAULT_TRACKED_STATS, STAT_COLORS, display_name
from herogrowth.models.entity import Entity
from herogrowth.models.growth import (
    ChartSeries,
    ComparisonRow,
    ComparisonTable,
    EntityResult,
    GrowthPoint,
    StatisticResult,
)
from herogrowth.pipeline.growth import build_series, summarize, top_n

logger = setup_logging(__name__)


def comparison_columns(tracked_stats: Sequence[str]) -> list[str]:
    columns = []
    for stat in tracked_stats:
        columns.extend([f"{stat}Avg", f"{stat}Max"])
    return columns


def build_chart_series(entity_name: str, statistic: str, series: Sequence[GrowthPoint]) -> ChartSeries:
    by_level = sorted(series, key=lambda point: point.level)
    background, border = STAT_COLORS.get(statistic, DEFAULT_STAT_COLORS)
    return ChartSeries(
        label=f"{entity_name} - {display_name(statistic)} % Increase",
        labels=[f"Level {point.level}" for point in by_level],
        values=[point.value for point in by_level],
        background_color=background,
        border_color=border,
    )


class GrowthPipeline:
    """
    Turns per-level hero records into growth series, summaries and comparisons.

    The pipeline holds configuration only; every call computes its results
    from the given input, so one instance can be shared freely.
    """

    def __init__(self, tracked_stats: Sequence[str] = DEFAULT_TRACKED_STATS, top_n: int = 3) -> None:
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}")
        self.tracked_stats = tuple(tracked_stats)
        self.top_n = top_n

    @property
    def columns(self) -> list[str]:
        return comparison_columns(self.tracked_stats)

    def process(self, entity: Entity) -> EntityResult:
        results: EntityResult = {}
        for stat in self.tracked_stats:
            series = build_series(entity.records, stat, entity_name=entity.name)
            summary = summarize(series)
            if summary is None:
                logger.debug(f"No growth data for {entity.name=} {stat=}, omitting")
                continue

            results[stat] = StatisticResult(
                series=series,
                summary=summary,
                top_increases=top_n(series, self.top_n),
                chart_series=build_chart_series(entity.name, stat, series),
            )
        return results

    def process_all(self, entities: Mapping[str, Entity]) -> dict[str, EntityResult]:
        return {name: self.process(entity) for name, entity in entities.items()}

    def compare(self, entities: Mapping[str, Entity]) -> ComparisonTable:
        return self.compare_results(self.process_all(entities))

    def compare_results(self, results: Mapping[str, EntityResult]) -> ComparisonTable:
        """Comparison table from already processed heroes; missing statistics count as 0."""
        columns = self.columns
        rows = []
        for name, stats in results.items():
            values = {}
            for stat in self.tracked_stats:
                result = stats.get(stat)
                values[f"{stat}Avg"] = result.summary.avg if result is not None else 0
                values[f"{stat}Max"] = result.summary.max if result is not None else 0
            rows.append(ComparisonRow(name=name, values=values))

        column_maxima = {}
        if rows:
            column_maxima = {column: max(row[column] for row in rows) for column in columns}
            for row in rows:
                row.highlights = {column: row[column] == column_maxima[column] for column in columns}

        logger.info(f"Built comparison for {len(rows)} heroes across {len(columns)} columns")
        return ComparisonTable(columns=columns, rows=rows, column_maxima=column_maxima)
