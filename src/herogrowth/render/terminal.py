from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from herogrowth.config import settings, setup_logging
from herogrowth.constants import (
    DEFAULT_TRACKED_STATS,
    GROWTH_BANDS,
    NO_GROWTH_LEGEND,
    NO_GROWTH_STYLE,
    display_name,
    short_name,
)
from herogrowth.models.growth import ComparisonTable, EntityResult, GrowthPoint, StatisticResult
from herogrowth.render.base import RendererBase

logger = setup_logging(__name__)

BAR = "█"
AXIS_INDENT = " " * 7


def growth_style(value: float) -> str:
    for bound, inclusive, style, _legend in GROWTH_BANDS:
        if value >= bound if inclusive else value > bound:
            return style
    return NO_GROWTH_STYLE


def _level_labels(series: Sequence[GrowthPoint], marked: Sequence[int]) -> str:
    chars = [" "] * len(series)
    cursor = 0
    for i in marked:
        if i < cursor:
            continue
        label = str(series[i].level)
        chars[i : i + len(label)] = label
        cursor = i + len(label) + 1
    return "".join(chars).rstrip()


def create_ascii_graph(series: Sequence[GrowthPoint], title: str, max_height: int = 20) -> list[str]:
    """
    Vertical bar graph of growth values as rich markup lines.

    Each column is one level; rows step from the maximum down to the minimum
    value, and a column is filled wherever its value reaches the row threshold.
    """
    if not series:
        return []
    if max_height < 1:
        raise ValueError(f"max_height must be at least 1, got {max_height}")

    values = [point.value for point in series]
    max_value, min_value = max(values), min(values)
    value_range = (max_value - min_value) or 1

    lines = [
        f"\n[bold cyan]=== {escape(title)} ===[/bold cyan]",
        f"[cyan]Range: {min_value:.2f}% to {max_value:.2f}%\n[/cyan]",
    ]
    for row in range(max_height, -1, -1):
        threshold = min_value + (row / max_height) * value_range
        line = f"{threshold:>6.1f}% |"
        for value in values:
            if value >= threshold:
                style = growth_style(value)
                line += f"[{style}]{BAR}[/{style}]"
            else:
                line += " "
        lines.append(line)

    marked = [i for i in range(len(series)) if i % 5 == 0 or i == len(series) - 1]
    x_axis = "".join("+" if i in marked else "-" for i in range(len(series)))
    lines.append(f"{AXIS_INDENT}|{x_axis}")
    lines.append(f"{AXIS_INDENT}{_level_labels(series, marked)} (Level)")
    return lines


def summary_lines(result: StatisticResult) -> list[str]:
    summary = result.summary
    lines = [
        "[blue]\nSummary Statistics:[/blue]",
        f"  [blue]Average Increase:[/blue] [bright_green]{summary.avg:.2f}%[/bright_green]",
        f"  [blue]Highest Increase:[/blue] [bright_green]{summary.max:.2f}%[/bright_green] "
        f"[cyan](Level {summary.max_level})[/cyan]",
        f"  [blue]Lowest Increase:[/blue] [bright_yellow]{summary.min:.2f}%[/bright_yellow] "
        f"[cyan](Level {summary.min_level})[/cyan]",
        f"  [blue]Top {len(result.top_increases)} Increases:[/blue]",
    ]
    for i, point in enumerate(result.top_increases, start=1):
        lines.append(
            f"    {i}. [bright_green]Level {point.level}: +{point.value:.2f}%[/bright_green] "
            f"[cyan]({point.previous_value:g} → {point.actual_value:g})[/cyan]"
        )
    return lines


def comparison_table(comparison: ComparisonTable, tracked_stats: Sequence[str]) -> Table:
    table = Table(title="Cross-Hero Comparison")
    table.add_column("Hero", style="bold")
    for stat in tracked_stats:
        table.add_column(f"{short_name(stat)} Avg %", justify="right")
        table.add_column(f"{short_name(stat)} Max %", justify="right")

    for row in comparison.rows:
        cells = [escape(row.name)]
        for column in comparison.columns:
            text = f"{row[column]:.2f}%"
            cells.append(f"[bold bright_green]{text}[/bold bright_green]" if row.highlights.get(column) else text)
        table.add_row(*cells)
    return table


class TerminalRenderer(RendererBase):
    """Colored terminal report: per-hero bar graphs, summaries and the cross-hero comparison."""

    def __init__(
        self,
        console: Console | None = None,
        tracked_stats: Sequence[str] = DEFAULT_TRACKED_STATS,
        graph_height: int | None = None,
    ) -> None:
        self.console = console or Console(highlight=False, record=True)
        self.tracked_stats = tuple(tracked_stats)
        self.graph_height = graph_height if graph_height is not None else settings.GRAPH_HEIGHT

    @property
    def name(self) -> str:
        return "renderer_terminal"

    def _print(self, text: str = "") -> None:
        self.console.print(text, highlight=False)

    def render_hero(self, hero_name: str, stats: EntityResult) -> None:
        self._print(f"[bold yellow]\n--- {escape(hero_name)} ---[/bold yellow]")

        for stat in self.tracked_stats:
            result = stats.get(stat)
            if result is None:
                continue
            title = f"{hero_name} - {display_name(stat)} % Increase per Level"
            for line in create_ascii_graph(result.series, title, self.graph_height):
                self._print(line)
            for line in summary_lines(result):
                self._print(line)
            self._print("\n")

        self._print(f"[blue]--- {escape(hero_name)} Stat Comparison ---[/blue]")
        for stat in self.tracked_stats:
            result = stats.get(stat)
            if result is not None:
                self._print(
                    f"  [blue]{short_name(stat)} Average Increase:[/blue] "
                    f"[bright_green]{result.summary.avg:.2f}%[/bright_green]"
                )
        self._print("\n" + "=" * 80)

    def render_cross_hero(self, results: Mapping[str, EntityResult], comparison: ComparisonTable) -> None:
        self._print("[bold cyan]\n=== Cross-Hero Stat Comparison ===\n[/bold cyan]")
        for stat in self.tracked_stats:
            self._print(f"[bold yellow]--- {display_name(stat)} Across All Heroes ---[/bold yellow]")
            for hero_name, stats in results.items():
                result = stats.get(stat)
                if result is None:
                    continue
                summary = result.summary
                self._print(
                    f"  [blue]{escape(hero_name)}:[/blue] [bright_green]Avg: {summary.avg:.2f}%[/bright_green] "
                    f"[cyan]Max: {summary.max:.2f}% (Lv{summary.max_level})[/cyan]"
                )
            self._print()

        if comparison.rows:
            self.console.print(comparison_table(comparison, self.tracked_stats))

    def render_legend(self) -> None:
        self._print("[bold cyan]=== Legend ===[/bold cyan]")
        for _bound, _inclusive, style, legend in GROWTH_BANDS:
            self._print(f"[{style}]{BAR}[/{style}] {legend}")
        self._print(f"[{NO_GROWTH_STYLE}]{BAR}[/{NO_GROWTH_STYLE}] {NO_GROWTH_LEGEND}\n")
        self._print(
            "[cyan]Note: Each column represents one level upgrade showing the percentage "
            "increase from the previous level.[/cyan]"
        )

    def render(self, results: Mapping[str, EntityResult], comparison: ComparisonTable) -> str:
        logger.info(f"Rendering terminal report for {len(results)} heroes")
        self._print("[bold cyan]=== Hero Upgrade Percentage Visualizer ===\n[/bold cyan]")
        for hero_name, stats in results.items():
            self.render_hero(hero_name, stats)
        self.render_cross_hero(results, comparison)
        self.render_legend()
        return self.console.export_text() if self.console.record else ""
