import re
from collections.abc import Mapping, Sequence
from functools import lru_cache
from pathlib import Path

import plotly.graph_objects as go
import plotly.io as pio
from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from herogrowth.config import settings, setup_logging
from herogrowth.constants import DEFAULT_TRACKED_STATS, display_name, short_name
from herogrowth.models.growth import ComparisonTable, EntityResult, StatisticResult
from herogrowth.models.growtherror import RenderError
from herogrowth.render.base import RendererBase

logger = setup_logging(__name__)

REPORT_FILENAME = "hero_upgrade_report.html"


@lru_cache
def get_report_template(template_name: str = "report.html.j2") -> Template:
    template_dir = Path(__file__).parent / "templates"
    env = Environment(loader=FileSystemLoader(template_dir), autoescape=select_autoescape(["html", "j2"]))
    return env.get_template(template_name)


def chart_id(hero_name: str, statistic: str) -> str:
    compact = re.sub(r"\W+", "", hero_name)
    return f"chart_{compact}_{statistic}"


def build_figure(result: StatisticResult) -> go.Figure:
    """
    Line chart of one statistic's growth per level.

    Hovering a point shows the previous and new stat values next to the
    percentage increase.
    """
    chart = result.chart_series
    by_level = sorted(result.series, key=lambda point: point.level)
    fig = go.Figure(
        go.Scatter(
            x=chart.labels,
            y=chart.values,
            name=chart.label,
            mode="lines+markers",
            line={"color": chart.border_color, "width": 2, "shape": "spline", "smoothing": 0.1},
            marker={"color": chart.border_color},
            customdata=[[point.previous_value, point.actual_value] for point in by_level],
            hovertemplate=(
                "%{x}<br>Previous Value: %{customdata[0]}<br>New Value: %{customdata[1]}"
                "<br>Increase: +%{y:.2f}%<extra></extra>"
            ),
        )
    )
    fig.update_layout(
        title=chart.label,
        showlegend=False,
        plot_bgcolor=chart.background_color,
        xaxis_title="Hero Level",
        yaxis_title="Percentage Increase (%)",
        yaxis={"rangemode": "tozero"},
        margin={"l": 40, "r": 20, "t": 50, "b": 40},
    )
    return fig


class WebRenderer(RendererBase):
    """Builds a standalone HTML report with interactive plotly charts."""

    def __init__(self, tracked_stats: Sequence[str] = DEFAULT_TRACKED_STATS, output_dir: Path | None = None) -> None:
        self.tracked_stats = tuple(tracked_stats)
        self.output_dir = output_dir if output_dir is not None else settings.ASSET_OUTPUT_DIR

    @property
    def name(self) -> str:
        return "renderer_web"

    def _hero_sections(self, results: Mapping[str, EntityResult]) -> list[dict]:
        sections = []
        include_plotlyjs: bool | str = "cdn"
        for hero_name, stats in results.items():
            charts = []
            for stat in self.tracked_stats:
                result = stats.get(stat)
                if result is None:
                    continue
                figure_html = pio.to_html(
                    build_figure(result),
                    full_html=False,
                    include_plotlyjs=include_plotlyjs,
                    div_id=chart_id(hero_name, stat),
                )
                # plotly.js is loaded once, with the first chart
                include_plotlyjs = False
                charts.append(
                    {
                        "title": f"{display_name(stat)} Percentage Increase",
                        "figure_html": figure_html,
                        "summary": result.summary,
                        "top_increases": result.top_increases,
                    }
                )
            sections.append({"name": hero_name, "charts": charts})
        return sections

    def _comparison_context(self, comparison: ComparisonTable) -> dict:
        headers = []
        for stat in self.tracked_stats:
            headers.extend([f"{short_name(stat)} Avg %", f"{short_name(stat)} Max %"])
        rows = [
            {
                "name": row.name,
                "cells": [
                    {"text": f"{row[column]:.2f}%", "highlight": row.highlights.get(column, False)}
                    for column in comparison.columns
                ],
            }
            for row in comparison.rows
        ]
        return {"headers": headers, "rows": rows}

    def render(self, results: Mapping[str, EntityResult], comparison: ComparisonTable) -> str:
        logger.info(f"Rendering web report for {len(results)} heroes")
        template = get_report_template()
        return template.render(
            title="Hero Upgrade Percentage Visualizer",
            heroes=self._hero_sections(results),
            comparison=self._comparison_context(comparison),
        )

    def save(self, html: str, path: Path | None = None) -> Path:
        target = path if path is not None else self.output_dir / REPORT_FILENAME
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding="utf-8")
            logger.info(f"Web report written to {target}")
            return target
        except OSError as exc:
            logger.error(f"Failed to write web report to {target}: {exc}")
            raise RenderError(
                message=f"Failed to write web report to {target}: {exc}",
                details={"path": str(target)},
            ) from exc
