from collections.abc import Callable
from pathlib import Path

import pytest

from herogrowth.models.entity import Entity
from herogrowth.models.growtherror import ErrorStates, RenderError
from herogrowth.pipeline.pipeline import GrowthPipeline
from herogrowth.render.web import REPORT_FILENAME, WebRenderer, build_figure, chart_id


@pytest.fixture
def processed(make_entity: Callable[..., Entity], hero_records):
    pipeline = GrowthPipeline()
    king = [
        {"level": 5, "damagePerSecond": 200, "hitpoints": 2000, "healthRecovery": 0},
        {"level": 6, "damagePerSecond": 230, "hitpoints": 2100, "healthRecovery": 0},
    ]
    results = pipeline.process_all(
        {"Archer Queen": make_entity("Archer Queen", hero_records), "<King>": make_entity("<King>", king)}
    )
    return results, pipeline.compare_results(results)


def test_chart_id_strips_whitespace() -> None:
    assert chart_id("Royal  Champion", "hitpoints") == "chart_RoyalChampion_hitpoints"


def test_build_figure_uses_chart_series(processed) -> None:
    results, _ = processed
    result = results["Archer Queen"]["damagePerSecond"]

    fig = build_figure(result)

    trace = fig.data[0]
    assert list(trace.x) == ["Level 2", "Level 3", "Level 4"]
    assert list(trace.y) == result.chart_series.values
    assert "Previous Value" in trace.hovertemplate
    assert fig.layout.title.text == "Archer Queen - Damage Per Second % Increase"
    assert fig.layout.xaxis.title.text == "Hero Level"


def test_render_builds_report(processed) -> None:
    results, comparison = processed

    html = WebRenderer().render(results, comparison)

    assert "<title>Hero Upgrade Percentage Visualizer</title>" in html
    assert 'id="chart_ArcherQueen_damagePerSecond"' in html
    assert "Archer Queen" in html
    assert "&lt;King&gt;" in html
    assert "<strong>&lt;King&gt;</strong>" in html
    assert "DPS Avg %" in html
    assert "highlight-max" in html
    assert "cdn.plot.ly" in html


def test_save_writes_report(tmp_path: Path, processed) -> None:
    results, comparison = processed
    renderer = WebRenderer(output_dir=tmp_path / "out")

    path = renderer.save(renderer.render(results, comparison))

    assert path == tmp_path / "out" / REPORT_FILENAME
    assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


def test_save_into_unwritable_location_raises_render_error(tmp_path: Path, processed) -> None:
    results, comparison = processed
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")
    renderer = WebRenderer()

    with pytest.raises(RenderError) as exc_info:
        renderer.save(renderer.render(results, comparison), blocker / REPORT_FILENAME)

    assert exc_info.value.error_type == ErrorStates.RENDER_ERROR
    assert exc_info.value.details["path"] == str(blocker / REPORT_FILENAME)
