import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from herogrowth.models.entity import Entity, LevelRecord
from herogrowth.models.growth import GrowthPoint
from herogrowth.pipeline.pipeline import GrowthPipeline

logger = logging.getLogger(__name__)


@pytest.fixture
def make_entity() -> Callable[..., Entity]:
    def _make_entity(name: str = "Archer Queen", records: list[dict[str, Any]] | None = None) -> Entity:
        return Entity(name=name, records=[LevelRecord.model_validate(r) for r in records or []])

    return _make_entity


@pytest.fixture
def make_points() -> Callable[..., list[GrowthPoint]]:
    def _make_points(values: list[tuple[int, float]]) -> list[GrowthPoint]:
        return [
            GrowthPoint(level=level, value=value, previous_value=100, actual_value=100 + value)
            for level, value in values
        ]

    return _make_points


@pytest.fixture
def hero_records() -> list[dict[str, Any]]:
    return [
        {"level": 1, "damagePerSecond": 100, "hitpoints": 1000, "healthRecovery": 50},
        {"level": 2, "damagePerSecond": 110, "hitpoints": 1050, "healthRecovery": 50},
        {"level": 3, "damagePerSecond": 121, "hitpoints": 1050, "healthRecovery": 55},
        {"level": 4, "damagePerSecond": 127, "hitpoints": 1100, "healthRecovery": 60},
    ]


@pytest.fixture
def pipeline() -> GrowthPipeline:
    return GrowthPipeline()


@pytest.fixture
def hero_data_dir(tmp_path: Path, hero_records: list[dict[str, Any]]) -> Path:
    """Stats files for two heroes; the other configured heroes have no file."""
    (tmp_path / "archer_queen_stats.json").write_text(json.dumps({"stats": hero_records}))
    king_records = [
        {"level": 5, "damagePerSecond": 200, "hitpoints": 2000, "healthRecovery": 0},
        {"level": 6, "damagePerSecond": 230, "hitpoints": 2100, "healthRecovery": 0},
    ]
    (tmp_path / "barbarian_king_stats.json").write_text(json.dumps({"stats": king_records}))
    return tmp_path
