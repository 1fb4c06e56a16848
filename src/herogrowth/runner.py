from dataclasses import dataclass

from herogrowth.config import setup_logging
from herogrowth.datasource.base import DataSourceBase
from herogrowth.models.entity import Entity
from herogrowth.models.growth import ComparisonTable, EntityResult
from herogrowth.models.growtherror import UnknownEntityError
from herogrowth.pipeline.pipeline import GrowthPipeline
from herogrowth.render.base import RendererBase

logger = setup_logging(__name__)


@dataclass
class RunResult:
    entities: dict[str, Entity]
    results: dict[str, EntityResult]
    comparison: ComparisonTable


class ReportRunner:
    """Loads heroes from a datasource and runs them through a pipeline."""

    def __init__(self, datasource: DataSourceBase, pipeline: GrowthPipeline) -> None:
        self.datasource = datasource
        self.pipeline = pipeline

    def run(self, hero: str | None = None) -> RunResult:
        try:
            entities = self.datasource.load_entities()
            if hero is not None and hero not in entities:
                raise UnknownEntityError(hero, available=list(entities))

            results = self.pipeline.process_all(entities)
            # the comparison always ranks every loaded hero
            comparison = self.pipeline.compare_results(results)
            if hero is not None:
                entities = {hero: entities[hero]}
                results = {hero: results[hero]}
            logger.info(f"Processed {len(results)} heroes from {self.datasource.name}")
            return RunResult(entities=entities, results=results, comparison=comparison)
        except Exception as exc:
            logger.error(f"ReportRunner.run failed: {exc}")
            raise

    def hero(self, name: str) -> EntityResult:
        return self.run(hero=name).results[name]

    def render(self, renderer: RendererBase, hero: str | None = None) -> str:
        result = self.run(hero=hero)
        return renderer.render(result.results, result.comparison)
