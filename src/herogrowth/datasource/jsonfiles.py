import json
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from herogrowth.config import setup_logging
from herogrowth.constants import HERO_FILES
from herogrowth.datasource.base import DataSourceBase
from herogrowth.models.entity import Entity
from herogrowth.models.growtherror import DataSourceError

logger = setup_logging(__name__)


class JsonFileDataSource(DataSourceBase):
    """Reads one ``{"stats": [...]}`` JSON file per hero from a data directory."""

    def __init__(self, data_dir: Path | str, hero_files: Mapping[str, str] | None = None) -> None:
        self.data_dir = Path(data_dir)
        self.hero_files = dict(hero_files if hero_files is not None else HERO_FILES)

    @property
    def name(self) -> str:
        return "datasource_jsonfiles"

    def load_entities(self) -> dict[str, Entity]:
        logger.info(f"Loading hero stats from {self.data_dir}")
        entities = {}
        for hero_name, filename in self.hero_files.items():
            path = self.data_dir / filename
            if not path.exists():
                logger.warning(f"Stats file for {hero_name} not found at {path}, skipping")
                continue
            entities[hero_name] = self._load_entity(hero_name, path)

        logger.info(f"Loaded {len(entities)} heroes: {list(entities)}")
        return entities

    def _load_entity(self, hero_name: str, path: Path) -> Entity:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(payload, dict):
                raise ValueError("top-level JSON value must be an object")
            entity = Entity.model_validate({"name": hero_name, "records": payload.get("stats") or []})
            logger.info(f"Read {len(entity.records)} level records for {hero_name}")
            return entity
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Error reading stats for {hero_name} from {path}: {e}")
            raise DataSourceError(
                message=f"Failed to load stats for {hero_name}: {str(e)}",
                details={"hero": hero_name, "path": str(path)},
            ) from e
