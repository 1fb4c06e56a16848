from typing import Any

from pydantic import BaseModel, Field, PositiveInt, model_validator


class LevelRecord(BaseModel):
    """Statistic values of one hero at one level."""

    level: PositiveInt
    stats: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_flat_stats(cls, data: Any) -> Any:
        # Stats files store records flat: {"level": 2, "hitpoints": 1500, ...}
        if isinstance(data, dict) and "stats" not in data:
            fields = dict(data)
            level = fields.pop("level", None)
            return {"level": level, "stats": fields}
        return data

    def get(self, statistic: str) -> Any:
        return self.stats.get(statistic)


class Entity(BaseModel):
    name: str
    records: list[LevelRecord] = Field(default_factory=list)

    @property
    def levels(self) -> list[int]:
        return [record.level for record in self.records]
