from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GrowthPoint(_CamelModel):
    """Percentage change of one statistic between two consecutive levels."""

    level: int
    value: float
    previous_value: float
    actual_value: float


class Summary(_CamelModel):
    avg: float
    max: float
    min: float
    max_level: int
    min_level: int


class ChartSeries(_CamelModel):
    label: str
    labels: list[str]
    values: list[float]
    background_color: str
    border_color: str


class StatisticResult(_CamelModel):
    series: list[GrowthPoint]
    summary: Summary
    top_increases: list[GrowthPoint]
    chart_series: ChartSeries


class ComparisonRow(_CamelModel):
    name: str
    values: dict[str, float] = Field(default_factory=dict)
    highlights: dict[str, bool] = Field(default_factory=dict)

    def __getitem__(self, column: str) -> float:
        return self.values[column]


class ComparisonTable(_CamelModel):
    columns: list[str] = Field(default_factory=list)
    rows: list[ComparisonRow] = Field(default_factory=list)
    column_maxima: dict[str, float] = Field(default_factory=dict)

    def row(self, name: str) -> ComparisonRow | None:
        return next((row for row in self.rows if row.name == name), None)

    def to_records(self) -> list[dict[str, float | str]]:
        return [{"name": row.name, **row.values} for row in self.rows]


EntityResult = dict[str, StatisticResult]
