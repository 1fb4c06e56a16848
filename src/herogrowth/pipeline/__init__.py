from herogrowth.pipeline.growth import build_series, percentage_increase, summarize, top_n
from herogrowth.pipeline.pipeline import GrowthPipeline

__all__ = ["GrowthPipeline", "build_series", "percentage_increase", "summarize", "top_n"]
