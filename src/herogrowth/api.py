import asyncio
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from herogrowth.config import settings, setup_logging
from herogrowth.datasource import get_datasource
from herogrowth.datasource.base import DataSourceBase
from herogrowth.models.growtherror import DataSourceError, MalformedInputError, UnknownEntityError
from herogrowth.pipeline.pipeline import GrowthPipeline
from herogrowth.render.web import WebRenderer
from herogrowth.runner import ReportRunner

logger = setup_logging(__name__)
app = FastAPI(title="herogrowth")


def get_source() -> DataSourceBase:
    return get_datasource()


def get_pipeline() -> GrowthPipeline:
    return GrowthPipeline(tracked_stats=settings.TRACKED_STATS, top_n=settings.TOP_N)


def get_runner(
    datasource: DataSourceBase = Depends(get_source),
    pipeline: GrowthPipeline = Depends(get_pipeline),
) -> ReportRunner:
    return ReportRunner(datasource=datasource, pipeline=pipeline)


def _raise_http(exc: Exception, action: str) -> None:
    if isinstance(exc, UnknownEntityError):
        raise HTTPException(status_code=404, detail=exc.message) from exc
    if isinstance(exc, MalformedInputError):
        raise HTTPException(status_code=422, detail=exc.message) from exc
    if isinstance(exc, DataSourceError):
        raise HTTPException(status_code=502, detail=exc.message) from exc
    logger.error(f"{action} failed: {exc}")
    raise HTTPException(status_code=500, detail=f"{action} failed") from exc


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/heroes")
async def list_heroes(datasource: DataSourceBase = Depends(get_source)) -> list[str]:
    try:
        entities = await asyncio.to_thread(datasource.load_entities)
        return list(entities)
    except Exception as exc:
        _raise_http(exc, "Listing heroes")


@app.get("/heroes/{name}")
async def hero_growth(name: str, runner: ReportRunner = Depends(get_runner)) -> dict[str, Any]:
    try:
        stats = await asyncio.to_thread(runner.hero, name)
        return {stat: result.model_dump(by_alias=True) for stat, result in stats.items()}
    except Exception as exc:
        _raise_http(exc, "Hero growth")


@app.get("/comparison")
async def comparison(runner: ReportRunner = Depends(get_runner)) -> dict[str, Any]:
    try:
        result = await asyncio.to_thread(runner.run)
        return result.comparison.model_dump(by_alias=True)
    except Exception as exc:
        _raise_http(exc, "Comparison")


@app.get("/", response_class=HTMLResponse)
async def report(runner: ReportRunner = Depends(get_runner)) -> HTMLResponse:
    try:
        renderer = WebRenderer(tracked_stats=runner.pipeline.tracked_stats)
        html = await asyncio.to_thread(runner.render, renderer)
        return HTMLResponse(content=html)
    except Exception as exc:
        _raise_http(exc, "Web report")
