from pathlib import Path

from herogrowth.config import settings
from herogrowth.datasource.base import DataSourceBase
from herogrowth.datasource.jsonfiles import JsonFileDataSource


def get_datasource(data_dir: Path | str | None = None) -> DataSourceBase:
    """
    Build the default datasource.

    A new instance is returned on every call so callers decide how long it
    lives; ``data_dir`` falls back to ``settings.DATA_DIR``.
    """
    return JsonFileDataSource(data_dir if data_dir is not None else settings.DATA_DIR)
