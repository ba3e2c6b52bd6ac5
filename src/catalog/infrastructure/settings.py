"""Environment-based settings.

Every value can be overridden with a ``CATALOG_``-prefixed environment
variable or a ``.env`` file in the working directory, e.g.
``CATALOG_DATABASE_URL=postgresql+psycopg://...``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class CatalogSettings(BaseSettings):

    storage: Literal["sql", "json"] = "sql"
    database_url: str = Field(default=f"sqlite:///{_DATA_DIR / 'catalog.db'}")
    json_path: Path = Field(default=_DATA_DIR / "products.json")
    echo_sql: bool = False
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> CatalogSettings:
    return CatalogSettings()
