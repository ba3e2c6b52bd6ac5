"""Database engine construction and schema creation."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine, StaticPool, create_engine, event, make_url

from catalog.infrastructure.persistence.product_table import metadata


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for *database_url*.

    In-memory SQLite gets a StaticPool so every connection sees the same
    database; file-backed SQLite gets its parent directory created. SQLite
    connections also get a Unicode-aware ``casefold()`` SQL function, since
    the built-in ``lower()`` only folds ASCII.
    """
    url = make_url(database_url)
    engine_kwargs: dict = {"echo": echo}

    if url.get_backend_name() == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            engine_kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    else:
        engine_kwargs["pool_pre_ping"] = True

    logger.info(
        "Initializing database engine for {}", url.render_as_string(hide_password=True)
    )
    engine = create_engine(url, **engine_kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _register_sqlite_functions)
    return engine


def create_schema(engine: Engine) -> None:
    """Create the products table if it does not exist yet."""
    logger.info("Ensuring products schema exists")
    metadata.create_all(engine)


def _casefold(value: str | None) -> str | None:
    return None if value is None else value.casefold()


def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    dbapi_connection.create_function("casefold", 1, _casefold, deterministic=True)
