from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import MetaData

from festplanner.infra.settings import settings

# Deterministic constraint/index names
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


_engines: dict[str, Engine] = {}


def _ensure_sqlite_dir(db_url: str) -> None:
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def get_engine(db_url: str | None = None) -> Engine:
    """Get or create the engine for ``db_url`` (defaults to ``settings.database_url``).

    Engines are cached per URL. In-memory SQLite shares one connection
    through a static pool so every session sees the same database.
    """
    chosen_url = db_url or settings.database_url
    engine = _engines.get(chosen_url)
    if engine is not None:
        return engine

    connect_args: dict[str, object] = {}
    kwargs: dict[str, object] = {}
    if chosen_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if ":memory:" in chosen_url or chosen_url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
        else:
            _ensure_sqlite_dir(chosen_url)

    engine = create_engine(
        chosen_url,
        echo=settings.echo_sql,
        future=True,
        connect_args=connect_args,
        **kwargs,
    )
    # Register mapped tables before creating them
    from festplanner.domain import entities  # noqa: F401

    Base.metadata.create_all(engine)
    _engines[chosen_url] = engine
    return engine


def get_sessionmaker(db_url: str | None = None) -> sessionmaker:
    """Get a session factory bound to the engine for ``db_url``."""
    return sessionmaker(
        bind=get_engine(db_url),
        autoflush=False,
        autocommit=False,
        future=True,
    )


def dispose_engines() -> None:
    """Dispose and forget every cached engine."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()
