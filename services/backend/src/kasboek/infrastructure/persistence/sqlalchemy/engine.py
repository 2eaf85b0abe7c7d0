"""Async engine construction."""

from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """Let SQLAlchemy own BEGIN so SAVEPOINTs nest inside the transaction.

    The sqlite driver defers BEGIN until the first DML statement, which
    would turn a leading SAVEPOINT into its own transaction.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for a database URL.

    SQLite URLs get savepoint support; in-memory SQLite shares a single
    connection so every session sees the same database.

    Parameters
    ----------
    database_url
        SQLAlchemy async URL (postgresql+asyncpg or sqlite+aiosqlite)
    echo
        Log emitted SQL

    Returns
    -------
    AsyncEngine instance
    """
    if not database_url.startswith("sqlite"):
        return create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,  # Verify connections before use
        )

    if ":memory:" in database_url:
        engine = create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        # Ensure data directory exists for SQLite
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        engine = create_async_engine(database_url, echo=echo)

    _enable_sqlite_savepoints(engine)
    return engine
