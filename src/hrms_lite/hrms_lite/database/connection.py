from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


@dataclass
class DBConfig:
    url: str
    echo: bool = False


class DatabaseConnection:
    """Owns the process-wide SQLAlchemy engine.

    Note: Repositories open one short transaction per operation through
    `db_session`; the engine pools the underlying DBAPI connections.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._engine: Optional[Engine] = None

    @property
    def url(self) -> str:
        return self._config.url

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(self._config.url, echo=self._config.echo, future=True)
            if self._engine.dialect.name == "sqlite":
                _install_sqlite_hooks(self._engine)
            log.info("database engine ready (dialect=%s)", self._engine.dialect.name)
        return self._engine

    def connect(self):
        """Transactional connection: commits on success, rolls back on error."""
        return self.engine.begin()

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


def _install_sqlite_hooks(engine: Engine) -> None:
    # pysqlite defers BEGIN on its own, which breaks SAVEPOINT; take over
    # transaction control and enforce foreign keys on every connection.
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cur = dbapi_connection.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")
