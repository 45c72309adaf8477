from __future__ import annotations

import logging
from dataclasses import dataclass

import mysql.connector

from ..core.constants import DEFAULT_DB_PORT
from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", DEFAULT_DB_PORT)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "farm_ledger")),
        )


class DatabaseConnection:
    """DB connection factory with an explicit lifecycle.

    One instance is created per application and injected into every
    repository. Connections are short-lived (one per store operation) and
    are only handed out between open() and close().
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._open = False

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        if self._open:
            return
        # Fail fast on bad credentials instead of on the first request.
        try:
            trial = self._new_connection()
        except mysql.connector.Error as exc:
            raise StoreError(f"Cannot connect to {self.describe()}: {exc}") from exc
        trial.close()
        self._open = True
        logger.info("database opened (%s)", self.describe())

    def close(self) -> None:
        if self._open:
            self._open = False
            logger.info("database closed (%s)", self.describe())

    def connect(self):
        if not self._open:
            raise StoreError("Database connection is not open")
        return self._new_connection()

    def describe(self) -> str:
        c = self._config
        return f"{c.user}@{c.host}:{c.port}/{c.database}"

    def _new_connection(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )
