"""
config.py
---------
Central configuration module. Loads the environment from the .env file and
exposes the database connection settings and the log level as typed
constants, plus the `DbConfig` value that table gateways are built from.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping, Union

from dotenv import load_dotenv

from db.errors import ConfigError

load_dotenv()


# ── Database ──────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "phpmentoring")
DB_USER: str = os.getenv("DB_USER", "phpmentoring")
DB_PASS: str = os.getenv("DB_PASS", "")

DB_CONFIG: dict = {
    "host": DB_HOST,
    "port": DB_PORT,
    "dbname": DB_NAME,
    "username": DB_USER,
    "password": DB_PASS,
}

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


REQUIRED_DB_KEYS: tuple = ("host", "dbname", "username", "password")


@dataclass(frozen=True)
class DbConfig:
    """
    Validated connection settings for one database.

    Attributes:
        host: Database server hostname.
        dbname: Name of the database to connect to.
        username: Login role.
        password: Password for the login role.
        port: TCP port of the server (default: 5432).
    """
    host: str
    dbname: str
    username: str
    password: str
    port: int = 5432

    @classmethod
    def from_mapping(cls, config: Union["DbConfig", Mapping[str, Any]]) -> "DbConfig":
        """
        Build a DbConfig from a plain mapping, failing fast on missing keys.

        Args:
            config: Mapping with at least host, dbname, username and password.
                An existing DbConfig is returned unchanged.

        Raises:
            ConfigError: Naming the first required key that is absent.
        """
        if isinstance(config, cls):
            return config
        for key in REQUIRED_DB_KEYS:
            if key not in config:
                raise ConfigError(f"Missing required parameter {key}")
        return cls(
            host=config["host"],
            dbname=config["dbname"],
            username=config["username"],
            password=config["password"],
            port=int(config.get("port", 5432)),
        )

    def __repr__(self) -> str:
        return (
            f"DbConfig(host={self.host!r}, port={self.port}, "
            f"dbname={self.dbname!r}, username={self.username!r})"
        )
