"""
db/connection.py
----------------
Opens PostgreSQL connections for table gateways.
`connect` is the default connection provider: gateways call it lazily on their
first query and keep the returned connection for their whole lifetime.
"""

import psycopg2
from psycopg2 import extras

from config import DbConfig
from utils.logger import get_logger

logger = get_logger(__name__)


def connect(config: DbConfig):
    """
    Open a connection whose cursors return rows as dicts keyed by column name.

    Args:
        config: Validated connection settings.

    Returns:
        A psycopg2 connection object.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(
            host=config.host,
            port=config.port,
            dbname=config.dbname,
            user=config.username,
            password=config.password,
            cursor_factory=extras.RealDictCursor,
        )
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to {config.dbname}@{config.host}: {e}")
        raise
    logger.info(f"Connected to database {config.dbname}@{config.host}:{config.port}")
    return conn
