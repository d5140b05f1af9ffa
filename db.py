# db.py
import logging

from mysql.connector import pooling

import config

logger = logging.getLogger(__name__)

_connection_pool = None


def get_pool():
    """Create the connection pool on first use."""
    global _connection_pool
    if _connection_pool is None:
        db_config = config.db_config()
        logger.info("Creating MySQL pool for %s@%s/%s",
                    db_config["user"], db_config["host"], db_config["database"])
        _connection_pool = pooling.MySQLConnectionPool(
            pool_name="expenses_pool",
            pool_size=config.db_pool_size(),
            **db_config
        )
    return _connection_pool


def get_connection():
    try:
        return get_pool().get_connection()
    except Exception as e:
        raise RuntimeError(f"Database connection failed: {e}") from e
