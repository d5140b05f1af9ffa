# Read-only SQL execution layer for MySQL
# Executes ONLY statements that pass the safety validator, exactly as given

import logging

from mysql.connector import Error

import config
from db import get_connection
from errors import ExecutionError
from sql_guardrails import validate_sql

logger = logging.getLogger(__name__)


def execute_sql(statement: str, connection_factory=get_connection) -> list:
    """
    Executes a validated SELECT statement.
    Returns at most MAX_ROWS records as a list of dictionaries; rows past
    the cap are drained from the connection without being built into records.
    """
    # Only validated statements run, whoever the caller is
    validate_sql(statement)

    limit = config.max_rows()
    conn = None
    cursor = None

    try:
        conn = connection_factory()
        cursor = conn.cursor(dictionary=True)
        cursor.execute(statement)
        rows = cursor.fetchmany(limit + 1)
        conn.consume_results()
    except (Error, RuntimeError) as e:
        raise ExecutionError(str(e)) from e
    finally:
        if cursor:
            cursor.close()
        if conn:
            conn.close()

    if len(rows) > limit:
        logger.warning("Result truncated to %d rows", limit)
        rows = rows[:limit]
    return rows
