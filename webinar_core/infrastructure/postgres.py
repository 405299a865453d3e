"""
PostgreSQL connection helper for the content store.

Uses psycopg; rows come back as dicts so they can be handed straight to
ContentItem.from_record().
"""

import psycopg
from loguru import logger
from psycopg.rows import dict_row

from webinar_core.config import settings


def get_db_connection():
    """
    Get a PostgreSQL database connection.

    Returns a context manager that can be used with 'with' statement.
    The connection is automatically closed when the context exits.

    Usage:
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM webinars")

    Returns:
        psycopg.Connection: A PostgreSQL connection with a dict row factory.
    """
    try:
        conn = psycopg.connect(settings.POSTGRES_DSN, row_factory=dict_row)
        logger.debug("Connected to PostgreSQL")
        return conn
    except Exception as e:
        logger.error(f"Failed to connect to PostgreSQL: {e}")
        raise
