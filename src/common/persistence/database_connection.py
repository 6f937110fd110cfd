"""MySQL connection factory."""

import logging

import mysql.connector
from mysql.connector import Error
from mysql.connector.constants import ClientFlag

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError

logger = logging.getLogger(__name__)


def get_connection():
    """Opens a new MySQL connection. Callers own it and must close it."""
    try:
        connection = mysql.connector.connect(
            host=settings.DB_HOST,
            port=settings.DB_PORT,
            database=settings.DB_DATABASE,
            user=settings.DB_USER,
            password=settings.DB_PASSWORD,
            autocommit=False,
            charset="utf8mb4",
            use_unicode=True,
            # rowcount reports matched rows, so an UPDATE that changes nothing still counts
            client_flags=[ClientFlag.FOUND_ROWS],
        )
    except Error as e:
        raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
    logger.debug(f"Opened MySQL connection to {settings.DB_HOST}/{settings.DB_DATABASE}")
    return connection
