# src/common/persistence/mysql_base_repository.py
"""MySQL base implementation of the generic repository."""

import logging
from abc import abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence

from mysql.connector import Error, errorcode

from src.common.exceptions.custom_exceptions import (
    DatabaseError,
    DuplicateEntryError,
    ForeignKeyViolationError,
    RowMappingError,
)
from src.common.persistence.database_connection import get_connection
from src.common.persistence.generic_repository import ID, T, IGenericRepository

logger = logging.getLogger(__name__)

DUPLICATE_KEY_ERRNOS = frozenset({errorcode.ER_DUP_ENTRY})
FOREIGN_KEY_ERRNOS = frozenset(
    {
        errorcode.ER_ROW_IS_REFERENCED,
        errorcode.ER_ROW_IS_REFERENCED_2,
        errorcode.ER_NO_REFERENCED_ROW,
        errorcode.ER_NO_REFERENCED_ROW_2,
    }
)


class MySQLBaseRepository(IGenericRepository[T, ID]):
    """
    Statement lifecycle shared by the MySQL repositories.

    Every helper opens its own connection and cursor and closes both before
    returning, whether the statement succeeded, the driver failed or a row
    could not be mapped. Nothing is kept open between calls.

    Subclasses provide ``_map_row`` once; all query variants reuse it.
    """

    def __init__(self, connection_factory: Optional[Callable[[], Any]] = None) -> None:
        self._connection_factory = connection_factory or get_connection

    @abstractmethod
    def _map_row(self, row: dict) -> T:
        """Builds an entity from a dictionary cursor row."""
        pass

    @abstractmethod
    def create_tables(self) -> None:
        """Creates the repository's table if it does not exist."""
        pass

    @contextmanager
    def _cursor(self, dictionary: bool = False) -> Iterator[tuple[Any, Any]]:
        connection = self._connection_factory()
        try:
            cursor = connection.cursor(dictionary=dictionary)
            try:
                yield connection, cursor
            finally:
                cursor.close()
        finally:
            connection.close()

    def _map(self, row: dict) -> T:
        try:
            return self._map_row(row)
        except (KeyError, ValueError, TypeError) as e:
            raise RowMappingError(f"Cannot map {type(self).__name__} row: {e!r}", original_exception=e) from e

    @staticmethod
    def _translate_error(message: str, error: Error) -> DatabaseError:
        """Classifies a driver error by its MySQL error code."""
        if error.errno in DUPLICATE_KEY_ERRNOS:
            return DuplicateEntryError(f"{message}: duplicate entry", original_exception=error)
        if error.errno in FOREIGN_KEY_ERRNOS:
            return ForeignKeyViolationError(f"{message}: referential constraint violated", original_exception=error)
        return DatabaseError(f"{message}: {error}", original_exception=error)

    def _execute_update(self, query: str, params: Sequence[Any], error_message: str) -> int:
        """Runs one INSERT/UPDATE/DELETE in its own transaction and returns the affected row count."""
        try:
            with self._cursor() as (connection, cursor):
                try:
                    cursor.execute(query, params)
                    connection.commit()
                except Error:
                    connection.rollback()
                    raise
                return cursor.rowcount
        except Error as e:
            raise self._translate_error(error_message, e) from e

    def _execute_query_for_one(self, query: str, params: Sequence[Any], error_message: str) -> Optional[T]:
        try:
            with self._cursor(dictionary=True) as (_, cursor):
                cursor.execute(query, params)
                row = cursor.fetchone()
                return self._map(row) if row else None
        except Error as e:
            raise self._translate_error(error_message, e) from e

    def _execute_query_for_list(self, query: str, params: Sequence[Any] = (), error_message: str = "Query failed") -> list[T]:
        try:
            with self._cursor(dictionary=True) as (_, cursor):
                cursor.execute(query, params)
                return [self._map(row) for row in cursor.fetchall()]
        except Error as e:
            raise self._translate_error(error_message, e) from e

    def _execute_ddl(self, query: str, description: str) -> None:
        try:
            with self._cursor() as (connection, cursor):
                cursor.execute(query)
                connection.commit()
        except Error as e:
            raise DatabaseError(f"Error creating {description} table: {e}", original_exception=e)
        logger.info(f"{description} table checked/created.")

    def exists(self, table_name: str, entity_id: ID) -> bool:
        """Counts rows with the given id without building an entity."""
        # Table names cannot be bound as parameters; they only come from repository constants.
        query = f"SELECT COUNT(*) FROM {table_name} WHERE id = %s"
        try:
            with self._cursor() as (_, cursor):
                cursor.execute(query, (entity_id,))
                row = cursor.fetchone()
                return bool(row) and row[0] > 0
        except Error as e:
            raise self._translate_error(f"Error checking {table_name} id {entity_id}", e) from e
