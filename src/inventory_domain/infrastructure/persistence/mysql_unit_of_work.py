# src/inventory_domain/infrastructure/persistence/mysql_unit_of_work.py
"""MySQL connection holder and unit of work shared by the inventory repositories."""

import logging
from contextlib import contextmanager
from typing import Iterator

import mysql.connector
from mysql.connector import Error

from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError
from src.inventory_domain.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class MySQLUnitOfWork(IUnitOfWork):
    """
    Owns the single MySQL connection used by the item and movement repositories.

    Outside a transaction every repository write commits on its own; inside
    ``transaction()`` the writes are committed or rolled back together.
    """

    def __init__(self) -> None:
        """Initializes the unit of work without connecting."""
        self._connection = None
        self.in_transaction = False

    def get_connection(self):
        """Establishes or returns an active MySQL database connection."""
        if not self._connection or not self._connection.is_connected():
            try:
                self._connection = mysql.connector.connect(
                    host=settings.DB_HOST,
                    database=settings.DB_DATABASE,
                    user=settings.DB_USER,
                    password=settings.DB_PASSWORD,
                    autocommit=False,
                    charset="utf8mb4",
                    use_unicode=True,
                )
            except Error as e:
                raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
        return self._connection

    @contextmanager
    def transaction(self) -> Iterator[None]:
        if self.in_transaction:
            raise DatabaseError("Nested transactions are not supported.")
        conn = self.get_connection()
        self.in_transaction = True
        try:
            yield
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Transaction failed: {e}", original_exception=e)
        except Exception:
            conn.rollback()
            raise
        finally:
            self.in_transaction = False

    def commit_unless_in_transaction(self) -> None:
        if not self.in_transaction:
            self.get_connection().commit()

    def rollback_unless_in_transaction(self) -> None:
        if not self.in_transaction:
            self.get_connection().rollback()

    def close(self) -> None:
        """Closes the database connection if it is open."""
        if self._connection and self._connection.is_connected():
            self._connection.close()
        self._connection = None

    def __del__(self) -> None:
        """Closes the database connection when the object is destroyed."""
        if self._connection and self._connection.is_connected():
            self._connection.close()
