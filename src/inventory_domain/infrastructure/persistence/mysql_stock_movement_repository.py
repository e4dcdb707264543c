# src/inventory_domain/infrastructure/persistence/mysql_stock_movement_repository.py
"""MySQL implementation of the stock movement ledger."""

import logging
import uuid
from datetime import datetime

from mysql.connector import Error

from src.common.exceptions.custom_exceptions import DatabaseError
from src.common.utils.date_utils import format_datetime_for_db, parse_datetime_from_db, utc_now
from src.inventory_domain.domain.entities.stock_movement import StockMovement, StockOperation
from src.inventory_domain.domain.repositories.stock_movement_repository import IStockMovementRepository
from src.inventory_domain.infrastructure.persistence.mysql_unit_of_work import MySQLUnitOfWork

logger = logging.getLogger(__name__)


class MySQLStockMovementRepository(IStockMovementRepository):
    """MySQL implementation of the Stock Movement Repository. Rows are only ever inserted."""

    def __init__(self, unit_of_work: MySQLUnitOfWork) -> None:
        """Initializes the repository on a shared unit of work."""
        self.unit_of_work = unit_of_work

    def create_tables(self) -> None:
        """Creates the inv_stock_movements table. Requires inv_items to exist."""
        create_movements_table_query = """
        CREATE TABLE IF NOT EXISTS inv_stock_movements (
            id CHAR(36) PRIMARY KEY,
            seq BIGINT UNSIGNED NOT NULL AUTO_INCREMENT UNIQUE,
            item_id CHAR(36) NOT NULL,
            quantity INT UNSIGNED NOT NULL,
            operation ENUM('input', 'output') NOT NULL,
            description VARCHAR(255),
            created_at DATETIME NOT NULL,
            INDEX idx_item_id (item_id),
            CONSTRAINT fk_movement_item FOREIGN KEY (item_id) REFERENCES inv_items (id),
            CONSTRAINT chk_quantity_positive CHECK (quantity >= 1)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        conn = self.unit_of_work.get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(create_movements_table_query)
            conn.commit()
            logger.info("Stock movements table checked/created.")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating stock movements table: {e}", original_exception=e)
        finally:
            cursor.close()

    def create(
        self,
        item_id: str,
        quantity: int,
        operation: StockOperation,
        description: str | None = None,
        created_at: datetime | None = None,
    ) -> StockMovement:
        """Inserts one movement with a generated UUID."""
        movement = StockMovement(
            id=str(uuid.uuid4()),
            item_id=item_id,
            quantity=quantity,
            operation=StockOperation(operation),
            description=description,
            created_at=created_at or utc_now(),
        )
        conn = self.unit_of_work.get_connection()
        cursor = conn.cursor()

        insert_query = """
        INSERT INTO inv_stock_movements
        (id, item_id, quantity, operation, description, created_at)
        VALUES (%s, %s, %s, %s, %s, %s)
        """
        params = (
            movement.id,
            movement.item_id,
            movement.quantity,
            movement.operation.value,
            movement.description,
            format_datetime_for_db(movement.created_at),
        )

        try:
            cursor.execute(insert_query, params)
            self.unit_of_work.commit_unless_in_transaction()
        except Error as e:
            self.unit_of_work.rollback_unless_in_transaction()
            raise DatabaseError(f"Error saving stock movement for item {item_id}: {e}", original_exception=e)
        finally:
            cursor.close()
        return movement

    def get_by_item_id(self, item_id: str) -> list[StockMovement]:
        """Retrieves the movements of one item in insertion order."""
        conn = self.unit_of_work.get_connection()
        cursor = conn.cursor(dictionary=True)

        try:
            query = """
            SELECT id, item_id, quantity, operation, description, created_at
            FROM inv_stock_movements
            WHERE item_id = %s
            ORDER BY seq
            """
            cursor.execute(query, (item_id,))
            return [
                StockMovement(
                    id=row["id"],
                    item_id=row["item_id"],
                    quantity=row["quantity"],
                    operation=StockOperation(row["operation"]),
                    description=row["description"],
                    created_at=parse_datetime_from_db(row["created_at"]),
                )
                for row in cursor.fetchall()
            ]
        except Error as e:
            raise DatabaseError(f"Error fetching stock movements for item {item_id}: {e}", original_exception=e)
        finally:
            cursor.close()
