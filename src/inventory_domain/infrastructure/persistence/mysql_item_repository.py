# src/inventory_domain/infrastructure/persistence/mysql_item_repository.py
"""MySQL implementation of the Item repository."""

import logging
import uuid
from decimal import Decimal
from typing import Any, Optional

from mysql.connector import Error

from src.common.exceptions.custom_exceptions import ConcurrentStockUpdateError, DatabaseError
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.stock_movement import OPENING_STOCK_DESCRIPTION, StockOperation
from src.inventory_domain.domain.repositories.item_repository import IItemRepository
from src.inventory_domain.domain.repositories.stock_movement_repository import IStockMovementRepository
from src.inventory_domain.infrastructure.persistence.mysql_stock_movement_repository import (
    MySQLStockMovementRepository,
)
from src.inventory_domain.infrastructure.persistence.mysql_unit_of_work import MySQLUnitOfWork

logger = logging.getLogger(__name__)

ITEM_COLUMNS = "id, name, cost, price, stock, min_stock, active, description, barcode, category"


class MySQLItemRepository(IItemRepository):
    """MySQL implementation of the Item Repository."""

    def __init__(
        self, unit_of_work: MySQLUnitOfWork, stock_movement_repo: IStockMovementRepository | None = None
    ) -> None:
        """Initializes the repository on a shared unit of work."""
        self.unit_of_work = unit_of_work
        self.stock_movement_repo = stock_movement_repo or MySQLStockMovementRepository(unit_of_work)

    def create_tables(self) -> None:
        """Creates the inv_items table if it does not exist."""
        create_items_table_query = """
        CREATE TABLE IF NOT EXISTS inv_items (
            id CHAR(36) PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            cost DECIMAL(12, 2) NOT NULL DEFAULT 0,
            price DECIMAL(12, 2) NOT NULL DEFAULT 0,
            stock INT UNSIGNED NOT NULL DEFAULT 0,
            min_stock INT UNSIGNED,
            active BOOLEAN NOT NULL DEFAULT TRUE,
            description TEXT,
            barcode VARCHAR(64),
            category VARCHAR(255),
            date_updated DATETIME DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_name (name),
            INDEX idx_barcode (barcode)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        conn = self.unit_of_work.get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(create_items_table_query)
            conn.commit()
            logger.info("Inventory items table checked/created.")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating inventory items table: {e}", original_exception=e)
        finally:
            cursor.close()

    def find_by_id(self, item_id: str) -> Optional[Item]:
        """Retrieves an item by id. Inside a transaction the row is locked until commit."""
        conn = self.unit_of_work.get_connection()
        cursor = conn.cursor(dictionary=True)
        query = f"SELECT {ITEM_COLUMNS} FROM inv_items WHERE id = %s"
        if self.unit_of_work.in_transaction:
            query += " FOR UPDATE"
        try:
            cursor.execute(query, (item_id,))
            row = cursor.fetchone()
            return self._row_to_item(row) if row else None
        except Error as e:
            raise DatabaseError(f"Error fetching item {item_id}: {e}", original_exception=e)
        finally:
            cursor.close()

    def create(
        self,
        name: str,
        cost: float = 0.0,
        price: float = 0.0,
        stock: int = 0,
        min_stock: int | None = None,
        **extra,
    ) -> Item:
        """Inserts a new item with a generated UUID, plus its opening movement when stock > 0."""
        item = Item(id=str(uuid.uuid4()), name=name, cost=cost, price=price, stock=stock, min_stock=min_stock, **extra)
        if self.unit_of_work.in_transaction:
            self._insert_item(item)
        else:
            with self.unit_of_work.transaction():
                self._insert_item(item)
        logger.info(f"Created item '{item.name}' ({item.id}) with opening stock {item.stock}.")
        return item

    def _insert_item(self, item: Item) -> None:
        conn = self.unit_of_work.get_connection()
        cursor = conn.cursor()

        insert_query = f"INSERT INTO inv_items ({ITEM_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)"
        params = (
            item.id,
            item.name,
            item.cost,
            item.price,
            item.stock,
            item.min_stock,
            item.active,
            item.description,
            item.barcode,
            item.category,
        )

        try:
            cursor.execute(insert_query, params)
        except Error as e:
            raise DatabaseError(f"Error saving item {item.name}: {e}", original_exception=e)
        finally:
            cursor.close()

        if item.stock > 0:
            self.stock_movement_repo.create(
                item_id=item.id,
                quantity=item.stock,
                operation=StockOperation.INPUT,
                description=OPENING_STOCK_DESCRIPTION,
            )

    def update_stock(self, item_id: str, new_stock: int, expected_stock: int | None = None) -> None:
        """Writes the item's stock, optionally only if it still equals expected_stock."""
        conn = self.unit_of_work.get_connection()
        cursor = conn.cursor()

        query = "UPDATE inv_items SET stock = %s WHERE id = %s"
        params: tuple = (new_stock, item_id)
        if expected_stock is not None:
            query += " AND stock = %s"
            params = (new_stock, item_id, expected_stock)

        try:
            cursor.execute(query, params)
            updated_rows = cursor.rowcount
        except Error as e:
            self.unit_of_work.rollback_unless_in_transaction()
            raise DatabaseError(f"Error updating stock for item {item_id}: {e}", original_exception=e)
        finally:
            cursor.close()

        if updated_rows == 0:
            self.unit_of_work.rollback_unless_in_transaction()
            if expected_stock is not None:
                raise ConcurrentStockUpdateError(item_id, expected_stock)
            raise DatabaseError(f"Item {item_id} does not exist.")
        self.unit_of_work.commit_unless_in_transaction()

    def get_all(self, active_only: bool = False) -> list[Item]:
        """Retrieves all items ordered by name."""
        conn = self.unit_of_work.get_connection()
        cursor = conn.cursor(dictionary=True)
        query = f"SELECT {ITEM_COLUMNS} FROM inv_items"
        if active_only:
            query += " WHERE active = TRUE"
        query += " ORDER BY name"
        try:
            cursor.execute(query)
            return [self._row_to_item(row) for row in cursor.fetchall()]
        except Error as e:
            raise DatabaseError(f"Error fetching items: {e}", original_exception=e)
        finally:
            cursor.close()

    @staticmethod
    def _row_to_item(row: dict[str, Any]) -> Item:
        return Item(
            id=row["id"],
            name=row["name"],
            cost=float(row["cost"]) if isinstance(row["cost"], Decimal) else row["cost"],
            price=float(row["price"]) if isinstance(row["price"], Decimal) else row["price"],
            stock=row["stock"],
            min_stock=row["min_stock"],
            active=bool(row["active"]),
            description=row["description"],
            barcode=row["barcode"],
            category=row["category"],
        )
