# src/inventory_domain/domain/services/stock_movement_validator.py
"""Domain service validating stock movements against an item's current state."""

from typing import Any

from src.common.exceptions.custom_exceptions import StockMovementError, StockMovementErrorKind
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.stock_movement import StockOperation


class StockMovementValidator:
    """Checks quantity, operation and resulting stock. Never touches persistence."""

    @staticmethod
    def is_natural_number(quantity: Any) -> bool:
        # bool is a subclass of int and is not a quantity
        return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity >= 1

    @staticmethod
    def parse_operation(operation: Any) -> StockOperation:
        """Returns the StockOperation for "input"/"output", raising INVALID_OPTION otherwise."""
        if isinstance(operation, StockOperation):
            return operation
        if isinstance(operation, str):
            for member in StockOperation:
                if operation == member.value:
                    return member
        raise StockMovementError(
            StockMovementErrorKind.INVALID_OPTION,
            f"Invalid operation {operation!r}: expected 'input' or 'output'.",
        )

    def validate(self, item: Item, quantity: Any, operation: Any) -> tuple[StockOperation, int]:
        """
        Validates a movement and computes the item's stock after it.

        Checks run in a fixed order: quantity, then operation, then the
        resulting stock for outputs. Returns the parsed operation and the new stock.
        """
        if not self.is_natural_number(quantity):
            raise StockMovementError(
                StockMovementErrorKind.ONLY_NATURAL_NUMBERS,
                f"Invalid quantity {quantity!r}: only natural numbers are accepted.",
            )

        stock_operation = self.parse_operation(operation)

        new_stock = item.stock + stock_operation.sign * quantity
        if new_stock < 0:
            raise StockMovementError(
                StockMovementErrorKind.STOCK_CANNOT_BE_NEGATIVE,
                f"Cannot remove {quantity} units from item {item.id}: only {item.stock} in stock.",
            )

        return stock_operation, new_stock
