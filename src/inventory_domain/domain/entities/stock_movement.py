"""Stock movement entity and operation type."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


# Description of the movement that books an item's initial quantity into the ledger
OPENING_STOCK_DESCRIPTION = "OPENING_STOCK"


class StockOperation(str, Enum):
    """Direction of a stock movement."""

    INPUT = "input"
    OUTPUT = "output"

    @property
    def sign(self) -> int:
        return 1 if self is StockOperation.INPUT else -1


@dataclass(frozen=True)  # Ledger entries are never modified once recorded
class StockMovement:
    """Represents a single increase or decrease of an item's stock."""

    id: str
    item_id: str
    quantity: int
    operation: StockOperation
    description: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if not self.item_id:
            raise ValueError("A stock movement must reference an item.")
        if self.quantity < 1:
            raise ValueError("Movement quantity must be at least 1.")

    @property
    def signed_quantity(self) -> int:
        """Quantity with the sign of its effect on the item's stock."""
        return self.operation.sign * self.quantity
