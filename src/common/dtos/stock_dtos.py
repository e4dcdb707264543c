"""Data Transfer Objects for stock movements and inventory reporting."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from src.common.utils.date_utils import format_datetime_for_api
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.stock_movement import StockMovement, StockOperation
from src.inventory_domain.domain.services.stock_movement_validator import StockMovementValidator

# Operation spelling used by the inventory REST backend
API_OPERATIONS = {StockOperation.INPUT: "IN", StockOperation.OUTPUT: "OUT"}


@dataclass
class StockMovementRequestDTO:
    """DTO for a requested stock movement, as received from a caller."""

    item_id: str
    quantity: Any  # Validated by StockMovementValidator, not here
    operation: Any
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    unit_cost: Optional[float] = None

    def to_payload(self) -> dict[str, Any]:
        """
        Builds the JSON body expected by the inventory REST backend.

        Raises StockMovementError (INVALID_OPTION) for an unknown operation.
        """
        operation = API_OPERATIONS[StockMovementValidator.parse_operation(self.operation)]
        payload: dict[str, Any] = {
            "item_id": self.item_id,
            "quantity": self.quantity,
            "operation": operation,
        }
        if self.description is not None:
            payload["description"] = self.description
        if self.created_at is not None:
            payload["created_at"] = format_datetime_for_api(self.created_at)
        if self.unit_cost is not None:
            payload["unit_cost"] = self.unit_cost
        return payload


@dataclass
class StockMovementResultDTO:
    """DTO returned after a movement is recorded."""

    movement: StockMovement
    previous_stock: int
    new_stock: int


@dataclass
class StockReconciliationDTO:
    """Comparison between an item's ledger balance and its recorded stock."""

    item_id: str
    ledger_stock: int
    recorded_stock: int

    @property
    def difference(self) -> int:
        return self.recorded_stock - self.ledger_stock

    @property
    def is_consistent(self) -> bool:
        return self.difference == 0


@dataclass
class InventoryMetricsDTO:
    """Operational inventory figures."""

    stock_value: float
    critical_items: int
    total_items: int


def item_from_api_response(data: dict[str, Any]) -> Item:
    """Creates an Item from one entry of the backend's ``GET /items`` response."""
    return Item(
        id=str(data["id"]),
        name=data.get("name", ""),
        cost=float(data.get("cost") or 0),
        price=float(data.get("price") or 0),
        stock=int(data.get("stock") or 0),
        min_stock=data.get("min_stock"),
        active=bool(data.get("active", True)),
        description=data.get("description"),
        barcode=data.get("barcode"),
        category=data.get("category"),
    )
