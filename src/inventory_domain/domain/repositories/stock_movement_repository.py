# inventory_domain/domain/repositories/stock_movement_repository.py
"""Stock movement repository interface (append-only ledger)."""
from abc import ABC, abstractmethod
from datetime import datetime

from src.inventory_domain.domain.entities.stock_movement import StockMovement, StockOperation


class IStockMovementRepository(ABC):
    @abstractmethod
    def create(
        self,
        item_id: str,
        quantity: int,
        operation: StockOperation,
        description: str | None = None,
        created_at: datetime | None = None,
    ) -> StockMovement:
        """Appends a movement to the ledger and returns it with a generated identifier."""
        pass

    @abstractmethod
    def get_by_item_id(self, item_id: str) -> list[StockMovement]:
        """Retrieves the movements of one item, oldest first."""
        pass
