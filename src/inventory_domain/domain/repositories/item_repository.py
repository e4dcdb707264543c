# inventory_domain/domain/repositories/item_repository.py
"""Item repository interface."""
from abc import ABC, abstractmethod
from typing import Optional

from src.inventory_domain.domain.entities.item import Item


class IItemRepository(ABC):
    @abstractmethod
    def find_by_id(self, item_id: str) -> Optional[Item]:
        """Retrieves an item by its identifier, or None if it does not exist."""
        pass

    @abstractmethod
    def create(
        self,
        name: str,
        cost: float = 0.0,
        price: float = 0.0,
        stock: int = 0,
        min_stock: int | None = None,
        **extra,
    ) -> Item:
        """
        Creates an item and assigns its identifier.

        A positive opening stock is recorded as an input movement in the same
        write, so the ledger balance matches the new item's stock.
        """
        pass

    @abstractmethod
    def update_stock(self, item_id: str, new_stock: int, expected_stock: int | None = None) -> None:
        """
        Sets the on-hand quantity of an item.

        When expected_stock is given the write only happens if the stored
        stock still equals it; otherwise ConcurrentStockUpdateError is raised.
        """
        pass

    @abstractmethod
    def get_all(self, active_only: bool = False) -> list[Item]:
        """Retrieves all items."""
        pass
