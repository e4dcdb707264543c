"""In-memory implementations of the inventory repositories."""

import copy
import uuid
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime
from typing import Iterator, Optional

from src.common.exceptions.custom_exceptions import ConcurrentStockUpdateError
from src.common.utils.date_utils import utc_now
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.stock_movement import (
    OPENING_STOCK_DESCRIPTION,
    StockMovement,
    StockOperation,
)
from src.inventory_domain.domain.repositories.item_repository import IItemRepository
from src.inventory_domain.domain.repositories.stock_movement_repository import IStockMovementRepository
from src.inventory_domain.domain.repositories.unit_of_work import IUnitOfWork


class InMemoryItemRepository(IItemRepository):
    """
    Dictionary-backed item store.

    An item created with stock is booked into the ledger with an opening
    input movement, so stock > 0 needs a stock_movement_repo.
    """

    def __init__(self, stock_movement_repo: IStockMovementRepository | None = None) -> None:
        self.items: dict[str, Item] = {}
        self.stock_movement_repo = stock_movement_repo

    def find_by_id(self, item_id: str) -> Optional[Item]:
        item = self.items.get(item_id)
        # Stored stock only changes through update_stock
        return replace(item) if item else None

    def create(
        self,
        name: str,
        cost: float = 0.0,
        price: float = 0.0,
        stock: int = 0,
        min_stock: int | None = None,
        **extra,
    ) -> Item:
        item = Item(id=str(uuid.uuid4()), name=name, cost=cost, price=price, stock=stock, min_stock=min_stock, **extra)
        if item.stock > 0:
            if self.stock_movement_repo is None:
                raise ValueError("An item with opening stock needs a movement ledger to record it.")
            self.stock_movement_repo.create(
                item_id=item.id,
                quantity=item.stock,
                operation=StockOperation.INPUT,
                description=OPENING_STOCK_DESCRIPTION,
                created_at=utc_now(),
            )
        self.items[item.id] = item
        return replace(item)

    def update_stock(self, item_id: str, new_stock: int, expected_stock: int | None = None) -> None:
        item = self.items.get(item_id)
        if item is None:
            raise KeyError(item_id)
        if expected_stock is not None and item.stock != expected_stock:
            raise ConcurrentStockUpdateError(item_id, expected_stock)
        self.items[item_id] = replace(item, stock=new_stock)

    def get_all(self, active_only: bool = False) -> list[Item]:
        return [replace(item) for item in self.items.values() if item.active or not active_only]


class InMemoryStockMovementRepository(IStockMovementRepository):
    """List-backed append-only movement ledger."""

    def __init__(self) -> None:
        self.movements: list[StockMovement] = []

    def create(
        self,
        item_id: str,
        quantity: int,
        operation: StockOperation,
        description: str | None = None,
        created_at: datetime | None = None,
    ) -> StockMovement:
        movement = StockMovement(
            id=str(uuid.uuid4()),
            item_id=item_id,
            quantity=quantity,
            operation=StockOperation(operation),
            description=description,
            created_at=created_at,
        )
        self.movements.append(movement)
        return movement

    def get_by_item_id(self, item_id: str) -> list[StockMovement]:
        return [m for m in self.movements if m.item_id == item_id]


class InMemoryUnitOfWork(IUnitOfWork):
    """Snapshots both stores on entry and restores them if the block fails."""

    def __init__(self, item_repo: InMemoryItemRepository, stock_movement_repo: InMemoryStockMovementRepository) -> None:
        self.item_repo = item_repo
        self.stock_movement_repo = stock_movement_repo

    @contextmanager
    def transaction(self) -> Iterator[None]:
        items_snapshot = copy.copy(self.item_repo.items)
        movements_snapshot = list(self.stock_movement_repo.movements)
        try:
            yield
        except Exception:
            self.item_repo.items = items_snapshot
            self.stock_movement_repo.movements = movements_snapshot
            raise
