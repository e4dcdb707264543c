"""Application service for stock movements and inventory queries."""

import logging

from src.common.dtos.stock_dtos import (
    InventoryMetricsDTO,
    StockMovementRequestDTO,
    StockMovementResultDTO,
    StockReconciliationDTO,
)
from src.common.exceptions.custom_exceptions import StockMovementError, StockMovementErrorKind
from src.inventory_domain.application.stock_use_case import StockUseCase
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.stock_movement import StockMovement
from src.inventory_domain.domain.repositories.item_repository import IItemRepository
from src.inventory_domain.domain.repositories.stock_movement_repository import IStockMovementRepository
from src.inventory_domain.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class StockApplicationService:
    """Keeps item stock and the movement ledger in step, and reports on inventory."""

    def __init__(
        self,
        item_repo: IItemRepository,
        stock_movement_repo: IStockMovementRepository,
        unit_of_work: IUnitOfWork,
    ) -> None:
        """Initializes the StockApplicationService."""
        self.item_repo = item_repo
        self.stock_movement_repo = stock_movement_repo
        self.unit_of_work = unit_of_work
        self.stock_use_case = StockUseCase(stock_movement_repo, item_repo)

    def register_stock_movement(self, request: StockMovementRequestDTO) -> StockMovementResultDTO:
        """
        Records a movement and stores the item's new stock in one transaction.

        The stock write is guarded by the value read during validation, so a
        concurrent movement on the same item makes this call fail with
        ConcurrentStockUpdateError and leaves no movement behind.
        """
        with self.unit_of_work.transaction():
            result = self.stock_use_case.execute(
                item_id=request.item_id,
                quantity=request.quantity,
                operation=request.operation,
                description=request.description,
                created_at=request.created_at,
            )
            self.item_repo.update_stock(
                request.item_id, result.new_stock, expected_stock=result.previous_stock
            )
        return result

    def get_item_movements(self, item_id: str) -> list[StockMovement]:
        """Retrieves the ledger of one item, oldest first."""
        self._get_item_or_raise(item_id)
        return self.stock_movement_repo.get_by_item_id(item_id)

    def reconcile_item_stock(self, item_id: str) -> StockReconciliationDTO:
        """Compares the ledger balance of an item with its recorded stock."""
        item = self._get_item_or_raise(item_id)
        ledger_stock = sum(m.signed_quantity for m in self.stock_movement_repo.get_by_item_id(item_id))
        reconciliation = StockReconciliationDTO(item_id=item_id, ledger_stock=ledger_stock, recorded_stock=item.stock)
        if not reconciliation.is_consistent:
            logger.warning(
                f"Item {item_id} stock {item.stock} does not match its ledger balance {ledger_stock}."
            )
        return reconciliation

    def get_items_below_min_stock(self) -> list[Item]:
        """Retrieves active items whose stock is under their configured minimum."""
        return [item for item in self.item_repo.get_all(active_only=True) if item.is_below_min_stock]

    def get_inventory_metrics(self) -> InventoryMetricsDTO:
        """Returns stock value and count of critical items over active items."""
        items = self.item_repo.get_all(active_only=True)
        return InventoryMetricsDTO(
            stock_value=round(sum(item.stock_value for item in items), 2),
            critical_items=sum(1 for item in items if item.is_below_min_stock),
            total_items=len(items),
        )

    def _get_item_or_raise(self, item_id: str) -> Item:
        item = self.item_repo.find_by_id(item_id)
        if item is None:
            raise StockMovementError(StockMovementErrorKind.RESOURCE_NOT_FOUND, f"Item {item_id} not found.")
        return item
