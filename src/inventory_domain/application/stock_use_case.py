"""Use case recording a single stock movement."""

import logging
from datetime import datetime
from typing import Any

from src.common.dtos.stock_dtos import StockMovementResultDTO
from src.common.exceptions.custom_exceptions import StockMovementError, StockMovementErrorKind
from src.common.utils.date_utils import utc_now
from src.inventory_domain.domain.repositories.item_repository import IItemRepository
from src.inventory_domain.domain.repositories.stock_movement_repository import IStockMovementRepository
from src.inventory_domain.domain.services.stock_movement_validator import StockMovementValidator

logger = logging.getLogger(__name__)


class StockUseCase:
    """Validates a requested movement and appends it to the ledger."""

    def __init__(
        self,
        stock_movement_repo: IStockMovementRepository,
        item_repo: IItemRepository,
        validator: StockMovementValidator | None = None,
    ) -> None:
        self.stock_movement_repo = stock_movement_repo
        self.item_repo = item_repo
        self.validator = validator or StockMovementValidator()

    def execute(
        self,
        item_id: str,
        quantity: Any,
        operation: Any,
        description: str | None = None,
        created_at: datetime | None = None,
    ) -> StockMovementResultDTO:
        """
        Records a movement for an existing item.

        The item's stock itself is not written here: the returned DTO carries
        the new value and the caller persists it.

        Raises:
            StockMovementError: with kind RESOURCE_NOT_FOUND, ONLY_NATURAL_NUMBERS,
                INVALID_OPTION or STOCK_CANNOT_BE_NEGATIVE. Nothing is created
                when it is raised.
        """
        item = self.item_repo.find_by_id(item_id)
        if item is None:
            logger.warning(f"Stock movement rejected: item {item_id} not found.")
            raise StockMovementError(StockMovementErrorKind.RESOURCE_NOT_FOUND, f"Item {item_id} not found.")

        try:
            stock_operation, new_stock = self.validator.validate(item, quantity, operation)
        except StockMovementError as e:
            logger.warning(f"Stock movement rejected for item {item_id} ({e.kind.name}): {e.message}")
            raise

        movement = self.stock_movement_repo.create(
            item_id=item.id,
            quantity=quantity,
            operation=stock_operation,
            description=description,
            created_at=created_at or utc_now(),
        )

        logger.info(
            f"Recorded {stock_operation.value} of {quantity} for item '{item.name}' ({item.id}): "
            f"stock {item.stock} -> {new_stock}"
        )
        return StockMovementResultDTO(movement=movement, previous_stock=item.stock, new_stock=new_stock)
