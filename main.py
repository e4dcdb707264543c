"""Main application entry point for registering stock movements."""

import argparse
import logging
import sys

from src.common.dtos.stock_dtos import StockMovementRequestDTO
from src.common.exceptions.custom_exceptions import (
    APIError,
    ApplicationError,
    DatabaseError,
    StockMovementError,
)
from src.common.logger_config import setup_logging
from src.inventory_domain.application.stock_service import StockApplicationService
from src.inventory_domain.infrastructure.persistence.mysql_item_repository import MySQLItemRepository
from src.inventory_domain.infrastructure.persistence.mysql_stock_movement_repository import (
    MySQLStockMovementRepository,
)
from src.inventory_domain.infrastructure.persistence.mysql_unit_of_work import MySQLUnitOfWork

logger = logging.getLogger(__name__)


def setup_stock_dependencies(unit_of_work: MySQLUnitOfWork) -> StockApplicationService:
    """Initializes and wires up inventory domain dependencies."""
    stock_movement_repository = MySQLStockMovementRepository(unit_of_work)
    item_repository = MySQLItemRepository(unit_of_work, stock_movement_repo=stock_movement_repository)
    return StockApplicationService(
        item_repo=item_repository, stock_movement_repo=stock_movement_repository, unit_of_work=unit_of_work
    )


def create_inventory_db_tables(unit_of_work: MySQLUnitOfWork) -> None:
    """Creates tables for the inventory domain (items first, movements reference them)."""
    MySQLItemRepository(unit_of_work).create_tables()
    MySQLStockMovementRepository(unit_of_work).create_tables()


def parse_quantity(value: str) -> int | float | str:
    """Keeps the raw value when it is not numeric so validation reports it."""
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Register a stock movement for an inventory item.")
    parser.add_argument("item_id", help="Identifier of the item")
    parser.add_argument("quantity", type=parse_quantity, help="Number of units moved (natural number)")
    parser.add_argument("operation", help="'input' or 'output'")
    parser.add_argument("--description", default=None, help="Reason for the movement, e.g. COMPRA or VENDA")
    parser.add_argument("--init-db", action="store_true", help="Create the inventory tables before registering")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file (overrides LOG_FILE)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file)

    unit_of_work = MySQLUnitOfWork()
    try:
        if args.init_db:
            create_inventory_db_tables(unit_of_work)

        stock_service = setup_stock_dependencies(unit_of_work)
        result = stock_service.register_stock_movement(
            StockMovementRequestDTO(
                item_id=args.item_id,
                quantity=args.quantity,
                operation=args.operation,
                description=args.description,
            )
        )
        logger.info(
            f"Movement {result.movement.id} recorded. Stock: {result.previous_stock} -> {result.new_stock}"
        )
        return 0

    except StockMovementError as e:
        logger.error(f"Stock movement rejected [{e.kind.name}]: {e}")
        return 1
    except (APIError, DatabaseError) as e:
        logger.error(f"An error occurred while registering the stock movement: {e}")
        return 2
    except ApplicationError as e:
        logger.error(f"Stock movement could not be registered: {e}")
        return 2
    finally:
        unit_of_work.close()


if __name__ == "__main__":
    sys.exit(main())
