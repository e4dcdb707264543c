# tests/conftest.py
import pytest
from unittest.mock import Mock
from datetime import datetime
import pytz

from src.common.config.settings import settings
from src.common.dtos.stock_dtos import StockMovementRequestDTO
from src.inventory_domain.application.stock_service import StockApplicationService
from src.inventory_domain.application.stock_use_case import StockUseCase
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.repositories.item_repository import IItemRepository
from src.inventory_domain.domain.repositories.stock_movement_repository import IStockMovementRepository
from src.inventory_domain.infrastructure.persistence.in_memory_repositories import (
    InMemoryItemRepository,
    InMemoryStockMovementRepository,
    InMemoryUnitOfWork,
)


@pytest.fixture(autouse=True)
def mock_settings_inventory_api(mocker) -> None:
    """Mocks the inventory API settings for consistent testing."""
    mocker.patch.object(settings, "INVENTORY_API_BASE_URL", "https://inventory.example.com/api")
    mocker.patch.object(settings, "INVENTORY_API_TOKEN", "test_token")
    mocker.patch.object(settings, "INVENTORY_API_TIMEOUT", 30)


@pytest.fixture
def stocks_repository() -> InMemoryStockMovementRepository:
    return InMemoryStockMovementRepository()


@pytest.fixture
def items_repository(stocks_repository) -> InMemoryItemRepository:
    """Item store that books opening stock into stocks_repository."""
    return InMemoryItemRepository(stocks_repository)


@pytest.fixture
def stock_use_case(stocks_repository, items_repository) -> StockUseCase:
    """StockUseCase over in-memory repositories."""
    return StockUseCase(stocks_repository, items_repository)


@pytest.fixture
def stock_service(items_repository, stocks_repository) -> StockApplicationService:
    """StockApplicationService over in-memory repositories."""
    return StockApplicationService(
        item_repo=items_repository,
        stock_movement_repo=stocks_repository,
        unit_of_work=InMemoryUnitOfWork(items_repository, stocks_repository),
    )


@pytest.fixture
def mock_item_repository() -> Mock:
    return Mock(spec=IItemRepository)


@pytest.fixture
def mock_stock_movement_repository() -> Mock:
    return Mock(spec=IStockMovementRepository)


@pytest.fixture
def sample_item() -> Item:
    return Item(id="item-1", name="produto", cost=1, price=2, stock=4, min_stock=5)


@pytest.fixture
def sample_created_at() -> datetime:
    return datetime(2024, 3, 1, 12, 30, 0, tzinfo=pytz.utc)


@pytest.fixture
def sample_movement_request(sample_created_at) -> StockMovementRequestDTO:
    return StockMovementRequestDTO(
        item_id="item-1",
        quantity=3,
        operation="output",
        description="VENDA",
        created_at=sample_created_at,
    )
