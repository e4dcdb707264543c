# tests/test_inventory_domain/test_application/test_stock_use_case.py
"""Tests for the Stock Use Case."""

from unittest.mock import Mock

import pytest

from src.common.dtos.stock_dtos import StockMovementResultDTO
from src.common.exceptions.custom_exceptions import StockMovementError, StockMovementErrorKind
from src.inventory_domain.application.stock_use_case import StockUseCase
from src.inventory_domain.domain.entities.stock_movement import StockOperation


def test_should_be_able_to_create_an_input_stock(stock_use_case, items_repository) -> None:
    item = items_repository.create(name="produto", cost=1, price=2, stock=0)

    result = stock_use_case.execute(item_id=item.id, quantity=5, operation="input")

    assert isinstance(result, StockMovementResultDTO)
    assert isinstance(result.movement.id, str) and result.movement.id
    assert result.movement.operation is StockOperation.INPUT
    assert result.previous_stock == 0
    assert result.new_stock == 5


def test_should_be_able_to_create_an_output_stock(stock_use_case, items_repository, stocks_repository) -> None:
    item = items_repository.create(name="produto", cost=1, price=2, stock=4)
    assert [m.signed_quantity for m in stocks_repository.get_by_item_id(item.id)] == [4]

    result = stock_use_case.execute(item_id=item.id, quantity=1, operation="output")

    assert isinstance(result.movement.id, str) and result.movement.id
    assert result.new_stock == 3


def test_output_of_entire_stock_is_allowed(stock_use_case, items_repository) -> None:
    item = items_repository.create(name="produto", stock=4)

    result = stock_use_case.execute(item_id=item.id, quantity=4, operation="output")

    assert result.new_stock == 0


def test_should_not_create_stock_for_inexistent_item(stock_use_case, stocks_repository) -> None:
    with pytest.raises(StockMovementError) as exc_info:
        stock_use_case.execute(item_id="nonexistent", quantity=5, operation="input")

    assert exc_info.value.kind is StockMovementErrorKind.RESOURCE_NOT_FOUND
    assert exc_info.value.status_code == 404
    assert stocks_repository.movements == []


def test_inexistent_item_is_reported_before_other_validations(stock_use_case) -> None:
    with pytest.raises(StockMovementError) as exc_info:
        stock_use_case.execute(item_id="nonexistent", quantity=0, operation="exchange")

    assert exc_info.value.kind is StockMovementErrorKind.RESOURCE_NOT_FOUND


@pytest.mark.parametrize("quantity", [0, -1, 1.5])
@pytest.mark.parametrize("operation", ["input", "output"])
def test_should_not_create_stock_with_non_natural_numbers(
    stock_use_case, items_repository, stocks_repository, quantity, operation
) -> None:
    item = items_repository.create(name="produto", cost=1, price=2, stock=10)
    movements_before = list(stocks_repository.movements)

    with pytest.raises(StockMovementError) as exc_info:
        stock_use_case.execute(item_id=item.id, quantity=quantity, operation=operation)

    assert exc_info.value.kind is StockMovementErrorKind.ONLY_NATURAL_NUMBERS
    assert exc_info.value.status_code == 400
    assert stocks_repository.movements == movements_before


def test_should_not_create_stock_with_wrong_option(stock_use_case, items_repository, stocks_repository) -> None:
    item = items_repository.create(name="produto", cost=1, price=2, stock=0)

    with pytest.raises(StockMovementError) as exc_info:
        stock_use_case.execute(item_id=item.id, quantity=2, operation="exchange")

    assert exc_info.value.kind is StockMovementErrorKind.INVALID_OPTION
    assert stocks_repository.movements == []


def test_should_not_create_output_greater_than_item_stock(
    stock_use_case, items_repository, stocks_repository
) -> None:
    item = items_repository.create(name="produto", cost=1, price=2, stock=5)

    with pytest.raises(StockMovementError) as exc_info:
        stock_use_case.execute(item_id=item.id, quantity=6, operation="output")

    assert exc_info.value.kind is StockMovementErrorKind.STOCK_CANNOT_BE_NEGATIVE
    assert len(stocks_repository.movements) == 1


def test_execute_does_not_write_item_stock(stock_use_case, items_repository) -> None:
    item = items_repository.create(name="produto", stock=2)

    stock_use_case.execute(item_id=item.id, quantity=3, operation="input")

    assert items_repository.find_by_id(item.id).stock == 2


def test_execute_passes_description_and_timestamp(stock_use_case, items_repository, sample_created_at) -> None:
    item = items_repository.create(name="produto", stock=0)

    result = stock_use_case.execute(
        item_id=item.id, quantity=1, operation="input", description="COMPRA", created_at=sample_created_at
    )

    assert result.movement.description == "COMPRA"
    assert result.movement.created_at == sample_created_at


def test_execute_defaults_created_at_to_now(stock_use_case, items_repository) -> None:
    item = items_repository.create(name="produto", stock=0)

    result = stock_use_case.execute(item_id=item.id, quantity=1, operation="input")

    assert result.movement.created_at is not None
    assert result.movement.created_at.tzinfo is not None


def test_execute_with_mocked_repositories(mock_stock_movement_repository, mock_item_repository, sample_item) -> None:
    mock_item_repository.find_by_id.return_value = sample_item
    use_case = StockUseCase(mock_stock_movement_repository, mock_item_repository)

    result = use_case.execute(item_id="item-1", quantity=3, operation="output", description="VENDA")

    mock_item_repository.find_by_id.assert_called_once_with("item-1")
    create_kwargs = mock_stock_movement_repository.create.call_args.kwargs
    assert create_kwargs["item_id"] == "item-1"
    assert create_kwargs["quantity"] == 3
    assert create_kwargs["operation"] is StockOperation.OUTPUT
    assert create_kwargs["description"] == "VENDA"
    assert result.movement is mock_stock_movement_repository.create.return_value
    assert result.new_stock == 1
    mock_item_repository.update_stock.assert_not_called()


def test_rejected_movement_never_reaches_repository(mock_stock_movement_repository, mock_item_repository, sample_item) -> None:
    mock_item_repository.find_by_id.return_value = sample_item
    use_case = StockUseCase(mock_stock_movement_repository, mock_item_repository)

    with pytest.raises(StockMovementError):
        use_case.execute(item_id="item-1", quantity=5, operation="output")

    mock_stock_movement_repository.create.assert_not_called()


def test_rejection_is_logged_as_warning(stock_use_case, items_repository, caplog) -> None:
    item = items_repository.create(name="produto", stock=0)

    with caplog.at_level("WARNING"), pytest.raises(StockMovementError):
        stock_use_case.execute(item_id=item.id, quantity=2, operation="exchange")

    assert "INVALID_OPTION" in caplog.text
