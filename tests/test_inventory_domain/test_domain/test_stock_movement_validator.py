"""Tests for the StockMovementValidator domain service."""

import pytest

from src.common.exceptions.custom_exceptions import StockMovementError, StockMovementErrorKind
from src.inventory_domain.domain.entities.item import Item
from src.inventory_domain.domain.entities.stock_movement import StockOperation
from src.inventory_domain.domain.services.stock_movement_validator import StockMovementValidator


class TestStockMovementValidator:
    def setup_method(self) -> None:
        """Setup test dependencies."""
        self.validator = StockMovementValidator()
        self.item = Item(id="item-1", name="produto", cost=1, price=2, stock=5)

    @pytest.mark.parametrize("stock, quantity", [(0, 1), (0, 5), (7, 100), (5, 1)])
    def test_input_always_adds_quantity(self, stock: int, quantity: int) -> None:
        item = Item(id="item-1", name="produto", stock=stock)

        operation, new_stock = self.validator.validate(item, quantity, "input")

        assert operation is StockOperation.INPUT
        assert new_stock == stock + quantity

    @pytest.mark.parametrize("quantity", [1, 4, 5])
    def test_output_up_to_stock_is_valid(self, quantity: int) -> None:
        operation, new_stock = self.validator.validate(self.item, quantity, "output")

        assert operation is StockOperation.OUTPUT
        assert new_stock == 5 - quantity

    @pytest.mark.parametrize("quantity", [6, 50])
    def test_output_above_stock_is_rejected(self, quantity: int) -> None:
        with pytest.raises(StockMovementError) as exc_info:
            self.validator.validate(self.item, quantity, "output")

        assert exc_info.value.kind is StockMovementErrorKind.STOCK_CANNOT_BE_NEGATIVE

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, 2.0, "3", True, None])
    def test_non_natural_quantities_are_rejected(self, quantity) -> None:
        with pytest.raises(StockMovementError) as exc_info:
            self.validator.validate(self.item, quantity, "input")

        assert exc_info.value.kind is StockMovementErrorKind.ONLY_NATURAL_NUMBERS

    @pytest.mark.parametrize("operation", ["exchange", "INPUT", "IN", "", None, 1])
    def test_unknown_operations_are_rejected(self, operation) -> None:
        with pytest.raises(StockMovementError) as exc_info:
            self.validator.validate(self.item, 1, operation)

        assert exc_info.value.kind is StockMovementErrorKind.INVALID_OPTION

    def test_quantity_is_checked_before_operation(self) -> None:
        with pytest.raises(StockMovementError) as exc_info:
            self.validator.validate(self.item, 0, "exchange")

        assert exc_info.value.kind is StockMovementErrorKind.ONLY_NATURAL_NUMBERS

    def test_operation_is_checked_before_resulting_stock(self) -> None:
        with pytest.raises(StockMovementError) as exc_info:
            self.validator.validate(self.item, 100, "exchange")

        assert exc_info.value.kind is StockMovementErrorKind.INVALID_OPTION

    def test_accepts_stock_operation_members(self) -> None:
        operation, new_stock = self.validator.validate(self.item, 2, StockOperation.OUTPUT)

        assert operation is StockOperation.OUTPUT
        assert new_stock == 3

    def test_validate_does_not_modify_item(self) -> None:
        self.validator.validate(self.item, 2, "output")

        assert self.item.stock == 5
