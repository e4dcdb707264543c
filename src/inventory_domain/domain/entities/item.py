"""Item entity."""

from dataclasses import dataclass


@dataclass
class Item:
    """A merchandise, service or supply record with a tracked on-hand quantity."""

    id: str
    name: str
    cost: float = 0.0
    price: float = 0.0
    stock: int = 0
    min_stock: int | None = None
    active: bool = True
    description: str | None = None
    barcode: str | None = None
    category: str | None = None

    def __post_init__(self) -> None:
        """Post-initialization for validation."""
        if self.stock < 0:
            raise ValueError("Stock cannot be negative.")
        if self.cost < 0 or self.price < 0:
            raise ValueError("Cost and price cannot be negative.")
        if self.min_stock is not None and self.min_stock < 0:
            raise ValueError("Minimum stock cannot be negative.")

    @property
    def is_below_min_stock(self) -> bool:
        return self.min_stock is not None and self.stock < self.min_stock

    @property
    def stock_value(self) -> float:
        """Value of the on-hand quantity at unit cost."""
        return self.cost * self.stock
