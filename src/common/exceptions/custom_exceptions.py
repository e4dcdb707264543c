"""Custom application-wide exceptions."""

from enum import Enum


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    status_code: int = 500

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class APIError(ApplicationError):
    """Exception raised for errors during calls to the inventory REST backend."""

    status_code = 502

    def __init__(
        self,
        message: str = "API call failed",
        original_exception: Exception | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.message = f"API Error: {message}"
        if status_code:
            self.status_code = status_code
            self.message += f" (Status Code: {status_code})"


class DatabaseError(ApplicationError):
    """Exception raised for errors during database operations."""

    def __init__(self, message: str = "Database operation failed", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Database Error: {message}"


class StockMovementErrorKind(Enum):
    """Closed set of reasons a stock movement can be rejected."""

    RESOURCE_NOT_FOUND = ("Resource not found.", 404)
    ONLY_NATURAL_NUMBERS = ("Quantity must be a natural number (integer greater than zero).", 400)
    INVALID_OPTION = ("Operation must be either 'input' or 'output'.", 400)
    STOCK_CANNOT_BE_NEGATIVE = ("Stock cannot be negative.", 400)

    def __init__(self, default_message: str, status_code: int) -> None:
        self.default_message = default_message
        self.status_code = status_code


class StockMovementError(ApplicationError):
    """
    Raised when a stock movement is rejected.

    Callers tell the failures apart through ``kind`` rather than through
    subclasses, so every member of StockMovementErrorKind can be handled.
    """

    def __init__(self, kind: StockMovementErrorKind, message: str | None = None) -> None:
        super().__init__(message or kind.default_message)
        self.kind = kind
        self.status_code = kind.status_code

    def to_dict(self) -> dict:
        return {"error": self.kind.name, "message": self.message}


class ConcurrentStockUpdateError(ApplicationError):
    """Raised when an item's stock changed between reading it and writing the new value."""

    status_code = 409

    def __init__(self, item_id: str, expected_stock: int) -> None:
        super().__init__(f"Stock of item {item_id} changed concurrently (expected {expected_stock}).")
        self.item_id = item_id
        self.expected_stock = expected_stock
