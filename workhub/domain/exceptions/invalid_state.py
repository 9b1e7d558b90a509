"""
InvalidStateError - Raised when an operation is not allowed in the entity's current state.
Maps to: HTTP 409 Conflict

ProductOutOfStockError - Not enough available inventory to place or reserve an order line.
Maps to: HTTP 409 Conflict
"""


class InvalidStateError(Exception):
    """Exception raised when an entity's state forbids the requested operation."""

    def __init__(self, message: str):
        super().__init__(message)


class ProductOutOfStockError(InvalidStateError):
    def __init__(self, product_name: str, requested: int, available: int):
        super().__init__(
            f"Product {product_name} is out of stock: requested {requested}, available {available}"
        )
        self.requested = requested
        self.available = available
