"""
Error taxonomy for the kiosk backend.

Errors are raised by the inventory ledger, the sale engine and the request
serializers at the point where a rule is violated. The API layer never
catches them; ``apps.core.exception_handler`` translates each kind into a
response status in one place.
"""


class KioskError(Exception):
    """Base class for all business errors raised by the kiosk apps."""

    default_message = "Kiosk operation failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(KioskError):
    """Raised when a product or sale id is unknown."""

    default_message = "Resource not found"

    @classmethod
    def for_resource(cls, resource, key):
        return cls(f"{resource} not found with ID: {key}")


class InvalidArgumentError(KioskError):
    """
    Raised when a business rule rejects the input.

    Examples: sale price not above cost price, empty cart, non-positive
    sale total, non-positive stock increment.
    """

    default_message = "Invalid argument"


class InsufficientStockError(KioskError):
    """Raised when a stock decrement exceeds the quantity on hand."""

    def __init__(self, product_id, product_name, available, requested):
        self.product_id = product_id
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for product: {product_name}. "
            f"Available: {available}, Requested: {requested}"
        )


class ValidationFailedError(KioskError):
    """
    Raised when structural input validation fails before business logic runs.

    Carries one message per offending field.
    """

    default_message = "Validation failed"

    def __init__(self, errors, message=None):
        self.errors = errors
        super().__init__(message)


class InternalError(KioskError):
    """Unexpected failure."""

    default_message = "Internal server error"
