"""
Service-layer exceptions

Routers translate these into HTTP responses; services never raise
HTTPException directly.
"""


class StorefrontError(Exception):
    """Base class for storefront business errors"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StorefrontError):
    """Requested record or layout element does not exist"""

    status_code = 404


class ValidationFailedError(StorefrontError):
    """Business validation rejected the request"""


class InsufficientStockError(ValidationFailedError):
    """Order quantity exceeds available stock"""

    def __init__(self, product_name: str, available: int):
        super().__init__(f"Insufficient stock for {product_name}: only {available} items available")
        self.available = available
