"""Product domain specific exceptions."""


class ProductError(Exception):
    """Base class for product related domain errors."""


class ProductNotFoundError(ProductError):
    """Raised when the referenced product does not exist."""


class ProductOwnershipError(ProductError):
    """Raised when a caller acts on a listing they do not own."""
