"""Product listing exports."""

from .exceptions import ProductError, ProductNotFoundError, ProductOwnershipError
from .models import Product, ProductCreateInput, ProductReference
from .repository import ProductLookup, ProductRepository
from .service import ProductService

__all__ = [
    "Product",
    "ProductCreateInput",
    "ProductReference",
    "ProductLookup",
    "ProductRepository",
    "ProductService",
    "ProductError",
    "ProductNotFoundError",
    "ProductOwnershipError",
]
