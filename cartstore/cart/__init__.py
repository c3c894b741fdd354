"""Cart package: product model, seed catalog and store."""
from .models import Product
from .catalog import CATALOG_SEED, default_catalog
from .service import CartStore

__all__ = [
    "Product",
    "CATALOG_SEED",
    "default_catalog",
    "CartStore",
]
