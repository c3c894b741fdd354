"""
Cartstore Package

Contains the shopping cart components:
- cart: catalog, Product model and CartStore
- services.money: Decimal money helpers
- models: Pydantic snapshot schemas
- config / logging / errors: ambient settings and helpers

Note: Imports are lazy so that importing the package does not
configure logging before settings are read.
"""

__all__ = [
    "CartStore",
    "Product",
    "default_catalog",
]


def __getattr__(name):
    """Lazy attribute access for the public cart API."""
    if name == "CartStore":
        from cartstore.cart import CartStore
        return CartStore
    elif name == "Product":
        from cartstore.cart import Product
        return Product
    elif name == "default_catalog":
        from cartstore.cart import default_catalog
        return default_catalog
    raise AttributeError(f"module 'cartstore' has no attribute '{name}'")
