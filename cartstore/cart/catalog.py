"""Seed catalog."""
from typing import List

from .models import Product

# Images are served by the rendering layer
CATALOG_SEED = (
    {"id": 990, "name": "strawberry", "unit_price": "0.25", "image_ref": "../images/strawberry.jpg"},
    {"id": 991, "name": "orange", "unit_price": "2", "image_ref": "../images/orange.jpg"},
    {"id": 992, "name": "cherry", "unit_price": "0.30", "image_ref": "../images/cherry.jpg"},
)


def default_catalog() -> List[Product]:
    """Fresh Product instances for the seed catalog, all with quantity 0."""
    return [Product.from_dict(entry) for entry in CATALOG_SEED]
