"""Product model with Decimal-based pricing."""
from dataclasses import dataclass
from decimal import Decimal

from cartstore.services.money import to_decimal, multiply


@dataclass(eq=False)
class Product:
    """
    Catalog entry. ``quantity`` is the quantity currently in the cart.

    Compared by identity: the cart holds references to catalog entries.
    """
    id: int
    name: str
    unit_price: Decimal
    image_ref: str = ""
    quantity: int = 0

    def __post_init__(self):
        self.unit_price = to_decimal(self.unit_price)
        if self.unit_price < 0:
            raise ValueError("unit_price must be a non-negative number")
        if self.quantity < 0:
            raise ValueError("quantity must be a non-negative integer")

    @property
    def line_total(self) -> Decimal:
        """Price for all units in the cart."""
        return multiply(self.unit_price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "unit_price": str(self.unit_price),
            "image_ref": self.image_ref,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        """Create from dictionary."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            unit_price=to_decimal(data["unit_price"]),
            image_ref=data.get("image_ref", ""),
            quantity=int(data.get("quantity", 0)),
        )
