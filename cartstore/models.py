"""
Pydantic Models - Read-only snapshots of cart state

Used by whatever renders the cart; CartStore itself works on
the Product dataclass.
"""

from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class PaymentStatus(str, Enum):
    """Outcome of a payment against the cart total."""
    OWED = "owed"  # Balance still due
    PAID = "paid"  # Exact payment
    CHANGE = "change"  # Overpaid, change due


class ProductSnapshot(BaseModel):
    """Single cart line."""
    product_id: int = Field(description="Catalog product id")
    name: str = Field(description="Product name")
    unit_price: Decimal = Field(description="Price per unit", ge=0)
    quantity: int = Field(description="Quantity in cart", ge=0)
    line_total: Decimal = Field(description="unit_price * quantity", ge=0)
    image_ref: str = Field(default="", description="Image reference for the rendering layer")


class CartSummary(BaseModel):
    """Snapshot of the whole cart."""
    is_empty: bool
    items: List[ProductSnapshot] = Field(default_factory=list)
    total_items: int = Field(default=0, ge=0)
    total: Decimal = Field(default=Decimal("0"), ge=0)
    pending_payment: Decimal = Field(default=Decimal("0"))
    currency: str = "USD"
    formatted_total: str = ""


class PaymentResult(BaseModel):
    """
    Result of tendering an amount.

    ``remaining`` keeps the signed value: negative is still owed,
    positive is change.
    """
    remaining: Decimal
    status: PaymentStatus
    balance_due: Decimal = Field(default=Decimal("0"), ge=0)
    change_due: Decimal = Field(default=Decimal("0"), ge=0)
    pending_payment: Decimal = Field(default=Decimal("0"))
