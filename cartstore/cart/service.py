"""Cart store: catalog, cart and pending payment for one shopper."""
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from cartstore.config import settings
from cartstore.errors import (
    ERROR_DUPLICATE_PRODUCT_ID,
    ERROR_PAYMENT_INCOMPLETE,
    ERROR_PRODUCT_NOT_FOUND,
    ERROR_PRODUCT_NOT_IN_CART,
)
from cartstore.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from cartstore.models import CartSummary, PaymentResult, PaymentStatus, ProductSnapshot
from cartstore.services.money import ZERO, add, compare, format_money, subtract, to_decimal
from .catalog import default_catalog
from .models import Product

logger = get_logger(__name__)


class CartStore:
    """
    Holds a catalog and the cart built from it.

    Features:
    - Cart entries are references to catalog products; quantity lives on the product
    - Unknown product ids are absorbed as no-ops
    - Payments accumulate across calls until the total is covered
    """

    def __init__(self, products: Optional[Iterable[Product]] = None, currency: Optional[str] = None):
        catalog = list(products) if products is not None else default_catalog()

        index: Dict[int, Product] = {}
        for product in catalog:
            if product.id in index:
                raise ValueError(f"{ERROR_DUPLICATE_PRODUCT_ID}: {product.id}")
            index[product.id] = product

        self._catalog: Tuple[Product, ...] = tuple(catalog)
        self._index = index
        self._cart: List[Product] = [p for p in self._catalog if p.quantity > 0]
        self._pending_payment = ZERO
        self.currency = currency or settings.currency

    @property
    def products(self) -> Tuple[Product, ...]:
        """Catalog in seed order."""
        return self._catalog

    @property
    def cart(self) -> Tuple[Product, ...]:
        """Products currently in the cart, in the order they were added."""
        return tuple(self._cart)

    @property
    def pending_payment(self) -> Decimal:
        """Amount tendered toward the current total so far."""
        return self._pending_payment

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(product.quantity for product in self._cart)

    def find_product(self, product_id: int) -> Optional[Product]:
        """Look up a catalog product by id. Returns None when there is none."""
        try:
            return self._index.get(product_id)
        except TypeError:
            # Unhashable ids can never match a catalog entry
            logger.debug("%s: unusable id %s", ERROR_PRODUCT_NOT_FOUND, sanitize_id_for_logging(product_id))
            return None

    def _lookup(self, product_id: int, action: str) -> Optional[Product]:
        product = self.find_product(product_id)
        if product is None:
            logger.debug(
                "%s: %s skipped for id %s",
                ERROR_PRODUCT_NOT_FOUND, action, sanitize_id_for_logging(product_id),
            )
        return product

    def _drop(self, product: Product) -> None:
        product.quantity = 0
        if product in self._cart:
            self._cart.remove(product)

    def add_to_cart(self, product_id: int) -> None:
        """Add one unit; the product enters the cart on its first unit."""
        product = self._lookup(product_id, "add_to_cart")
        if product is None:
            return

        product.quantity += 1
        if product not in self._cart:
            self._cart.append(product)
        logger.debug(
            "Added %s to cart (qty %d)",
            sanitize_string_for_logging(product.name), product.quantity,
        )

    def increase_quantity(self, product_id: int) -> None:
        """Same as add_to_cart."""
        self.add_to_cart(product_id)

    def decrease_quantity(self, product_id: int) -> None:
        """Remove one unit; the product leaves the cart when it reaches zero."""
        product = self._lookup(product_id, "decrease_quantity")
        if product is None:
            return

        if product.quantity <= 0:
            logger.debug("%s: %s", ERROR_PRODUCT_NOT_IN_CART, sanitize_id_for_logging(product_id))
            return

        product.quantity -= 1
        if product.quantity == 0:
            self._drop(product)

    def remove_from_cart(self, product_id: int) -> None:
        """Drop the product from the cart whatever its quantity."""
        product = self._lookup(product_id, "remove_from_cart")
        if product is None:
            return
        self._drop(product)

    def cart_total(self) -> Decimal:
        """Sum of unit price times quantity over the cart. Zero when empty."""
        return sum((product.line_total for product in self._cart), ZERO)

    def empty_cart(self) -> None:
        """Clear the cart, zero every quantity and forget any pending payment."""
        for product in self._cart:
            product.quantity = 0
        self._cart.clear()
        self._pending_payment = ZERO

    def pay(self, amount) -> Decimal:
        """
        Tender ``amount`` toward the cart total.

        Amounts accumulate across calls. Returns pending minus total:
        negative means that much is still owed, zero is exact, positive is
        change. Once the total is covered the pending payment resets to 0.
        """
        self._pending_payment = add(self._pending_payment, to_decimal(amount))
        remaining = subtract(self._pending_payment, self.cart_total())

        if compare(remaining, ZERO) >= 0:
            logger.info(
                "Payment complete, change due %s",
                format_money(remaining, self.currency),
            )
            self._pending_payment = ZERO
        else:
            logger.info(
                "%s, balance due %s",
                ERROR_PAYMENT_INCOMPLETE, format_money(-remaining, self.currency),
            )
        return remaining

    def settle(self, amount) -> PaymentResult:
        """pay() wrapped in a PaymentResult."""
        remaining = self.pay(amount)
        sign = compare(remaining, ZERO)
        if sign < 0:
            status = PaymentStatus.OWED
        elif sign == 0:
            status = PaymentStatus.PAID
        else:
            status = PaymentStatus.CHANGE

        return PaymentResult(
            remaining=remaining,
            status=status,
            balance_due=-remaining if sign < 0 else ZERO,
            change_due=remaining if sign > 0 else ZERO,
            pending_payment=self._pending_payment,
        )

    def get_cart_summary(self) -> CartSummary:
        """Get a snapshot of the cart for rendering."""
        total = self.cart_total()
        return CartSummary(
            is_empty=not self._cart,
            items=[
                ProductSnapshot(
                    product_id=product.id,
                    name=product.name,
                    unit_price=product.unit_price,
                    quantity=product.quantity,
                    line_total=product.line_total,
                    image_ref=product.image_ref,
                )
                for product in self._cart
            ],
            total_items=self.total_items,
            total=total,
            pending_payment=self._pending_payment,
            currency=self.currency,
            formatted_total=format_money(total, self.currency),
        )
