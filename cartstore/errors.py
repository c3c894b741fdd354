"""
Common Error Constants

Centralized messages for the conditions cart operations absorb.
Operations never raise on these; they are logged and treated as no-ops.
"""

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_PRODUCT_NOT_IN_CART = "Product not in cart"
ERROR_DUPLICATE_PRODUCT_ID = "Duplicate product id in catalog"

# Payment errors
ERROR_PAYMENT_INCOMPLETE = "Payment incomplete"
