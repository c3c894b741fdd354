"""
Tests for logging helpers and cart log output
"""

import logging

from cartstore.cart import CartStore, Product
from cartstore.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging


class TestSanitizers:
    """Tests for log sanitizers."""

    def test_id_truncated(self):
        """Test long ids are cut to 8 chars."""
        assert sanitize_id_for_logging("abcdefghijkl") == "abcdefgh"

    def test_int_id(self):
        """Test int id."""
        assert sanitize_id_for_logging(990) == "990"

    def test_id_none(self):
        """Test None id becomes N/A."""
        assert sanitize_id_for_logging(None) == "N/A"

    def test_newlines_escaped(self):
        """Test newlines escaped."""
        assert sanitize_string_for_logging("a\nb") == "a\\nb"

    def test_string_truncated(self):
        """Test string truncated."""
        assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."

    def test_get_logger_cached(self):
        """Test get_logger returns the same instance."""
        assert get_logger("cartstore.test") is get_logger("cartstore.test")


class TestCartLogging:
    """Cart operations log instead of raising."""

    def test_missing_product_logged(self, caplog):
        """Test unknown id is logged at DEBUG."""
        store = CartStore()

        with caplog.at_level(logging.DEBUG, logger="cartstore"):
            store.add_to_cart(12345)

        assert "Product not found" in caplog.text

    def test_payment_logged(self, caplog):
        """Test partial and completed payments are logged."""
        store = CartStore(products=[Product(id=1, name="A", unit_price=2)])
        store.add_to_cart(1)

        with caplog.at_level(logging.INFO, logger="cartstore"):
            store.pay(1)
            store.pay(2)

        assert "balance due $1.00" in caplog.text
        assert "change due $1.00" in caplog.text
