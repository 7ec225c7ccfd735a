"""Test cart items and cart totals."""
import pytest
from decimal import Decimal
from discount_engine.cart import Cart, CartItem
from discount_engine.money import MAX_AMOUNT, MAX_QUANTITY
from discount_engine.errors import ValidationError


def test_cart_item_line_total():
    item = CartItem(product_name="Mouse", quantity=3, unit_price=Decimal("19.99"))
    assert item.line_total == Decimal("59.97")


def test_cart_item_rounds_unit_price():
    item = CartItem(product_name="Cable", quantity=1, unit_price="9.995")
    assert item.unit_price == Decimal("10.00")


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_cart_item_rejects_blank_name(name):
    with pytest.raises(ValidationError, match="product_name"):
        CartItem(product_name=name, quantity=1, unit_price="1.00")


@pytest.mark.parametrize("quantity", [0, -1])
def test_cart_item_rejects_non_positive_quantity(quantity):
    with pytest.raises(ValidationError, match="quantity"):
        CartItem(product_name="Pen", quantity=quantity, unit_price="1.00")


def test_cart_item_rejects_negative_price():
    with pytest.raises(ValidationError, match="unit_price"):
        CartItem(product_name="Pen", quantity=1, unit_price="-0.01")


def test_cart_item_allows_free_items():
    item = CartItem(product_name="Sticker", quantity=5, unit_price=0)
    assert item.line_total == Decimal("0.00")


def test_cart_total():
    cart = Cart.of([("Laptop", 1, "250.00"), ("Mouse", 2, "19.99")])
    assert cart.total == Decimal("289.98")
    assert cart.item_count == 3


def test_empty_cart_total_is_zero():
    cart = Cart()
    assert cart.total == Decimal("0.00")
    assert str(cart.total) == "0.00"


def test_cart_preserves_order():
    cart = Cart.of([("B", 1, "1.00"), ("A", 1, "2.00"), ("C", 1, "3.00")])
    assert [item.product_name for item in cart.items] == ["B", "A", "C"]


def test_cart_is_immutable():
    cart = Cart.of([("Laptop", 1, "250.00")])
    assert isinstance(cart.items, tuple)
    with pytest.raises(ValidationError):
        cart.items = ()
    with pytest.raises(ValidationError):
        cart.items[0].quantity = 2


def test_cart_of_validates_rows():
    with pytest.raises(ValidationError):
        Cart.of([("Laptop", 0, "250.00")])


def test_cart_item_rejects_oversize_price():
    with pytest.raises(ValidationError, match="unit_price"):
        CartItem(product_name="Yacht", quantity=1, unit_price=Decimal("1e27"))


def test_cart_item_rejects_oversize_quantity():
    with pytest.raises(ValidationError, match="quantity"):
        Cart.of([("Bolt", 10**27, "1.00")])


def test_cart_total_at_upper_bounds():
    row = ("Bulk", MAX_QUANTITY, MAX_AMOUNT)
    cart = Cart.of([row] * 20)
    assert cart.total == Decimal("19999999999999800000.00")
