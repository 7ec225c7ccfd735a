"""Cart and cart line items.

Both are frozen pydantic models: invalid fields raise ``ValidationError`` at
construction and nothing can be changed afterwards.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from discount_engine import money


class CartItem(BaseModel):
    """One line of a cart: a product, how many, and the unit price."""

    model_config = ConfigDict(frozen=True)

    product_name: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0, le=money.MAX_QUANTITY)
    unit_price: Decimal = Field(..., ge=0, le=money.MAX_AMOUNT)

    @field_validator("product_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("product_name must not be blank")
        return value

    @field_validator("unit_price")
    @classmethod
    def _to_money(cls, value: Decimal) -> Decimal:
        return money.to_money(value)

    @property
    def line_total(self) -> Decimal:
        return money.multiply(self.unit_price, self.quantity)


class Cart(BaseModel):
    """Ordered, immutable collection of cart items.

    Usage::

        cart = Cart.of([("Laptop", 1, "250.00"), ("Mouse", 2, "19.99")])
        cart.total  # Decimal("289.98")
    """

    model_config = ConfigDict(frozen=True)

    items: tuple[CartItem, ...] = ()

    @classmethod
    def of(cls, rows: Iterable[tuple[str, int, money.MoneyLike]]) -> "Cart":
        """Build a cart from ``(product_name, quantity, unit_price)`` rows."""
        return cls(
            items=tuple(
                CartItem(product_name=name, quantity=quantity, unit_price=unit_price)
                for name, quantity, unit_price in rows
            )
        )

    @property
    def total(self) -> Decimal:
        """Sum of line totals, ``0.00`` for an empty cart."""
        total = money.ZERO
        for item in self.items:
            total = money.add(total, item.line_total)
        return total

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
