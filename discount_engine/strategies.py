"""Discount strategies: one per campaign variant.

A strategy is a pair of pure functions over ``(cart, campaign)``: a
predicate deciding whether the campaign applies, and a computation producing
the ``Discount``. ``apply`` assumes ``is_applicable`` returned True; the
discount service always checks first.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from discount_engine import money
from discount_engine.campaigns import (
    Campaign,
    CampaignType,
    Discount,
    PercentageCampaign,
)
from discount_engine.cart import Cart

C = TypeVar("C", bound=Campaign)


class DiscountStrategy(ABC, Generic[C]):
    """Evaluates one campaign variant against a cart."""

    name: ClassVar[str]
    campaign_type: ClassVar[CampaignType]
    model_class: ClassVar[type[Campaign]]

    @abstractmethod
    def is_applicable(self, cart: Cart, campaign: C) -> bool:
        ...

    @abstractmethod
    def apply(self, cart: Cart, campaign: C) -> Discount:
        ...

    def handles(self, campaign: Campaign) -> bool:
        """True if ``campaign`` is the variant this strategy declares."""
        return (
            isinstance(campaign, self.model_class)
            and campaign.campaign_type == self.campaign_type
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(campaign_type={self.campaign_type.value})"


class PercentageDiscountStrategy(DiscountStrategy[PercentageCampaign]):
    """Percent off the cart total.

    Rules:
    - Applies only when the cart total is strictly above ``min_order_total``
    - ``total * rate / 100``, rounded half-up to cents
    - Never more than the cart total, whatever the rate
    """

    name = "percentage"
    campaign_type = CampaignType.PERCENTAGE
    model_class = PercentageCampaign

    def is_applicable(self, cart: Cart, campaign: PercentageCampaign) -> bool:
        return cart.total > campaign.min_order_total

    def apply(self, cart: Cart, campaign: PercentageCampaign) -> Discount:
        total = cart.total
        amount = money.percent_of(total, campaign.rate)
        if amount > total:
            amount = total
        return Discount(name=campaign.name, amount=amount)
