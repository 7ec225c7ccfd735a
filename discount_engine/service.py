"""Discount evaluation service.

Holds the registry of strategies keyed by campaign type and evaluates a cart
against a set of campaigns:

- The registry is built and checked once, at construction
- Every campaign is matched to its strategy before any discount is computed,
  so a missing or mismatched strategy aborts the call with no partial result
- Campaigns that do not apply are skipped; that is not an error
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

import structlog

from discount_engine.campaigns import Campaign, CampaignType, Discount
from discount_engine.cart import Cart
from discount_engine.errors import (
    ConfigurationError,
    DuplicateStrategyError,
    StrategyNotFoundError,
    TypeMismatchError,
)
from discount_engine.strategies import DiscountStrategy

log = structlog.get_logger(__name__)


class DiscountService:
    """Evaluates campaigns against carts using a fixed set of strategies.

    Usage::

        service = DiscountService([PercentageDiscountStrategy()])
        discounts = service.evaluate(cart, {summer_sale, loyalty_bonus})
    """

    def __init__(self, strategies: Iterable[DiscountStrategy]):
        registry: dict[CampaignType, DiscountStrategy] = {}
        for strategy in strategies:
            _check_declared(strategy)
            if strategy.campaign_type in registry:
                log.error(
                    "duplicate_strategy",
                    campaign_type=strategy.campaign_type.value,
                    first=repr(registry[strategy.campaign_type]),
                    second=repr(strategy),
                )
                raise DuplicateStrategyError(strategy.campaign_type)
            registry[strategy.campaign_type] = strategy

        self._by_type: Mapping[CampaignType, DiscountStrategy] = MappingProxyType(registry)
        log.info(
            "discount_service_ready",
            campaign_types=[t.value for t in self._by_type],
        )

    @property
    def registered_types(self) -> frozenset[CampaignType]:
        return frozenset(self._by_type)

    def strategy_for(self, campaign_type: CampaignType) -> DiscountStrategy:
        """Return the strategy registered for ``campaign_type``.

        Raises:
            StrategyNotFoundError: if none is registered.
        """
        strategy = self._by_type.get(campaign_type)
        if strategy is None:
            log.error("strategy_not_found", campaign_type=campaign_type.value)
            raise StrategyNotFoundError(campaign_type)
        return strategy

    def evaluate(self, cart: Cart, campaigns: Iterable[Campaign]) -> list[Discount]:
        """Return the discounts granted by every applicable campaign.

        Discounts are independent of each other; combining them is up to the
        caller. An empty list means nothing applied.
        """
        resolved = [(campaign, self._resolve(campaign)) for campaign in campaigns]

        discounts: list[Discount] = []
        for campaign, strategy in resolved:
            if not strategy.is_applicable(cart, campaign):
                log.debug(
                    "campaign_not_applicable",
                    campaign=campaign.name,
                    campaign_type=campaign.campaign_type.value,
                    cart_total=str(cart.total),
                )
                continue

            discount = strategy.apply(cart, campaign)
            log.info(
                "discount_granted",
                campaign=campaign.name,
                strategy=strategy.name,
                amount=str(discount.amount),
            )
            discounts.append(discount)

        return discounts

    def _resolve(self, campaign: Campaign) -> DiscountStrategy:
        strategy = self.strategy_for(campaign.campaign_type)
        if not strategy.handles(campaign):
            log.error(
                "strategy_type_mismatch",
                strategy=strategy.name,
                expected=strategy.model_class.__name__,
                actual=type(campaign).__name__,
            )
            raise TypeMismatchError(strategy.name, strategy.model_class, campaign)
        return strategy


def _check_declared(strategy: DiscountStrategy) -> None:
    """Raise ConfigurationError unless the strategy declares what it handles."""
    problems = []
    if not isinstance(getattr(strategy, "campaign_type", None), CampaignType):
        problems.append("campaign_type must be a CampaignType")
    model_class = getattr(strategy, "model_class", None)
    if not (isinstance(model_class, type) and issubclass(model_class, Campaign)):
        problems.append("model_class must be a Campaign subclass")
    name = getattr(strategy, "name", None)
    if not isinstance(name, str) or not name.strip():
        problems.append("name must be a non-blank string")
    if problems:
        log.error("invalid_strategy", strategy=type(strategy).__name__, problems=problems)
        raise ConfigurationError(
            f"Strategy {type(strategy).__name__} is misdeclared: {'; '.join(problems)}"
        )
