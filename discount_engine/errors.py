"""Error types for the discount engine.

Construction problems in carts and campaigns surface as pydantic's
``ValidationError`` (re-exported here). Everything the service itself
raises derives from ``DiscountEngineError``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

if TYPE_CHECKING:
    from discount_engine.campaigns import CampaignType


class DiscountEngineError(Exception):
    """Base class for discount engine errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(DiscountEngineError):
    """The discount service cannot be built from the given strategies or config."""


class DuplicateStrategyError(ConfigurationError):
    """Two strategies declare the same campaign type."""

    def __init__(self, campaign_type: "CampaignType"):
        super().__init__(f"Duplicate strategy for campaign type: {campaign_type.value}")
        self.campaign_type = campaign_type


class StrategyNotFoundError(DiscountEngineError):
    """No strategy is registered for a campaign's type."""

    def __init__(self, campaign_type: "CampaignType"):
        super().__init__(f"Strategy for campaign type {campaign_type.value} not found")
        self.campaign_type = campaign_type


class TypeMismatchError(DiscountEngineError):
    """A strategy was handed a campaign variant it does not handle."""

    def __init__(self, strategy: str, expected: type, actual: Any):
        super().__init__(
            f"Strategy {strategy} expected {expected.__name__} "
            f"but got {type(actual).__name__}"
        )
        self.strategy = strategy
        self.expected = expected
        self.actual = actual


__all__ = [
    "ConfigurationError",
    "DiscountEngineError",
    "DuplicateStrategyError",
    "StrategyNotFoundError",
    "TypeMismatchError",
    "ValidationError",
]
