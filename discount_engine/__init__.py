"""
Campaign discount evaluation engine.

Evaluates a cart against marketing campaigns through a registry of
pluggable discount strategies:
- Money: Decimal helpers with a fixed 2-digit, half-up scale
- Cart / CartItem: immutable, validated line items with a computed total
- Campaign variants tagged by CampaignType, and the Discounts they grant
- DiscountStrategy: one per campaign variant
- DiscountService: strategy registry + evaluation loop
"""
from discount_engine.campaigns import (
    Campaign,
    CampaignType,
    Discount,
    PercentageCampaign,
)
from discount_engine.cart import Cart, CartItem
from discount_engine.config import (
    STRATEGY_CATALOG,
    EngineConfig,
    LoggingConfig,
    build_discount_service,
)
from discount_engine.errors import (
    ConfigurationError,
    DiscountEngineError,
    DuplicateStrategyError,
    StrategyNotFoundError,
    TypeMismatchError,
    ValidationError,
)
from discount_engine.log_setup import configure_logging
from discount_engine.service import DiscountService
from discount_engine.strategies import DiscountStrategy, PercentageDiscountStrategy

__all__ = [
    # Model
    "Cart",
    "CartItem",
    "Campaign",
    "CampaignType",
    "PercentageCampaign",
    "Discount",
    # Strategies
    "DiscountStrategy",
    "PercentageDiscountStrategy",
    # Service
    "DiscountService",
    # Config
    "EngineConfig",
    "LoggingConfig",
    "STRATEGY_CATALOG",
    "build_discount_service",
    "configure_logging",
    # Errors
    "ConfigurationError",
    "DiscountEngineError",
    "DuplicateStrategyError",
    "StrategyNotFoundError",
    "TypeMismatchError",
    "ValidationError",
]
