"""Dataclass-based engine configuration.

Which strategies a deployment runs and how it logs are frozen dataclasses
with sensible defaults and environment overrides. Monetary scale and
rounding are fixed in ``discount_engine.money`` and are not configurable.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from discount_engine.errors import ConfigurationError
from discount_engine.service import DiscountService
from discount_engine.strategies import DiscountStrategy, PercentageDiscountStrategy

# Strategy name -> class, for building a service from configuration
STRATEGY_CATALOG: dict[str, type[DiscountStrategy]] = {
    PercentageDiscountStrategy.name: PercentageDiscountStrategy,
}

_TRUTHY = {"1", "true", "yes", "on"}


# ---------------------------------------------------------------------------
# Config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LoggingConfig:
    """structlog output settings."""

    level: str = "INFO"
    json: bool = False  # JSON lines instead of the console renderer


@dataclass(frozen=True)
class EngineConfig:
    """Complete configuration for a discount engine deployment.

    Usage::

        config = EngineConfig.from_env()
        configure_logging(config.logging)
        service = build_discount_service(config)
    """

    strategies: tuple[str, ...] = (PercentageDiscountStrategy.name,)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> "EngineConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "DISCOUNTS_") -> "EngineConfig":
        """Create config from environment variables.

        Example: DISCOUNTS_STRATEGIES=percentage DISCOUNTS_LOG_LEVEL=DEBUG
        """
        overrides = {}
        strategies = os.getenv(f"{prefix}STRATEGIES")
        if strategies is not None:
            overrides["strategies"] = tuple(
                name.strip() for name in strategies.split(",") if name.strip()
            )

        log_overrides = {}
        level = os.getenv(f"{prefix}LOG_LEVEL")
        if level:
            log_overrides["level"] = level.upper()
        as_json = os.getenv(f"{prefix}LOG_JSON")
        if as_json is not None:
            log_overrides["json"] = as_json.strip().lower() in _TRUTHY
        if log_overrides:
            overrides["logging"] = LoggingConfig(**log_overrides)

        return cls(**overrides)


def build_discount_service(config: Optional[EngineConfig] = None) -> DiscountService:
    """Instantiate the configured strategies and build the service.

    Raises:
        ConfigurationError: for a strategy name missing from the catalog, or
            (as ``DuplicateStrategyError``) when two configured strategies
            handle the same campaign type.
    """
    config = config or EngineConfig.default()
    strategies = []
    for name in config.strategies:
        strategy_cls = STRATEGY_CATALOG.get(name)
        if strategy_cls is None:
            known = ", ".join(sorted(STRATEGY_CATALOG))
            raise ConfigurationError(f"Unknown strategy: {name} (known: {known})")
        strategies.append(strategy_cls())
    return DiscountService(strategies)
