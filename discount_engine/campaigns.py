"""Campaign variants and the discounts they grant.

Campaigns form a closed set of variants. Each variant is a frozen pydantic
model tagged with a ``CampaignType``; the tag is what the discount service
uses to find the strategy for a campaign. To add a variant, add a member to
``CampaignType``, a model here, and a strategy in ``strategies``.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from discount_engine import money


class CampaignType(str, Enum):
    PERCENTAGE = "percentage"


class Campaign(BaseModel):
    """Base for all campaign variants."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    campaign_type: CampaignType

    @field_validator("name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class PercentageCampaign(Campaign):
    """Percent off the whole cart once its total passes ``min_order_total``."""

    campaign_type: Literal[CampaignType.PERCENTAGE] = CampaignType.PERCENTAGE
    rate: Decimal = Field(..., ge=0, le=money.MAX_RATE)
    min_order_total: Decimal = Field(money.ZERO, ge=0, le=money.MAX_AMOUNT)

    @field_validator("rate", "min_order_total")
    @classmethod
    def _to_money(cls, value: Decimal) -> Decimal:
        return money.to_money(value)


@dataclass(frozen=True)
class Discount:
    """A discount granted by one campaign."""

    name: str
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, "amount", money.to_money(self.amount))
