"""Percentage discount arithmetic."""

import math

from app.config import DiscountPolicy
from app.domain.errors import InvalidDiscount

# Accepted range; below zero is a markup.
MIN_PERCENT = -100.0
MAX_PERCENT = 1000.0


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def check_discount(percent: float, policy: DiscountPolicy) -> None:
    """
    Reject percentages no price can be computed from.

    NaN, infinities and values outside ``MIN_PERCENT``..``MAX_PERCENT`` are
    refused under every policy. Under REJECT so is anything over 100%.
    """
    if not math.isfinite(percent) or not MIN_PERCENT <= percent <= MAX_PERCENT:
        raise InvalidDiscount(percent)
    if policy is DiscountPolicy.REJECT and percent > 100:
        raise InvalidDiscount(percent)


def discounted_price(price: int, percent: float, policy: DiscountPolicy) -> int:
    new_price = round_half_up(price - price * percent / 100)
    if policy is DiscountPolicy.CLAMP:
        return max(new_price, 0)
    return new_price
