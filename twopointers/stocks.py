"""Best profit from a series of daily prices."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def _require_prices(prices: Sequence[int]) -> None:
    if not prices:
        raise ValueError("at least one price is required")


def max_profit_single_trade(prices: Sequence[int]) -> int:
    """Return the best profit from one purchase followed by one later sale.

    Returns 0 when no sale can beat its purchase.
    """
    _require_prices(prices)
    profit = 0
    lowest = prices[0]
    for price in prices[1:]:
        if price < lowest:
            lowest = price
        elif price - lowest > profit:
            profit = price - lowest
    return profit


def max_profit_many_trades(prices: Sequence[int]) -> int:
    """Return the best profit when any number of non-overlapping trades is allowed."""
    _require_prices(prices)
    return sum(later - earlier for earlier, later in pairwise(prices) if later > earlier)