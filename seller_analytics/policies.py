from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from seller_analytics.models import Item, Product, SellerAccumulator

# (item, product) -> realized revenue for the line
RevenuePolicy = Callable[[Item, Product], Decimal]
# (rank index, total sellers, accumulator) -> bonus amount
BonusPolicy = Callable[[int, int, SellerAccumulator], Decimal]

_HUNDRED = Decimal("100")

BONUS_RATE_FIRST  = Decimal("0.15")
BONUS_RATE_PODIUM = Decimal("0.10")
BONUS_RATE_MIDDLE = Decimal("0.05")


def calculate_simple_revenue(item: Item, product: Product) -> Decimal:
    """Line revenue after the item's percentage discount, if any."""
    total = item.sale_price * item.quantity
    if item.discount and item.discount > 0:
        return total * (1 - item.discount / _HUNDRED)
    return total


def calculate_bonus_by_profit(index: int, total: int, seller: SellerAccumulator) -> Decimal:
    """
    Tiered bonus by rank after sorting on descending profit.

    Rules are checked in order, so the first seller always gets the top rate
    and with three or fewer sellers the last one still gets the podium rate.
    """
    profit = seller.profit
    if index == 0:
        return profit * BONUS_RATE_FIRST
    if index < 3:
        return profit * BONUS_RATE_PODIUM
    if index == total - 1:
        return Decimal("0")
    return profit * BONUS_RATE_MIDDLE


@dataclass(frozen=True)
class AnalysisOptions:
    calculate_revenue: RevenuePolicy
    calculate_bonus: BonusPolicy


DEFAULT_OPTIONS = AnalysisOptions(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)
