"""
Unit tests for the default revenue and bonus policies.
"""

from decimal import Decimal

import pytest

from seller_analytics.models import Item, Product, SellerAccumulator
from seller_analytics.policies import calculate_bonus_by_profit, calculate_simple_revenue


PRODUCT = Product(sku="P1", purchase_price=Decimal("10"))


def acc(profit):
    return SellerAccumulator(seller_id="S", name="Test Seller", profit=Decimal(str(profit)))


class TestSimpleRevenue:
    def test_no_discount(self):
        item = Item(sku="P1", quantity=3, sale_price=Decimal("19.99"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("59.97")

    def test_zero_discount_is_ignored(self):
        item = Item(sku="P1", quantity=2, sale_price=Decimal("50"), discount=Decimal("0"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("100")

    def test_percentage_discount(self):
        item = Item(sku="P1", quantity=4, sale_price=Decimal("25"), discount=Decimal("15"))
        # 100 * (1 - 0.15)
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("85")

    def test_full_discount(self):
        item = Item(sku="P1", quantity=4, sale_price=Decimal("25"), discount=Decimal("100"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("0")

    def test_zero_quantity(self):
        item = Item(sku="P1", sale_price=Decimal("25"), discount=Decimal("10"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("0")


class TestBonusByProfit:
    @pytest.mark.parametrize("index, total, expected", [
        (0, 10, Decimal("150")),   # first place
        (1, 10, Decimal("100")),   # podium
        (2, 10, Decimal("100")),
        (3, 10, Decimal("50")),    # middle
        (8, 10, Decimal("50")),
        (9, 10, Decimal("0")),     # last place
    ])
    def test_tiers(self, index, total, expected):
        assert calculate_bonus_by_profit(index, total, acc(1000)) == expected

    def test_single_seller_is_first_not_last(self):
        assert calculate_bonus_by_profit(0, 1, acc(1000)) == Decimal("150")

    @pytest.mark.parametrize("index, total", [(1, 2), (2, 3)])
    def test_podium_wins_over_last_place(self, index, total):
        assert calculate_bonus_by_profit(index, total, acc(1000)) == Decimal("100")

    def test_last_of_four_gets_nothing(self):
        assert calculate_bonus_by_profit(3, 4, acc(1000)) == Decimal("0")

    def test_negative_profit_scales_too(self):
        assert calculate_bonus_by_profit(0, 5, acc(-200)) == Decimal("-30")
