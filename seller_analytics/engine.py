import logging
from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from pydantic import ValidationError

from seller_analytics.exceptions import InvalidInputError, InvalidOptionsError
from seller_analytics.models import (
    SalesData,
    SellerAccumulator,
    SellerReport,
    TopProduct,
)
from seller_analytics.policies import BonusPolicy, RevenuePolicy

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10

_TWO_DP = Decimal("0.01")


def _as_decimal(value: Any) -> Decimal:
    # policies may hand back floats or ints
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _round(value: Decimal) -> Decimal:
    return value.quantize(_TWO_DP, rounding=ROUND_HALF_UP)


def _validate_data(data: Any) -> SalesData:
    if data is None:
        raise InvalidInputError("Sales data is required")

    if not isinstance(data, SalesData):
        if not isinstance(data, Mapping):
            raise InvalidInputError(f"Sales data must be a mapping, got {type(data).__name__}")
        try:
            data = SalesData.model_validate(data)
        except ValidationError as exc:
            raise InvalidInputError(f"Malformed sales data: {exc.error_count()} validation error(s)") from exc

    if not data.sellers:
        raise InvalidInputError("sellers must be a non-empty list")
    if not data.products:
        raise InvalidInputError("products must be a non-empty list")
    if not data.purchase_records:
        raise InvalidInputError("purchase_records must be a non-empty list")
    return data


def _validate_options(options: Any) -> tuple[RevenuePolicy, BonusPolicy]:
    if options is None:
        raise InvalidOptionsError("Analysis options are required")

    if isinstance(options, Mapping):
        calculate_revenue = options.get("calculate_revenue")
        calculate_bonus = options.get("calculate_bonus")
    else:
        calculate_revenue = getattr(options, "calculate_revenue", None)
        calculate_bonus = getattr(options, "calculate_bonus", None)

    if not callable(calculate_revenue):
        raise InvalidOptionsError("calculate_revenue must be a callable")
    if not callable(calculate_bonus):
        raise InvalidOptionsError("calculate_bonus must be a callable")
    return calculate_revenue, calculate_bonus


def _top_products(products_sold: dict[str, int]) -> list[TopProduct]:
    # sorted() is stable, so equal quantities keep first-sale order
    ranked = sorted(products_sold.items(), key=lambda entry: entry[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:TOP_PRODUCTS_LIMIT]]


def analyze(data: Any, options: Any) -> list[SellerReport]:
    """
    Build the per-seller performance report.

    ``data`` is a SalesData (or a mapping shaped like one) and ``options``
    supplies ``calculate_revenue`` and ``calculate_bonus``. Sellers come
    back sorted by descending profit; records for unknown sellers and items
    for unknown SKUs are skipped.
    """
    sales_data = _validate_data(data)
    calculate_revenue, calculate_bonus = _validate_options(options)

    # ── 1. One accumulator per seller, in input order ────────────────────────
    accumulators = [
        SellerAccumulator(seller_id=s.id, name=f"{s.first_name} {s.last_name}")
        for s in sales_data.sellers
    ]
    seller_index: dict[str, SellerAccumulator] = {}
    for acc in accumulators:
        seller_index[acc.seller_id] = acc

    # ── 2. Product lookup ────────────────────────────────────────────────────
    product_index = {p.sku: p for p in sales_data.products}

    # ── 3. Fold purchase records ─────────────────────────────────────────────
    skipped_records = 0
    skipped_items = 0

    for record in sales_data.purchase_records:
        seller = seller_index.get(record.seller_id)
        if seller is None:
            skipped_records += 1
            continue

        seller.sales_count += 1
        seller.revenue += record.total_amount

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                skipped_items += 1
                continue

            cost = product.purchase_price * item.quantity
            revenue = _as_decimal(calculate_revenue(item, product))
            seller.profit += revenue - cost
            seller.products_sold[item.sku] = seller.products_sold.get(item.sku, 0) + item.quantity

    # ── 4. Rank by profit ────────────────────────────────────────────────────
    ranked = sorted(accumulators, key=lambda acc: acc.profit, reverse=True)
    total = len(ranked)

    # ── 5. Bonus, top products and rounding ──────────────────────────────────
    reports = []
    for index, seller in enumerate(ranked):
        bonus = _as_decimal(calculate_bonus(index, total, seller))
        reports.append(SellerReport(
            seller_id=seller.seller_id,
            name=seller.name,
            revenue=_round(seller.revenue),
            profit=_round(seller.profit),
            sales_count=seller.sales_count,
            top_products=_top_products(seller.products_sold),
            bonus=_round(bonus),
        ))

    logger.debug(
        "Analyzed %d sellers over %d purchase records (%d records and %d items skipped)",
        total,
        len(sales_data.purchase_records),
        skipped_records,
        skipped_items,
    )
    return reports
