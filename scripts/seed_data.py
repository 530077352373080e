"""
Deterministic test-data generator.

Produces:
  - 5 sellers
  - 24 products across 4 categories
  - 300 purchase records spread over Jan 2026
    - 1-4 line items each, ~40 % of items discounted (5-25 %)
    - a handful of records from a retired seller that is no longer listed
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from seller_analytics.models import Item, Product, PurchaseRecord, Seller
from seller_analytics.store import DataStore

SEED = 42
START = date(2026, 1, 1)
DAYS  = 31

_TWO_DP = Decimal("0.01")

CATEGORIES = ["Electronics", "Home", "Apparel", "Toys"]


def _money(value: float) -> Decimal:
    return Decimal(str(round(value, 2)))


def seed(store: DataStore, rng_seed: int = SEED) -> None:
    rng = random.Random(rng_seed)

    # ── sellers ──────────────────────────────────────────────────────────────
    names = [
        ("Alexey", "Petrov"),
        ("Ivan", "Smirnov"),
        ("Maria", "Ivanova"),
        ("Dmitry", "Sokolov"),
        ("Elena", "Kuznetsova"),
    ]
    seller_ids = []
    for n, (first, last) in enumerate(names, start=1):
        sid = f"seller_{n}"
        seller_ids.append(sid)
        store.add_seller(Seller(id=sid, first_name=first, last_name=last))

    # ── products ─────────────────────────────────────────────────────────────
    skus = []
    for n in range(1, 25):
        sku = f"SKU_{n:03d}"
        category = CATEGORIES[(n - 1) % len(CATEGORIES)]
        cost = rng.uniform(5, 400)
        skus.append(sku)
        store.add_product(Product(
            sku=sku,
            name=f"{category} item #{n}",
            category=category,
            purchase_price=_money(cost),
            sale_price=_money(cost * rng.uniform(1.1, 1.8)),
        ))

    # ── purchase records ─────────────────────────────────────────────────────
    # sellers are weighted so the ranking has a clear spread
    weights = [5, 4, 3, 2, 1]
    total = 300
    orphans = 6  # records from "seller_retired", skipped by the report

    for n in range(1, total + 1):
        seller_id = "seller_retired" if n <= orphans else rng.choices(seller_ids, weights)[0]

        items = []
        for sku in rng.sample(skus, rng.randint(1, 4)):
            product = store.get_product(sku)
            assert product is not None
            discount = Decimal(rng.choice([5, 10, 15, 20, 25])) if rng.random() < 0.4 else Decimal("0")
            items.append(Item(
                sku=sku,
                quantity=rng.randint(1, 5),
                discount=discount,
                sale_price=product.sale_price,
            ))

        gross = sum((i.sale_price * i.quantity for i in items), Decimal("0"))
        net = sum(
            (i.sale_price * i.quantity * (1 - i.discount / 100) for i in items),
            Decimal("0"),
        )
        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"receipt_{n:04d}",
            date=START + timedelta(days=rng.randrange(DAYS)),
            seller_id=seller_id,
            customer_id=f"customer_{rng.randint(1, 120):03d}",
            items=items,
            total_discount=(gross - net).quantize(_TWO_DP),
            total_amount=net.quantize(_TWO_DP),
        ))
