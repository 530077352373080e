from pydantic import BaseModel, ConfigDict, Field, field_validator
import datetime
from decimal import Decimal
from typing import Optional


# ids and SKUs may arrive as numbers
_INPUT_CONFIG = ConfigDict(coerce_numbers_to_str=True)


class Seller(BaseModel):
    model_config = _INPUT_CONFIG

    id: str
    first_name: str
    last_name: str


class Product(BaseModel):
    model_config = _INPUT_CONFIG

    sku: str
    purchase_price: Decimal  # cost per unit
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[Decimal] = None  # catalog price, informational only


class Item(BaseModel):
    model_config = _INPUT_CONFIG

    sku: str
    quantity: int = 0
    discount: Optional[Decimal] = None  # percentage, 0-100
    sale_price: Decimal

    @field_validator("quantity", mode="before")
    @classmethod
    def _null_quantity(cls, v):
        return 0 if v is None else v


class PurchaseRecord(BaseModel):
    model_config = _INPUT_CONFIG

    seller_id: str
    total_amount: Decimal = Decimal("0")
    items: list[Item] = Field(default_factory=list)
    receipt_id: Optional[str] = None
    date: Optional[datetime.date] = None
    customer_id: Optional[str] = None
    total_discount: Optional[Decimal] = None

    @field_validator("total_amount", mode="before")
    @classmethod
    def _null_total(cls, v):
        return Decimal("0") if v is None else v


class SalesData(BaseModel):
    sellers: list[Seller] = Field(default_factory=list)
    products: list[Product] = Field(default_factory=list)
    purchase_records: list[PurchaseRecord] = Field(default_factory=list)


# ── Running totals, one per seller while folding purchase records ────────────

class SellerAccumulator(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    # sku -> cumulative quantity, in order of first sale
    products_sold: dict[str, int] = Field(default_factory=dict)


# ── Report models ────────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    quantity: int


class SellerReport(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal
