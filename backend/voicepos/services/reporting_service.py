# Overview: Read-side views over the record store (search, filter, sort, totals).

from __future__ import annotations

from flask import current_app

from ..errors import QueryError
from ..models import Product, Customer, Transaction
from ..models.inventory import stock_status, STATUS_IN_STOCK, STATUS_LOW, STATUS_CRITICAL, STATUS_OUT_OF_STOCK
from ..models.transactions import TRANSACTION_KINDS, KIND_SALE, KIND_BAKI_SALE, KIND_BAKI_PAYMENT
from voicepos.time_utils import is_same_day
from .store_service import list_products, list_customers, list_transactions

PRODUCT_SORT_KEYS = {
    "name": lambda p: p.name.lower(),
    "quantity": lambda p: p.quantity,
    "price": lambda p: p.price,
    "value": lambda p: p.stock_value,
}

STOCK_FILTERS = ("all", "in-stock", "low-stock", "out-of-stock")


def _thresholds() -> tuple[int, int]:
    return (
        current_app.config.get("LOW_STOCK_THRESHOLD", 10),
        current_app.config.get("CRITICAL_STOCK_THRESHOLD", 5),
    )


def product_to_dict(product: Product) -> dict:
    low, critical = _thresholds()
    return product.to_dict(low=low, critical=critical)


def _is_low(product: Product) -> bool:
    low, _ = _thresholds()
    return 0 < product.quantity < low


def _is_out(product: Product) -> bool:
    return product.quantity <= 0


def _matches_stock_filter(product: Product, status: str) -> bool:
    if status == "all":
        return True
    low, critical = _thresholds()
    current = stock_status(product.quantity, low=low, critical=critical)
    if status == "in-stock":
        return current == STATUS_IN_STOCK
    if status == "low-stock":
        return current in (STATUS_LOW, STATUS_CRITICAL)
    return current == STATUS_OUT_OF_STOCK


def filter_products(
    *,
    search: str | None = None,
    status: str = "all",
    sort: str = "name",
    direction: str = "asc",
) -> list[Product]:
    """
    Inventory listing.

    - search: substring of the canonical name (case-insensitive) or Bengali name
    - status: all | in-stock | low-stock | out-of-stock
    - sort: name | quantity | price | value, direction asc | desc
    """
    if status not in STOCK_FILTERS:
        raise QueryError(f"status must be one of: {', '.join(STOCK_FILTERS)}")
    if sort not in PRODUCT_SORT_KEYS:
        raise QueryError(f"sort must be one of: {', '.join(PRODUCT_SORT_KEYS)}")
    if direction not in ("asc", "desc"):
        raise QueryError("direction must be asc or desc")

    needle = (search or "").strip()
    products = [
        p for p in list_products()
        if (not needle or needle.lower() in p.name.lower() or needle in p.name_bn)
        and _matches_stock_filter(p, status)
    ]
    products.sort(key=PRODUCT_SORT_KEYS[sort], reverse=(direction == "desc"))
    return products


def low_stock_products() -> list[Product]:
    """In stock but under the low threshold, lowest quantity first."""
    return sorted((p for p in list_products() if _is_low(p)), key=lambda p: p.quantity)


def inventory_summary() -> dict:
    products = list_products()
    _, critical = _thresholds()
    low = [p for p in products if _is_low(p)]
    return {
        "total_products": len(products),
        "total_units": sum(p.quantity for p in products),
        "total_value": sum(p.stock_value for p in products),
        "low_stock_count": len(low),
        "critical_count": sum(1 for p in low if p.quantity < critical),
        "out_of_stock_count": sum(1 for p in products if _is_out(p)),
    }


def search_customers(search: str | None = None) -> list[Customer]:
    """Name (case-insensitive) or phone substring; highest balance first."""
    needle = (search or "").strip().lower()
    customers = [
        c for c in list_customers()
        if not needle or needle in c.name.lower() or (c.phone and needle in c.phone)
    ]
    customers.sort(key=lambda c: c.total_baki, reverse=True)
    return customers


def customer_summary() -> dict:
    customers = list_customers()
    return {
        "total_baki": sum(c.total_baki for c in customers),
        "customers_with_baki": sum(1 for c in customers if c.total_baki > 0),
    }


def filter_transactions(*, search: str | None = None, kind: str = "all") -> list[Transaction]:
    if kind != "all" and kind not in TRANSACTION_KINDS:
        raise QueryError(f"kind must be 'all' or one of: {', '.join(TRANSACTION_KINDS)}")

    needle = (search or "").strip().lower()

    def _matches(t: Transaction) -> bool:
        if kind != "all" and t.kind != kind:
            return False
        if not needle:
            return True
        return (
            needle in t.description.lower()
            or (t.customer_name is not None and needle in t.customer_name.lower())
            or (t.product_name is not None and needle in t.product_name.lower())
        )

    return [t for t in list_transactions() if _matches(t)]


def transaction_totals(transactions: list[Transaction] | None = None) -> dict:
    if transactions is None:
        transactions = list_transactions()
    return {
        "total_sales": sum(t.amount for t in transactions if t.kind in (KIND_SALE, KIND_BAKI_SALE)),
        "total_payments": sum(t.amount for t in transactions if t.kind == KIND_BAKI_PAYMENT),
    }


def dashboard_summary() -> dict:
    products = list_products()
    customers = list_customers()
    feed = list_transactions()
    today = [t for t in feed if is_same_day(t.occurred_at)]

    top_customers = sorted(
        (c for c in customers if c.total_baki > 0),
        key=lambda c: c.total_baki,
        reverse=True,
    )[:5]

    return {
        "inventory_units": sum(p.quantity for p in products),
        "product_types": len(products),
        "today_sales": sum(t.amount for t in today if t.kind in (KIND_SALE, KIND_BAKI_SALE)),
        "today_transaction_count": len(today),
        "total_transaction_count": len(feed),
        "total_baki": sum(c.total_baki for c in customers),
        "customers_with_baki": sum(1 for c in customers if c.total_baki > 0),
        "low_stock_count": sum(1 for p in products if _is_low(p)),
        "out_of_stock_count": sum(1 for p in products if _is_out(p)),
        "low_stock_products": [product_to_dict(p) for p in low_stock_products()[:5]],
        "top_customers": [c.to_dict() for c in top_customers],
        "recent_transactions": [t.to_dict() for t in today[:5]],
    }
