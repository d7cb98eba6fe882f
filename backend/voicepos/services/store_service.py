"""
Record store: the three in-memory collections and their accessors.

The collections live in the app's SQLAlchemy session (an in-memory SQLite
database). Reads return model instances; the only write paths are
process_command() in command_service and the seeding helpers below.
"""
from __future__ import annotations

from typing import Optional

from ..extensions import db
from ..models import Product, Customer, LedgerEntry, Transaction
from ..models.transactions import KIND_SALE, KIND_BAKI_SALE
from voicepos.time_utils import days_ago, utcnow
from .concurrency import serialized

DEMO_PRODUCTS = [
    # name, name_bn, quantity, unit, price
    ("Rice (Atta)", "আটা", 50, "kg", 55),
    ("Lentils (Dal)", "ডাল", 30, "kg", 120),
    ("Oil", "তেল", 20, "liter", 180),
    ("Sugar", "চিনি", 25, "kg", 65),
    ("Salt", "লবণ", 40, "kg", 30),
]

DEMO_CUSTOMERS = [
    {
        "name": "Rahim",
        "phone": "01712345678",
        "entries": [
            # days ago, amount, description
            (2, 300, "মুদি দোকান থেকে কেনাকাটা"),
            (1, 200, "চাল এবং ডাল"),
        ],
    },
    {
        "name": "Karim",
        "phone": "01898765432",
        "entries": [
            (3, 1000, "মাসিক কেনাকাটা"),
            (1, -250, "আংশিক পরিশোধ"),
        ],
    },
]

# Oldest first, so the last one inserted ends up at the head of the feed
DEMO_TRANSACTIONS = [
    {
        "kind": KIND_BAKI_SALE,
        "product_name": "Lentils (Dal)",
        "quantity": 1,
        "amount": 120,
        "customer_name": "Rahim",
        "description": "রহিম ডাল ১ কেজি বাকিতে নিলো ১২০ টাকা",
    },
    {
        "kind": KIND_SALE,
        "product_name": "Rice (Atta)",
        "quantity": 2,
        "amount": 110,
        "description": "আটা ২ কেজি বিক্রি হলো ১১০ টাকায়",
    },
]


def list_products() -> list[Product]:
    return db.session.query(Product).order_by(Product.id.asc()).all()


def list_customers() -> list[Customer]:
    return db.session.query(Customer).order_by(Customer.id.asc()).all()


def list_transactions(limit: int | None = None) -> list[Transaction]:
    """Most-recent-first."""
    query = db.session.query(Transaction).order_by(Transaction.id.desc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_product(product_id: int) -> Optional[Product]:
    return db.session.get(Product, product_id)


def get_customer(customer_id: int) -> Optional[Customer]:
    return db.session.get(Customer, customer_id)


def get_customer_by_name(name: str) -> Optional[Customer]:
    """
    Exact name match, case-insensitive, oldest customer first.

    Folded in Python: SQLite lower() only folds ASCII, and names may be
    any script ("ÉMILE" and "émile" are the same customer).
    """
    key = name.lower()
    return next((c for c in list_customers() if c.name.lower() == key), None)


def _clear() -> None:
    db.session.query(LedgerEntry).delete()
    db.session.query(Customer).delete()
    db.session.query(Product).delete()
    db.session.query(Transaction).delete()


def seed_demo_data() -> None:
    """Insert the fixed sample records. Does not commit."""
    now = utcnow()
    for name, name_bn, quantity, unit, price in DEMO_PRODUCTS:
        db.session.add(Product(
            name=name,
            name_bn=name_bn,
            quantity=quantity,
            unit=unit,
            price=price,
            last_updated=now,
        ))

    for data in DEMO_CUSTOMERS:
        customer = Customer(name=data["name"], phone=data["phone"], total_baki=0)
        for age_days, amount, description in data["entries"]:
            if amount >= 0:
                customer.record_credit(amount, description, occurred_at=days_ago(age_days))
            else:
                customer.record_payment(-amount, description, occurred_at=days_ago(age_days))
        db.session.add(customer)

    for data in DEMO_TRANSACTIONS:
        db.session.add(Transaction(occurred_at=now, **data))


@serialized
def reset_store(seed: bool = True) -> None:
    """Drop every record and optionally reseed. Commits."""
    _clear()
    if seed:
        seed_demo_data()
    db.session.commit()
