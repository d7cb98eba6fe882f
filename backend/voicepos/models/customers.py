from __future__ import annotations

from ..extensions import db
from voicepos.time_utils import to_utc_z, utcnow

ENTRY_CREDIT = "credit"
ENTRY_PAYMENT = "payment"


class Customer(db.Model):
    """
    Customer carrying an outstanding credit ("baki") balance.

    INVARIANT: total_baki == sum(entry.amount for entry in entries).
    Use record_credit() / record_payment() so the balance and the ledger
    entry always change together.
    """
    __tablename__ = "customers"
    __table_args__ = (
        db.Index("ix_customers_name", "name"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    phone = db.Column(db.String(32), nullable=True)

    total_baki = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    entries = db.relationship(
        "LedgerEntry",
        back_populates="customer",
        order_by="LedgerEntry.id",
        lazy=True,
    )

    def __repr__(self) -> str:
        return f"<Customer id={self.id} name={self.name!r} total_baki={self.total_baki}>"

    def record_credit(self, amount: int, description: str, occurred_at=None) -> "LedgerEntry":
        entry = LedgerEntry(
            amount=amount,
            kind=ENTRY_CREDIT,
            description=description,
            occurred_at=occurred_at or utcnow(),
        )
        self.entries.append(entry)
        self.total_baki = (self.total_baki or 0) + amount
        return entry

    def record_payment(self, amount: int, description: str, occurred_at=None) -> "LedgerEntry":
        """Payments are stored with a negative amount."""
        entry = LedgerEntry(
            amount=-amount,
            kind=ENTRY_PAYMENT,
            description=description,
            occurred_at=occurred_at or utcnow(),
        )
        self.entries.append(entry)
        self.total_baki = (self.total_baki or 0) - amount
        return entry

    def to_dict(self, include_entries: bool = False) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "total_baki": self.total_baki,
            "entry_count": len(self.entries),
            "created_at": to_utc_z(self.created_at),
        }
        if include_entries:
            # Newest first for display; storage order is insertion order
            data["entries"] = [
                e.to_dict()
                for e in sorted(self.entries, key=lambda e: (e.occurred_at, e.id), reverse=True)
            ]
        return data


class LedgerEntry(db.Model):
    """
    Append-only per-customer ledger line.

    KINDS:
    - credit: goods taken on credit (positive amount)
    - payment: repayment (negative amount)

    IMMUTABLE: Records are never updated or deleted.
    """
    __tablename__ = "ledger_entries"
    __table_args__ = (
        db.Index("ix_ledger_entries_customer_occurred", "customer_id", "occurred_at"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    customer_id = db.Column(db.Integer, db.ForeignKey("customers.id"), nullable=False, index=True)

    amount = db.Column(db.Integer, nullable=False)
    kind = db.Column(db.String(16), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")

    occurred_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    customer = db.relationship("Customer", back_populates="entries")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "amount": self.amount,
            "kind": self.kind,
            "description": self.description,
            "occurred_at": to_utc_z(self.occurred_at),
        }
