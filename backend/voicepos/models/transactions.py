from __future__ import annotations

from ..extensions import db
from voicepos.time_utils import to_utc_z, utcnow

KIND_SALE = "sale"
KIND_STOCK_IN = "stock-in"
KIND_BAKI_SALE = "baki-sale"
KIND_BAKI_PAYMENT = "baki-payment"
TRANSACTION_KINDS = (KIND_SALE, KIND_STOCK_IN, KIND_BAKI_SALE, KIND_BAKI_PAYMENT)


class Transaction(db.Model):
    """
    Global audit feed. One row per processed command, including commands
    that matched no pattern.

    product_name is the token as it was spoken, not a product id.
    The feed is read most-recent-first (id descending).

    IMMUTABLE: Records are never updated or deleted.
    """
    __tablename__ = "transactions"
    __table_args__ = (
        db.Index("ix_transactions_kind_occurred", "kind", "occurred_at"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    kind = db.Column(db.String(16), nullable=False, index=True)

    product_name = db.Column(db.String(255), nullable=True)
    quantity = db.Column(db.Float, nullable=True)
    amount = db.Column(db.Integer, nullable=False, default=0)
    customer_name = db.Column(db.String(128), nullable=True)
    description = db.Column(db.Text, nullable=False, default="")

    occurred_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    def __repr__(self) -> str:
        return f"<Transaction id={self.id} kind={self.kind} amount={self.amount}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": self.kind,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "amount": self.amount,
            "customer_name": self.customer_name,
            "description": self.description,
            "occurred_at": to_utc_z(self.occurred_at),
        }
