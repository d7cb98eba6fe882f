from __future__ import annotations

from ..extensions import db
from voicepos.time_utils import to_utc_z, utcnow

UNIT_KG = "kg"
UNIT_LITER = "liter"
UNIT_PIECE = "piece"
UNITS = (UNIT_KG, UNIT_LITER, UNIT_PIECE)

# Bengali nouns used in generated descriptions
UNIT_LABELS_BN = {
    UNIT_KG: "কেজি",
    UNIT_LITER: "লিটার",
    UNIT_PIECE: "পিস",
}

STATUS_IN_STOCK = "in-stock"
STATUS_LOW = "low"
STATUS_CRITICAL = "critical"
STATUS_OUT_OF_STOCK = "out-of-stock"


def stock_status(quantity: float, *, low: int = 10, critical: int = 5) -> str:
    if quantity <= 0:
        return STATUS_OUT_OF_STOCK
    if quantity < critical:
        return STATUS_CRITICAL
    if quantity < low:
        return STATUS_LOW
    return STATUS_IN_STOCK


class Product(db.Model):
    """
    Product master data.

    name is the canonical (Latin script) name and is what spoken product
    tokens are matched against; name_bn is the display name used in the
    generated Bengali descriptions.

    QUANTITY: Only cash-sale and stock-in commands change quantity, and
    last_updated is always written in the same flush. Quantity is allowed
    to go negative (a sale is never rejected for lack of stock).
    """
    __tablename__ = "products"
    __table_args__ = (
        db.Index("ix_products_name", "name"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)

    name = db.Column(db.String(255), nullable=False)
    name_bn = db.Column(db.String(255), nullable=False)

    quantity = db.Column(db.Float, nullable=False, default=0)
    unit = db.Column(db.String(16), nullable=False, default=UNIT_KG)

    # Whole taka per unit
    price = db.Column(db.Integer, nullable=False, default=0)

    last_updated = db.Column(db.DateTime, nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} quantity={self.quantity} {self.unit}>"

    @property
    def stock_value(self) -> float:
        return self.quantity * self.price

    def adjust_quantity(self, delta: float) -> None:
        self.quantity = self.quantity + delta
        self.last_updated = utcnow()

    def to_dict(self, *, low: int = 10, critical: int = 5) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "name_bn": self.name_bn,
            "quantity": self.quantity,
            "unit": self.unit,
            "price": self.price,
            "stock_value": self.stock_value,
            "stock_status": stock_status(self.quantity, low=low, critical=critical),
            "last_updated": to_utc_z(self.last_updated),
        }
