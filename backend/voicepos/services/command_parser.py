"""
Command classification: utterance -> tagged command.

Patterns are tried in a fixed priority order and the first one found
anywhere in the utterance decides the intent:

1. "<name> <amount> taka baki"                 -> CreditGrant
2. "<name> <amount> taka dilo|payment|paid"    -> Payment
3. "<product> <qty> <unit> bikri|sale"         -> CashSale  (+ "<n> taka" total, optional)
4. "<product> <qty> <unit> stock|ashlo"        -> StockIn
5. anything else                               -> Unclassified

Classification is pure: it never looks at the store and never raises.
Applying a command lives in command_service.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

CREDIT_PATTERN = re.compile(r"(\w+)\s+(\d+)\s+taka\s+baki", re.IGNORECASE)
PAYMENT_PATTERN = re.compile(r"(\w+)\s+(\d+)\s+taka\s+(dilo|payment|paid)", re.IGNORECASE)
SALE_PATTERN = re.compile(r"(\w+)\s+(\d+(?:\.\d+)?)\s+(kg|liter|piece)\s+(bikri|sale)", re.IGNORECASE)
STOCK_PATTERN = re.compile(r"(\w+)\s+(\d+(?:\.\d+)?)\s+(kg|liter|piece)\s+(stock|ashlo)", re.IGNORECASE)
PRICE_PATTERN = re.compile(r"(\d+)\s+taka", re.IGNORECASE)


@dataclass(frozen=True)
class CreditGrant:
    text: str
    customer_name: str
    amount: int


@dataclass(frozen=True)
class Payment:
    text: str
    customer_name: str
    amount: int


@dataclass(frozen=True)
class CashSale:
    text: str
    product_name: str
    quantity: float
    unit: str
    amount: int


@dataclass(frozen=True)
class StockIn:
    text: str
    product_name: str
    quantity: float
    unit: str


@dataclass(frozen=True)
class Unclassified:
    text: str


Command = Union[CreditGrant, Payment, CashSale, StockIn, Unclassified]


def _sale_total(text: str) -> int:
    match = PRICE_PATTERN.search(text)
    return int(match.group(1)) if match else 0


def classify(text: str) -> Command:
    match = CREDIT_PATTERN.search(text)
    if match:
        return CreditGrant(text=text, customer_name=match.group(1), amount=int(match.group(2)))

    match = PAYMENT_PATTERN.search(text)
    if match:
        return Payment(text=text, customer_name=match.group(1), amount=int(match.group(2)))

    match = SALE_PATTERN.search(text)
    if match:
        return CashSale(
            text=text,
            product_name=match.group(1),
            quantity=float(match.group(2)),
            unit=match.group(3).lower(),
            amount=_sale_total(text),
        )

    match = STOCK_PATTERN.search(text)
    if match:
        return StockIn(
            text=text,
            product_name=match.group(1),
            quantity=float(match.group(2)),
            unit=match.group(3).lower(),
        )

    return Unclassified(text=text)
