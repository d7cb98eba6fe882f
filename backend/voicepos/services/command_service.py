"""
Command Service - applies classified commands to the record store.

WHY: Classification (command_parser) is kept separate from mutation so each
side can be tested on its own. Every accepted utterance produces exactly one
Transaction at the head of the feed, whether or not a pattern matched.

ATOMICITY:
- A customer's balance and its new ledger entry are written in one commit.
- A product's quantity and last_updated are written together.
- process_command() holds the store's mutation lock for the whole
  classify/apply/commit cycle, so one utterance finishes before the next
  one starts.
"""
from __future__ import annotations

import math

from flask import current_app

from ..extensions import db
from ..errors import AmountOutOfRangeError, EmptyCommandError
from ..models import Customer, Transaction
from ..models.inventory import UNIT_LABELS_BN
from ..models.transactions import KIND_SALE, KIND_STOCK_IN, KIND_BAKI_SALE, KIND_BAKI_PAYMENT
from .command_parser import (
    Command,
    CreditGrant,
    Payment,
    CashSale,
    StockIn,
    Unclassified,
    classify,
)
from .concurrency import serialized, commit_unit_of_work
from .matching import localized_product_name, matching_products
from .numerals import to_bengali_digits
from .store_service import get_customer_by_name, list_products

# Amounts and balances are SQLite INTEGER columns (signed 64-bit).
MAX_AMOUNT = 2 ** 63 - 1


def _check_range(command: Command) -> None:
    amount = getattr(command, "amount", 0)
    if amount > MAX_AMOUNT:
        raise AmountOutOfRangeError("Amount is too large", {"amount": str(amount)})
    quantity = getattr(command, "quantity", 0.0)
    if not math.isfinite(quantity):
        raise AmountOutOfRangeError("Quantity is too large", {"quantity": str(quantity)})


def _check_balance(customer: Customer, delta: int) -> None:
    balance = (customer.total_baki or 0) + delta
    if abs(balance) > MAX_AMOUNT:
        raise AmountOutOfRangeError(
            "Resulting balance is too large",
            {"customer": customer.name, "balance": str(balance)},
        )


def _apply_credit(command: CreditGrant) -> Transaction:
    customer = get_customer_by_name(command.customer_name)
    if customer is None:
        customer = Customer(name=command.customer_name, total_baki=0)
        db.session.add(customer)
    _check_balance(customer, command.amount)
    customer.record_credit(command.amount, command.text)

    return Transaction(
        kind=KIND_BAKI_SALE,
        amount=command.amount,
        customer_name=command.customer_name,
        description=f"{command.customer_name} {to_bengali_digits(command.amount)} টাকা বাকিতে নিলো",
    )


def _apply_payment(command: Payment) -> Transaction:
    customer = get_customer_by_name(command.customer_name)
    if customer is not None:
        _check_balance(customer, -command.amount)
        customer.record_payment(command.amount, command.text)
    else:
        # Recorded in the feed anyway; nothing to reduce.
        current_app.logger.warning(
            "Payment of %s from unknown customer %r recorded without a ledger entry",
            command.amount,
            command.customer_name,
        )

    return Transaction(
        kind=KIND_BAKI_PAYMENT,
        amount=command.amount,
        customer_name=command.customer_name,
        description=f"{command.customer_name} {to_bengali_digits(command.amount)} টাকা পরিশোধ করলো",
    )


def _adjust_matching_products(product_name: str, delta: float) -> str:
    """
    Apply delta to every product matching the token (not just the first).

    Returns the Bengali display name, resolved before any quantity changes.
    """
    products = list_products()
    name_bn = localized_product_name(product_name, products)
    for product in matching_products(product_name, products):
        product.adjust_quantity(delta)
    return name_bn


def _apply_sale(command: CashSale) -> Transaction:
    name_bn = _adjust_matching_products(command.product_name, -command.quantity)
    unit_bn = UNIT_LABELS_BN.get(command.unit, command.unit)

    return Transaction(
        kind=KIND_SALE,
        product_name=command.product_name,
        quantity=command.quantity,
        amount=command.amount,
        description=(
            f"{name_bn} {to_bengali_digits(command.quantity)} {unit_bn} "
            f"বিক্রি হলো {to_bengali_digits(command.amount)} টাকায়"
        ),
    )


def _apply_stock_in(command: StockIn) -> Transaction:
    name_bn = _adjust_matching_products(command.product_name, command.quantity)
    unit_bn = UNIT_LABELS_BN.get(command.unit, command.unit)

    return Transaction(
        kind=KIND_STOCK_IN,
        product_name=command.product_name,
        quantity=command.quantity,
        amount=0,
        description=f"{name_bn} {to_bengali_digits(command.quantity)} {unit_bn} স্টক এসেছে",
    )


def _apply_unclassified(command: Unclassified) -> Transaction:
    return Transaction(kind=KIND_SALE, amount=0, description=command.text)


_HANDLERS = {
    CreditGrant: _apply_credit,
    Payment: _apply_payment,
    CashSale: _apply_sale,
    StockIn: _apply_stock_in,
    Unclassified: _apply_unclassified,
}


def apply_command(command: Command) -> Transaction:
    """
    Stage the mutation for one classified command and add its transaction
    to the session. Does not commit.

    Raises:
        AmountOutOfRangeError: a value or resulting balance does not fit the store
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unsupported command type: {type(command).__name__}")
    _check_range(command)

    transaction = handler(command)
    db.session.add(transaction)
    db.session.flush()  # assigns transaction.id so it sorts at the head of the feed
    return transaction


@serialized
def process_command(text: str | None) -> Transaction:
    """
    Single mutation entry point: classify, apply and commit one utterance.

    Raises:
        EmptyCommandError: text is missing or whitespace only
        AmountOutOfRangeError: nothing was written; the session is rolled back
    """
    if text is None or not text.strip():
        raise EmptyCommandError("Please enter or speak a command")

    command = classify(text)
    transaction = commit_unit_of_work(lambda: apply_command(command))
    current_app.logger.info(
        "Processed %s command -> transaction %s (%s)",
        type(command).__name__,
        transaction.id,
        transaction.kind,
    )
    return transaction
