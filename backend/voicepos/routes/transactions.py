# Overview: Flask API routes for the transaction feed.

from flask import Blueprint, request

from ..errors import QueryError
from ..services import reporting_service

transactions_bp = Blueprint("transactions", __name__, url_prefix="/api/transactions")


@transactions_bp.get("")
def list_transactions():
    """
    Transaction feed, most recent first.

    Query params:
    - search: str (optional) - matches description, customer or product name
    - kind: all | sale | stock-in | baki-sale | baki-payment (default all)
    """
    try:
        transactions = reporting_service.filter_transactions(
            search=request.args.get("search"),
            kind=request.args.get("kind", "all"),
        )
    except QueryError as e:
        return {"error": str(e)}, 400

    result = {
        "items": [t.to_dict() for t in transactions],
        "count": len(transactions),
    }
    # Totals cover the whole feed, not just the filtered page
    result.update(reporting_service.transaction_totals())
    return result
