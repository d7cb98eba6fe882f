# Overview: Flask API routes for the customer credit ledger.

from flask import Blueprint, request

from ..services import reporting_service
from ..services.store_service import get_customer

customers_bp = Blueprint("customers", __name__, url_prefix="/api/customers")


@customers_bp.get("")
def list_customers():
    """
    List customers, highest outstanding balance first.

    Query params:
    - search: str (optional) - name or phone substring
    """
    customers = reporting_service.search_customers(request.args.get("search"))
    result = {
        "items": [c.to_dict() for c in customers],
        "count": len(customers),
    }
    result.update(reporting_service.customer_summary())
    return result


@customers_bp.get("/<int:customer_id>")
def get_customer_route(customer_id: int):
    """Customer with ledger entries, newest first."""
    customer = get_customer(customer_id)
    if customer is None:
        return {"error": "Customer not found"}, 404
    return {"customer": customer.to_dict(include_entries=True)}
