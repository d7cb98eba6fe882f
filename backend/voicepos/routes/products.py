# Overview: Flask API routes for inventory; parses query params and returns JSON responses.

from flask import Blueprint, request, current_app

from ..errors import QueryError
from ..services import reporting_service
from ..services.reporting_service import product_to_dict

products_bp = Blueprint("products", __name__, url_prefix="/api/products")


@products_bp.get("")
def list_products():
    """
    List products.

    Query params:
    - search: str (optional) - name or Bengali name substring
    - status: all | in-stock | low-stock | out-of-stock (default all)
    - sort: name | quantity | price | value (default name)
    - direction: asc | desc (default asc)
    """
    try:
        products = reporting_service.filter_products(
            search=request.args.get("search"),
            status=request.args.get("status", "all"),
            sort=request.args.get("sort", "name"),
            direction=request.args.get("direction", "asc"),
        )
    except QueryError as e:
        return {"error": str(e)}, 400

    return {
        "items": [product_to_dict(p) for p in products],
        "count": len(products),
    }


@products_bp.get("/summary")
def inventory_summary():
    try:
        return reporting_service.inventory_summary()
    except Exception:
        current_app.logger.exception("Failed to build inventory summary")
        return {"error": "Internal server error"}, 500
