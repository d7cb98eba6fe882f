# backend/voicepos/routes/system.py
"""
System health and version endpoints.
"""

import sys
import time
from flask import Blueprint, current_app
from ..extensions import db
from ..models import Product, Customer, Transaction
from voicepos.time_utils import utcnow

system_bp = Blueprint("system", __name__)


def check_store_health() -> dict:
    """
    Check that the in-memory store answers queries.

    Returns dict with status and details.
    """
    start_time = time.time()
    try:
        details = {
            "products": db.session.query(Product).count(),
            "customers": db.session.query(Customer).count(),
            "transactions": db.session.query(Transaction).count(),
        }
        elapsed_ms = (time.time() - start_time) * 1000
        return {
            "status": "healthy",
            "latency_ms": round(elapsed_ms, 2),
            "details": details,
        }
    except Exception:
        elapsed_ms = (time.time() - start_time) * 1000
        current_app.logger.exception("Store health check failed")
        return {
            "status": "unhealthy",
            "latency_ms": round(elapsed_ms, 2),
            "error": "Store error",
        }


@system_bp.get("/health")
def health():
    """
    Returns:
    - 200: store healthy
    - 503: store unhealthy
    """
    store_health = check_store_health()
    http_status = 200 if store_health["status"] == "healthy" else 503
    return {
        "status": store_health["status"],
        "timestamp": utcnow().isoformat() + "Z",
        "checks": {"store": store_health},
    }, http_status


@system_bp.get("/version")
def version():
    """Non-sensitive deployment information."""
    env = "production" if not current_app.debug else "development"
    return {
        "api_version": "0.1.0",
        "environment": env,
        "python_version": sys.version.split()[0],
        "server_time": utcnow().isoformat() + "Z",
    }
