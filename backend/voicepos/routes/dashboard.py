# Overview: Flask API route for the dashboard overview.

from flask import Blueprint, current_app

from ..services import reporting_service

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


@dashboard_bp.get("")
def dashboard():
    """Headline numbers plus short lists for the overview screen."""
    try:
        return reporting_service.dashboard_summary()
    except Exception:
        current_app.logger.exception("Failed to build dashboard")
        return {"error": "Internal server error"}, 500
