# Overview: Flask API route for submitting typed or transcribed commands.

# backend/voicepos/routes/commands.py
"""
Command submission.

POST /api/commands {"text": "Rahim 100 taka baki"}
- 201 with the transaction that was appended to the feed
- 400 when text is missing or blank
"""
from flask import Blueprint, request, jsonify, current_app

from ..errors import CommandError
from ..services.command_service import process_command

commands_bp = Blueprint("commands", __name__, url_prefix="/api/commands")


@commands_bp.post("")
def submit_command_route():
    """Classify and apply one utterance."""
    data = request.get_json(silent=True) or {}
    text = data.get("text")
    if text is not None and not isinstance(text, str):
        return jsonify({"error": "text must be a string"}), 400

    try:
        transaction = process_command(text)
        return jsonify({"transaction": transaction.to_dict()}), 201

    except CommandError as e:
        return jsonify({"error": str(e), "details": e.details}), 400
    except Exception:
        current_app.logger.exception("Failed to process command")
        return jsonify({"error": "Internal server error"}), 500
