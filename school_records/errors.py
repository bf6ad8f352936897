from flask import current_app, flash, jsonify, redirect, request, url_for
from sqlalchemy.exc import SQLAlchemyError

from .extensions import db


class PayloadError(ValueError):
    """A submitted value that cannot be stored in its column."""


def _is_api_request():
    return request.blueprint == "api" or request.path.startswith("/api/")


def register_error_handlers(app):
    @app.errorhandler(PayloadError)
    def payload_error(exc):
        if _is_api_request() or not request.blueprint:
            return jsonify({"error": str(exc)}), 400
        current_app.logger.info("Rejected %s submission: %s", request.blueprint, exc)
        flash(str(exc), "error")
        return redirect(url_for(f"{request.blueprint}.validation"))

    @app.errorhandler(SQLAlchemyError)
    def store_error(exc):
        db.session.rollback()
        current_app.logger.exception("Store failure on %s %s", request.method, request.path)
        if _is_api_request():
            return jsonify({"error": "Database error"}), 500
        return "Database error", 500, {"Content-Type": "text/plain; charset=utf-8"}
