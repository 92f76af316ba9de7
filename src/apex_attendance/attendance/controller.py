from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request, session

from ..common.validators import require_latitude, require_longitude
from ..core.exceptions import DomainError, NotFoundError, ValidationError
from ..geo.geofence import Position

logger = logging.getLogger(__name__)


def _position_from(payload) -> Optional[Position]:
    """Read lat/lng from a request mapping. Missing or unusable means no fix."""
    lat = payload.get("lat")
    lng = payload.get("lng")
    if lat in (None, "") or lng in (None, ""):
        return None
    try:
        return Position(latitude=require_latitude(lat), longitude=require_longitude(lng))
    except ValidationError:
        return None


def register(app: Flask, container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "worker_id" not in session:
                return jsonify({"error": "Login required"}), 401
            return view(*args, **kwargs)

        return wrapper

    def _domain_error(e: DomainError):
        status = 404 if isinstance(e, NotFoundError) else 400
        return jsonify({"error": str(e)}), status

    @app.route("/api/checkin/status", methods=["GET"], endpoint="checkin_status")
    @login_required
    def checkin_status():
        try:
            decision = container.attendance_service.evaluate(
                str(session["worker_id"]),
                _position_from(request.args),
            )
            return jsonify(decision.to_dict()), 200
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            logger.exception("Failed to evaluate check-in status")
            return jsonify({"error": "Server error while checking status"}), 500

    @app.route("/api/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        try:
            result = container.attendance_service.check_in(
                str(session["worker_id"]),
                _position_from(payload),
            )
            return jsonify(result.to_dict()), 201 if result.created else 200
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            logger.exception("Check-in failed")
            return jsonify({"error": "Server error during check-in"}), 500

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        try:
            record = container.attendance_service.today_record(str(session["worker_id"]))
            return jsonify({"record": record.to_dict() if record else None}), 200
        except DomainError as e:
            return _domain_error(e)

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        worker_id = str(session["worker_id"])
        try:
            year = request.args.get("year")
            month = request.args.get("month")
            if not year or not month:
                today = container.attendance_service.local_today(worker_id)
                year = year or today.year
                month = month or today.month
            year, month = int(year), int(month)
        except ValueError:
            return jsonify({"error": "year/month must be integers"}), 400
        except DomainError as e:
            return _domain_error(e)

        try:
            rows = container.attendance_service.monthly_history(worker_id, year, month)
        except DomainError as e:
            return _domain_error(e)
        return jsonify({"year": year, "month": month, "data": [r.to_dict() for r in rows]}), 200
