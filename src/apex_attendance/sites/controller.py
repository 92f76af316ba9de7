from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import DomainError, NotFoundError

logger = logging.getLogger(__name__)

_FIELD_MAP = {
    "name": "name",
    "latitude": "latitude",
    "longitude": "longitude",
    "radius_meters": "radius_meters",
    "checkin_start_time": "checkin_start",
    "checkin_end_time": "checkin_end",
    "timezone": "timezone",
    "is_active": "is_active",
}


def _site_fields(payload: dict) -> dict:
    return {target: payload[source] for source, target in _FIELD_MAP.items() if source in payload}


def register(app: Flask, container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "role" not in session:
                return jsonify({"error": "Unauthorized"}), 401
            if session.get("role") != Role.ADMIN.value:
                return jsonify({"error": "Forbidden"}), 403
            return view(*args, **kwargs)

        return wrapper

    def _domain_error(e: DomainError):
        status = 404 if isinstance(e, NotFoundError) else 400
        return jsonify({"error": str(e)}), status

    @app.route("/api/admin/sites", methods=["GET"], endpoint="admin_sites")
    @admin_required
    def admin_sites():
        sites = container.site_service.list_sites()
        return jsonify({"data": [s.to_dict() for s in sites]}), 200

    @app.route("/api/admin/sites", methods=["POST"], endpoint="admin_sites_create")
    @admin_required
    def admin_sites_create():
        payload = request.get_json(silent=True) or {}
        try:
            site = container.site_service.create(
                site_id=payload.get("site_id"),
                name=payload.get("name"),
                latitude=payload.get("latitude"),
                longitude=payload.get("longitude"),
                radius_meters=payload.get("radius_meters"),
                checkin_start=payload.get("checkin_start_time"),
                checkin_end=payload.get("checkin_end_time"),
                timezone=payload.get("timezone"),
                is_active=payload.get("is_active", True),
            )
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            logger.exception("Failed to create site")
            return jsonify({"error": "Server error while saving site"}), 500
        return jsonify({"data": site.to_dict()}), 201

    @app.route("/api/admin/sites/<site_id>", methods=["GET"], endpoint="admin_site_detail")
    @admin_required
    def admin_site_detail(site_id: str):
        try:
            return jsonify({"data": container.site_service.get(site_id).to_dict()}), 200
        except DomainError as e:
            return _domain_error(e)

    @app.route("/api/admin/sites/<site_id>", methods=["PUT"], endpoint="admin_site_update")
    @admin_required
    def admin_site_update(site_id: str):
        payload = request.get_json(silent=True) or {}
        try:
            site = container.site_service.update(site_id, **_site_fields(payload))
        except DomainError as e:
            return _domain_error(e)
        except Exception:
            logger.exception("Failed to update site %s", site_id)
            return jsonify({"error": "Server error while saving site"}), 500
        return jsonify({"data": site.to_dict()}), 200
