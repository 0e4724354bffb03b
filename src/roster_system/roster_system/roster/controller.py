from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from .service import groups_from_payload

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.roster_service

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _read_json() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def _read_present(data: dict) -> bool:
        present = data.get("present")
        if not isinstance(present, bool):
            raise ValidationError("present must be true or false")
        return present

    @app.route("/api/roster", methods=["GET"], endpoint="roster_state")
    def roster_state():
        return jsonify(service.get_state())

    @app.route("/api/summary", methods=["GET"], endpoint="roster_summary")
    def roster_summary():
        return jsonify(service.get_summary())

    @app.route("/api/classes", methods=["POST"], endpoint="add_class")
    def add_class():
        data = _read_json()
        class_name = data.get("class_name")
        if not isinstance(class_name, (str, type(None))):
            return _error("class_name must be text", 400)
        try:
            service.add_class_from_form(class_name, groups_from_payload(data.get("groups")))
            return jsonify(service.get_state()), 201
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to add class")
            return _error("System error while adding class", 500)

    @app.route("/api/classes/active", methods=["POST"], endpoint="select_class")
    def select_class():
        data = _read_json()
        class_name = data.get("class_name")
        if not isinstance(class_name, str):
            return _error("class_name is required", 400)
        service.select_class(class_name)
        return jsonify(service.get_state())

    @app.route("/api/attendance/mark-all", methods=["POST"], endpoint="mark_all")
    def mark_all():
        data = _read_json()
        try:
            service.mark_all(_read_present(data))
            return jsonify(service.get_summary())
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to mark all students")
            return _error("System error while marking attendance", 500)

    @app.route("/api/attendance/<student_id>", methods=["POST"], endpoint="toggle_attendance")
    def toggle_attendance(student_id: str):
        data = _read_json()
        try:
            service.toggle(student_id, _read_present(data))
            return jsonify(service.get_summary())
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to toggle attendance for %s", student_id)
            return _error("System error while marking attendance", 500)
