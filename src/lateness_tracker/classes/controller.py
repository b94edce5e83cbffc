from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .service import UPDATABLE_FIELDS


def register(app: Flask, container: Container) -> None:
    def _not_found():
        return jsonify({"success": False, "message": "Class not found"}), 404

    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    def classes_list():
        return jsonify([c.to_dict() for c in container.class_service.get_all()])

    @app.route("/api/classes", methods=["POST"], endpoint="classes_create")
    def classes_create():
        payload = request.get_json(silent=True) or {}
        name = (payload.get("name") or "").strip()
        if not name:
            return jsonify({"success": False, "message": "Class name is required"}), 400

        new_class = container.class_service.add(name, payload.get("schedule"))
        return jsonify(new_class.to_dict()), 201

    @app.route("/api/classes/<class_id>", methods=["GET"], endpoint="classes_detail")
    def classes_detail(class_id: str):
        class_obj = container.class_service.get_by_id(class_id)
        if not class_obj:
            return _not_found()
        return jsonify(class_obj.to_dict())

    @app.route("/api/classes/<class_id>", methods=["PATCH"], endpoint="classes_update")
    def classes_update(class_id: str):
        payload = request.get_json(silent=True) or {}
        updated = container.class_service.update(class_id, **{k: v for k, v in payload.items() if k in UPDATABLE_FIELDS})
        if not updated:
            return _not_found()
        return jsonify(updated.to_dict())

    @app.route("/api/classes/<class_id>", methods=["DELETE"], endpoint="classes_delete")
    def classes_delete(class_id: str):
        if not container.class_service.delete(class_id):
            return _not_found()
        return jsonify({"success": True})

    @app.route("/api/classes/<class_id>/schedule/<int:day>", methods=["GET"], endpoint="classes_schedule_day")
    def classes_schedule_day(class_id: str, day: int):
        if not container.class_service.get_by_id(class_id):
            return _not_found()
        entry = container.class_service.get_schedule_for_day(class_id, day)
        return jsonify(entry.to_dict() if entry else None)
