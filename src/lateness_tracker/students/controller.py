from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<class_id>/students", methods=["GET"], endpoint="students_by_class")
    def students_by_class(class_id: str):
        students = container.student_service.get_sorted_by_name(class_id)
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students", methods=["POST"], endpoint="students_create")
    def students_create():
        payload = request.get_json(silent=True) or {}
        try:
            student = container.student_service.add(
                payload.get("name") or "",
                payload.get("classId") or "",
                payload.get("photoUrl"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(student.to_dict()), 201

    @app.route("/api/students/<student_id>", methods=["PATCH"], endpoint="students_update")
    def students_update(student_id: str):
        payload = request.get_json(silent=True) or {}
        field_map = {"name": "name", "classId": "class_id", "photoUrl": "photo_url"}
        changes = {field_map[k]: v for k, v in payload.items() if k in field_map}
        try:
            student = container.student_service.update(student_id, **changes)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        if not student:
            return jsonify({"success": False, "message": "Student not found"}), 404
        return jsonify(student.to_dict())

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="students_delete")
    def students_delete(student_id: str):
        if not container.student_service.delete(student_id):
            return jsonify({"success": False, "message": "Student not found"}), 404
        return jsonify({"success": True})

    @app.route("/api/classes/<class_id>/students/import", methods=["POST"], endpoint="students_import")
    def students_import(class_id: str):
        if not container.class_service.get_by_id(class_id):
            return jsonify({"success": False, "message": "Class not found"}), 404
        content = request.get_data(as_text=True)
        result = container.student_service.import_from_csv(content, class_id)
        return jsonify(result.to_dict())
