from __future__ import annotations

import re

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{2}:\d{2}$")


def register(app: Flask, container: Container) -> None:
    def _bad_request(message: str):
        return jsonify({"success": False, "message": message}), 400

    @app.route("/api/arrivals", methods=["POST"], endpoint="arrivals_mark")
    def arrivals_mark():
        """Mark a student present.

        Body: ``{"studentId", "classId", "date", "time"?}``. A second mark for
        the same student and date answers 409 with the existing record.
        """

        payload = request.get_json(silent=True) or {}
        student_id = payload.get("studentId")
        class_id = payload.get("classId")
        date_s = str(payload.get("date") or "")
        time_s = payload.get("time")

        if not student_id or not class_id:
            return _bad_request("studentId and classId are required")
        if not _DATE_RE.match(date_s):
            return _bad_request("date must be YYYY-MM-DD")
        try:
            parse_iso_date(date_s)
        except ValueError:
            return _bad_request(f"{date_s} is not a calendar date")
        if time_s is not None and not _TIME_RE.match(str(time_s)):
            return _bad_request("time must be HH:MM")

        result = container.arrival_service.mark_arrival(student_id, class_id, date_s, time_s)
        return jsonify(result.to_dict()), (201 if result.success else 409)

    @app.route("/api/arrivals/<student_id>/<date_s>", methods=["GET"], endpoint="arrivals_detail")
    def arrivals_detail(student_id: str, date_s: str):
        arrival = container.arrival_service.has_arrived(student_id, date_s)
        if not arrival:
            return jsonify({"success": False, "message": "No arrival recorded"}), 404
        return jsonify(arrival.to_dict())

    @app.route("/api/arrivals/<student_id>/<date_s>", methods=["DELETE"], endpoint="arrivals_remove")
    def arrivals_remove(student_id: str, date_s: str):
        removed = container.arrival_service.remove_arrival(student_id, date_s)
        return jsonify({"success": removed}), (200 if removed else 404)

    @app.route("/api/classes/<class_id>/arrivals/<date_s>", methods=["GET"], endpoint="arrivals_by_class_date")
    def arrivals_by_class_date(class_id: str, date_s: str):
        arrivals = container.arrival_service.get_by_class_and_date(class_id, date_s)
        return jsonify([a.to_dict() for a in arrivals])

    @app.route("/api/students/<student_id>/stats", methods=["GET"], endpoint="students_stats")
    def students_stats(student_id: str):
        stats = container.arrival_service.get_student_stats(
            student_id, request.args.get("start"), request.args.get("end")
        )
        return jsonify(stats.to_dict())

    @app.route("/api/classes/<class_id>/stats", methods=["GET"], endpoint="classes_stats")
    def classes_stats(class_id: str):
        stats = container.arrival_service.get_class_stats(
            class_id, request.args.get("start"), request.args.get("end")
        )
        return jsonify(stats.to_dict())
