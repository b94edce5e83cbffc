from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _not_found():
        return jsonify({"success": False, "message": "Class not found"}), 404

    def _monthly(class_id: str, year: int, month: int):
        if not 1 <= month <= 12:
            return None
        return container.report_service.generate_monthly_report(class_id, year, month)

    @app.route("/api/classes/<class_id>/reports/<int:year>/<int:month>", methods=["GET"], endpoint="reports_monthly")
    def reports_monthly(class_id: str, year: int, month: int):
        report = _monthly(class_id, year, month)
        if not report:
            return _not_found()
        return jsonify(report.to_dict())

    @app.route(
        "/api/classes/<class_id>/reports/<int:year>/<int:month>.csv",
        methods=["GET"],
        endpoint="reports_monthly_csv",
    )
    def reports_monthly_csv(class_id: str, year: int, month: int):
        report = _monthly(class_id, year, month)
        if not report:
            return _not_found()

        csv_bytes = container.report_service.generate_csv(report).encode("utf-8")
        filename = f"retards_{year}_{month:02d}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/classes/<class_id>/sheets/<date_s>", methods=["GET"], endpoint="reports_daily_sheet")
    def reports_daily_sheet(class_id: str, date_s: str):
        sheet = container.report_service.generate_daily_sheet(class_id, date_s)
        if not sheet:
            return _not_found()
        return jsonify(sheet.to_dict())

    @app.route("/api/export", methods=["GET"], endpoint="data_export")
    def data_export():
        return app.response_class(
            container.report_service.export_json().encode("utf-8"),
            mimetype="application/json",
            headers={"Content-Disposition": "attachment; filename=lateness-tracker.json"},
        )

    @app.route("/api/import", methods=["POST"], endpoint="data_import")
    def data_import():
        result = container.report_service.import_json(request.get_data(as_text=True))
        return jsonify(result.to_dict()), (200 if result.success else 400)
