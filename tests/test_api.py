from __future__ import annotations

import pytest

from lateness_tracker.main import create_app
from lateness_tracker.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(store=InMemoryKeyValueStore("api-test"))
    return app.test_client()


def _create_class(client, name="1AEP"):
    resp = client.post("/api/classes", json={"name": name})
    assert resp.status_code == 201
    return resp.get_json()


def _create_student(client, class_id, name):
    resp = client.post("/api/students", json={"name": name, "classId": class_id})
    assert resp.status_code == 201
    return resp.get_json()


def test_class_crud(client):
    created = _create_class(client)
    class_id = created["id"]

    assert created["schedule"]["sunday"] == {"enabled": False}
    assert client.get(f"/api/classes/{class_id}/schedule/1").get_json()["startTime"] == "12:30"

    resp = client.patch(f"/api/classes/{class_id}", json={"name": "1AEP-bis", "class_id": "ignored"})
    assert resp.get_json()["name"] == "1AEP-bis"

    assert len(client.get("/api/classes").get_json()) == 1
    assert client.delete(f"/api/classes/{class_id}").status_code == 200
    assert client.get(f"/api/classes/{class_id}").status_code == 404


def test_blank_student_name_is_rejected(client):
    class_id = _create_class(client)["id"]

    resp = client.post("/api/students", json={"name": "  ", "classId": class_id})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_mark_arrival_and_duplicate(client):
    class_id = _create_class(client)["id"]
    student = _create_student(client, class_id, "Amal")
    body = {"studentId": student["id"], "classId": class_id, "date": "2024-02-05", "time": "12:45"}

    first = client.post("/api/arrivals", json=body)
    second = client.post("/api/arrivals", json=dict(body, time="12:00"))

    assert first.status_code == 201
    assert first.get_json()["arrival"]["minutesLate"] == 15
    assert second.status_code == 409
    assert second.get_json()["existingRecord"]["time"] == "12:45"

    stats = client.get(f"/api/students/{student['id']}/stats").get_json()
    assert stats["tardies"] == 1

    assert client.delete(f"/api/arrivals/{student['id']}/2024-02-05").status_code == 200
    assert client.get(f"/api/arrivals/{student['id']}/2024-02-05").status_code == 404


def test_mark_arrival_validates_input(client):
    resp = client.post("/api/arrivals", json={"studentId": "s", "classId": "c", "date": "05/02/2024"})

    assert resp.status_code == 400


def test_mark_arrival_rejects_impossible_date(client):
    class_id = _create_class(client)["id"]
    student = _create_student(client, class_id, "Amal")

    resp = client.post("/api/arrivals", json={"studentId": student["id"], "classId": class_id, "date": "2024-02-30"})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert client.get(f"/api/classes/{class_id}/arrivals/2024-02-30").get_json() == []


def test_monthly_report_csv_and_daily_sheet(client):
    class_id = _create_class(client)["id"]
    zara = _create_student(client, class_id, "Zara")
    _create_student(client, class_id, "Amal")
    client.post(
        "/api/arrivals",
        json={"studentId": zara["id"], "classId": class_id, "date": "2024-02-05", "time": "12:45"},
    )

    report = client.get(f"/api/classes/{class_id}/reports/2024/2").get_json()
    assert [s["name"] for s in report["students"]] == ["Amal", "Zara"]

    csv_resp = client.get(f"/api/classes/{class_id}/reports/2024/2.csv")
    assert csv_resp.mimetype == "text/csv"
    lines = csv_resp.get_data(as_text=True).split("\n")
    assert lines[0] == "Rapport de retards - 1AEP - février 2024"
    assert lines[-1] == "Total,1,1,15,15"

    sheet = client.get(f"/api/classes/{class_id}/sheets/2024-02-05").get_json()
    assert [r["status"] for r in sheet["students"]] == ["absent", "late"]

    assert client.get("/api/classes/cls_missing/reports/2024/2").status_code == 404
    assert client.get(f"/api/classes/{class_id}/reports/2024/13").status_code == 404


def test_export_import_round_trip(client):
    class_id = _create_class(client)["id"]
    _create_student(client, class_id, "Amal")
    exported = client.get("/api/export").get_data(as_text=True)

    bad = client.post("/api/import", data="{nope", content_type="application/json")
    assert bad.status_code == 400
    assert bad.get_json()["success"] is False

    ok = client.post("/api/import", data=exported, content_type="application/json")
    assert ok.status_code == 200
    assert len(client.get(f"/api/classes/{class_id}/students").get_json()) == 1


def test_students_csv_import(client):
    class_id = _create_class(client)["id"]

    resp = client.post(
        f"/api/classes/{class_id}/students/import",
        data="name,photoUrl\nAmal\nZara,http://img/z.png",
        content_type="text/csv",
    )

    assert resp.get_json() == {"success": True, "imported": 2, "errors": []}
    assert client.post("/api/classes/cls_missing/students/import", data="A").status_code == 404
