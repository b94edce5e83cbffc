from __future__ import annotations

import json

from lateness_tracker.core.constants import CORE_KEYS


def _seed(classes, students, arrivals):
    c = classes.add("1AEP")
    s = students.add("Amal", c.id)
    arrivals.mark_arrival(s.id, c.id, "2024-02-05", "12:45")
    return c, s


def test_export_is_flat_bundle(classes, students, arrivals, reports):
    c, s = _seed(classes, students, arrivals)

    bundle = json.loads(reports.export_json())

    assert set(bundle) == set(CORE_KEYS)
    assert bundle["classes"][0]["id"] == c.id
    assert bundle["students"][0]["classId"] == c.id
    assert bundle["arrivals"][0]["minutesLate"] == 15


def test_import_of_export_round_trips(store, classes, students, arrivals, reports):
    _seed(classes, students, arrivals)
    before = store.export_all()
    exported = reports.export_json()

    store.clear_all()
    reports.reload()
    assert classes.get_all() == []

    result = reports.import_json(exported)

    assert result.success is True
    assert store.export_all() == before
    assert len(classes.get_all()) == 1
    assert len(students.get_all()) == 1
    assert arrivals.get_all()[0].minutes_late == 15


def test_malformed_json_is_reported_not_raised(store, classes, students, arrivals, reports):
    _seed(classes, students, arrivals)
    before = store.export_all()

    result = reports.import_json("{not json")

    assert result.success is False
    assert result.error
    assert store.export_all() == before


def test_wrong_shape_leaves_store_untouched(store, classes, students, arrivals, reports):
    _seed(classes, students, arrivals)
    before = store.export_all()
    payload = json.dumps({"classes": [], "students": "oops"})

    result = reports.import_json(payload)

    assert result.success is False
    assert "'students' must be an array" in result.error
    assert store.export_all() == before
    assert len(classes.get_all()) == 1


def test_duplicate_arrivals_are_rejected(reports):
    arrival = {"id": "arr_1", "studentId": "stu_1", "date": "2024-02-05"}
    result = reports.import_json(json.dumps({"arrivals": [arrival, dict(arrival, id="arr_2")]}))

    assert result.success is False
    assert "Duplicate arrival" in result.error


def test_non_object_payload_is_rejected(reports):
    assert reports.import_json("[1, 2]").success is False


def _arrival(**overrides):
    item = {
        "id": "arr_9",
        "studentId": "stu_9",
        "classId": "cls_9",
        "date": "2024-02-06",
        "time": "12:45",
        "minutesLate": 15,
        "status": "late",
    }
    item.update(overrides)
    return item


def test_non_numeric_minutes_late_is_rejected_before_writing(store, classes, students, arrivals, reports):
    _seed(classes, students, arrivals)
    before = store.export_all()

    result = reports.import_json(json.dumps({"arrivals": [_arrival(minutesLate="abc")]}))

    assert result.success is False
    assert "minutesLate" in result.error
    assert store.export_all() == before
    assert arrivals.get_all()[0].minutes_late == 15


def test_unknown_status_is_rejected(store, reports):
    result = reports.import_json(json.dumps({"arrivals": [_arrival(status="absent")]}))

    assert result.success is False
    assert "status" in result.error
    assert store.get("arrivals") is None


def test_impossible_date_is_rejected(store, classes, students, arrivals, reports):
    _seed(classes, students, arrivals)
    before = store.export_all()

    result = reports.import_json(json.dumps({"arrivals": [_arrival(date="2024-02-30")]}))

    assert result.success is False
    assert "date" in result.error
    assert store.export_all() == before


def test_non_string_ids_are_rejected(store, reports):
    payload = {"arrivals": [_arrival(studentId=["stu_1"]), _arrival(id="arr_10", studentId=["stu_1"])]}

    result = reports.import_json(json.dumps(payload))

    assert result.success is False
    assert "'arrivals[0].studentId' must be a string" in result.error
    assert store.get("arrivals") is None


def test_schedule_day_entries_are_checked(store, classes, students, arrivals, reports):
    _seed(classes, students, arrivals)
    before = store.export_all()
    bad_class = {"id": "cls_9", "name": "2AEP", "schedule": {"monday": {"enabled": True, "startTime": 830}}}

    result = reports.import_json(json.dumps({"classes": [bad_class]}))

    assert result.success is False
    assert "'classes[0].schedule.monday.startTime' must be an HH:MM string" in result.error
    assert store.export_all() == before
    assert classes.get_all()[0].name == "1AEP"


def test_schedule_day_needs_boolean_enabled(reports):
    bad_class = {"id": "cls_9", "name": "2AEP", "schedule": {"monday": {"enabled": "yes"}}}

    result = reports.import_json(json.dumps({"classes": [bad_class]}))

    assert result.success is False
    assert "enabled" in result.error


def test_well_typed_bundle_is_accepted(classes, arrivals, reports):
    good_class = {
        "id": "cls_9",
        "name": "2AEP",
        "schedule": {"monday": {"enabled": True, "startTime": "08:30", "endTime": "10:00"}, "sunday": {"enabled": False}},
    }

    result = reports.import_json(json.dumps({"classes": [good_class], "arrivals": [_arrival()]}))

    assert result.success is True
    assert classes.get_by_id("cls_9").schedule.for_day(1).start_time == "08:30"
    assert arrivals.get_all()[0].is_late is True
