from __future__ import annotations

import pytest

from lateness_tracker.core.exceptions import ValidationError


def test_add_trims_name(students):
    s = students.add("  Amal  ", "cls_1", "http://img/amal.png")

    assert s.id.startswith("stu_")
    assert s.name == "Amal"
    assert s.photo_url == "http://img/amal.png"


def test_add_rejects_blank_name(students):
    with pytest.raises(ValidationError):
        students.add("   ", "cls_1")
    assert students.get_all() == []


def test_update_and_delete(students):
    s = students.add("Amal", "cls_1")

    moved = students.update(s.id, class_id="cls_2")
    assert moved.class_id == "cls_2"
    assert students.get_by_class("cls_1") == []

    assert students.update("stu_missing", name="x") is None
    assert students.delete(s.id) is True
    assert students.delete(s.id) is False


def test_sorted_by_name_is_locale_aware(students):
    for name in ["Zara", "Amal", "Zoé", "Émile"]:
        students.add(name, "cls_1")
    students.add("Other", "cls_2")

    names = [s.name for s in students.get_sorted_by_name("cls_1")]

    assert names == ["Amal", "Émile", "Zara", "Zoé"]


def test_sorted_by_name_handles_cyrillic(students):
    # Code point order would put "Ё" (U+0401) before "Е" (U+0415).
    for name in ["Ёлка", "Елена"]:
        students.add(name, "cls_1")

    assert [s.name for s in students.get_sorted_by_name("cls_1")] == ["Елена", "Ёлка"]


def test_import_from_csv_skips_header_and_reports_empty_names(students):
    content = "name,photoUrl\nAmal,http://img/a.png\n\n ,http://img/x.png\nZara\n"

    result = students.import_from_csv(content, "cls_1")

    assert result.success is True
    assert result.imported == 2
    assert result.errors == ["Line 4: Empty name"]

    by_name = {s.name: s for s in students.get_by_class("cls_1")}
    assert by_name["Amal"].photo_url == "http://img/a.png"
    assert by_name["Zara"].photo_url is None


def test_import_from_csv_without_header(students):
    result = students.import_from_csv("Amal\nZara", "cls_1")

    assert result.imported == 2
