from __future__ import annotations

from lateness_tracker.reports.csv_export import render_monthly_csv
from lateness_tracker.reports.model import MonthlyReport, StudentMonthlyRow
from lateness_tracker.reports.service import ReportService


def _row(name, total_days, tardies, minutes, avg):
    return StudentMonthlyRow(
        id=f"stu_{name}",
        name=name,
        photo_url=None,
        total_days=total_days,
        on_time=total_days - tardies,
        tardies=tardies,
        total_minutes_late=minutes,
        avg_minutes_late=avg,
    )


def _report(rows):
    return MonthlyReport(
        class_id="cls_1",
        class_name="1AEP",
        year=2024,
        month=2,
        month_name="février",
        generated_at="2024-03-01T08:00:00",
        start_date="2024-02-01",
        end_date="2024-02-29",
        students=rows,
    )


def test_csv_layout_is_fixed():
    report = _report([_row("Amal", 5, 0, 0, 0), _row("Zara", 4, 2, 40, 20), _row("Yan", 3, 1, 5, 5)])

    assert render_monthly_csv(report) == "\n".join(
        [
            "Rapport de retards - 1AEP - février 2024",
            "",
            "Nom,Délais,Retards,Minutes de retard, Moyenne",
            "Amal,5,0,0,0",
            "Zara,4,2,40,20",
            "Yan,3,1,5,5",
            "",
            "Total,12,3,45,15",
        ]
    )


def test_totals_average_is_zero_without_tardies():
    csv_text = render_monthly_csv(_report([_row("Amal", 5, 0, 0, 0)]))

    assert csv_text.splitlines()[-1] == "Total,5,0,0,0"


def test_empty_class_still_has_totals():
    assert render_monthly_csv(_report([])).splitlines()[-1] == "Total,0,0,0,0"


def test_names_are_verbatim_unless_quoting_requested():
    report = _report([_row('Doe, "JJ"', 1, 0, 0, 0)])

    assert 'Doe, "JJ",1,0,0,0' in render_monthly_csv(report).splitlines()
    assert '"Doe, ""JJ""",1,0,0,0' in render_monthly_csv(report, quote=True).splitlines()


def test_service_uses_configured_quoting(classes, students, arrivals, store):
    c = classes.add("1AEP")
    students.add("Doe, J", c.id)
    svc = ReportService(store, classes, students, arrivals, csv_quote_fields=True)

    report = svc.generate_monthly_report(c.id, 2024, 2)

    assert '"Doe, J",0,0,0,0' in svc.generate_csv(report)
    assert "Doe, J,0,0,0,0" in svc.generate_csv(report, quote=False)
