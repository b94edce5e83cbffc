"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_NAMESPACE = "lateness-tracker"

CLASSES_KEY = "classes"
STUDENTS_KEY = "students"
ARRIVALS_KEY = "arrivals"
CORE_KEYS = (CLASSES_KEY, STUDENTS_KEY, ARRIVALS_KEY)

DEFAULT_START_TIME = "12:30"
DEFAULT_END_TIME = "14:20"

# Index 0 is Sunday, matching the weekday numbering used by callers.
DAY_NAMES = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")

MONTH_NAMES = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)

CSV_TITLE = "Rapport de retards - {class_name} - {month_name} {year}"
CSV_HEADER = "Nom,Délais,Retards,Minutes de retard, Moyenne"
