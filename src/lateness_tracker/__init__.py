"""Lateness Tracker package.

Organized by feature modules (classes, students, arrivals, reports) over a
namespaced key-value store, with a thin Flask controller layer on top.
"""
