"""Attendance Dashboard package.

Feature modules (students, attendance, uploads, reports, ...) sit around a single
in-memory ``AttendanceStore``; services read from and write through it.
"""
