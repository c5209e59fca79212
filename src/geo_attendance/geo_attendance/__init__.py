"""GeoAttendance package.

Organized by feature modules (geo, attendance, leave, reporting, ...) with a
thin Flask controller layer on top of pure policy code and repository-backed
services.
"""
