"""Class check-in package.

Organized by feature modules (schedules, attendance, users, reports) with a thin
Flask controller layer over service/repository layers.
"""
