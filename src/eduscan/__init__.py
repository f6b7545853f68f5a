"""EduScan attendance package.

This package is organized by feature modules (students, attendance, reports, ...)
with a thin Flask controller layer over service/repository layers. All state
lives in a JSON document store (see ``eduscan.store``).
"""
