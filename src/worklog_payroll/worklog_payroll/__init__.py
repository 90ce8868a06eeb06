"""Worklog Payroll package.

Feature modules (employees, worklogs, payroll, reports, audit, ...) each carry
a thin Flask controller layer over service and repository layers.
"""
