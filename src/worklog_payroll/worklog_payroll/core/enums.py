from __future__ import annotations

from enum import Enum


class WorkStatus(str, Enum):
    """Attendance status stored on a work log."""

    PRESENT = "present"
    ABSENT = "absent"
    OVERTIME = "overtime"
    HOLIDAY = "holiday"


class SalaryStatus(str, Enum):
    """Lifecycle of a persisted salary snapshot."""

    PENDING = "pending"
    PAID = "paid"


class AuditAction(str, Enum):
    """Short tags written to the admin log."""

    ADD_EMPLOYEE = "ADD_EMPLOYEE"
    UPDATE_EMPLOYEE = "UPDATE_EMPLOYEE"
    DELETE_EMPLOYEE = "DELETE_EMPLOYEE"
    ADD_WORKLOG = "ADD_WORKLOG"
    UPDATE_WORKLOG = "UPDATE_WORKLOG"
    DELETE_WORKLOG = "DELETE_WORKLOG"
    BULK_TIME_TRACKING = "BULK_TIME_TRACKING"
    SALARY_CALCULATION = "SALARY_CALCULATION"
    SALARY_PAID = "SALARY_PAID"
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
