from datetime import date
from decimal import Decimal

import pytest

from src.worklog_payroll.worklog_payroll.core.exceptions import NotFoundError, ValidationError
from src.worklog_payroll.worklog_payroll.employees.service import EmployeeService


@pytest.fixture
def service(employees, audit):
    return EmployeeService(employees, audit)


def test_add_employee_normalizes_input(service, admin_logs):
    emp = service.add_employee(name="  Asha ", hourly_rate="50", joining_date="2024-01-02", gender=" Female ", actor="a")

    assert emp.name == "Asha"
    assert emp.hourly_rate == Decimal("50")
    assert emp.joining_date == date(2024, 1, 2)
    assert emp.gender == "female"
    assert emp.is_active
    assert admin_logs.entries[-1].details == "Added new employee: Asha"


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(name="", hourly_rate="10", joining_date="2024-01-01"),
        dict(name="A", hourly_rate="-1", joining_date="2024-01-01"),
        dict(name="A", hourly_rate="ten", joining_date="2024-01-01"),
        dict(name="A", hourly_rate="10", joining_date=""),
        dict(name="A", hourly_rate="10", joining_date="01/02/2024"),
    ],
)
def test_add_employee_validation(service, kwargs):
    with pytest.raises(ValidationError):
        service.add_employee(actor="a", **kwargs)


def test_deactivate_keeps_history_but_hides_from_roster(service, employees, worklogs, admin_logs):
    emp = employees.add("Asha", 50)
    worklogs.seed(emp.employee_id, date(2024, 3, 1), 8)

    service.deactivate_employee(emp.employee_id, actor="a")

    assert service.list_active() == []
    assert employees.get_by_id(emp.employee_id).is_active is False
    assert len(worklogs.list_rows(employee_id=emp.employee_id)) == 1
    assert admin_logs.entries[-1].action == "DELETE_EMPLOYEE"
    with pytest.raises(ValidationError):
        service.deactivate_employee(emp.employee_id, actor="a")


def test_update_and_missing(service, employees):
    emp = employees.add("Asha", 50)

    updated = service.update_employee(emp.employee_id, name="Asha P", hourly_rate="55.5", joining_date="2024-01-01", actor="a")

    assert updated.name == "Asha P"
    assert updated.hourly_rate == Decimal("55.5")
    with pytest.raises(NotFoundError):
        service.get(42)


def test_search_is_case_insensitive(service, employees):
    employees.add("Asha Patel", 50)
    employees.add("Ravi Kumar", 40)

    assert [e.name for e in service.search("PAT")] == ["Asha Patel"]
