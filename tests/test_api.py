from datetime import date

from src.worklog_payroll.worklog_payroll.core.enums import WorkStatus


def test_health_is_public(client):
    assert client.get("/api/health").get_json()["status"] == "ok"


def test_protected_routes_need_login(client):
    resp = client.get("/api/employees")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_bad_credentials(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "wrong"})
    assert resp.status_code == 401


def test_employee_crud(logged_in, employees):
    resp = logged_in.post(
        "/api/employees", json={"name": "Asha", "hourly_rate": "50", "joining_date": "2024-01-02"}
    )
    assert resp.status_code == 201
    employee_id = resp.get_json()["employee"]["id"]

    resp = logged_in.post("/api/employees", json={"name": "", "hourly_rate": "50", "joining_date": "2024-01-02"})
    assert resp.status_code == 400

    assert logged_in.delete(f"/api/employees/{employee_id}").status_code == 200
    assert logged_in.get("/api/employees").get_json()["employees"] == []
    assert logged_in.delete("/api/employees/999").status_code == 404


def test_attendance_save_and_grid(logged_in, employees, worklogs):
    ann = employees.add("Ann", 40)
    ben = employees.add("Ben", 40)

    resp = logged_in.post(
        "/api/attendance/2024-03-15",
        json={"edits": {str(ann.employee_id): {"hours": "8", "status": "present"}, str(ben.employee_id): {"hours": 0, "status": "present"}}},
    )
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["inserted"] == 1 and body["updated"] == 0
    assert body["message"] == "0 updated, 1 inserted"

    grid = logged_in.get("/api/attendance/2024-03-15").get_json()["employees"]
    assert [row["hours"] for row in grid] == ["8", "0"]


def test_attendance_save_rejects_bad_hours(logged_in, employees, worklogs):
    ann = employees.add("Ann", 40)

    resp = logged_in.post("/api/attendance/2024-03-15", json={"edits": {str(ann.employee_id): {"hours": 30}}})

    assert resp.status_code == 400
    assert worklogs.writes == []


def test_attendance_store_failure_is_502(logged_in, employees, worklogs):
    ann = employees.add("Ann", 40)
    worklogs.fail_on_write = 1

    resp = logged_in.post("/api/attendance/2024-03-15", json={"edits": {str(ann.employee_id): {"hours": 8}}})

    assert resp.status_code == 502
    body = resp.get_json()
    assert body["inserted"] == 0 and body["failed_employee_id"] == ann.employee_id


def test_payroll_endpoint(logged_in, employees, worklogs):
    e1 = employees.add("E1", 50)
    worklogs.seed(e1.employee_id, date(2024, 3, 4), 8, WorkStatus.PRESENT)

    body = logged_in.get("/api/payroll?start=2024-03-01&end=2024-03-31").get_json()
    assert body["grand_total"] == "400.00"
    assert body["rows"][0]["total_pay"] == "400.00"

    resp = logged_in.get("/api/payroll?start=2024-03-31&end=2024-03-01")
    assert resp.status_code == 400


def test_payroll_snapshot_flow(logged_in, employees, worklogs):
    e1 = employees.add("E1", 50)
    worklogs.seed(e1.employee_id, date(2024, 3, 4), 8)

    resp = logged_in.post("/api/payroll/snapshots", json={"start": "2024-03-01", "end": "2024-03-31"})
    assert resp.status_code == 201
    calc_id = resp.get_json()["ids"][0]

    resp = logged_in.post(f"/api/payroll/snapshots/{calc_id}/paid")
    assert resp.get_json()["snapshot"]["status"] == "paid"
    assert logged_in.get("/api/payroll/snapshots?status=paid").get_json()["snapshots"][0]["id"] == calc_id


def test_dashboard_uses_injected_today(logged_in, employees, worklogs, fixed_today):
    ann = employees.add("Ann", 40)
    worklogs.seed(ann.employee_id, fixed_today, 10, WorkStatus.OVERTIME)

    body = logged_in.get("/api/dashboard").get_json()

    assert body["total_employees"] == 1
    assert body["present_today"] == 0
    assert body["total_hours_this_month"] == "10"
    assert body["overtime_hours"] == "2"


def test_report_export_download(logged_in, employees, worklogs):
    ann = employees.add("Ann", 40)
    worklogs.seed(ann.employee_id, date(2024, 3, 4), 8)

    resp = logged_in.get("/api/reports/export?start=2024-03-01&end=2024-03-31")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "time-tracking-report-2024-03-01-to-2024-03-31.csv" in resp.headers["Content-Disposition"]


def test_admin_logs_listing(logged_in):
    body = logged_in.get("/api/admin-logs?q=login").get_json()
    assert body["success"] is True
    assert body["logs"][0]["action"] == "LOGIN"


def test_admin_logs_negative_limit_is_bad_request(logged_in):
    resp = logged_in.get("/api/admin-logs?limit=-5")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_worklog_crud(logged_in, employees):
    ann = employees.add("Ann", 40)

    resp = logged_in.post("/api/worklogs", json={"employee_id": ann.employee_id, "date": "2024-03-15", "total_hours": 8})
    assert resp.status_code == 201
    log_id = resp.get_json()["log"]["id"]

    resp = logged_in.post("/api/worklogs", json={"employee_id": ann.employee_id, "date": "2024-03-15", "total_hours": 4})
    assert resp.status_code == 400

    resp = logged_in.put(f"/api/worklogs/{log_id}", json={"total_hours": "9", "status": "overtime"})
    assert resp.get_json()["log"]["status"] == "overtime"

    assert logged_in.delete(f"/api/worklogs/{log_id}").status_code == 200
    assert logged_in.get("/api/worklogs").get_json()["logs"] == []


def test_calendar_month(logged_in, employees, worklogs):
    ann = employees.add("Ann", 40)
    worklogs.seed(ann.employee_id, date(2024, 3, 15), 8)

    days = logged_in.get("/api/calendar/2024/3").get_json()["days"]
    by_date = {d["date"]: d for d in days}
    assert by_date["2024-03-15"]["is_today"] is True
    assert by_date["2024-03-15"]["status"] == "present"
    assert logged_in.get("/api/calendar/2024/13").status_code == 400
