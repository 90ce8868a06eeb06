from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable

from ..worklogs.model import WorkLogRow

CSV_HEADERS = ["Employee", "Employee ID", "Date", "Start Time", "End Time", "Total Hours", "Status", "Notes"]


def export_filename(start: date, end: date) -> str:
    return f"time-tracking-report-{start.isoformat()}-to-{end.isoformat()}.csv"


def rows_to_csv(rows: Iterable[WorkLogRow]) -> bytes:
    """Render rows as CSV (utf-8 with BOM so spreadsheet apps detect the encoding)."""

    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL)
    writer.writerow(CSV_HEADERS)
    for r in rows:
        writer.writerow(
            [
                r.employee_name,
                r.employee_id,
                r.work_date.isoformat(),
                r.start_time.strftime("%H:%M") if r.start_time else "",
                r.end_time.strftime("%H:%M") if r.end_time else "",
                str(r.total_hours),
                r.status.value,
                r.notes or "",
            ]
        )
    return out.getvalue().encode("utf-8-sig")
