"""Bulk save of one day's attendance grid.

The grid holds an ``(hours, status)`` edit per employee. Saving it compares
each edit with the log already stored for ``(employee, date)`` and issues the
smallest set of writes:

- no stored log, default edit (0 h, present) -> nothing
- no stored log, any other edit             -> insert
- stored log, hours or status differ        -> update that log
- stored log, nothing differs               -> nothing

Writes run one at a time in employee order. The first store failure stops the
batch; writes already applied stay applied, are audited, and are reported on
the raised ``BatchSaveError``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from ..audit.service import AuditLogger
from ..common.validators import parse_hours, parse_status
from ..core.constants import DEFAULT_HOURS, DEFAULT_STATUS
from ..core.enums import AuditAction, WorkStatus
from ..core.exceptions import BatchSaveError, StoreError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import WorkLog
from .repository import WorkLogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayEdit:
    hours: Decimal
    status: WorkStatus

    @classmethod
    def default(cls) -> "DayEdit":
        return cls(hours=DEFAULT_HOURS, status=DEFAULT_STATUS)

    @classmethod
    def parse(cls, raw: Any) -> "DayEdit":
        if isinstance(raw, DayEdit):
            return cls(hours=parse_hours(raw.hours), status=parse_status(raw.status))
        if not isinstance(raw, Mapping):
            raise ValidationError("Each edit must be an object with 'hours' and 'status'")
        return cls(
            hours=parse_hours(raw.get("hours", DEFAULT_HOURS)),
            status=parse_status(raw.get("status", DEFAULT_STATUS)),
        )

    @property
    def is_default(self) -> bool:
        return self.hours == DEFAULT_HOURS and self.status == DEFAULT_STATUS

    def differs_from(self, log: WorkLog) -> bool:
        return self.hours != log.total_hours or self.status != log.status


@dataclass(frozen=True)
class PlannedWrite:
    """One store operation; ``log_id`` is None for an insert."""

    employee_id: int
    edit: DayEdit
    log_id: Optional[int] = None

    @property
    def is_insert(self) -> bool:
        return self.log_id is None


@dataclass(frozen=True)
class ReconcilePlan:
    work_date: date
    writes: tuple[PlannedWrite, ...]
    unchanged: int

    @property
    def inserts(self) -> list[PlannedWrite]:
        return [w for w in self.writes if w.is_insert]

    @property
    def updates(self) -> list[PlannedWrite]:
        return [w for w in self.writes if not w.is_insert]

    @property
    def has_changes(self) -> bool:
        return bool(self.writes)


@dataclass(frozen=True)
class ReconcileResult:
    work_date: date
    inserted: int
    updated: int
    unchanged: int

    @property
    def has_changes(self) -> bool:
        return (self.inserted + self.updated) > 0

    @property
    def summary(self) -> str:
        return f"{self.updated} updated, {self.inserted} inserted"

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "inserted": self.inserted,
            "updated": self.updated,
            "unchanged": self.unchanged,
            "has_changes": self.has_changes,
            "message": self.summary if self.has_changes else "No hours or status changes to save.",
        }


def _recency_key(log: WorkLog):
    stamp = log.updated_at or log.created_at
    return (stamp is not None, stamp or 0, log.log_id)


def index_persisted(persisted: Iterable[WorkLog], work_date: date) -> dict[int, WorkLog]:
    """Map employee id -> stored log for ``work_date``.

    If duplicates exist for one employee, the most recently updated log wins.
    """

    grouped: dict[int, list[WorkLog]] = {}
    for log in persisted:
        if log.work_date != work_date:
            continue
        grouped.setdefault(log.employee_id, []).append(log)

    out: dict[int, WorkLog] = {}
    for employee_id, logs in grouped.items():
        if len(logs) > 1:
            logger.warning(
                "%d work logs found for employee %s on %s; reconciling against the latest",
                len(logs),
                employee_id,
                work_date.isoformat(),
            )
        out[employee_id] = max(logs, key=_recency_key)
    return out


def plan_day(work_date: date, edits: Mapping[int, DayEdit], persisted: Iterable[WorkLog]) -> ReconcilePlan:
    """Decide insert / update / no-op for every edited employee. No I/O."""

    existing = index_persisted(persisted, work_date)
    writes: list[PlannedWrite] = []
    unchanged = 0

    for employee_id in sorted(edits):
        edit = edits[employee_id]
        log = existing.get(employee_id)
        if log is None:
            if edit.is_default:
                unchanged += 1
            else:
                writes.append(PlannedWrite(employee_id=employee_id, edit=edit))
        elif edit.differs_from(log):
            writes.append(PlannedWrite(employee_id=employee_id, edit=edit, log_id=log.log_id))
        else:
            unchanged += 1

    return ReconcilePlan(work_date=work_date, writes=tuple(writes), unchanged=unchanged)


class AttendanceReconciler:
    """Use case: load and save the per-day attendance grid."""

    def __init__(self, worklogs: WorkLogRepository, employees: EmployeeRepository, audit: AuditLogger):
        self._worklogs = worklogs
        self._employees = employees
        self._audit = audit

    def day_grid(self, work_date: date) -> list[dict]:
        existing = index_persisted(self._worklogs.list_for_date(work_date), work_date)
        grid = []
        for employee in self._employees.list_active():
            log = existing.get(employee.employee_id)
            edit = DayEdit(hours=log.total_hours, status=log.status) if log else DayEdit.default()
            grid.append(
                {
                    "employee_id": employee.employee_id,
                    "name": employee.name,
                    "hourly_rate": str(employee.hourly_rate),
                    "hours": str(edit.hours),
                    "status": edit.status.value,
                    "log_id": log.log_id if log else None,
                }
            )
        return grid

    def parse_edits(self, raw: Mapping[Any, Any]) -> dict[int, DayEdit]:
        """Validate a raw ``{employee_id: {hours, status}}`` mapping.

        Raises ValidationError before anything is written.
        """

        active_ids = {e.employee_id for e in self._employees.list_active()}
        edits: dict[int, DayEdit] = {}
        for key, value in raw.items():
            try:
                employee_id = int(key)
            except (TypeError, ValueError):
                raise ValidationError(f"Invalid employee id: {key!r}")
            if employee_id not in active_ids:
                raise ValidationError(f"Employee {employee_id} is not on the active roster")
            try:
                edits[employee_id] = DayEdit.parse(value)
            except ValidationError as e:
                raise ValidationError(f"Employee {employee_id}: {e}")
        return edits

    def save_day(self, work_date: date, edits: Mapping[Any, Any], *, actor: str) -> ReconcileResult:
        parsed = self.parse_edits(edits)
        plan = plan_day(work_date, parsed, self._worklogs.list_for_date(work_date))

        if not plan.has_changes:
            return ReconcileResult(work_date=work_date, inserted=0, updated=0, unchanged=plan.unchanged)

        inserted = 0
        updated = 0
        for write in plan.writes:
            try:
                if write.is_insert:
                    self._insert(work_date, write, actor)
                    inserted += 1
                elif self._worklogs.update_hours_status(
                    write.log_id,
                    total_hours=write.edit.hours,
                    status=write.edit.status,
                    modified_by=actor,
                ):
                    updated += 1
                else:
                    logger.info(
                        "Work log %s vanished before update; inserting for employee %s on %s",
                        write.log_id,
                        write.employee_id,
                        work_date.isoformat(),
                    )
                    self._insert(work_date, write, actor)
                    inserted += 1
            except StoreError as e:
                if inserted + updated:
                    self._audit.record(
                        AuditAction.BULK_TIME_TRACKING,
                        f"Saved time logs on {work_date.isoformat()}: {updated} updated, {inserted} inserted "
                        f"(stopped at employee {write.employee_id})",
                        actor,
                    )
                raise BatchSaveError(
                    f"Saving {work_date.isoformat()} stopped at employee {write.employee_id} "
                    f"after {updated} updated, {inserted} inserted: {e}",
                    work_date=work_date,
                    inserted=inserted,
                    updated=updated,
                    employee_id=write.employee_id,
                ) from e

        result = ReconcileResult(work_date=work_date, inserted=inserted, updated=updated, unchanged=plan.unchanged)
        self._audit.record(
            AuditAction.BULK_TIME_TRACKING,
            f"Saved time logs on {work_date.isoformat()}: {result.summary}",
            actor,
        )
        return result

    def _insert(self, work_date: date, write: PlannedWrite, actor: str) -> int:
        return self._worklogs.insert(
            employee_id=write.employee_id,
            work_date=work_date,
            total_hours=write.edit.hours,
            status=write.edit.status,
            created_by=actor,
        )
