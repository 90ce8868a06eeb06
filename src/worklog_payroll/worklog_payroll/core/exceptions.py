from __future__ import annotations

from datetime import date
from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class StoreError(DomainError):
    """Raised when the record store call itself fails."""


class BatchSaveError(StoreError):
    """A sequential batch write stopped at its first store failure.

    ``inserted`` and ``updated`` count the writes that were applied before the
    failure; those are not rolled back.
    """

    def __init__(
        self,
        message: str,
        *,
        work_date: date,
        inserted: int,
        updated: int,
        employee_id: Optional[int] = None,
    ):
        super().__init__(message)
        self.work_date = work_date
        self.inserted = inserted
        self.updated = updated
        self.employee_id = employee_id

    @property
    def applied(self) -> int:
        return self.inserted + self.updated
