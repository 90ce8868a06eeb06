"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

from .enums import WorkStatus

DEFAULT_HOURS = Decimal("0")
DEFAULT_STATUS = WorkStatus.PRESENT
MIN_HOURS = Decimal("0")
MAX_HOURS = Decimal("24")
STANDARD_DAY_HOURS = Decimal("8")

DEFAULT_AUDIT_LIMIT = 100
RECENT_ACTIVITY_LIMIT = 5
