"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_SHIFT_START = time(9, 0)
DEFAULT_LATE_TOLERANCE_MINUTES = 10
DEFAULT_EARLY_BIRD_MINUTES = 30

EARLY_BIRD_REASON = "Early Bird Check-In (>30 mins early)"
TASK_MASTER_REASON = "Completed all daily tasks"
PERFECT_AUDIT_REASON = "Perfect 5.0 Performance Audit"
PERFECT_AUDIT_SCORE = 5.0

UNKNOWN_EMPLOYEE_NAME = "Unknown"
PLACEHOLDER_AVATAR_URL = "https://via.placeholder.com/150"

EOTM_POINTS_WEIGHT = 0.5
EOTM_REVIEW_WEIGHT = 0.5
EOTM_REVIEW_SCALE = 10
EOTM_BONUS_REASON = "Employee of the Month {month:02d}/{year}"

# Column widths of point_transactions.
MAX_EMPLOYEE_ID_LENGTH = 64
MAX_REASON_LENGTH = 255
