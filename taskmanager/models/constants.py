"""Constants for the Task Management API.

This module centralizes field limits and fixed values used throughout the application.
"""

API_VERSION = "1.0.0"

# Field limits
TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

# Sort rank for priority (lower = first)
PRIORITY_RANK = {
    "high": 1,
    "medium": 2,
    "low": 3,
}
