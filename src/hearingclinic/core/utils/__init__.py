"""
Utility functions for the Hearing Clinic application.
"""

from .datetime_utils import get_current_timestamp
from .string_utils import generate_id, is_blank

__all__ = [
    # Datetime utilities
    "get_current_timestamp",
    # String utilities
    "generate_id",
    "is_blank",
]
