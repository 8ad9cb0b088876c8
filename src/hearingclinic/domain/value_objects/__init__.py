"""
Value objects package for domain layer.
"""

from .hearing_test_result import HearingTestResult

__all__ = [
    "HearingTestResult",
]
