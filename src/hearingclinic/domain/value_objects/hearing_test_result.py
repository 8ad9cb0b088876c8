"""
Hearing test result value object.

Results have no identity: two results with the same ear levels recorded on the
same calendar day are interchangeable, whatever the time of day.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..enums.severity import SeverityLevel


@dataclass(frozen=True, eq=False)
class HearingTestResult:
    """Immutable audiometry measurement for both ears."""

    test_date: datetime
    left_ear_db: int
    right_ear_db: int

    @property
    def is_normal(self) -> bool:
        """Normal hearing is above 20 dB in both ears."""
        return self.left_ear_db > 20 and self.right_ear_db > 20

    @property
    def worst_ear(self) -> int:
        return min(self.left_ear_db, self.right_ear_db)

    @property
    def severity_level(self) -> SeverityLevel:
        return SeverityLevel.from_worst_ear(self.worst_ear)

    @property
    def recommended_action(self) -> str:
        return self.severity_level.recommended_action

    def __eq__(self, other: Any) -> bool:
        """Equality comparison on ear levels and calendar date only."""
        if not isinstance(other, HearingTestResult):
            return False
        return (
            self.left_ear_db == other.left_ear_db
            and self.right_ear_db == other.right_ear_db
            and self.test_date.date() == other.test_date.date()
        )

    def __hash__(self) -> int:
        """Hash for use in sets and dictionaries."""
        return hash((self.left_ear_db, self.right_ear_db, self.test_date.date()))

    def __str__(self) -> str:
        return (
            f"HearingTest[Left:{self.left_ear_db}dB "
            f"Right:{self.right_ear_db}dB Status:{self.severity_level.value}]"
        )
