"""
Hearing loss severity levels and the clinical action each one calls for.
"""

from enum import Enum


class SeverityLevel(str, Enum):
    """Severity of hearing loss, classified from the worst ear's threshold."""
    NORMAL = "Normal"
    SLIGHT = "Slight"
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"

    @classmethod
    def from_worst_ear(cls, worst_ear_db: int) -> "SeverityLevel":
        """Classify a threshold in dB against the fixed band boundaries."""
        if worst_ear_db >= 21:
            return cls.NORMAL
        if worst_ear_db >= 16:
            return cls.SLIGHT
        if worst_ear_db >= 11:
            return cls.MILD
        if worst_ear_db >= 6:
            return cls.MODERATE
        return cls.SEVERE

    @property
    def recommended_action(self) -> str:
        return RECOMMENDED_ACTIONS[self]


RECOMMENDED_ACTIONS = {
    SeverityLevel.NORMAL: "No intervention needed",
    SeverityLevel.SLIGHT: "Monitor for changes",
    SeverityLevel.MILD: "Consider hearing aids",
    SeverityLevel.MODERATE: "Recommend hearing aid fitting",
    SeverityLevel.SEVERE: "Immediate fitting recommended",
}
