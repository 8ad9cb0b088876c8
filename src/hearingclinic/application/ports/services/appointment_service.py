"""
Appointment lookup interface.
"""

from abc import ABC, abstractmethod
from typing import List


class AppointmentService(ABC):
    """Abstract source of a patient's appointments."""

    @abstractmethod
    async def fetch_appointments(self, patient_id: str) -> List[str]:
        """Return appointment identifiers for the patient.

        Adapters raise ``ExternalServiceError`` when the source cannot answer.
        """
        pass
