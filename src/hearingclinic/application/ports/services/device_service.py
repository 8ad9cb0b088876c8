"""
Device lookup interface.
"""

from abc import ABC, abstractmethod
from typing import List


class DeviceService(ABC):
    """Abstract source of the hearing devices known for a patient."""

    @abstractmethod
    async def fetch_devices(self, patient_id: str) -> List[str]:
        """Return device identifiers for the patient.

        Adapters raise ``ExternalServiceError`` when the source cannot answer.
        """
        pass
