"""
Patient repository interface for data access abstraction.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.patient import Patient


class PatientRepository(ABC):
    """Abstract repository for patient data access.

    Implementations may raise ``StorageError`` from any method. Atomic
    single-entity read/update is the implementation's responsibility.
    """

    @abstractmethod
    async def get_by_id(self, patient_id: str) -> Optional[Patient]:
        """Find a patient by ID, or None."""
        pass

    @abstractmethod
    async def get_all(self) -> List[Patient]:
        """Return every stored patient."""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> List[Patient]:
        """Find patients whose name contains ``name``, ignoring case."""
        pass

    @abstractmethod
    async def add(self, patient: Patient) -> None:
        """Store a new patient."""
        pass

    @abstractmethod
    async def update(self, patient: Patient) -> None:
        """Replace a stored patient. Raises PatientNotFoundError if it is gone."""
        pass

    @abstractmethod
    async def delete(self, patient_id: str) -> None:
        """Delete a patient by ID."""
        pass
