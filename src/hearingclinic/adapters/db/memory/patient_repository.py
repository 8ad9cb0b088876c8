"""
In-memory implementation of PatientRepository.
"""

import asyncio
from typing import Dict, List, Optional

from hearingclinic.application.ports.repositories.patient_repo import PatientRepository
from hearingclinic.core.exceptions import StorageError
from hearingclinic.domain.entities.patient import Patient
from hearingclinic.domain.errors import PatientNotFoundError


class InMemoryPatientRepository(PatientRepository):
    """Process-local PatientRepository keeping patients in insertion order.

    Stored entities are snapshots: callers get copies, so changes only become
    visible after ``update``.
    """

    def __init__(self) -> None:
        self._patients: Dict[str, Patient] = {}
        self._lock = asyncio.Lock()

    async def get_by_id(self, patient_id: str) -> Optional[Patient]:
        """Find a patient by ID."""
        patient = self._patients.get(patient_id)
        return _copy(patient) if patient is not None else None

    async def get_all(self) -> List[Patient]:
        """Return all patients in insertion order."""
        return [_copy(patient) for patient in self._patients.values()]

    async def get_by_name(self, name: str) -> List[Patient]:
        """Find patients by partial, case-insensitive name match."""
        needle = name.casefold()
        return [
            _copy(patient)
            for patient in self._patients.values()
            if needle in patient.name.casefold()
        ]

    async def add(self, patient: Patient) -> None:
        """Save a new patient."""
        if patient is None:
            raise StorageError("Cannot store an empty patient")
        async with self._lock:
            if patient.id in self._patients:
                raise StorageError(
                    f"Patient with ID '{patient.id}' already exists",
                    {"patient_id": patient.id},
                )
            self._patients[patient.id] = _copy(patient)

    async def update(self, patient: Patient) -> None:
        """Replace an existing patient."""
        if patient is None:
            raise StorageError("Cannot store an empty patient")
        async with self._lock:
            if patient.id not in self._patients:
                raise PatientNotFoundError(patient.id)
            self._patients[patient.id] = _copy(patient)

    async def delete(self, patient_id: str) -> None:
        """Delete a patient by ID. Unknown IDs are ignored."""
        async with self._lock:
            self._patients.pop(patient_id, None)


def _copy(patient: Patient) -> Patient:
    # HearingTestResult is immutable, so sharing it between copies is safe
    return Patient.restore(
        patient_id=patient.id,
        name=patient.name,
        email=patient.email,
        created_date=patient.created_date,
        modified_date=patient.modified_date,
        latest_test=patient.latest_test,
        device_ids=patient.device_ids,
    )
