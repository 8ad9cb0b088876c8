"""Patient orchestration service.

Coordinates the patient repository, the entity business rules and the
auxiliary appointment/device lookups. Holds no state between calls.
"""

import asyncio
from typing import List, Optional

from ...core.structured_logger import get_logger
from ...core.utils.string_utils import is_blank
from ...domain.entities.patient import Patient, validate_ear_level
from ...domain.errors import PatientNotFoundError, ValidationError
from ..dto.patient_dto import (
    CreatePatientRequest,
    PatientComprehensiveDTO,
    PatientDTO,
    RecordHearingTestRequest,
    UpdatePatientRequest,
)
from ..ports.repositories.patient_repo import PatientRepository
from ..ports.services.appointment_service import AppointmentService
from ..ports.services.device_service import DeviceService

logger = get_logger()


class PatientOrchestrationService:
    """Application service for patient records."""

    def __init__(
        self,
        patient_repository: PatientRepository,
        appointment_service: AppointmentService,
        device_service: DeviceService,
    ):
        if patient_repository is None:
            raise ValueError("patient_repository is required")
        if appointment_service is None:
            raise ValueError("appointment_service is required")
        if device_service is None:
            raise ValueError("device_service is required")
        self._patient_repository = patient_repository
        self._appointment_service = appointment_service
        self._device_service = device_service

    # Create

    async def create_patient(self, request: CreatePatientRequest) -> PatientDTO:
        """Validate input, create the entity, save it and return its DTO."""
        if request is None:
            raise ValidationError("request", "Create request required")

        patient = Patient.create(request.name, request.email)
        await self._patient_repository.add(patient)

        logger.info("Patient created", patient_id=patient.id)
        return PatientDTO.from_domain(patient)

    # Read

    async def get_patient(self, patient_id: str) -> PatientDTO:
        """Return a patient, raising PatientNotFoundError when absent."""
        patient = await self._load_patient(patient_id)
        return PatientDTO.from_domain(patient)

    async def get_all_patients(self) -> List[PatientDTO]:
        patients = await self._patient_repository.get_all()
        return [PatientDTO.from_domain(patient) for patient in patients]

    async def search_patients_by_name(self, name: str) -> List[PatientDTO]:
        """Case-insensitive, partial match on patient name."""
        if is_blank(name):
            raise ValidationError("name", "Search name required")

        patients = await self._patient_repository.get_by_name(name)
        logger.debug("Patient search", query=name, matches=len(patients))
        return [PatientDTO.from_domain(patient) for patient in patients]

    # Update

    async def update_patient(
        self, patient_id: str, request: UpdatePatientRequest
    ) -> PatientDTO:
        """Update contact info; unset request fields keep the stored values."""
        _require_id(patient_id)
        if request is None:
            raise ValidationError("request", "Update request required")

        patient = await self._load_patient(patient_id)
        patient.update_contact_info(
            request.name if request.name is not None else patient.name,
            request.email if request.email is not None else patient.email,
        )
        await self._patient_repository.update(patient)

        logger.info("Patient contact info updated", patient_id=patient.id)
        return PatientDTO.from_domain(patient)

    async def record_hearing_test(
        self, patient_id: str, request: RecordHearingTestRequest
    ) -> PatientDTO:
        """Record a hearing test, replacing the patient's previous result."""
        _require_id(patient_id)
        if request is None:
            raise ValidationError("request", "Hearing test request required")
        validate_ear_level("left_ear_db", request.left_ear_db)
        validate_ear_level("right_ear_db", request.right_ear_db)

        patient = await self._load_patient(patient_id)
        result = patient.record_hearing_test(request.left_ear_db, request.right_ear_db)
        await self._patient_repository.update(patient)

        logger.info(
            "Hearing test recorded",
            patient_id=patient.id,
            severity=result.severity_level.value,
        )
        return PatientDTO.from_domain(patient)

    async def assign_device(self, patient_id: str, device_id: str) -> PatientDTO:
        """Assign a hearing device to the patient."""
        _require_id(patient_id)
        if is_blank(device_id):
            raise ValidationError("device_id", "Device ID required")

        patient = await self._load_patient(patient_id)
        patient.assign_device(device_id)
        await self._patient_repository.update(patient)

        logger.info("Device assigned", patient_id=patient.id, device_id=device_id)
        return PatientDTO.from_domain(patient)

    # Delete

    async def delete_patient(self, patient_id: str) -> None:
        """Delete a patient. Existence is not checked here."""
        _require_id(patient_id)

        await self._patient_repository.delete(patient_id)
        logger.info("Patient deleted", patient_id=patient_id)

    # Aggregation

    async def get_complete_patient_data(self, patient_id: str) -> PatientComprehensiveDTO:
        """Fetch the patient, appointments and devices concurrently.

        All three lookups are started before any is awaited and the join waits
        for every one of them to settle; one failing lookup never cancels the
        others. When several fail, the first in dispatch order (patient,
        appointments, devices) is raised and the rest are logged.
        """
        _require_id(patient_id)

        patient_task = asyncio.create_task(
            self._patient_repository.get_by_id(patient_id)
        )
        appointments_task = asyncio.create_task(
            self._appointment_service.fetch_appointments(patient_id)
        )
        devices_task = asyncio.create_task(
            self._device_service.fetch_devices(patient_id)
        )

        patient, appointments, devices = await asyncio.gather(
            patient_task, appointments_task, devices_task, return_exceptions=True
        )

        failures = [
            (source, outcome)
            for source, outcome in (
                ("patient", patient),
                ("appointments", appointments),
                ("devices", devices),
            )
            if isinstance(outcome, BaseException)
        ]
        if failures:
            for source, error in failures[1:]:
                logger.warning(
                    "Discarding additional lookup failure",
                    patient_id=patient_id,
                    source=source,
                    error=repr(error),
                )
            raise failures[0][1]

        if patient is None:
            raise PatientNotFoundError(patient_id)

        return PatientComprehensiveDTO(
            patient=PatientDTO.from_domain(patient),
            appointments=list(appointments),
            devices=list(devices),
        )

    async def _load_patient(self, patient_id: str) -> Patient:
        _require_id(patient_id)
        patient: Optional[Patient] = await self._patient_repository.get_by_id(patient_id)
        if patient is None:
            raise PatientNotFoundError(patient_id)
        return patient


def _require_id(patient_id: str) -> None:
    if is_blank(patient_id):
        raise ValidationError("patient_id", "Patient ID required")
