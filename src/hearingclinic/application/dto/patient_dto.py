"""Patient DTOs for API communication."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ...domain.entities.patient import Patient
from ...domain.value_objects.hearing_test_result import HearingTestResult


@dataclass
class CreatePatientRequest:
    """Request DTO for patient creation."""

    name: str
    email: str


@dataclass
class UpdatePatientRequest:
    """Request DTO for contact updates. Unset fields keep their current value."""

    name: Optional[str] = None
    email: Optional[str] = None


@dataclass
class RecordHearingTestRequest:
    """Request DTO for recording a hearing test."""

    left_ear_db: int
    right_ear_db: int


@dataclass
class HearingTestResultDTO:
    """DTO for a hearing test result."""

    test_date: datetime
    left_ear_db: int
    right_ear_db: int
    is_normal: bool
    severity_level: str

    @classmethod
    def from_domain(cls, result: HearingTestResult) -> "HearingTestResultDTO":
        return cls(
            test_date=result.test_date,
            left_ear_db=result.left_ear_db,
            right_ear_db=result.right_ear_db,
            is_normal=result.is_normal,
            severity_level=result.severity_level.value,
        )


@dataclass
class PatientDTO:
    """DTO for patient summary."""

    id: str
    name: str
    email: str
    latest_test: Optional[HearingTestResultDTO]
    created_date: datetime
    device_ids: List[str] = field(default_factory=list)

    @classmethod
    def from_domain(cls, patient: Patient) -> "PatientDTO":
        return cls(
            id=patient.id,
            name=patient.name,
            email=patient.email,
            latest_test=(
                HearingTestResultDTO.from_domain(patient.latest_test)
                if patient.latest_test is not None
                else None
            ),
            created_date=patient.created_date,
            device_ids=list(patient.device_ids),
        )


@dataclass
class PatientComprehensiveDTO:
    """DTO bundling a patient with appointments and devices."""

    patient: PatientDTO
    appointments: List[str]
    devices: List[str]
