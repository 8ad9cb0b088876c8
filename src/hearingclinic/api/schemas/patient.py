"""
Pydantic schemas for patient-related API endpoints.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...application.dto.patient_dto import (
    HearingTestResultDTO,
    PatientComprehensiveDTO,
    PatientDTO,
)


class CreatePatientRequest(BaseModel):
    """Request schema for patient creation."""

    name: str = Field(..., max_length=200, description="Patient full name")
    email: str = Field(..., max_length=320, description="Patient email address")


class UpdatePatientRequest(BaseModel):
    """Request schema for contact updates; omitted fields are left unchanged."""

    name: Optional[str] = Field(None, max_length=200, description="New full name")
    email: Optional[str] = Field(None, max_length=320, description="New email address")


class RecordHearingTestRequest(BaseModel):
    """Request schema for recording a hearing test."""

    left_ear_db: int = Field(..., description="Left ear hearing threshold in dB")
    right_ear_db: int = Field(..., description="Right ear hearing threshold in dB")


class AssignDeviceRequest(BaseModel):
    """Request schema for assigning a hearing device."""

    device_id: str = Field(..., max_length=100, description="Hearing device identifier")


class HearingTestResultSchema(BaseModel):
    test_date: datetime
    left_ear_db: int
    right_ear_db: int
    is_normal: bool
    severity_level: str

    @classmethod
    def from_dto(cls, dto: HearingTestResultDTO) -> "HearingTestResultSchema":
        return cls(
            test_date=dto.test_date,
            left_ear_db=dto.left_ear_db,
            right_ear_db=dto.right_ear_db,
            is_normal=dto.is_normal,
            severity_level=dto.severity_level,
        )


class PatientSchema(BaseModel):
    id: str
    name: str
    email: str
    latest_test: Optional[HearingTestResultSchema] = None
    created_date: datetime
    device_ids: List[str] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: PatientDTO) -> "PatientSchema":
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            latest_test=(
                HearingTestResultSchema.from_dto(dto.latest_test)
                if dto.latest_test is not None
                else None
            ),
            created_date=dto.created_date,
            device_ids=list(dto.device_ids),
        )


class PatientComprehensiveSchema(BaseModel):
    patient: PatientSchema
    appointments: List[str]
    devices: List[str]

    @classmethod
    def from_dto(cls, dto: PatientComprehensiveDTO) -> "PatientComprehensiveSchema":
        return cls(
            patient=PatientSchema.from_dto(dto.patient),
            appointments=list(dto.appointments),
            devices=list(dto.devices),
        )
