"""
API schemas package.
"""

# Common schemas
from .common import ApiResponse, ErrorResponse

# Patient schemas
from .patient import (
    AssignDeviceRequest,
    CreatePatientRequest,
    HearingTestResultSchema,
    PatientComprehensiveSchema,
    PatientSchema,
    RecordHearingTestRequest,
    UpdatePatientRequest,
)

__all__ = [
    # Common
    "ApiResponse",
    "ErrorResponse",
    # Patients
    "AssignDeviceRequest",
    "CreatePatientRequest",
    "HearingTestResultSchema",
    "PatientComprehensiveSchema",
    "PatientSchema",
    "RecordHearingTestRequest",
    "UpdatePatientRequest",
]
