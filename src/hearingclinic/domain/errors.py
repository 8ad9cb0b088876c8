"""
Domain-specific error types for business rule violations.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base domain error."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(DomainError):
    """Malformed or missing required input."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field})
        self.field = field


class ConflictError(DomainError):
    """Requested change would violate an invariant of the current state."""

    def __init__(
        self,
        message: str,
        error_code: str = "CONFLICT",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, error_code, details)


class DeviceAlreadyAssignedError(ConflictError):
    """Device is already assigned to the patient."""

    def __init__(self, device_id: str) -> None:
        message = f"Device {device_id} already assigned"
        super().__init__(message, "DEVICE_ALREADY_ASSIGNED", {"device_id": device_id})


class NotFoundError(DomainError):
    """Referenced resource does not exist."""

    def __init__(
        self,
        message: str,
        error_code: str = "NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, error_code, details)


class PatientNotFoundError(NotFoundError):
    """Patient not found."""

    def __init__(self, patient_id: str) -> None:
        message = f"Patient with ID '{patient_id}' not found"
        super().__init__(message, "PATIENT_NOT_FOUND", {"patient_id": patient_id})
