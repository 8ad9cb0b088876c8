"""
Exception handling for the Hearing Clinic application.

This module provides application-level exception classes. Business rule
violations live in ``hearingclinic.domain.errors``.
"""

from typing import Any, Dict, Optional


class HearingClinicException(Exception):
    """Base exception class for Hearing Clinic application."""

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


class ConfigurationError(HearingClinicException):
    """Raised when there's a configuration error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "CONFIG_ERROR", details)


class StorageError(HearingClinicException):
    """Raised when a persistence collaborator fails (connectivity, constraints)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "STORAGE_ERROR", details)


class ExternalServiceError(HearingClinicException):
    """Raised when an auxiliary data source fails."""

    def __init__(
        self, service: str, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.service = service
        full_message = f"{service} service error: {message}"
        super().__init__(full_message, "EXTERNAL_SERVICE_ERROR", details)
