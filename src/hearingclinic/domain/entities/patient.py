"""Patient domain entity representing a patient of the hearing clinic."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Optional, Tuple

from ...core.utils.datetime_utils import get_current_timestamp
from ...core.utils.string_utils import generate_id, is_blank
from ..errors import DeviceAlreadyAssignedError, ValidationError
from ..value_objects.hearing_test_result import HearingTestResult


class Patient:
    """Patient aggregate root.

    State is read through properties and changed only through the business
    methods below. Every method validates before touching state, so a failed
    call leaves the patient exactly as it was.
    """

    def __init__(
        self,
        patient_id: str,
        name: str,
        email: str,
        created_date: datetime,
        modified_date: datetime,
        latest_test: Optional[HearingTestResult] = None,
        device_ids: Iterable[str] = (),
    ) -> None:
        self._id = patient_id
        self._name = name
        self._email = email
        self._latest_test = latest_test
        self._device_ids = list(device_ids)
        self._created_date = created_date
        self._modified_date = modified_date

    @classmethod
    def create(cls, name: str, email: str) -> "Patient":
        """Create a new patient with a fresh identifier."""
        _validate_contact_info(name, email)
        now = get_current_timestamp()
        return cls(
            patient_id=generate_id(),
            name=name.strip(),
            email=_normalize_email(email),
            created_date=now,
            modified_date=now,
        )

    @classmethod
    def restore(
        cls,
        patient_id: str,
        name: str,
        email: str,
        created_date: datetime,
        modified_date: datetime,
        latest_test: Optional[HearingTestResult] = None,
        device_ids: Iterable[str] = (),
    ) -> "Patient":
        """Rebuild a previously stored patient without regenerating id or timestamps."""
        if is_blank(patient_id):
            raise ValidationError("patient_id", "Patient ID required")
        _validate_contact_info(name, email)
        devices = list(device_ids)
        if len(set(devices)) != len(devices):
            raise ValidationError("device_ids", "Device IDs must be unique")
        if modified_date < created_date:
            raise ValidationError("modified_date", "Modified date precedes created date")
        return cls(
            patient_id=patient_id,
            name=name.strip(),
            email=_normalize_email(email),
            created_date=created_date,
            modified_date=modified_date,
            latest_test=latest_test,
            device_ids=devices,
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def latest_test(self) -> Optional[HearingTestResult]:
        return self._latest_test

    @property
    def device_ids(self) -> Tuple[str, ...]:
        return tuple(self._device_ids)

    @property
    def created_date(self) -> datetime:
        return self._created_date

    @property
    def modified_date(self) -> datetime:
        return self._modified_date

    def record_hearing_test(self, left_ear_db: int, right_ear_db: int) -> HearingTestResult:
        """Record a new test result, replacing the previous one."""
        validate_ear_level("left_ear_db", left_ear_db)
        validate_ear_level("right_ear_db", right_ear_db)

        now = get_current_timestamp()
        self._latest_test = HearingTestResult(
            test_date=now,
            left_ear_db=left_ear_db,
            right_ear_db=right_ear_db,
        )
        self._touch(now)
        return self._latest_test

    def assign_device(self, device_id: str) -> None:
        """Assign a hearing device, keeping assignment order."""
        if is_blank(device_id):
            raise ValidationError("device_id", "Device ID required")
        if device_id in self._device_ids:
            raise DeviceAlreadyAssignedError(device_id)

        self._device_ids.append(device_id)
        self._touch()

    def update_contact_info(self, name: str, email: str) -> None:
        """Update patient contact information."""
        _validate_contact_info(name, email)

        self._name = name.strip()
        self._email = _normalize_email(email)
        self._touch()

    def has_normal_hearing(self) -> bool:
        """False until a test has been recorded."""
        if self._latest_test is None:
            return False
        return self._latest_test.is_normal

    def _touch(self, now: Optional[datetime] = None) -> None:
        now = now or get_current_timestamp()
        # Clock skew must not break modified >= created
        self._modified_date = max(now, self._created_date)

    def __eq__(self, other: Any) -> bool:
        """Entities are equal when their identifiers are."""
        if not isinstance(other, Patient):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Patient(id={self._id!r}, name={self._name!r}, email={self._email!r})"


def _validate_contact_info(name: Optional[str], email: Optional[str]) -> None:
    if is_blank(name):
        raise ValidationError("name", "Patient name is required")
    if is_blank(email):
        raise ValidationError("email", "Patient email is required")


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_ear_level(field: str, value: Any) -> None:
    """Ear levels are whole, non-negative decibel readings."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "Hearing measurements must be whole decibel values")
    if value < 0:
        raise ValidationError(field, "Hearing measurements cannot be negative")
