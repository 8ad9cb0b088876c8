"""
Concurrent fan-out/join behaviour of get_complete_patient_data.
"""

import asyncio

import pytest

from hearingclinic.adapters.db.memory.patient_repository import InMemoryPatientRepository
from hearingclinic.application.dto.patient_dto import CreatePatientRequest
from hearingclinic.application.ports.services.appointment_service import AppointmentService
from hearingclinic.application.ports.services.device_service import DeviceService
from hearingclinic.application.services.patient_service import PatientOrchestrationService
from hearingclinic.core.exceptions import ExternalServiceError, StorageError
from hearingclinic.domain.errors import PatientNotFoundError, ValidationError

JOIN_TIMEOUT = 2.0


class StartGate:
    """Lets callers proceed only once ``parties`` callers have arrived."""

    def __init__(self, parties: int) -> None:
        self._parties = parties
        self._arrived = 0
        self._open = asyncio.Event()

    async def arrive(self) -> None:
        self._arrived += 1
        if self._arrived >= self._parties:
            self._open.set()
        await self._open.wait()


class GatedRepository(InMemoryPatientRepository):
    def __init__(self, gate=None, error=None):
        super().__init__()
        self._gate = gate
        self._error = error

    async def get_by_id(self, patient_id):
        if self._gate is not None:
            await self._gate.arrive()
        if self._error is not None:
            raise self._error
        return await super().get_by_id(patient_id)


class FakeAppointments(AppointmentService):
    def __init__(self, result=("A-1", "A-2"), gate=None, error=None, delay=0.0):
        self.result = list(result)
        self.gate = gate
        self.error = error
        self.delay = delay
        self.finished = False

    async def fetch_appointments(self, patient_id):
        if self.gate is not None:
            await self.gate.arrive()
        await asyncio.sleep(self.delay)
        self.finished = True
        if self.error is not None:
            raise self.error
        return list(self.result)


class FakeDevices(DeviceService):
    def __init__(self, result=("D-1",), gate=None, error=None, delay=0.0):
        self.result = list(result)
        self.gate = gate
        self.error = error
        self.delay = delay
        self.finished = False

    async def fetch_devices(self, patient_id):
        if self.gate is not None:
            await self.gate.arrive()
        await asyncio.sleep(self.delay)
        self.finished = True
        if self.error is not None:
            raise self.error
        return list(self.result)


async def seed(repository):
    service = PatientOrchestrationService(repository, FakeAppointments(), FakeDevices())
    created = await service.create_patient(CreatePatientRequest("Jane Doe", "jane@x.com"))
    return created.id


@pytest.mark.asyncio
async def test_returns_bundle_of_all_three_lookups():
    repository = InMemoryPatientRepository()
    patient_id = await seed(repository)
    service = PatientOrchestrationService(repository, FakeAppointments(), FakeDevices())

    bundle = await service.get_complete_patient_data(patient_id)

    assert bundle.patient.id == patient_id
    assert bundle.patient.email == "jane@x.com"
    assert bundle.appointments == ["A-1", "A-2"]
    assert bundle.devices == ["D-1"]


@pytest.mark.asyncio
async def test_all_lookups_are_dispatched_before_any_is_awaited():
    # Each lookup blocks until all three have started; a sequential
    # implementation would never get past the first one.
    gate = StartGate(3)
    repository = GatedRepository(gate=gate)
    patient_id = await seed(repository)
    service = PatientOrchestrationService(
        repository, FakeAppointments(gate=gate), FakeDevices(gate=gate)
    )

    bundle = await asyncio.wait_for(
        service.get_complete_patient_data(patient_id), timeout=JOIN_TIMEOUT
    )

    assert bundle.patient.id == patient_id


@pytest.mark.asyncio
async def test_missing_patient_is_not_found_even_with_auxiliary_data():
    appointments = FakeAppointments()
    devices = FakeDevices()
    service = PatientOrchestrationService(InMemoryPatientRepository(), appointments, devices)

    with pytest.raises(PatientNotFoundError):
        await service.get_complete_patient_data("missing")

    assert appointments.finished and devices.finished


@pytest.mark.asyncio
async def test_auxiliary_failure_fails_the_whole_operation():
    repository = InMemoryPatientRepository()
    patient_id = await seed(repository)
    service = PatientOrchestrationService(
        repository,
        FakeAppointments(error=ExternalServiceError("appointments", "unreachable")),
        FakeDevices(),
    )

    with pytest.raises(ExternalServiceError):
        await service.get_complete_patient_data(patient_id)


@pytest.mark.asyncio
async def test_failure_does_not_cancel_the_other_lookups():
    repository = InMemoryPatientRepository()
    patient_id = await seed(repository)
    devices = FakeDevices(delay=0.05)
    service = PatientOrchestrationService(
        repository,
        FakeAppointments(error=ExternalServiceError("appointments", "unreachable")),
        devices,
    )

    with pytest.raises(ExternalServiceError):
        await service.get_complete_patient_data(patient_id)

    # The join waited for the slower device lookup to settle
    assert devices.finished is True


@pytest.mark.asyncio
async def test_multiple_failures_report_the_first_in_dispatch_order():
    repository = GatedRepository(error=StorageError("database down"))
    appointments = FakeAppointments(error=ExternalServiceError("appointments", "down"))
    devices = FakeDevices(error=ExternalServiceError("devices", "down"), delay=0.02)
    service = PatientOrchestrationService(repository, appointments, devices)

    with pytest.raises(StorageError, match="database down"):
        await service.get_complete_patient_data("any-id")

    assert appointments.finished and devices.finished


@pytest.mark.asyncio
async def test_auxiliary_failures_reported_in_order_when_patient_found():
    repository = InMemoryPatientRepository()
    patient_id = await seed(repository)
    service = PatientOrchestrationService(
        repository,
        FakeAppointments(error=ExternalServiceError("appointments", "down"), delay=0.02),
        FakeDevices(error=ExternalServiceError("devices", "down")),
    )

    with pytest.raises(ExternalServiceError) as exc_info:
        await service.get_complete_patient_data(patient_id)

    assert exc_info.value.service == "appointments"


@pytest.mark.asyncio
async def test_blank_id_is_rejected_before_any_lookup():
    appointments = FakeAppointments()
    devices = FakeDevices()
    service = PatientOrchestrationService(InMemoryPatientRepository(), appointments, devices)

    with pytest.raises(ValidationError):
        await service.get_complete_patient_data("  ")

    assert not appointments.finished and not devices.finished
