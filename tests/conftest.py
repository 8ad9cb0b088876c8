"""
Shared fixtures: fresh in-memory repository, instant auxiliary sources,
orchestration service and an HTTP client wired to them.
"""

import pytest
from fastapi.testclient import TestClient

from hearingclinic.adapters.db.memory.patient_repository import InMemoryPatientRepository
from hearingclinic.adapters.external.simulated_sources import (
    SimulatedAppointmentService,
    SimulatedDeviceService,
)
from hearingclinic.api.deps import (
    get_appointment_service,
    get_device_service,
    get_patient_repository,
)
from hearingclinic.app import app
from hearingclinic.application.services.patient_service import PatientOrchestrationService


@pytest.fixture
def patient_repository():
    return InMemoryPatientRepository()


@pytest.fixture
def appointment_service():
    return SimulatedAppointmentService(delay_ms=0)


@pytest.fixture
def device_service():
    return SimulatedDeviceService(delay_ms=0)


@pytest.fixture
def patient_service(patient_repository, appointment_service, device_service):
    return PatientOrchestrationService(patient_repository, appointment_service, device_service)


@pytest.fixture
def client(patient_repository, appointment_service, device_service):
    """Test client whose dependencies point at the per-test fixtures."""
    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[get_patient_repository] = lambda: patient_repository
    app.dependency_overrides[get_appointment_service] = lambda: appointment_service
    app.dependency_overrides[get_device_service] = lambda: device_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides = original_overrides
