"""FastAPI dependency providers."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..adapters.db.memory.patient_repository import InMemoryPatientRepository
from ..adapters.external.simulated_sources import (
    SimulatedAppointmentService,
    SimulatedDeviceService,
)
from ..application.ports.repositories.patient_repo import PatientRepository
from ..application.ports.services.appointment_service import AppointmentService
from ..application.ports.services.device_service import DeviceService
from ..application.services.patient_service import PatientOrchestrationService
from ..core.config import get_settings


@lru_cache()
def get_patient_repository() -> PatientRepository:
    """Get patient repository instance (one per process)."""
    return InMemoryPatientRepository()


@lru_cache()
def get_appointment_service() -> AppointmentService:
    """Get appointment lookup instance."""
    settings = get_settings()
    return SimulatedAppointmentService(delay_ms=settings.auxiliary.appointments_delay_ms)


@lru_cache()
def get_device_service() -> DeviceService:
    """Get device lookup instance."""
    settings = get_settings()
    return SimulatedDeviceService(delay_ms=settings.auxiliary.devices_delay_ms)


PatientRepositoryDep = Annotated[PatientRepository, Depends(get_patient_repository)]
AppointmentServiceDep = Annotated[AppointmentService, Depends(get_appointment_service)]
DeviceServiceDep = Annotated[DeviceService, Depends(get_device_service)]


def get_patient_service(
    patient_repo: PatientRepositoryDep,
    appointment_service: AppointmentServiceDep,
    device_service: DeviceServiceDep,
) -> PatientOrchestrationService:
    """Build the orchestration service from the injected collaborators."""
    return PatientOrchestrationService(patient_repo, appointment_service, device_service)


PatientServiceDep = Annotated[PatientOrchestrationService, Depends(get_patient_service)]
