"""
Simulated appointment and device lookups.

Stand-ins for the appointment and device services until those are reachable;
each waits for a configured latency and returns a fixed list.
"""

import asyncio
import logging
from typing import List

from hearingclinic.application.ports.services.appointment_service import AppointmentService
from hearingclinic.application.ports.services.device_service import DeviceService

logger = logging.getLogger("hearingclinic")

DEFAULT_APPOINTMENTS = ("Appointment 1", "Appointment 2")
DEFAULT_DEVICES = ("Device 1",)


class SimulatedAppointmentService(AppointmentService):
    """Appointment lookup returning a fixed list after a delay."""

    def __init__(self, delay_ms: int = 50, appointments=DEFAULT_APPOINTMENTS):
        self._delay_seconds = delay_ms / 1000
        self._appointments = list(appointments)

    async def fetch_appointments(self, patient_id: str) -> List[str]:
        logger.debug(f"Fetching appointments for patient {patient_id}")
        await asyncio.sleep(self._delay_seconds)
        return list(self._appointments)


class SimulatedDeviceService(DeviceService):
    """Device lookup returning a fixed list after a delay."""

    def __init__(self, delay_ms: int = 50, devices=DEFAULT_DEVICES):
        self._delay_seconds = delay_ms / 1000
        self._devices = list(devices)

    async def fetch_devices(self, patient_id: str) -> List[str]:
        logger.debug(f"Fetching devices for patient {patient_id}")
        await asyncio.sleep(self._delay_seconds)
        return list(self._devices)
