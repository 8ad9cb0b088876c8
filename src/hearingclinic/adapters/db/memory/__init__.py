"""
In-memory persistence adapters.
"""

from .patient_repository import InMemoryPatientRepository

__all__ = ["InMemoryPatientRepository"]
