"""
Hearing Clinic: patient records service for hearing clinics

A clean architecture-based service that keeps patient identity, contact data,
assigned hearing devices and the latest hearing test result, and classifies
hearing loss severity from audiometry thresholds.
"""

__version__ = "0.1.0"
__author__ = "Hearing Clinic Team"
__description__ = "Patient records service for hearing clinics"
