"""
Models Package

Exports all models for easy importing.
"""

from booking.models.accommodation import Accommodation
from booking.models.reservation import Reservation

__all__ = ['Accommodation', 'Reservation']
