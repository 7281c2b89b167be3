"""
Services Package

Exports all services for easy importing.
"""

from booking.services.accommodations import (
    list_accommodation_names,
    add_accommodation,
    remove_accommodation,
)
from booking.services.reservations import create_reservation, list_reservations

__all__ = [
    'list_accommodation_names',
    'add_accommodation',
    'remove_accommodation',
    'create_reservation',
    'list_reservations',
]
