"""
Reservation Service
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from booking.errors import StorageError
from booking.extensions import db
from booking.models import Reservation

logger = logging.getLogger(__name__)

MISSING_TABLE = "Tabel 'reserveringen' ontbreekt in de database."


def create_reservation(form):
    """Store one reservation from raw form data, without validation."""
    reservation = Reservation.from_form(form)
    try:
        db.session.add(reservation)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Could not store reservation: %s', e)
        raise StorageError(str(e)) from e
    logger.info('Reservation %s stored for %r', reservation.id, reservation.accommodation)
    return reservation


def list_reservations():
    """All reservations ordered by id, leaving out rows with NULL columns."""
    try:
        rows = Reservation.query.order_by(Reservation.id).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Could not load reservations: %s', e)
        raise StorageError(MISSING_TABLE) from e
    return [r for r in rows if r.is_complete()]

