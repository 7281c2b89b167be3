"""
Accommodation Service

Reads and changes the accommodation list.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from booking.errors import StorageError
from booking.extensions import db
from booking.models import Accommodation

logger = logging.getLogger(__name__)

MISSING_TABLE = "tabel 'accommodaties' ontbreekt in de database"


def list_accommodation_names():
    """Return every accommodation name in insertion order.

    NULL names are skipped. Any database failure is reported as a missing table.
    """
    try:
        rows = db.session.query(Accommodation.name).order_by(Accommodation.id).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Could not load accommodations: %s', e)
        raise StorageError(MISSING_TABLE) from e
    return [name for (name,) in rows if name is not None]


def add_accommodation(name):
    """Insert an accommodation. Empty names are ignored.

    Returns:
        True if a row was inserted.
    """
    if not name:
        return False
    try:
        db.session.add(Accommodation(name=name))
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Could not add accommodation %r: %s', name, e)
        raise StorageError(str(e)) from e
    logger.info('Accommodation %r added', name)
    return True


def remove_accommodation(name):
    """Delete every accommodation whose name matches exactly.

    Returns:
        Number of rows removed (0 for an empty name).
    """
    if not name:
        return 0
    try:
        removed = Accommodation.query.filter_by(name=name).delete(synchronize_session=False)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Could not remove accommodation %r: %s', name, e)
        raise StorageError(str(e)) from e
    logger.info('Accommodation %r removed (%d rows)', name, removed)
    return removed

