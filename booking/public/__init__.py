"""
Public Blueprint

Pages open to every visitor, including the booking form.
"""

from flask import Blueprint

public_bp = Blueprint('public', __name__)

from booking.public import routes  # noqa: E402, F401
