"""
Admin Blueprint

Admin access is a single session flag set by a shared password.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from booking.admin import routes  # noqa: E402, F401
