"""
Admin Decorator
"""

from functools import wraps
from flask import session, redirect, url_for


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.

    Checks only session['is_admin']; anything else redirects to the
    admin login page.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if session.get('is_admin') is not True:
            return redirect(url_for('admin.admin_login'), code=303)
        return f(*args, **kwargs)
    return wrapper
