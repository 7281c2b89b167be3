"""
Admin Routes

Login, dashboard, reservation listing and accommodation management.
"""

import logging

from flask import current_app, render_template, request, redirect, url_for, flash, session

from booking.admin import admin_bp
from booking.admin.decorators import admin_required
from booking.errors import StorageError, error_response
from booking.services import (
    list_accommodation_names,
    add_accommodation,
    remove_accommodation,
    list_reservations,
)

logger = logging.getLogger(__name__)

ACCOMMODATIONS_MISSING = "Tabel 'accommodaties' ontbreekt in de database."


@admin_bp.route('/login', methods=['GET', 'POST'])
def admin_login():
    """Password-only admin login.

    The submitted `wachtwoord` must equal ADMIN_PASSWORD exactly. There is
    no lockout; a wrong password simply answers 401.
    """
    if request.method == 'POST':
        if request.form.get('wachtwoord', '') == current_app.config['ADMIN_PASSWORD']:
            session.clear()
            session['is_admin'] = True
            logger.info('Admin login from %s', request.remote_addr)
            return redirect(url_for('admin.admin_dashboard'), code=303)
        logger.warning('Failed admin login from %s', request.remote_addr)
        return error_response('Onjuist wachtwoord', 401)

    return render_template('admin/login.html')


@admin_bp.route('/dashboard')
@admin_required
def admin_dashboard():
    return render_template('admin/dashboard.html')


@admin_bp.route('/reserveringen')
@admin_required
def admin_reservations():
    try:
        reservations = list_reservations()
    except StorageError as e:
        return error_response(str(e))
    return render_template('admin/reserveringen.html', reservations=reservations)


@admin_bp.route('/accommodaties', methods=['GET', 'POST'])
@admin_required
def manage_accommodations():
    """List accommodations; POST adds (actie=toevoegen) or removes (actie=verwijderen) one by name."""
    if request.method == 'POST':
        action = request.form.get('actie', '')
        name = request.form.get('naam', '')

        if action == 'toevoegen':
            try:
                added = add_accommodation(name)
            except StorageError as e:
                return error_response(f'Fout bij toevoegen accommodatie: {e}')
            if added:
                flash(f'Accommodatie "{name}" toegevoegd.', 'success')
        elif action == 'verwijderen':
            try:
                removed = remove_accommodation(name)
            except StorageError as e:
                return error_response(f'Fout bij verwijderen accommodatie: {e}')
            if removed:
                flash(f'Accommodatie "{name}" verwijderd.', 'success')

        return redirect(url_for('admin.manage_accommodations'), code=303)

    try:
        names = list_accommodation_names()
    except StorageError:
        return error_response(ACCOMMODATIONS_MISSING)
    return render_template('admin/accommodaties.html', accommodations=names)
