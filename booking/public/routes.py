"""
Public Routes
"""

from datetime import date

from flask import render_template, request, redirect, url_for

from booking.errors import StorageError, error_response
from booking.public import public_bp
from booking.services import list_accommodation_names, create_reservation


@public_bp.route('/')
def home():
    return render_template('home.html')


@public_bp.route('/accommodaties')
def accommodations():
    """Overview of the accommodations that can be booked."""
    try:
        names = list_accommodation_names()
    except StorageError as e:
        return error_response(f'Kan accommodaties niet laden: {e}')
    return render_template('accommodaties.html', accommodations=names)


@public_bp.route('/reserveren', methods=['GET', 'POST'])
def reserve():
    """Booking form; POST stores the submission as-is."""
    if request.method == 'POST':
        try:
            create_reservation(request.form)
        except StorageError as e:
            return error_response(f'Fout bij opslaan reservering: {e}')
        return redirect(url_for('public.home'), code=303)

    try:
        names = list_accommodation_names()
    except StorageError as e:
        return error_response(f'Kan accommodaties niet laden: {e}')
    return render_template('reserveren.html',
                           accommodations=names,
                           today=date.today().isoformat())


@public_bp.route('/contact')
def contact():
    return render_template('contact.html')


@public_bp.route('/over')
def about():
    return render_template('over.html')
