"""
Reservation Booking Site
Application Entry Point

Reads config.json, connects to the database and serves the site.
"""

from booking.server import main

if __name__ == '__main__':
    main()
