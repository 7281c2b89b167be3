"""
Reservation Model
"""

from booking.extensions import db


class Reservation(db.Model):
    """A booking submitted through the public form"""
    __tablename__ = 'reserveringen'

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column('voornaam', db.String(100))
    name_infix = db.Column('tussenvoegsel', db.String(50))
    last_name = db.Column('achternaam', db.String(100))
    # Raw form values (YYYY-MM-DD), stored without parsing
    start_date = db.Column('begindatum', db.String(10))
    end_date = db.Column('einddatum', db.String(10))
    license_plate = db.Column('kenteken', db.String(20))
    email = db.Column(db.String(255))
    phone = db.Column('telefoon', db.String(50))
    # Accommodation name, not a foreign key
    accommodation = db.Column('accommodatie', db.String(100))

    # Form field name -> attribute
    FORM_FIELDS = {
        'voornaam': 'first_name',
        'tussenvoegsel': 'name_infix',
        'achternaam': 'last_name',
        'begindatum': 'start_date',
        'einddatum': 'end_date',
        'kenteken': 'license_plate',
        'email': 'email',
        'telefoon': 'phone',
        'accommodatie': 'accommodation',
    }

    @classmethod
    def from_form(cls, form):
        """Build a reservation from submitted form data; absent fields become ''."""
        return cls(**{attr: form.get(field, '') for field, attr in cls.FORM_FIELDS.items()})

    def is_complete(self):
        """True when no column is NULL."""
        return all(getattr(self, attr) is not None for attr in self.FORM_FIELDS.values())

    def __repr__(self):
        return f'<Reservation {self.id} {self.accommodation}>'
