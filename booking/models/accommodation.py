"""
Accommodation Model
"""

from booking.extensions import db


class Accommodation(db.Model):
    """A bookable unit, identified to visitors only by its name.

    Names are unique by convention only; the table allows duplicates.
    """
    __tablename__ = 'accommodaties'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column('naam', db.String(100))

    def __repr__(self):
        return f'<Accommodation {self.name}>'
