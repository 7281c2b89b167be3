import pytest

from booking import create_app
from booking.config import TestConfig
from booking.extensions import db
from booking.models import Accommodation


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(client):
    r = client.post('/admin/login', data={'wachtwoord': TestConfig.ADMIN_PASSWORD})
    assert r.status_code == 303
    return client


@pytest.fixture()
def accommodations(app):
    names = ['Chalet Eik', 'Blokhut Den', 'Chalet Eik']
    with app.app_context():
        db.session.add_all([Accommodation(name=n) for n in names])
        db.session.commit()
    return names


@pytest.fixture()
def drop_accommodations_table(app):
    with app.app_context():
        Accommodation.__table__.drop(db.engine)
