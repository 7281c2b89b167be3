import pytest

from booking.extensions import db
from booking.models import Accommodation, Reservation


ADMIN_ROUTES = ['/admin/dashboard', '/admin/reserveringen', '/admin/accommodaties']


@pytest.mark.parametrize('path', ADMIN_ROUTES)
def test_admin_routes_redirect_without_session(client, path):
    r = client.get(path)
    assert r.status_code == 303
    assert r.headers['Location'].endswith('/admin/login')


def test_admin_post_redirects_without_session(client, app):
    r = client.post('/admin/accommodaties', data={'actie': 'toevoegen', 'naam': 'Chalet Eik'})
    assert r.status_code == 303
    assert r.headers['Location'].endswith('/admin/login')

    with app.app_context():
        assert Accommodation.query.count() == 0


def test_login_page_renders(client):
    r = client.get('/admin/login')
    assert r.status_code == 200
    assert 'name="wachtwoord"' in r.get_data(as_text=True)


def test_login_with_correct_password(client):
    r = client.post('/admin/login', data={'wachtwoord': 'geheim'})
    assert r.status_code == 303
    assert r.headers['Location'].endswith('/admin/dashboard')

    with client.session_transaction() as sess:
        assert sess['is_admin'] is True

    r = client.get('/admin/dashboard')
    assert r.status_code == 200


def test_login_with_wrong_password(client):
    r = client.post('/admin/login', data={'wachtwoord': 'Geheim'})
    assert r.status_code == 401
    assert r.get_data(as_text=True) == 'Onjuist wachtwoord'

    with client.session_transaction() as sess:
        assert 'is_admin' not in sess

    r = client.get('/admin/dashboard')
    assert r.status_code == 303


def test_login_page_renders_for_logged_in_admin(admin_client):
    r = admin_client.get('/admin/login')
    assert r.status_code == 200
    assert 'name="wachtwoord"' in r.get_data(as_text=True)


def test_admin_session_has_no_logout_route(admin_client):
    r = admin_client.get('/admin/logout')
    assert r.status_code == 404

    r = admin_client.get('/admin/dashboard')
    assert r.status_code == 200


def test_dashboard_renders_without_database(admin_client, app):
    with app.app_context():
        db.drop_all()

    r = admin_client.get('/admin/dashboard')
    assert r.status_code == 200
    assert 'Reserveringen bekijken' in r.get_data(as_text=True)


def test_add_accommodation(admin_client, app):
    r = admin_client.post('/admin/accommodaties', data={'actie': 'toevoegen', 'naam': 'Boomhut'})
    assert r.status_code == 303
    assert r.headers['Location'].endswith('/admin/accommodaties')

    r = admin_client.get('/admin/accommodaties')
    assert r.status_code == 200
    assert 'Boomhut' in r.get_data(as_text=True)

    with app.app_context():
        assert [a.name for a in Accommodation.query.all()] == ['Boomhut']


def test_add_accommodation_with_empty_name_is_noop(admin_client, app):
    r = admin_client.post('/admin/accommodaties', data={'actie': 'toevoegen', 'naam': ''})
    assert r.status_code == 303

    with app.app_context():
        assert Accommodation.query.count() == 0


def test_remove_accommodation_removes_all_matches(admin_client, app, accommodations):
    r = admin_client.post('/admin/accommodaties', data={'actie': 'verwijderen', 'naam': 'Chalet Eik'})
    assert r.status_code == 303

    with app.app_context():
        assert [a.name for a in Accommodation.query.all()] == ['Blokhut Den']


def test_remove_requires_exact_name(admin_client, app, accommodations):
    admin_client.post('/admin/accommodaties', data={'actie': 'verwijderen', 'naam': 'chalet eik'})

    with app.app_context():
        assert Accommodation.query.count() == 3


def test_unknown_action_is_ignored(admin_client, app, accommodations):
    r = admin_client.post('/admin/accommodaties', data={'actie': 'hernoemen', 'naam': 'Chalet Eik'})
    assert r.status_code == 303
    assert r.headers['Location'].endswith('/admin/accommodaties')

    with app.app_context():
        assert Accommodation.query.count() == 3


def test_admin_list_without_table_returns_500(admin_client, drop_accommodations_table):
    r = admin_client.get('/admin/accommodaties')
    assert r.status_code == 500
    assert r.get_data(as_text=True) == "Tabel 'accommodaties' ontbreekt in de database."


def test_add_without_table_returns_500(admin_client, drop_accommodations_table):
    r = admin_client.post('/admin/accommodaties', data={'actie': 'toevoegen', 'naam': 'Boomhut'})
    assert r.status_code == 500
    assert r.get_data(as_text=True).startswith('Fout bij toevoegen accommodatie:')


def test_reservation_listing(admin_client, app):
    with app.app_context():
        db.session.add(Reservation(
            first_name='Jan', name_infix='', last_name='Berg',
            start_date='2026-07-01', end_date='2026-07-08', license_plate='12-ABC-3',
            email='jan@example.com', phone='0612345678', accommodation='Chalet Eik',
        ))
        # A row with NULL columns is left out of the listing
        db.session.add(Reservation(first_name='Onvolledig', accommodation='Blokhut Den'))
        db.session.commit()

    r = admin_client.get('/admin/reserveringen')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'jan@example.com' in body
    assert 'Onvolledig' not in body


def test_reservation_listing_without_table_returns_500(admin_client, app):
    with app.app_context():
        Reservation.__table__.drop(db.engine)

    r = admin_client.get('/admin/reserveringen')
    assert r.status_code == 500
    assert "reserveringen" in r.get_data(as_text=True)


def test_layout_shows_admin_link_only_for_admin(client):
    r = client.get('/')
    assert '/admin/dashboard' not in r.get_data(as_text=True)

    client.post('/admin/login', data={'wachtwoord': 'geheim'})
    r = client.get('/')
    assert '/admin/dashboard' in r.get_data(as_text=True)
