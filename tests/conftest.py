import pytest
from flask import g
from flask.testing import FlaskClient

from portal import create_app
from portal.config import TestConfig
from portal.extensions import db


ADMIN_PASSWORD = 'admin-pass'
PROFESSOR_PASSWORD = 'prof-pass'
STUDENT_PASSWORD = 'student-pass'


class AccountClient(FlaskClient):
    """Test client that resolves the logged-in account on every request.

    Requests share the app context the `app` fixture keeps open, and
    Flask-Login caches the current user on that context's `g`.
    """

    def open(self, *args, **kwargs):
        g.pop('_login_user', None)
        try:
            return super().open(*args, **kwargs)
        finally:
            g.pop('_login_user', None)


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    app.test_client_class = AccountClient
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_payload():
    def make(**overrides):
        payload = {
            'lastName': 'reyes',
            'firstName': 'maria',
            'middleName': 'lopez',
            'contactNumber': '+63 912 345 6789',
            'email': 'Maria.Reyes@Example.edu',
            'employeeID': 'a-0001',
            'department': 'registrar',
            'designation': 'Registrar',
            'employmentStatus': 'Full-time',
            'password': ADMIN_PASSWORD,
            'role': 'Super Admin',
            'accountStatus': 'Active',
            'createdBy': 'system',
        }
        payload.update(overrides)
        return payload
    return make


@pytest.fixture()
def professor_payload():
    def make(**overrides):
        payload = {
            'lastName': 'santos',
            'firstName': 'jose',
            'middleName': 'garcia',
            'professorID': 'P-1024',
            'email': 'jose.santos@example.edu',
            'contactNumber': '09171234567',
            'department': 'computer science',
            'designation': 'Assistant Professor',
            'employmentStatus': 'Full-time',
            'password': PROFESSOR_PASSWORD,
        }
        payload.update(overrides)
        return payload
    return make


@pytest.fixture()
def student_payload():
    def make(**overrides):
        payload = {
            'studentID': '01-2345-678901',
            'email': 'juan.delacruz.au@phinmaed.com',
            'password': STUDENT_PASSWORD,
            'course': 'bscs',
            'section': 'a',
            'yearLevel': '1',
            'lastName': 'dela cruz',
            'firstName': 'juan',
            'middleName': 'santos',
        }
        payload.update(overrides)
        return payload
    return make


@pytest.fixture()
def admin_client(client, admin_payload):
    """Test client logged in as a freshly registered admin (A-0001)."""
    r = client.post('/api/admins/register', json=admin_payload())
    assert r.status_code == 201
    r = client.post('/api/auth/login', json={'id': 'A-0001', 'password': ADMIN_PASSWORD})
    assert r.status_code == 200
    return client


@pytest.fixture()
def professor(admin_client, professor_payload):
    r = admin_client.post('/api/professors/register', json=professor_payload())
    assert r.status_code == 201
    from portal.models import Professor
    return Professor.query.filter_by(professor_id='P-1024').one()


@pytest.fixture()
def student(client, student_payload):
    r = client.post('/api/students/register', json=student_payload())
    assert r.status_code == 201
    from portal.models import Student
    return Student.query.filter_by(student_id='01-2345-678901').one()
