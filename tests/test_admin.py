from portal.models import Admin, Professor, Student

from conftest import ADMIN_PASSWORD, PROFESSOR_PASSWORD, STUDENT_PASSWORD


def test_register_admin(client, admin_payload):
    r = client.post('/api/admins/register', json=admin_payload())
    assert r.status_code == 201
    body = r.get_json()
    assert body['msg'] == 'Admin registered successfully.'
    assert body['admin'] == {
        'fullName': 'REYES, MARIA LOPEZ',
        'employeeID': 'A-0001',
        'email': 'maria.reyes@example.edu',
        'department': 'REGISTRAR',
        'designation': 'Registrar',
        'role': 'Super Admin',
    }
    stored = Admin.query.one()
    assert stored.password_hash != admin_payload()['password']
    assert stored.created_by == 'system'


def test_register_admin_missing_field(client, admin_payload):
    r = client.post('/api/admins/register', json=admin_payload(createdBy=''))
    assert r.status_code == 400
    assert r.get_json()['details'] == ['createdBy is required.']


def test_register_admin_invalid_formats(client, admin_payload):
    r = client.post('/api/admins/register', json=admin_payload(email='not-an-email'))
    assert r.status_code == 400
    assert r.get_json()['msg'] == 'Please enter a valid email address.'

    r = client.post('/api/admins/register', json=admin_payload(contactNumber='12ab'))
    assert r.status_code == 400
    assert r.get_json()['msg'] == 'Please enter a valid contact number.'

    r = client.post('/api/admins/register', json=admin_payload(contactNumber='٠٩١٧١٢٣٤٥٦٧'))
    assert r.status_code == 400
    assert r.get_json()['msg'] == 'Please enter a valid contact number.'

    r = client.post('/api/admins/register', json=admin_payload(employeeID='E-1'))
    assert r.status_code == 400

    r = client.post('/api/admins/register', json=admin_payload(accountStatus='Banned'))
    assert r.status_code == 400
    assert Admin.query.count() == 0


def test_register_admin_duplicate(client, admin_payload):
    client.post('/api/admins/register', json=admin_payload())

    r = client.post('/api/admins/register', json=admin_payload(employeeID='A-0002'))
    assert r.status_code == 400
    assert r.get_json()['msg'] == 'Email or Employee ID already exists.'

    r = client.post('/api/admins/register', json=admin_payload(email='new@example.edu'))
    assert r.status_code == 400
    assert Admin.query.count() == 1


def test_admin_routes_require_login(client):
    assert client.get('/api/admins/').status_code == 401
    assert client.get('/api/admins/accounts').status_code == 401
    assert client.delete('/api/admins/accounts/whatever').status_code == 401
    assert client.post('/api/professors/register', json={}).status_code == 401


def test_admin_routes_forbidden_for_students(client, student):
    client.post('/api/auth/login', json={'id': '01-2345-678901', 'password': STUDENT_PASSWORD})
    r = client.get('/api/admins/users')
    assert r.status_code == 403
    assert r.get_json() == {'msg': 'Admin access required'}


def test_list_admins_omits_password(admin_client):
    r = admin_client.get('/api/admins/')
    assert r.status_code == 200
    admins = r.get_json()
    assert len(admins) == 1
    assert admins[0]['employeeID'] == 'A-0001'
    assert not any('password' in key.lower() for key in admins[0])


def test_register_professor(admin_client, professor_payload):
    r = admin_client.post('/api/professors/register', json=professor_payload(professorID='p-2048'))
    assert r.status_code == 201
    body = r.get_json()
    assert body['professor']['professorID'] == 'P-2048'
    assert body['professor']['department'] == 'COMPUTER SCIENCE'

    r = admin_client.post('/api/professors/register', json=professor_payload(professorID='P-4096'))
    assert r.status_code == 400
    assert r.get_json()['msg'] == 'Email or Professor ID already exists.'


def test_list_accounts_across_kinds(admin_client, professor, student):
    for path, key in (('/api/admins/users', 'users'), ('/api/admins/accounts', 'accounts')):
        r = admin_client.get(path)
        assert r.status_code == 200
        accounts = r.get_json()[key]
        assert [a['type'] for a in accounts] == ['admin', 'professor', 'student']
        assert accounts[1]['professorID'] == 'P-1024'
        assert accounts[2]['fullName'] == 'DELA CRUZ, JUAN SANTOS'
        assert all('password_hash' not in a for a in accounts)


def test_status_update_falls_through_to_professor(admin_client, professor):
    r = admin_client.put(f'/api/admins/users/{professor.id}/status', json={'accountStatus': 'inactive'})
    assert r.status_code == 200
    body = r.get_json()
    assert body['msg'] == 'Account status updated successfully'
    assert body['user']['accountStatus'] == 'Inactive'
    assert 'account' not in body
    assert Professor.query.filter_by(professor_id='P-1024').one().account_status == 'Inactive'


def test_status_update_by_business_key(admin_client, professor, student):
    r = admin_client.patch('/api/admins/accounts/P-1024/status', json={'accountStatus': 'Suspended'})
    assert r.status_code == 200
    assert r.get_json()['account']['professorID'] == 'P-1024'

    r = admin_client.put('/api/admins/accounts/01-2345-678901/status', json={'accountStatus': 'Inactive'})
    assert r.status_code == 200
    assert Student.query.one().account_status == 'Inactive'

    r = admin_client.post('/api/auth/login', json={'id': 'P-1024', 'password': PROFESSOR_PASSWORD})
    assert r.status_code == 403
    assert r.get_json() == {'msg': 'Account is suspended.'}


def test_status_update_validation_and_not_found(admin_client, professor):
    r = admin_client.put('/api/admins/accounts/P-1024/status', json={'accountStatus': 'Banned'})
    assert r.status_code == 400

    r = admin_client.put('/api/admins/accounts/P-9999/status', json={'accountStatus': 'Active'})
    assert r.status_code == 404
    assert r.get_json() == {'msg': 'Account not found'}

    r = admin_client.put('/api/admins/accounts/P-9999/status', json={'accountStatus': 'Banned'})
    assert r.status_code == 404


def test_delete_falls_through_to_professor(admin_client, professor):
    r = admin_client.delete(f'/api/admins/users/{professor.id}')
    assert r.status_code == 200
    assert r.get_json() == {'msg': 'Account deleted successfully'}
    assert Professor.query.count() == 0
    assert Admin.query.count() == 1


def test_delete_by_business_key_and_missing(admin_client, student):
    r = admin_client.delete('/api/admins/accounts/01-2345-678901')
    assert r.status_code == 200
    assert Student.query.count() == 0

    r = admin_client.delete('/api/admins/accounts/01-2345-678901')
    assert r.status_code == 404


def test_suspended_admin_loses_access(admin_client, admin_payload, app):
    admin_client.post('/api/admins/register', json=admin_payload(
        employeeID='A-0002', email='other@example.edu'))
    other = app.test_client()
    r = other.post('/api/auth/login', json={'id': 'A-0002', 'password': ADMIN_PASSWORD})
    assert r.status_code == 200
    assert other.get('/api/admins/accounts').status_code == 200

    r = admin_client.put('/api/admins/accounts/A-0002/status', json={'accountStatus': 'Suspended'})
    assert r.status_code == 200

    assert other.get('/api/admins/accounts').status_code == 401
    assert other.delete('/api/admins/accounts/A-0001').status_code == 401
    assert Admin.query.count() == 2
    assert admin_client.get('/api/auth/current-user').status_code == 200


def test_reactivating_keeps_sessions(admin_client):
    r = admin_client.put('/api/admins/accounts/A-0001/status', json={'accountStatus': 'Active'})
    assert r.status_code == 200
    assert admin_client.get('/api/auth/current-user').status_code == 200


def test_deleted_account_session_is_closed(admin_client, professor, app):
    other = app.test_client()
    r = other.post('/api/auth/login', json={'id': 'P-1024', 'password': PROFESSOR_PASSWORD})
    assert r.status_code == 200

    assert admin_client.delete('/api/admins/accounts/P-1024').status_code == 200

    assert other.get('/api/auth/current-user').status_code == 401
    assert not any(
        session.identity.id == 'P-1024' for session in app.extensions['account_sessions'].values()
    )
