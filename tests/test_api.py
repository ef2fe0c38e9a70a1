import pytest
from fastapi.testclient import TestClient

from course_portal.database import get_db
from course_portal.main import app
from course_portal.models.course_class import CourseClass
from course_portal.models.user import User

REGISTER_BODY = {
    'firstName': 'Ada',
    'lastName': 'Lovelace',
    'email': 'ada@example.com',
    'password': 'secret123',
}


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_root_reports_status(client: TestClient) -> None:
    response = client.get('/')

    assert response.status_code == 200
    assert response.json() == {'status': 'Course Portal API Running'}


def test_register_login_and_account_flow(client: TestClient) -> None:
    registered = client.post('/api/auth/register', json=REGISTER_BODY)
    assert registered.status_code == 200
    body = registered.json()
    assert body['success'] is True
    assert set(body) == {'success', 'user', 'accessToken'}
    assert set(body['user']) == {
        '_id', 'firstName', 'lastName', 'isAdmin', 'isInstructor', 'email',
        'emailVerified', 'avatar', 'address', 'phoneNumber', 'region',
    }

    logged_in = client.post('/api/auth/login', json={'email': 'ada@example.com', 'password': 'secret123'})
    assert logged_in.status_code == 200
    token = logged_in.json()['accessToken']

    account = client.get('/api/users/my-account', headers={'Authorization': f'Bearer {token}'})
    assert account.status_code == 200
    assert account.json()['user'] == {
        '_id': body['user']['_id'],
        'firstName': 'Ada',
        'lastName': 'Lovelace',
        'isAdmin': False,
        'isInstructor': False,
        'email': 'ada@example.com',
        'emailVerified': False,
    }


def test_duplicate_register_uses_error_envelope(client: TestClient) -> None:
    assert client.post('/api/auth/register', json=REGISTER_BODY).status_code == 200

    response = client.post('/api/auth/register', json=REGISTER_BODY)

    assert response.status_code == 409
    assert response.json() == {
        'success': False,
        'errors': [{'email': 'ada@example.com', 'msg': 'The user already exist'}],
    }


def test_register_validation_errors_are_reported_per_field(client: TestClient) -> None:
    response = client.post(
        '/api/auth/register',
        json={'firstName': 'Ada', 'email': 'not-an-email', 'password': '123'},
    )

    assert response.status_code == 400
    body = response.json()
    assert body['success'] is False
    assert {error['path'] for error in body['errors']} == {'lastName', 'email', 'password'}
    assert all(error['location'] == 'body' for error in body['errors'])


def test_login_with_wrong_password_is_unauthorized(client: TestClient) -> None:
    client.post('/api/auth/register', json=REGISTER_BODY)

    response = client.post('/api/auth/login', json={'email': 'ada@example.com', 'password': 'wrong-one'})

    assert response.status_code == 401
    assert response.json() == {'success': False, 'errors': [{'msg': 'Email or password is invalid.'}]}


def test_my_account_requires_token(client: TestClient) -> None:
    response = client.get('/api/users/my-account')

    assert response.status_code == 401
    assert response.json() == {'success': False, 'errors': [{'msg': 'Access token not found'}]}


def test_roster_lookup(client: TestClient, db_session) -> None:
    student = User(first_name='Alan', last_name='Turing', email='alan@example.com', password='hash')
    db_session.add(CourseClass(course='cs101', students=[student]))
    db_session.commit()

    response = client.get('/api/classes/cs101')
    empty = client.get('/api/classes/missing')

    assert response.status_code == 200
    assert [entry['email'] for entry in response.json()['students']] == ['alan@example.com']
    assert 'password' not in response.json()['students'][0]
    assert empty.status_code == 200
    assert empty.json() == {'success': True, 'students': []}


def test_unexpected_errors_return_generic_message(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_hash(_password: str) -> str:
        raise RuntimeError('bcrypt backend missing at /usr/lib/libcrypt.so')

    monkeypatch.setattr('course_portal.routes.auth_routes.hash_password', broken_hash)
    failing_client = TestClient(app, raise_server_exceptions=False)

    response = failing_client.post('/api/auth/register', json=REGISTER_BODY)

    assert response.status_code == 500
    assert response.json() == {'success': False, 'errors': [{'msg': 'Internal server error'}]}
    assert 'libcrypt' not in response.text
