from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from app.client import SudharNayakClient, UserSession, ApiError
from app.domain.user.models import User
from app.main import app
from ..utils import DEFAULT_PASSWORD
import httpx
import pytest

BASE_URL = 'http://api.test/api'

def mocked_client(handler, session: UserSession = None) -> SudharNayakClient:
    return SudharNayakClient(session, base_url=BASE_URL, http_client=httpx.Client(transport=httpx.MockTransport(handler)))

def asgi_client(session: UserSession = None) -> SudharNayakClient:
    # every client gets its own transport so tokens never leak between users
    return SudharNayakClient(session, base_url='http://testserver/api', http_client=TestClient(app))

#
#
# MOCKED TRANSPORT
#
#
def test_token_attached_to_every_request():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get('Authorization'))
        return httpx.Response(200, json=[])

    api = mocked_client(handler, UserSession(token='jwt-token'))
    api.list_issues()
    api.list_comments(1)

    assert seen == ['Bearer jwt-token', 'Bearer jwt-token']

def test_no_token_without_session():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get('Authorization'))
        return httpx.Response(200, json=[])

    mocked_client(handler).list_issues()

    assert seen == [None]

def test_login_fills_session_and_logout_clears_it():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == '/api/auth/login'
        return httpx.Response(200, json={'id': 7, 'name': 'Asha', 'email': 'asha@example.com', 'role': 'citizen', 'token': 'jwt'})

    session = UserSession()
    api = mocked_client(handler, session)

    api.login('asha@example.com', 'secret1')

    assert session.token == 'jwt'
    assert session.id == 7

    api.logout()

    assert not session.is_authenticated

def test_list_issues_skips_empty_filters():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(dict(request.url.params))
        return httpx.Response(200, json=[])

    api = mocked_client(handler)
    api.list_issues(category='Road', status='')
    api.list_issues(status='In Progress')

    assert seen == [{'category': 'Road'}, {'status': 'In Progress'}]

def test_error_response_raises_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={'message': 'Issue not found'})

    with pytest.raises(ApiError) as e:
        mocked_client(handler).get_issue(99)

    assert e.value.status_code == 404
    assert str(e.value) == 'Issue not found'

def test_error_without_json_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text='Service Unavailable')

    with pytest.raises(ApiError) as e:
        mocked_client(handler).list_issues()

    assert e.value.status_code == 503
    assert e.value.message == 'Service Unavailable'

def test_transport_error_raises_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError('connection refused', request=request)

    with pytest.raises(ApiError) as e:
        mocked_client(handler).list_issues()

    assert e.value.status_code is None

def test_upload_image_returns_url():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, json={'url': 'https://res.cloudinary.com/demo/image/upload/abc'})

    assert mocked_client(handler).upload_image('data:image/png;base64,AAAA') == 'https://res.cloudinary.com/demo/image/upload/abc'

#
#
# AGAINST THE APPLICATION
#
#
def test_full_flow(client: TestClient, session: Session, create_admin: User):
    citizen = asgi_client()
    citizen.register('Asha', 'asha@example.com', 'secret1')
    issue = citizen.create_issue(
        'Garbage not collected',
        'Bins overflowing near the park',
        category='Garbage',
        location={'address': 'Park Street', 'lat': 22.55, 'lng': 88.35}
    )
    citizen.add_comment(issue['id'], 'Still not cleared')

    assert [item['id'] for item in citizen.my_issues()] == [issue['id']]
    assert citizen.me()['email'] == 'asha@example.com'

    neighbour = asgi_client()
    neighbour.register('Bharat', 'bharat@example.com', 'secret2')

    with pytest.raises(ApiError) as e:
        neighbour.update_issue_status(issue['id'], 'Resolved')
    assert e.value.status_code == 403
    assert neighbour.my_issues() == []

    admin = asgi_client()
    admin.login(create_admin.email, DEFAULT_PASSWORD)
    assert admin.session.is_admin

    assert admin.update_issue_status(issue['id'], 'Resolved')['status'] == 'Resolved'
    assert issue['id'] in [item['id'] for item in admin.list_issues(status='Resolved')]
    assert [comment['text'] for comment in admin.list_comments(issue['id'])] == ['Still not cleared']

    assert admin.delete_issue(issue['id']) == {'message': 'Issue removed'}
    with pytest.raises(ApiError) as e:
        citizen.get_issue(issue['id'])
    assert e.value.status_code == 404
