"""
HTTP client for the SudharNayak API.

Usage:
```python
session = UserSession.load('session.json')
with SudharNayakClient(session) as api:
    api.login('asha@example.com', 'secret1')
    api.create_issue('Pothole on 5th', 'Deep pothole near the bus stop', category='Road')
    session.save('session.json')
```
"""

from typing import Any, Optional
from app.config import API_URL, CLIENT_TIMEOUT
from .session import UserSession
import httpx
import logging

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """One short human readable message, plus the HTTP status when the server answered."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self):
        return self.message


class SudharNayakClient:

    def __init__(
        self,
        session: Optional[UserSession] = None,
        base_url: str = API_URL,
        timeout: float = CLIENT_TIMEOUT,
        http_client: Optional[httpx.Client] = None
    ):
        self.session = session if session is not None else UserSession()
        self.base_url = base_url.rstrip('/')
        self.http = http_client or httpx.Client(timeout=timeout)

        hooks = dict(self.http.event_hooks)
        hooks['request'] = [*hooks.get('request', []), self._attach_token]
        self.http.event_hooks = hooks

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self.http.close()

    def _attach_token(self, request: httpx.Request) -> None:
        if self.session.is_authenticated:
            request.headers['Authorization'] = f'Bearer {self.session.token}'

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get('message'):
            return str(body['message'])
        return response.text or response.reason_phrase or f'Request failed with status {response.status_code}'

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self.http.request(method, f'{self.base_url}{path}', **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f'{method} {path} failed: {e}')
            raise ApiError(str(e) or 'Network error') from e

        if response.is_error:
            raise ApiError(self._error_message(response), response.status_code)

        if not response.content:
            return None
        return response.json()

    # AUTH
    def register(self, name: str, email: str, password: str) -> dict:
        user = self._request('POST', '/auth/register', json={'name': name, 'email': email, 'password': password})
        self.session.update(user)
        return user

    def login(self, email: str, password: str) -> dict:
        user = self._request('POST', '/auth/login', json={'email': email, 'password': password})
        self.session.update(user)
        return user

    def logout(self) -> None:
        self.session.clear()

    def me(self) -> dict:
        return self._request('GET', '/auth/me')

    # ISSUES
    def list_issues(self, category: Optional[str] = None, status: Optional[str] = None) -> list[dict]:
        params = {key: value for key, value in (('category', category), ('status', status)) if value}
        return self._request('GET', '/issues', params=params)

    def get_issue(self, issue_id: int) -> dict:
        return self._request('GET', f'/issues/{issue_id}')

    def my_issues(self) -> list[dict]:
        return self._request('GET', '/issues/my-issues')

    def create_issue(
        self,
        title: str,
        description: str,
        category: Optional[str] = None,
        image_url: Optional[str] = None,
        location: Optional[dict] = None
    ) -> dict:
        body = {'title': title, 'description': description}
        if category:
            body['category'] = category
        if image_url:
            body['imageUrl'] = image_url
        if location:
            body['location'] = location
        return self._request('POST', '/issues', json=body)

    def update_issue_status(self, issue_id: int, status: Optional[str]) -> dict:
        return self._request('PUT', f'/issues/{issue_id}', json={'status': status})

    def delete_issue(self, issue_id: int) -> dict:
        return self._request('DELETE', f'/issues/{issue_id}')

    # COMMENTS
    def list_comments(self, issue_id: int) -> list[dict]:
        return self._request('GET', f'/comments/{issue_id}')

    def add_comment(self, issue_id: int, text: str) -> dict:
        return self._request('POST', f'/comments/{issue_id}', json={'text': text})

    # MEDIA
    def upload_image(self, data_uri: str) -> str:
        return self._request('POST', '/upload', json={'image': data_uri})['url']

    def reverse_geocode(self, lat: float, lng: float) -> dict:
        return self._request('GET', '/geocode/reverse', params={'lat': lat, 'lng': lng})
