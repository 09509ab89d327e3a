# tests/conftest.py
import json
from typing import Any, Dict, List, Tuple, Union

import httpx
import pytest
import pytest_asyncio

from linkedin_logon.oauth.http_client import LinkedInHttpClient
from linkedin_logon.oauth.models import LinkedInConfig

TOKEN_PATH = "/uas/oauth2/accessToken"
PROFILE_PATH = "/v2/me"
EMAIL_PATH = "/v2/emailAddress"

SAMPLE_PROFILE = {
    "id": "U1",
    "firstName": {"localized": {"en_US": "Jane"}},
    "lastName": {"localized": {"fr_FR": "Doe"}},
}
SAMPLE_EMAIL_PAYLOAD = {
    "elements": [
        {
            "handle": "urn:li:emailAddress:109707987",
            "handle~": {"emailAddress": "piet@example.com"},
        }
    ]
}

FakeAnswer = Union[Tuple[int, Any], Exception]


class FakeLinkedIn:
    """
    Stand-in for the LinkedIn API behind an httpx.MockTransport.

    Answers are (status, body) tuples per path, or an exception to raise
    as transport failure. Every request is recorded.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.answers: Dict[str, FakeAnswer] = {
            TOKEN_PATH: (200, {"access_token": "T", "expires_in": 3600}),
            PROFILE_PATH: (200, SAMPLE_PROFILE),
            EMAIL_PATH: (200, SAMPLE_EMAIL_PAYLOAD),
        }

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        answer = self.answers.get(request.url.path, (404, {"message": "Not found"}))
        if isinstance(answer, Exception):
            raise answer
        status_code, body = answer
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, content=json.dumps(body).encode(),
                              headers={"content-type": "application/json"})

    def calls_to(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path == path)

    def last_request_to(self, path: str) -> httpx.Request:
        return [r for r in self.requests if r.url.path == path][-1]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def linkedin_config() -> LinkedInConfig:
    return LinkedInConfig(app_id="test-app-id", app_secret="test-app-secret")


@pytest.fixture
def fake_linkedin() -> FakeLinkedIn:
    return FakeLinkedIn()


@pytest_asyncio.fixture
async def http_client(linkedin_config, fake_linkedin):
    async with LinkedInHttpClient(linkedin_config, transport=fake_linkedin.transport) as client:
        yield client
