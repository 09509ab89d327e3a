# tests/test_state.py
import pytest
from starlette.requests import Request
from starlette.responses import Response

from linkedin_logon.oauth.errors import LogonErrorKind, MissingSecretError, WrongSecretError
from linkedin_logon.oauth.models import StoredState
from linkedin_logon.oauth.state import StateCookieManager, verify_state
from linkedin_logon.utils import FernetEncryptor, generate_fernet_key

COOKIE_NAME = "linkedin_logon_state"


@pytest.fixture
def encryptor() -> FernetEncryptor:
    return FernetEncryptor(generate_fernet_key())


@pytest.fixture
def state_manager(encryptor) -> StateCookieManager:
    return StateCookieManager(encryptor, cookie_name=COOKIE_NAME, max_age_seconds=600)


def request_with_cookie(value: str) -> Request:
    return Request({
        "type": "http",
        "method": "GET",
        "path": "/linkedin/redirect",
        "headers": [(b"cookie", f"{COOKIE_NAME}={value}".encode())],
    })


def cookie_value_of(response: Response) -> str:
    header = response.headers["set-cookie"]
    return header.split(";", 1)[0].split("=", 1)[1]


class TestVerifyState:
    def test_missing_state(self):
        with pytest.raises(MissingSecretError) as exc_info:
            verify_state(None, "abc")
        assert exc_info.value.kind == LogonErrorKind.MISSING_SECRET

    @pytest.mark.parametrize("query_state", ["other", "", None])
    def test_mismatch(self, query_state):
        with pytest.raises(WrongSecretError) as exc_info:
            verify_state(StoredState(state="abc"), query_state)
        assert exc_info.value.kind == LogonErrorKind.WRONG_SECRET
        assert exc_info.value.expected == "abc"

    def test_match_returns_args(self):
        stored = StoredState(state="abc", args={"is_connect": "1"})

        assert verify_state(stored, "abc") == {"is_connect": "1"}


class TestStateCookieManager:
    def test_stored_state_reads_back(self, state_manager):
        response = Response()
        stored = StoredState(args={"is_connect": "1"})
        state_manager.store(response, stored)

        read_back = state_manager.read(request_with_cookie(cookie_value_of(response)))

        assert read_back == stored

    def test_cookie_is_encrypted_and_http_only(self, state_manager):
        response = Response()
        stored = StoredState()
        state_manager.store(response, stored)

        header = response.headers["set-cookie"]
        assert stored.state not in header
        assert "HttpOnly" in header
        assert "Max-Age=600" in header

    def test_absent_cookie(self, state_manager):
        request = Request({"type": "http", "method": "GET", "path": "/", "headers": []})

        assert state_manager.read(request) is None

    def test_tampered_cookie(self, state_manager):
        assert state_manager.read(request_with_cookie("gAAAAABtampered")) is None

    def test_cookie_of_other_key(self, state_manager):
        other = StateCookieManager(FernetEncryptor(generate_fernet_key()), COOKIE_NAME, 600)
        response = Response()
        other.store(response, StoredState())

        assert state_manager.read(request_with_cookie(cookie_value_of(response))) is None

    def test_encrypted_garbage_is_not_a_state(self, state_manager, encryptor):
        assert state_manager.read(request_with_cookie(encryptor.encrypt("not json"))) is None

    def test_clear_expires_cookie(self, state_manager):
        response = Response()
        state_manager.clear(response)

        header = response.headers["set-cookie"]
        assert header.startswith(f"{COOKIE_NAME}=")
        assert "Max-Age=0" in header


def test_invalid_key_is_refused():
    with pytest.raises(ValueError):
        FernetEncryptor("dG9vLXNob3J0")
