# tests/test_render.py
from fastapi.templating import Jinja2Templates
from starlette.requests import Request

from linkedin_logon.main import TEMPLATES_DIR
from linkedin_logon.oauth.models import AuthValidated, PersonProps, RedirectOutcome
from linkedin_logon.oauth.render import LogonRenderer, is_safari8problem, open_identity, seal_identity
from linkedin_logon.utils import FernetEncryptor, generate_fernet_key

SAFARI8_UA = b"Mozilla/5.0 (Macintosh) AppleWebKit/600.1.25 (KHTML, like Gecko) Version/8.0.1 Safari/600.1.25"
SAFARI9_UA = b"Mozilla/5.0 (Macintosh) AppleWebKit/601.1.56 (KHTML, like Gecko) Version/9.0 Safari/601.1.56"


def make_request(*headers) -> Request:
    return Request({"type": "http", "method": "GET", "path": "/", "headers": list(headers)})


def test_safari8_without_cookies():
    assert is_safari8problem(make_request((b"user-agent", SAFARI8_UA)))


def test_safari8_with_cookies():
    assert not is_safari8problem(make_request((b"user-agent", SAFARI8_UA), (b"cookie", b"a=b")))


def test_other_browsers():
    assert not is_safari8problem(make_request((b"user-agent", SAFARI9_UA)))
    assert not is_safari8problem(make_request())


def test_sealed_identity_opens_unchanged():
    encryptor = FernetEncryptor(generate_fernet_key())
    identity = AuthValidated(
        service_uid="U1",
        service_props={"access_token": "T", "expires": 3600},
        props=PersonProps(title="Jane Doe", name_first="Jane", name_surname="Doe", email="piet@example.com"),
        is_connect=True,
    )

    assert open_identity(encryptor, seal_identity(encryptor, identity)) == identity


def test_sealed_identity_needs_the_same_key():
    identity = AuthValidated(service_uid="U1", props=PersonProps(title="Jane ", email="piet@example.com"))
    token = seal_identity(FernetEncryptor(generate_fernet_key()), identity)

    assert open_identity(FernetEncryptor(generate_fernet_key()), token) is None


def make_renderer(secure_cookies: bool) -> LogonRenderer:
    return LogonRenderer(
        Jinja2Templates(directory=str(TEMPLATES_DIR)),
        FernetEncryptor(generate_fernet_key()),
        signup_confirm_url="/signup/confirm",
        secure_cookies=secure_cookies,
    )


def session_cookie_header(secure_cookies: bool) -> str:
    outcome = RedirectOutcome(session={"user_name": "Jane Doe"}, cookies={"session_id": "s1"})
    response = make_renderer(secure_cookies).render(make_request(), outcome)
    return response.headers["set-cookie"]


def test_session_cookies_follow_secure_flag():
    assert "secure" in session_cookie_header(True).lower()
    assert "secure" not in session_cookie_header(False).lower()
