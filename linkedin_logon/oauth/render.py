# linkedin_logon/oauth/render.py
import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError as PydanticValidationError

from .errors import LogonErrorKind
from .models import AuthValidated, RedirectOutcome, SERVICE_TITLE
from ..utils import FernetEncryptor

logger = logging.getLogger(__name__)

DONE_TEMPLATE = "logon_service_done.html"
ERROR_TEMPLATE = "logon_service_error.html"

# The popup is closed for these, the opener shows the result
CLOSE_WINDOW_ERRORS = {LogonErrorKind.CANCEL, LogonErrorKind.WRONG_SECRET}


def is_safari8problem(request: Request) -> bool:
    """
    Safari 8.0.x in its default setting does not pass any cookies after the
    redirect from LinkedIn, so the state cookie is missing.
    See https://github.com/drone/drone/issues/663#issuecomment-61565820
    """
    has_cookies = "cookie" in request.headers
    user_agent = request.headers.get("user-agent", "")
    is_version8 = "Version/8.0." in user_agent
    is_safari = "Safari/6" in user_agent
    return not has_cookies and is_version8 and is_safari


def seal_identity(encryptor: FernetEncryptor, identity: AuthValidated) -> str:
    """Encrypt a pending identity for the signup confirmation form."""
    return encryptor.encrypt(identity.model_dump_json())


def open_identity(encryptor: FernetEncryptor, token: str, ttl: Optional[int] = None) -> Optional[AuthValidated]:
    """The identity sealed by seal_identity, or None if invalid or expired."""
    decrypted = encryptor.decrypt(token, ttl=ttl)
    if decrypted is None:
        return None
    try:
        return AuthValidated.model_validate_json(decrypted)
    except PydanticValidationError as e:
        logger.warning(f"Sealed identity is not a valid identity: {e.errors()}")
        return None


class LogonRenderer:
    """Renders the success and error pages of the LinkedIn logon popup."""

    def __init__(
        self,
        templates: Jinja2Templates,
        encryptor: FernetEncryptor,
        signup_confirm_url: str,
        service: str = SERVICE_TITLE,
        secure_cookies: bool = True
    ):
        self.templates = templates
        self.encryptor = encryptor
        self.signup_confirm_url = signup_confirm_url
        self.service = service
        self.secure_cookies = secure_cookies

    def render(self, request: Request, outcome: RedirectOutcome) -> HTMLResponse:
        if outcome.is_ok:
            return self.html_ok(request, outcome)
        return self.html_error(request, outcome.error, outcome.what)

    def html_ok(self, request: Request, outcome: RedirectOutcome) -> HTMLResponse:
        context: Dict[str, Any] = dict(outcome.session)
        context["service"] = self.service
        response = self.templates.TemplateResponse(request, DONE_TEMPLATE, context)
        for name, value in outcome.cookies.items():
            response.set_cookie(key=name, value=value, httponly=True, secure=self.secure_cookies, samesite="lax")
        return response

    def html_error(
        self,
        request: Request,
        error: LogonErrorKind,
        what: Optional[Any] = None
    ) -> HTMLResponse:
        context: Dict[str, Any] = {
            "service": self.service,
            "is_safari8problem": is_safari8problem(request),
            "what": what,
            "error": error.value,
            "close_window": error in CLOSE_WINDOW_ERRORS,
        }
        if error == LogonErrorKind.SIGNUP_CONFIRM and isinstance(what, dict) and "auth" in what:
            identity: AuthValidated = what["auth"]
            context["pending_identity"] = seal_identity(self.encryptor, identity)
            context["signup_confirm_url"] = self.signup_confirm_url
            context["what"] = {"auth": identity.props}
        return self.templates.TemplateResponse(request, ERROR_TEMPLATE, context)
