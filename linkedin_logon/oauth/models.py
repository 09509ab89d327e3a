# linkedin_logon/oauth/models.py
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
import secrets

from .errors import LogonErrorKind

SERVICE_NAME = "linkedin"
SERVICE_TITLE = "LinkedIn"


def default_state_generator() -> str:
    """Generate a cryptographically secure random state parameter for OAuth requests."""
    return secrets.token_urlsafe(32)


class LinkedInConfig(BaseModel):
    """
    Configuration of the LinkedIn application and endpoints.

    Passed explicitly to every component of the redirect flow instead of
    being read from process-wide settings.
    """
    app_id: str = Field(description="Client ID of the LinkedIn application.")
    app_secret: str = Field(description="Client secret of the LinkedIn application.")
    scope: str = Field(default="r_liteprofile r_emailaddress")
    authorize_url: str = Field(default="https://www.linkedin.com/oauth/v2/authorization")
    token_url: str = Field(default="https://www.linkedin.com/uas/oauth2/accessToken")
    profile_url: str = Field(default="https://api.linkedin.com/v2/me")
    email_url: str = Field(default="https://api.linkedin.com/v2/emailAddress")
    timeout_seconds: float = Field(default=10.0, gt=0)
    connect_timeout_seconds: float = Field(default=10.0, gt=0)
    public_base_url: Optional[str] = Field(
        default=None,
        description="Absolute base URL of this site, used instead of the request URL for redirect_uri."
    )


class StoredState(BaseModel):
    """Content of the state cookie set when the logon was started."""
    state: str = Field(default_factory=default_state_generator)
    args: Dict[str, str] = Field(
        default_factory=dict,
        description="Opaque arguments of the logon, e.g. 'is_connect'."
    )


class AccessTokenResult(BaseModel):
    """Outcome of a successful authorization code exchange."""
    access_token: str
    expires_in: int


class PersonProps(BaseModel):
    """Person properties offered to the host for the new or connected account."""
    title: str
    name_first: Optional[str] = None
    name_surname: Optional[str] = None
    summary: Optional[str] = None
    email: str


class AuthValidated(BaseModel):
    """
    Canonical identity of a LinkedIn member, handed to the auth handlers.

    The access token is only kept inside service_props.
    """
    service: str = SERVICE_NAME
    service_uid: str
    service_props: Dict[str, Any] = Field(default_factory=dict)
    props: PersonProps
    is_connect: bool = False


class RedirectOutcome(BaseModel):
    """Result of processing one redirect, consumed by the renderer."""
    error: Optional[LogonErrorKind] = None
    what: Optional[Any] = None
    session: Dict[str, Any] = Field(default_factory=dict)
    cookies: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: LogonErrorKind, what: Optional[Any] = None) -> "RedirectOutcome":
        return cls(error=error, what=what)
