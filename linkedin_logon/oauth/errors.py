# linkedin_logon/oauth/errors.py
from enum import Enum
from typing import Any, Optional


class LogonErrorKind(str, Enum):
    """Error kinds shown on the logon error page, one per failure of the redirect flow."""

    CANCEL = "cancel"
    WRONG_SECRET = "wrong_secret"
    MISSING_SECRET = "missing_secret"
    ACCESS_TOKEN = "access_token"
    SERVICE_USER_DATA = "service_user_data"
    AUTH_USER_UNDEFINED = "auth_user_undefined"
    DUPLICATE = "duplicate"
    DUPLICATE_EMAIL = "duplicate_email"
    SIGNUP_CONFIRM = "signup_confirm"
    AUTH_USER_ERROR = "auth_user_error"


class LinkedInLogonError(Exception):
    """Base class for failures of the LinkedIn redirect flow."""

    kind: LogonErrorKind = LogonErrorKind.SERVICE_USER_DATA

    def __init__(self, message: str, what: Optional[Any] = None):
        self.message = message
        self.what = what
        super().__init__(message)


class MissingSecretError(LinkedInLogonError):
    """The state cookie is absent, expired or cannot be decrypted."""

    kind = LogonErrorKind.MISSING_SECRET


class WrongSecretError(LinkedInLogonError):
    """The state echoed by LinkedIn does not match the state cookie."""

    kind = LogonErrorKind.WRONG_SECRET

    def __init__(self, expected: str, received: Optional[str]):
        self.expected = expected
        self.received = received
        super().__init__(f"State mismatch, expected {expected!r}, got {received!r}")


class AccessTokenError(LinkedInLogonError):
    """
    The authorization code could not be exchanged for an access token.
    Codes are single use, so this is never retried.
    """

    kind = LogonErrorKind.ACCESS_TOKEN

    def __init__(
        self,
        message: str,
        url: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None
    ):
        self.url = url
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)


class ServiceUserDataError(LinkedInLogonError):
    """Fetching the profile or email address of the user failed."""

    kind = LogonErrorKind.SERVICE_USER_DATA

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None
    ):
        self.url = url
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)


class NoEmailError(ServiceUserDataError):
    """The email address response did not contain an address."""

    def __init__(self, message: str = "No email address in LinkedIn response."):
        super().__init__(message)


class MalformedProfileError(ServiceUserDataError):
    """The profile lacks the LinkedIn member id."""

    def __init__(self, message: str = "LinkedIn profile has no 'id'."):
        super().__init__(message)
