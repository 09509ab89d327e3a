# linkedin_logon/oauth/__init__.py
# LinkedIn OAuth2 redirect handling

# Models and configuration
from .models import (
    LinkedInConfig,
    StoredState,
    AccessTokenResult,
    PersonProps,
    AuthValidated,
    RedirectOutcome,
)

# Error taxonomy of the redirect flow
from .errors import (
    LogonErrorKind,
    LinkedInLogonError,
    MissingSecretError,
    WrongSecretError,
    AccessTokenError,
    ServiceUserDataError,
    NoEmailError,
    MalformedProfileError,
)

# Outbound calls to LinkedIn
from .http_client import HttpResult, LinkedInHttpClient
from .token_exchange import build_redirect_uri, fetch_access_token
from .profile import fetch_user_data, fetch_email_address, fetch_profile_and_email

# State cookie and identity normalization
from .state import StateCookieManager, verify_state
from .normalize import auth_user, get_localized_value

__all__ = [
    "LinkedInConfig",
    "StoredState",
    "AccessTokenResult",
    "PersonProps",
    "AuthValidated",
    "RedirectOutcome",
    "LogonErrorKind",
    "LinkedInLogonError",
    "MissingSecretError",
    "WrongSecretError",
    "AccessTokenError",
    "ServiceUserDataError",
    "NoEmailError",
    "MalformedProfileError",
    "HttpResult",
    "LinkedInHttpClient",
    "build_redirect_uri",
    "fetch_access_token",
    "fetch_user_data",
    "fetch_email_address",
    "fetch_profile_and_email",
    "StateCookieManager",
    "verify_state",
    "auth_user",
    "get_localized_value",
]
