# linkedin_logon/auth/models.py
from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class AuthOutcomeKind(str, Enum):
    OK = "ok"
    DUPLICATE = "duplicate"
    DUPLICATE_EMAIL = "duplicate_email"
    SIGNUP_CONFIRM = "signup_confirm"
    ERROR = "error"


class AuthOutcome(BaseModel):
    """
    Answer of an auth handler to a validated LinkedIn identity.

    Use the constructors below instead of setting the fields by hand.
    """
    kind: AuthOutcomeKind
    session: Dict[str, Any] = Field(
        default_factory=dict,
        description="Template variables of the logged on session, only for 'ok'."
    )
    cookies: Dict[str, str] = Field(
        default_factory=dict,
        description="Cookies to set on the success page, e.g. the session cookie."
    )
    email: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, session: Optional[Dict[str, Any]] = None, cookies: Optional[Dict[str, str]] = None) -> "AuthOutcome":
        return cls(kind=AuthOutcomeKind.OK, session=session or {}, cookies=cookies or {})

    @classmethod
    def duplicate(cls) -> "AuthOutcome":
        return cls(kind=AuthOutcomeKind.DUPLICATE)

    @classmethod
    def duplicate_email(cls, email: str) -> "AuthOutcome":
        return cls(kind=AuthOutcomeKind.DUPLICATE_EMAIL, email=email)

    @classmethod
    def signup_confirm(cls) -> "AuthOutcome":
        return cls(kind=AuthOutcomeKind.SIGNUP_CONFIRM)

    @classmethod
    def error(cls, reason: str) -> "AuthOutcome":
        return cls(kind=AuthOutcomeKind.ERROR, reason=reason)
