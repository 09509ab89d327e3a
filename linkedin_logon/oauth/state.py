# linkedin_logon/oauth/state.py
import logging
import secrets
from typing import Dict, Optional

from fastapi import Request, Response
from pydantic import ValidationError as PydanticValidationError

from .errors import MissingSecretError, WrongSecretError
from .models import StoredState
from ..utils import FernetEncryptor

logger = logging.getLogger(__name__)


class StateCookieManager:
    """
    Keeps the anti-CSRF state of a logon in an encrypted, short-lived cookie.

    The cookie is written when the logon starts and must be read only once:
    the redirect endpoint clears it on every response, whatever the outcome.
    """

    def __init__(
        self,
        encryptor: FernetEncryptor,
        cookie_name: str,
        max_age_seconds: int,
        secure: bool = True
    ):
        self.encryptor = encryptor
        self.cookie_name = cookie_name
        self.max_age_seconds = max_age_seconds
        self.secure = secure

    def store(self, response: Response, stored: StoredState) -> None:
        """Write the state to the response cookie."""
        response.set_cookie(
            key=self.cookie_name,
            value=self.encryptor.encrypt(stored.model_dump_json()),
            max_age=self.max_age_seconds,
            httponly=True,
            secure=self.secure,
            # LinkedIn redirects back with a top level GET, so Lax cookies are sent
            samesite="lax",
        )

    def read(self, request: Request) -> Optional[StoredState]:
        """The stored state, or None if the cookie is absent, expired or tampered with."""
        raw_cookie = request.cookies.get(self.cookie_name)
        if not raw_cookie:
            return None

        decrypted = self.encryptor.decrypt(raw_cookie, ttl=self.max_age_seconds)
        if decrypted is None:
            return None

        try:
            return StoredState.model_validate_json(decrypted)
        except PydanticValidationError as e:
            logger.warning(f"State cookie content is not a valid state: {e.errors()}")
            return None

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            key=self.cookie_name,
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )


def verify_state(stored: Optional[StoredState], query_state: Optional[str]) -> Dict[str, str]:
    """
    Check the state echoed by LinkedIn against the stored state.

    Returns:
        The arguments stored when the logon was started

    Raises:
        MissingSecretError: no usable stored state
        WrongSecretError: the states differ
    """
    if stored is None:
        logger.warning("LinkedIn OAuth redirect with missing or illegal state cookie")
        raise MissingSecretError("Missing or illegal state cookie.")

    if not query_state or not secrets.compare_digest(stored.state.encode(), query_state.encode()):
        logger.warning(
            f"LinkedIn OAuth redirect with state mismatch, expected {stored.state!r}, got {query_state!r}"
        )
        raise WrongSecretError(expected=stored.state, received=query_state)

    return stored.args
