# linkedin_logon/auth/dispatch.py
import logging
from typing import List, Optional, Sequence

from ..oauth.errors import LogonErrorKind
from ..oauth.models import AuthValidated, RedirectOutcome
from .handlers import AbstractAuthHandler
from .models import AuthOutcome, AuthOutcomeKind

logger = logging.getLogger(__name__)


class AuthDispatcher:
    """Offers an identity to an ordered list of handlers, the first answer wins."""

    def __init__(self, handlers: Optional[Sequence[AbstractAuthHandler]] = None):
        self.handlers: List[AbstractAuthHandler] = list(handlers or [])

    def register(self, handler: AbstractAuthHandler) -> None:
        self.handlers.append(handler)

    async def first(self, identity: AuthValidated) -> Optional[AuthOutcome]:
        """The first non-None answer of the handlers, None if nobody answered."""
        for handler in self.handlers:
            try:
                outcome = await handler.decide(identity)
            except Exception as e:
                logger.error(
                    f"[linkedin] Auth handler {type(handler).__name__} failed: {e}",
                    exc_info=True
                )
                return AuthOutcome.error(f"{type(handler).__name__} raised {type(e).__name__}")
            if outcome is None:
                continue
            if not isinstance(outcome, AuthOutcome):
                logger.error(
                    f"[linkedin] Auth handler {type(handler).__name__} returned "
                    f"{type(outcome).__name__} instead of an AuthOutcome"
                )
                return AuthOutcome.error(f"{type(handler).__name__} returned {type(outcome).__name__}")
            return outcome
        return None

    async def dispatch(self, identity: AuthValidated) -> RedirectOutcome:
        outcome = await self.first(identity)
        return interpret_outcome(outcome, identity)


def _loggable(identity: AuthValidated) -> dict:
    values = identity.model_dump()
    if values["service_props"].get("access_token"):
        values["service_props"]["access_token"] = "********"
    return values


def interpret_outcome(outcome: Optional[AuthOutcome], identity: AuthValidated) -> RedirectOutcome:
    """Translate the answer of the auth handlers into what the user will see."""
    if outcome is None:
        # No handler for signups, or signup not accepted
        logger.warning(f"[linkedin] Undefined auth_user return for user with props {_loggable(identity)}")
        return RedirectOutcome.failed(LogonErrorKind.AUTH_USER_UNDEFINED)

    if outcome.kind == AuthOutcomeKind.OK:
        return RedirectOutcome(session=outcome.session, cookies=outcome.cookies)

    if outcome.kind == AuthOutcomeKind.DUPLICATE:
        logger.info(f"[linkedin] Duplicate connection for user with props {_loggable(identity)}")
        return RedirectOutcome.failed(LogonErrorKind.DUPLICATE)

    if outcome.kind == AuthOutcomeKind.DUPLICATE_EMAIL:
        logger.info(f"[linkedin] User with email {outcome.email!r} already exists")
        return RedirectOutcome.failed(LogonErrorKind.DUPLICATE_EMAIL, what=outcome.email)

    if outcome.kind == AuthOutcomeKind.SIGNUP_CONFIRM:
        # The user has to confirm before a new account is added
        return RedirectOutcome.failed(LogonErrorKind.SIGNUP_CONFIRM, what={"auth": identity})

    logger.warning(
        f"[linkedin] Error return {outcome.reason!r} for user with props {_loggable(identity)}"
    )
    return RedirectOutcome.failed(LogonErrorKind.AUTH_USER_ERROR)
