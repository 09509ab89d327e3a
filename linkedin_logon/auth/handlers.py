# linkedin_logon/auth/handlers.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..oauth.models import AuthValidated
from .models import AuthOutcome


class AbstractAuthHandler(ABC):
    """
    Host supplied decision point for a validated LinkedIn identity.

    The host decides about linking, creating or refusing accounts. A handler
    that does not deal with the identity returns None so the next handler is
    asked.
    """

    @abstractmethod
    async def decide(self, identity: AuthValidated) -> Optional[AuthOutcome]:
        """Return an outcome, or None to pass the identity to the next handler."""
        pass
