# linkedin_logon/auth/__init__.py
# Auth dispatch: hands validated LinkedIn identities to host supplied handlers

from .models import AuthOutcome, AuthOutcomeKind
from .handlers import AbstractAuthHandler
from .dispatch import AuthDispatcher, interpret_outcome

__all__ = [
    "AuthOutcome",
    "AuthOutcomeKind",
    "AbstractAuthHandler",
    "AuthDispatcher",
    "interpret_outcome",
]
