# linkedin_logon/oauth/redirect.py
import logging
from typing import Optional

from .errors import LinkedInLogonError, LogonErrorKind
from .http_client import LinkedInHttpClient
from .models import LinkedInConfig, RedirectOutcome, StoredState
from .normalize import auth_user
from .profile import fetch_profile_and_email
from .state import verify_state
from .token_exchange import build_redirect_uri, fetch_access_token
from ..auth.dispatch import AuthDispatcher

logger = logging.getLogger(__name__)


class LinkedInRedirectFlow:
    """
    Completes a LinkedIn logon after the redirect back from LinkedIn.

    State check, code exchange, profile and email fetch, normalization and
    auth dispatch. Every failure ends as a RedirectOutcome with an error kind,
    nothing is retried.
    """

    def __init__(
        self,
        config: LinkedInConfig,
        http_client: LinkedInHttpClient,
        dispatcher: AuthDispatcher
    ):
        self.config = config
        self.http_client = http_client
        self.dispatcher = dispatcher

    async def process(
        self,
        stored_state: Optional[StoredState],
        query_state: Optional[str],
        code: Optional[str],
        pk: Optional[str],
        base_redirect_url: str
    ) -> RedirectOutcome:
        try:
            args = verify_state(stored_state, query_state)

            if not code:
                # The user declined at LinkedIn, no code is handed out then
                logger.info("[linkedin] Logon cancelled by user, no code in redirect")
                return RedirectOutcome.failed(LogonErrorKind.CANCEL)

            redirect_uri = build_redirect_uri(base_redirect_url, pk)
            token = await fetch_access_token(self.http_client, self.config, code, redirect_uri)
            profile, email = await fetch_profile_and_email(self.http_client, self.config, token.access_token)
            identity = auth_user(profile, email, token, args)
        except LinkedInLogonError as e:
            return RedirectOutcome.failed(e.kind)

        return await self.dispatcher.dispatch(identity)
