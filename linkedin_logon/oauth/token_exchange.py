# linkedin_logon/oauth/token_exchange.py
import logging
from typing import Optional
from urllib.parse import urlencode

from .errors import AccessTokenError
from .http_client import LinkedInHttpClient
from .models import AccessTokenResult, LinkedInConfig

logger = logging.getLogger(__name__)


def build_redirect_uri(base_redirect_url: str, pk: Optional[str]) -> str:
    """
    The redirect_uri registered with LinkedIn, with the 'pk' passthrough.

    Must give the same result when the logon is started and when the code is
    exchanged, LinkedIn rejects the exchange otherwise.
    """
    if not pk:
        return base_redirect_url
    return f"{base_redirect_url}?{urlencode({'pk': pk})}"


async def fetch_access_token(
    http_client: LinkedInHttpClient,
    config: LinkedInConfig,
    code: str,
    redirect_uri: str
) -> AccessTokenResult:
    """
    Exchange an authorization code for an access token.

    Raises:
        AccessTokenError: on any non-200 answer, transport failure or malformed body
    """
    result = await http_client.post_form(
        config.token_url,
        data={
            "grant_type": "authorization_code",
            "client_id": config.app_id,
            "redirect_uri": redirect_uri,
            "client_secret": config.app_secret,
            "code": code,
        },
    )

    if not result.is_ok:
        logger.error(f"[linkedin] error fetching access token [code {code!r}] {result.describe()}")
        raise AccessTokenError(
            "Access token request failed.",
            url=config.token_url,
            status_code=result.status_code,
            response_text=result.text,
        )

    payload = result.json_body()
    access_token = payload.get("access_token") if isinstance(payload, dict) else None
    expires_in = payload.get("expires_in") if isinstance(payload, dict) else None

    if not isinstance(access_token, str) or not access_token:
        logger.error(f"[linkedin] no access_token in response [code {code!r}] {result.describe()}")
        raise AccessTokenError(
            "Access token response without access_token.",
            url=config.token_url,
            status_code=result.status_code,
            response_text=result.text,
        )

    try:
        expires_in_seconds = int(expires_in)
    except (TypeError, ValueError):
        logger.error(f"[linkedin] invalid expires_in {expires_in!r} [code {code!r}]")
        raise AccessTokenError(
            "Access token response with invalid expires_in.",
            url=config.token_url,
            status_code=result.status_code,
            response_text=result.text,
        )

    return AccessTokenResult(access_token=access_token, expires_in=expires_in_seconds)
