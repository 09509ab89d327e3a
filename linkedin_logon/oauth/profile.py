# linkedin_logon/oauth/profile.py
import asyncio
import logging
from typing import Any, Dict, Tuple

from .errors import NoEmailError, ServiceUserDataError
from .http_client import HttpResult, LinkedInHttpClient
from .models import LinkedInConfig
from ..utils import mask_token

logger = logging.getLogger(__name__)

EMAIL_PROJECTION = "(elements*(handle~))"


def _raise_for_failed_fetch(result: HttpResult, what: str, access_token: str) -> None:
    if result.status_code == 401:
        # The token is invalid or expired, asking again gives the same answer
        logger.error(
            f"[linkedin] 401 error fetching {what} [token {mask_token(access_token)}] "
            f"will not retry {result.text[:500]!r}"
        )
    else:
        logger.error(
            f"[linkedin] error fetching {what} [token {mask_token(access_token)}] {result.describe()}"
        )
    raise ServiceUserDataError(
        f"Could not fetch {what}.",
        url=result.url,
        status_code=result.status_code,
        response_text=result.text,
    )


async def fetch_user_data(
    http_client: LinkedInHttpClient,
    config: LinkedInConfig,
    access_token: str
) -> Dict[str, Any]:
    """
    Fetch the lite profile of the member.

    Raises:
        ServiceUserDataError: on any failure, including a 401
    """
    result = await http_client.get(config.profile_url, params={"oauth2_access_token": access_token})
    if not result.is_ok:
        _raise_for_failed_fetch(result, "user data", access_token)

    profile = result.json_body()
    if not isinstance(profile, dict):
        logger.error(f"[linkedin] user data is not a JSON object: {result.text[:500]!r}")
        raise ServiceUserDataError(
            "User data is not a JSON object.",
            url=result.url,
            status_code=result.status_code,
            response_text=result.text,
        )
    return profile


def extract_email_address(payload: Any) -> str:
    """
    Email address from {"elements": [{"handle~": {"emailAddress": "..."}}]}.

    Raises:
        NoEmailError: when any level of the structure is missing or of the wrong type
    """
    if not isinstance(payload, dict):
        raise NoEmailError()
    elements = payload.get("elements")
    if not isinstance(elements, list) or not elements:
        raise NoEmailError()
    first = elements[0]
    if not isinstance(first, dict):
        raise NoEmailError()
    handle = first.get("handle~")
    if not isinstance(handle, dict):
        raise NoEmailError()
    email = handle.get("emailAddress")
    if not isinstance(email, str) or not email:
        raise NoEmailError()
    return email


async def fetch_email_address(
    http_client: LinkedInHttpClient,
    config: LinkedInConfig,
    access_token: str
) -> str:
    """
    Fetch the primary email address of the member.

    Raises:
        NoEmailError: the answer has no email address
        ServiceUserDataError: on HTTP or transport failures
    """
    result = await http_client.get(
        config.email_url,
        params={
            "q": "members",
            "projection": EMAIL_PROJECTION,
            "oauth2_access_token": access_token,
        },
    )
    if not result.is_ok:
        _raise_for_failed_fetch(result, "user email", access_token)
    return extract_email_address(result.json_body())


async def fetch_profile_and_email(
    http_client: LinkedInHttpClient,
    config: LinkedInConfig,
    access_token: str
) -> Tuple[Dict[str, Any], str]:
    """
    Fetch profile and email concurrently. Both must succeed.

    Raises:
        ServiceUserDataError: if either fetch failed
    """
    profile_result, email_result = await asyncio.gather(
        fetch_user_data(http_client, config, access_token),
        fetch_email_address(http_client, config, access_token),
        return_exceptions=True,
    )

    for outcome in (profile_result, email_result):
        if isinstance(outcome, BaseException) and not isinstance(outcome, ServiceUserDataError):
            raise outcome

    if isinstance(email_result, ServiceUserDataError):
        if not isinstance(profile_result, BaseException):
            logger.error(f"[linkedin] No email address, error {email_result.message!r} for {profile_result!r}")
        raise email_result
    if isinstance(profile_result, ServiceUserDataError):
        raise profile_result

    return profile_result, email_result
