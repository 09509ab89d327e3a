# linkedin_logon/oauth/normalize.py
import logging
from typing import Any, Dict, Mapping, Optional

from .errors import MalformedProfileError
from .models import AccessTokenResult, AuthValidated, PersonProps

logger = logging.getLogger(__name__)

PREFERRED_LOCALE = "en_US"
FALSE_VALUES = {"", "0", "false", "f", "no", "n", "off", "undefined", "null"}


def get_localized_value(prop: str, profile: Mapping[str, Any]) -> Optional[str]:
    """
    Resolve a possibly localized profile field.

    A plain string is returned as is. For {"localized": {"nl_NL": ..., "en_US": ...}}
    the en_US value is preferred, else the first locale of the map. Anything
    else, including null, resolves to None.
    """
    value = profile.get(prop)
    if isinstance(value, str):
        return value
    if not isinstance(value, dict):
        return None

    localized = value.get("localized")
    if not isinstance(localized, dict) or not localized:
        return None
    if PREFERRED_LOCALE in localized:
        chosen = localized[PREFERRED_LOCALE]
    else:
        chosen = next(iter(localized.values()))
    return chosen if isinstance(chosen, str) else None


def to_bool(value: Optional[str]) -> bool:
    """Anything but None and the well known false spellings is true."""
    if value is None:
        return False
    return str(value).strip().lower() not in FALSE_VALUES


def auth_user(
    profile: Mapping[str, Any],
    email: str,
    token: AccessTokenResult,
    args: Dict[str, str]
) -> AuthValidated:
    """
    Map a LinkedIn profile and email address to the canonical identity.

    Raises:
        MalformedProfileError: the profile has no member id
    """
    raw_user_id = profile.get("id")
    if not isinstance(raw_user_id, (str, int, float)) or isinstance(raw_user_id, bool) or raw_user_id == "":
        logger.error(f"[linkedin] Profile without member id: {dict(profile)!r}")
        raise MalformedProfileError()
    linkedin_user_id = str(raw_user_id)

    logger.debug(f"[linkedin] Authenticating {linkedin_user_id} {dict(profile)!r}")

    name_first = get_localized_value("firstName", profile)
    name_surname = get_localized_value("lastName", profile)

    return AuthValidated(
        service_uid=linkedin_user_id,
        service_props={
            "access_token": token.access_token,
            "expires": token.expires_in,
        },
        props=PersonProps(
            title=f"{name_first or ''} {name_surname or ''}",
            name_first=name_first,
            name_surname=name_surname,
            summary=get_localized_value("headline", profile),
            email=email,
        ),
        is_connect=to_bool(args.get("is_connect")),
    )
