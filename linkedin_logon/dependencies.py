# linkedin_logon/dependencies.py
import logging
from fastapi import HTTPException, Request, status

from .oauth.models import LinkedInConfig
from .oauth.redirect import LinkedInRedirectFlow
from .oauth.render import LogonRenderer
from .oauth.state import StateCookieManager

logger = logging.getLogger(__name__)


def _app_state_attr(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        logger.error(f"CRITICAL: '{name}' not initialized on the application state.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="LinkedIn logon service unavailable.",
        )
    return value


async def get_linkedin_config(request: Request) -> LinkedInConfig:
    return _app_state_attr(request, "linkedin_config")


async def get_state_cookie_manager(request: Request) -> StateCookieManager:
    return _app_state_attr(request, "state_cookie_manager")


async def get_redirect_flow(request: Request) -> LinkedInRedirectFlow:
    """The redirect flow, bound to the HTTP client opened in the app lifespan."""
    return _app_state_attr(request, "redirect_flow")


async def get_logon_renderer(request: Request) -> LogonRenderer:
    return _app_state_attr(request, "logon_renderer")
