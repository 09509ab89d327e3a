# linkedin_logon/oauth/endpoints.py
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from typing import Annotated, Optional
import logging
from urllib.parse import urlencode

from .errors import LogonErrorKind
from .models import LinkedInConfig, RedirectOutcome, StoredState
from .redirect import LinkedInRedirectFlow
from .render import LogonRenderer
from .state import StateCookieManager
from .token_exchange import build_redirect_uri
from ..dependencies import (
    get_linkedin_config,
    get_logon_renderer,
    get_redirect_flow,
    get_state_cookie_manager,
)

logger = logging.getLogger(__name__)
linkedin_router = APIRouter()


def base_redirect_url(request: Request, config: LinkedInConfig) -> str:
    """Absolute URL of the redirect endpoint, without query arguments."""
    if config.public_base_url:
        path = request.app.url_path_for("linkedin_redirect")
        return f"{config.public_base_url.rstrip('/')}{path}"
    return str(request.url_for("linkedin_redirect"))


@linkedin_router.get("/authorize", name="linkedin_authorize", response_class=RedirectResponse)
async def authorize(
    request: Request,
    config: Annotated[LinkedInConfig, Depends(get_linkedin_config)],
    state_manager: Annotated[StateCookieManager, Depends(get_state_cookie_manager)],
    is_connect: Annotated[Optional[str], Query()] = None,
    pk: Annotated[Optional[str], Query()] = None,
):
    """
    Start a LinkedIn logon: remember a fresh state in the state cookie and
    send the browser to the LinkedIn authorization page.
    """
    if not config.app_id:
        logger.error("LinkedIn app id is not configured, cannot start a logon.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="LinkedIn logon is not configured.",
        )

    args = {"is_connect": is_connect} if is_connect else {}
    stored = StoredState(args=args)
    params = {
        "response_type": "code",
        "client_id": config.app_id,
        "redirect_uri": build_redirect_uri(base_redirect_url(request, config), pk),
        "state": stored.state,
        "scope": config.scope,
    }
    response = RedirectResponse(f"{config.authorize_url}?{urlencode(params)}", status_code=status.HTTP_302_FOUND)
    state_manager.store(response, stored)
    logger.info(f"[linkedin] Starting logon, is_connect={is_connect!r}")
    return response


@linkedin_router.get("/redirect", name="linkedin_redirect", response_class=HTMLResponse)
async def linkedin_redirect(
    request: Request,
    config: Annotated[LinkedInConfig, Depends(get_linkedin_config)],
    state_manager: Annotated[StateCookieManager, Depends(get_state_cookie_manager)],
    flow: Annotated[LinkedInRedirectFlow, Depends(get_redirect_flow)],
    renderer: Annotated[LogonRenderer, Depends(get_logon_renderer)],
    state: Annotated[Optional[str], Query()] = None,
    code: Annotated[Optional[str], Query()] = None,
    pk: Annotated[Optional[str], Query()] = None,
    error: Annotated[Optional[str], Query()] = None,
    error_description: Annotated[Optional[str], Query()] = None,
):
    """
    Handle the OAuth redirect of the LinkedIn logon handshake.
    The state cookie is single use and cleared on every response.
    """
    logger.info(
        f"LinkedIn redirect received. Code: {'SET' if code else 'NOT_SET'}, State: {state!r}"
    )
    if error:
        logger.info(f"[linkedin] Redirect with error {error!r}: {error_description!r}")

    stored = state_manager.read(request)
    try:
        outcome = await flow.process(
            stored_state=stored,
            query_state=state,
            code=code,
            pk=pk,
            base_redirect_url=base_redirect_url(request, config),
        )
    except Exception as e:
        logger.error(f"Unexpected error in linkedin_redirect: {e}", exc_info=True)
        outcome = RedirectOutcome.failed(LogonErrorKind.SERVICE_USER_DATA)

    try:
        response = renderer.render(request, outcome)
    except Exception as e:
        logger.error(f"Rendering the LinkedIn logon result failed: {e}", exc_info=True)
        response = renderer.html_error(request, LogonErrorKind.SERVICE_USER_DATA)
    state_manager.clear(response)
    return response
