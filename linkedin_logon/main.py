# linkedin_logon/main.py
from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional, Sequence
import logging

import httpx

from .settings import Settings, settings as default_settings, log_settings
from .auth import AbstractAuthHandler, AuthDispatcher
from .oauth.endpoints import linkedin_router
from .oauth.http_client import LinkedInHttpClient
from .oauth.redirect import LinkedInRedirectFlow
from .oauth.render import LogonRenderer
from .oauth.state import StateCookieManager
from .utils import FernetEncryptor

TEMPLATES_DIR = Path(__file__).parent / "templates"

logger = logging.getLogger(__name__)


def configure_logging(current: Settings) -> None:
    level = "DEBUG" if current.debug_mode else current.log_level.upper()
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s [%(levelname)s] - %(message)s'
        )
    logging.getLogger("linkedin_logon").setLevel(level)


def create_app(
    app_settings: Optional[Settings] = None,
    handlers: Optional[Sequence[AbstractAuthHandler]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the LinkedIn logon application.

    Args:
        app_settings: Settings to use, the environment based settings by default
        handlers: Host auth handlers, asked in order for every validated identity
        transport: httpx transport for the LinkedIn API, for tests
    """
    current = app_settings or default_settings
    configure_logging(current)
    log_settings(current)

    config = current.linkedin_config()
    encryptor = FernetEncryptor(current.state_cookie_key)
    dispatcher = AuthDispatcher(handlers)

    @asynccontextmanager
    async def linkedin_logon_lifespan(app_instance: FastAPI):
        logger.info("Application startup initiated.")
        http_client = LinkedInHttpClient(config, transport=transport)
        app_instance.state.redirect_flow = LinkedInRedirectFlow(config, http_client, dispatcher)
        logger.info(f"LinkedIn redirect flow ready with {len(dispatcher.handlers)} auth handler(s).")
        try:
            yield
        finally:
            logger.info("Application shutdown initiated.")
            app_instance.state.redirect_flow = None
            await http_client.aclose()
            logger.info("LinkedIn HTTP client closed.")

    app = FastAPI(title=current.app_name, debug=current.debug_mode, lifespan=linkedin_logon_lifespan)
    app.state.settings = current
    app.state.linkedin_config = config
    app.state.auth_dispatcher = dispatcher
    app.state.state_cookie_manager = StateCookieManager(
        encryptor,
        cookie_name=current.state_cookie_name,
        max_age_seconds=current.state_cookie_max_age_seconds,
        secure=current.state_cookie_secure,
    )
    app.state.logon_renderer = LogonRenderer(
        Jinja2Templates(directory=str(TEMPLATES_DIR)),
        encryptor,
        signup_confirm_url=current.signup_confirm_url,
        secure_cookies=current.state_cookie_secure,
    )
    app.include_router(linkedin_router, prefix="/linkedin", tags=["LinkedIn Logon"])

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok", "configured": bool(config.app_id and config.app_secret)}

    return app


app = create_app()
