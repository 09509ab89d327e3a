# linkedin_logon/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional
import logging
from pathlib import Path

from .oauth.models import LinkedInConfig

logger = logging.getLogger(__name__)

# Two .parent calls get from linkedin_logon/settings.py to the project root
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DOTENV_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    app_name: str = "LinkedIn Logon"
    debug_mode: bool = False
    log_level: str = "INFO"

    # LinkedIn application credentials
    linkedin_app_id: str = ""
    linkedin_app_secret: str = Field(
        default="",
        description="Client secret of the LinkedIn application. Never logged."
    )
    linkedin_scope: str = "r_liteprofile r_emailaddress"

    # LinkedIn endpoints
    linkedin_authorize_url: str = "https://www.linkedin.com/oauth/v2/authorization"
    linkedin_token_url: str = "https://www.linkedin.com/uas/oauth2/accessToken"
    linkedin_profile_url: str = "https://api.linkedin.com/v2/me"
    linkedin_email_url: str = "https://api.linkedin.com/v2/emailAddress"

    # Outbound HTTP
    http_timeout_seconds: float = 10.0
    http_connect_timeout_seconds: float = 10.0

    # State cookie
    state_cookie_name: str = "linkedin_logon_state"
    state_cookie_max_age_seconds: int = 600
    state_cookie_secure: bool = Field(
        default=True,
        description="Send the state cookie and the host session cookies with the Secure flag."
    )
    state_cookie_key: Optional[str] = Field(
        default=None,
        description="Fernet key used to encrypt the state cookie. Generated per process if unset."
    )

    # Absolute base URL used to build the redirect_uri, e.g. behind a proxy
    public_base_url: Optional[str] = None
    signup_confirm_url: str = "/logon/signup-confirm"

    model_config = SettingsConfigDict(
        env_prefix="LINKEDIN_LOGON_",
        env_file=DOTENV_PATH if DOTENV_PATH.exists() else None,
        extra="ignore",
        env_file_encoding='utf-8'
    )

    def linkedin_config(self) -> LinkedInConfig:
        """Build the provider configuration handed to the redirect flow."""
        return LinkedInConfig(
            app_id=self.linkedin_app_id,
            app_secret=self.linkedin_app_secret,
            scope=self.linkedin_scope,
            authorize_url=self.linkedin_authorize_url,
            token_url=self.linkedin_token_url,
            profile_url=self.linkedin_profile_url,
            email_url=self.linkedin_email_url,
            timeout_seconds=self.http_timeout_seconds,
            connect_timeout_seconds=self.http_connect_timeout_seconds,
            public_base_url=self.public_base_url,
        )

    def masked(self) -> dict:
        """Settings as a dict with secrets replaced, safe for logs and the CLI."""
        values = self.model_dump()
        for secret_field in ("linkedin_app_secret", "state_cookie_key"):
            values[secret_field] = "********" if values.get(secret_field) else None
        return values


def log_settings(current: Settings) -> None:
    if DOTENV_PATH.exists():
        logger.info(f"SETTINGS: .env file FOUND at: {DOTENV_PATH}")
    else:
        logger.warning(
            f"SETTINGS: .env file NOT FOUND at: {DOTENV_PATH}. "
            "Will rely on OS env vars or defaults."
        )
    for key, value in current.masked().items():
        logger.debug(f"SETTINGS: {key} = {value!r}")
    if not current.linkedin_app_id or not current.linkedin_app_secret:
        logger.warning("SETTINGS: LinkedIn app id or secret is not configured. Logons will fail.")


settings = Settings()
