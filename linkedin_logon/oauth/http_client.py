# linkedin_logon/oauth/http_client.py
import json
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel

from .models import LinkedInConfig

logger = logging.getLogger(__name__)


class HttpResult(BaseModel):
    """Structured outcome of one outbound request. Transport failures have no status code."""
    url: str
    status_code: Optional[int] = None
    text: str = ""
    error: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status_code == 200

    def json_body(self) -> Optional[Any]:
        """Parsed JSON body, or None when the body is not valid JSON."""
        try:
            return json.loads(self.text)
        except (json.JSONDecodeError, TypeError):
            return None

    def describe(self) -> str:
        if self.status_code is None:
            return f"transport error: {self.error}"
        return f"HTTP {self.status_code}: {self.text[:500]!r}"


class LinkedInHttpClient:
    """
    Outbound HTTP for the LinkedIn API with fixed timeouts.

    Never raises for HTTP or transport failures; every call returns an
    HttpResult. There are no retries.
    """

    def __init__(self, config: LinkedInConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout_seconds, connect=config.connect_timeout_seconds),
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "LinkedInHttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, params: Optional[Dict[str, str]] = None) -> HttpResult:
        return await self._request("GET", url, params=params)

    async def post_form(self, url: str, data: Dict[str, str]) -> HttpResult:
        """POST an application/x-www-form-urlencoded body."""
        return await self._request(
            "POST",
            url,
            data=data,
            headers={"Accept": "application/json"},
        )

    async def _request(self, method: str, url: str, **kwargs) -> HttpResult:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            # Query strings carry the access token, only the bare URL is logged
            logger.warning(f"[linkedin] {method} {url} failed: {type(e).__name__}: {e}")
            return HttpResult(url=url, error=f"{type(e).__name__}: {e}")

        logger.debug(f"[linkedin] {method} {url} -> {response.status_code}")
        return HttpResult(url=url, status_code=response.status_code, text=response.text)
