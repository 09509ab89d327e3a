# tests/test_http_client.py
import httpx

from linkedin_logon.oauth.http_client import HttpResult, LinkedInHttpClient


async def test_get_returns_status_and_body(http_client, fake_linkedin):
    result = await http_client.get("https://api.linkedin.com/v2/me", params={"oauth2_access_token": "T"})

    assert result.is_ok
    assert result.status_code == 200
    assert result.json_body()["id"] == "U1"
    assert fake_linkedin.last_request_to("/v2/me").url.params["oauth2_access_token"] == "T"


async def test_transport_failure_is_a_result_without_status(http_client, fake_linkedin):
    fake_linkedin.answers["/v2/me"] = httpx.ConnectError("connection refused")

    result = await http_client.get("https://api.linkedin.com/v2/me")

    assert not result.is_ok
    assert result.status_code is None
    assert "ConnectError" in result.error


async def test_post_form_is_url_encoded(http_client, fake_linkedin):
    await http_client.post_form("https://www.linkedin.com/uas/oauth2/accessToken", data={"a": "b c"})

    request = fake_linkedin.last_request_to("/uas/oauth2/accessToken")
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert request.content == b"a=b+c"


async def test_redirects_are_followed(linkedin_config):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(302, headers={"location": "https://api.linkedin.com/new"})
        return httpx.Response(200, text="{}")

    async with LinkedInHttpClient(linkedin_config, transport=httpx.MockTransport(handler)) as client:
        result = await client.get("https://api.linkedin.com/old")

    assert result.status_code == 200
    assert result.url == "https://api.linkedin.com/old"


def test_timeouts_come_from_config(linkedin_config):
    client = LinkedInHttpClient(linkedin_config.model_copy(update={"timeout_seconds": 7.0, "connect_timeout_seconds": 3.0}))

    assert client._client.timeout.connect == 3.0
    assert client._client.timeout.read == 7.0


def test_malformed_json_body_is_none():
    result = HttpResult(url="https://x", status_code=200, text="<html>")

    assert result.json_body() is None
