"""Thin async client for the Twitch identity provider and Helix API."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar

import httpx

from clip_downloader.infrastructure.twitch.responses import (
    ApiRejection,
    ApiResponse,
    ApiSuccess,
    ClipsPage,
    NoResponse,
    TokenGrant,
    UserLookup,
)

logger = logging.getLogger(__name__)

TOKEN_URL = "https://id.twitch.tv/oauth2/token"
HELIX_URL = "https://api.twitch.tv/helix"

T = TypeVar("T")


class TwitchApiClient:
    """
    Issues Twitch requests over a shared ``httpx.AsyncClient``.

    HTTP errors and transport failures are returned as ``ApiRejection`` or
    ``NoResponse``; nothing is raised past this class for those.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        timeout: float | None = None,
        token_url: str = TOKEN_URL,
        helix_url: str = HELIX_URL,
    ) -> None:
        """
        Initialize the API client.

        Args:
            http_client: Client used for every request
            timeout: Per-request timeout in seconds (None waits indefinitely)
            token_url: Token endpoint of the identity provider
            helix_url: Base URL of the Helix API
        """
        self.http_client = http_client
        self.timeout = httpx.Timeout(timeout)
        self.token_url = token_url
        self.helix_url = helix_url.rstrip("/")

    async def request_token(self, client_id: str, client_secret: str) -> ApiResponse[TokenGrant]:
        """Exchange application credentials for an app access token."""
        params = {
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "client_credentials",
        }
        return await self._send(
            "POST",
            self.token_url,
            params=params,
            headers=None,
            parse=lambda body: TokenGrant(
                access_token=body["access_token"],
                expires_in=int(body["expires_in"]),
                token_type=body.get("token_type", "bearer"),
            ),
        )

    async def get_users(self, login: str, headers: Mapping[str, str]) -> ApiResponse[UserLookup]:
        """Look up accounts by login name."""
        return await self._send(
            "GET",
            f"{self.helix_url}/users",
            params={"login": login},
            headers=headers,
            parse=lambda body: UserLookup(users=list(body.get("data") or [])),
        )

    async def get_clips(
        self,
        broadcaster_id: str,
        headers: Mapping[str, str],
        first: int,
        after: str | None = None,
    ) -> ApiResponse[ClipsPage]:
        """Request one page of a broadcaster's clips."""
        params: dict[str, Any] = {"broadcaster_id": broadcaster_id, "first": first}
        if after:
            params["after"] = after
        return await self._send(
            "GET",
            f"{self.helix_url}/clips",
            params=params,
            headers=headers,
            parse=lambda body: ClipsPage(
                items=list(body.get("data") or []),
                cursor=(body.get("pagination") or {}).get("cursor") or None,
            ),
        )

    async def _send(
        self,
        method: str,
        url: str,
        params: Mapping[str, Any],
        headers: Mapping[str, str] | None,
        parse: Callable[[dict[str, Any]], T],
    ) -> ApiResponse[T]:
        """Send a request and fold the outcome into one of the three cases."""
        try:
            response = await self.http_client.request(
                method, url, params=params, headers=headers, timeout=self.timeout
            )
        except httpx.HTTPError as e:
            logger.debug(f"{method} {url} failed without response: {e}")
            return NoResponse(reason=str(e) or e.__class__.__name__)

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            return ApiRejection(status_code=response.status_code, payload=body or response.text)

        if not isinstance(body, dict):
            return NoResponse(reason=f"Unexpected response body from {url}")

        try:
            return ApiSuccess(parse(body))
        except (KeyError, TypeError, ValueError) as e:
            return NoResponse(reason=f"Malformed response from {url}: {e}")
