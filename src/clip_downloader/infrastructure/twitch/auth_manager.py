"""Twitch app access token manager."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Callable

from clip_downloader.domain.exceptions import AuthenticationError
from clip_downloader.domain.models.credential import Credential
from clip_downloader.domain.services.storage import CredentialStore
from clip_downloader.infrastructure.twitch.api_client import TwitchApiClient
from clip_downloader.infrastructure.twitch.responses import ApiRejection, ApiSuccess

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_remaining(remaining: timedelta) -> str:
    """Format a duration as days plus hours-minutes-seconds."""
    total_seconds = int(remaining.total_seconds())
    days, rest = divmod(total_seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"Days: {days} HMS: {hours}-{minutes}-{seconds}"


class TwitchAuthManager:
    """
    Keeps the app access token valid.

    The stored token is reused while it has not expired. Otherwise a
    client-credentials exchange is made and the new token is persisted
    before it is handed back.
    """

    def __init__(
        self,
        api_client: TwitchApiClient,
        credential_store: CredentialStore,
        client_id: str,
        client_secret: str,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize the authentication manager.

        Args:
            api_client: Client for the identity provider
            credential_store: Where refreshed credentials are persisted
            client_id: Twitch application client ID
            client_secret: Twitch application client secret
            clock: Source of the current time
        """
        self.api_client = api_client
        self.credential_store = credential_store
        self.client_id = client_id
        self.client_secret = client_secret
        self.clock = clock

    async def ensure_valid_token(self, credential: Credential) -> Credential:
        """
        Return a credential whose token is valid now.

        Args:
            credential: The currently stored credential

        Returns:
            ``credential`` itself when still valid, otherwise a refreshed copy

        Raises:
            AuthenticationError: If the token exchange is rejected or gets no response
        """
        now = self.clock()
        if credential.is_valid(now):
            logger.debug("Reusing auth token")
            logger.info(f"Time before re-auth: {format_remaining(credential.time_remaining(now))}")
            return credential

        logger.info("Getting new auth token for account")
        response = await self.api_client.request_token(self.client_id, self.client_secret)

        if isinstance(response, ApiRejection):
            logger.warning(f"Token request rejected: {response.payload!r}")
            raise AuthenticationError(
                f"Token request rejected ({response.status_code}): {response.message}",
                payload=response.payload,
            )
        if not isinstance(response, ApiSuccess):
            logger.warning(f"Could not complete token request: {response.reason}")
            raise AuthenticationError(f"Could not complete token request: {response.reason}")

        grant = response.data
        refreshed = replace(
            credential,
            token=grant.access_token,
            expires_at=self.clock() + timedelta(seconds=grant.expires_in),
        )

        logger.info("Auth changed, writing into state")
        self.credential_store.save(refreshed)
        return refreshed

    def request_headers(self, credential: Credential) -> dict[str, str]:
        """
        Build the headers for authenticated Helix requests.

        Raises:
            AuthenticationError: If the credential carries no token
        """
        if not credential.token:
            raise AuthenticationError("Could not get access token for requests")
        return {
            "Authorization": f"Bearer {credential.token}",
            "Client-Id": self.client_id,
        }
