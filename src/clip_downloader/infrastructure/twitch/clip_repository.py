"""Twitch Helix implementation of the clip repository."""

from __future__ import annotations

import logging
from typing import Mapping

from clip_downloader.domain.exceptions import APIError, UserNotFoundError
from clip_downloader.domain.models.clip import ClipCollection, ClipInfo
from clip_downloader.domain.services.clip_repository import ClipRepository
from clip_downloader.infrastructure.twitch.api_client import TwitchApiClient
from clip_downloader.infrastructure.twitch.responses import ApiRejection, ApiSuccess

logger = logging.getLogger(__name__)

CLIPS_PAGE_SIZE = 20


class TwitchClipRepository(ClipRepository):
    """
    Walks the Helix clip listing of a broadcaster.

    The listing is cursor paginated; pages are requested one after another
    until the API runs out of clips or a page request fails.
    """

    def __init__(self, api_client: TwitchApiClient, page_size: int = CLIPS_PAGE_SIZE) -> None:
        """
        Initialize the clip repository.

        Args:
            api_client: Client for the Helix API
            page_size: Clips requested per page
        """
        self.api_client = api_client
        self.page_size = page_size

    async def fetch_all_clips(
        self, user_name: str, headers: Mapping[str, str]
    ) -> ClipCollection:
        """
        Retrieve every clip of a broadcaster.

        Args:
            user_name: Login name of the broadcaster
            headers: Authenticated request headers

        Returns:
            Clips in upstream order; ``truncated`` is set if a page failed

        Raises:
            UserNotFoundError: If no account matches the user name
            APIError: If the user lookup is rejected or gets no response
        """
        broadcaster_id = await self._resolve_user_id(user_name, headers)
        collection = ClipCollection()
        cursor: str | None = None

        while True:
            logger.info(f"Making request with key {cursor!r}")
            response = await self.api_client.get_clips(
                broadcaster_id, headers, first=self.page_size, after=cursor
            )

            if isinstance(response, ApiRejection):
                logger.error(
                    f"Clip page request rejected ({response.status_code}), "
                    f"keeping {len(collection)} clips: {response.payload!r}"
                )
                collection.truncated = True
                return collection
            if not isinstance(response, ApiSuccess):
                logger.error(
                    f"Clip page request failed, keeping {len(collection)} clips: {response.reason}"
                )
                collection.truncated = True
                return collection

            page = response.data
            if not page.items:
                return collection

            try:
                clips = [ClipInfo.from_api_item(item) for item in page.items]
            except (KeyError, TypeError) as e:
                logger.error(
                    f"Clip page contained a malformed entry, keeping {len(collection)} clips: {e!r}"
                )
                collection.truncated = True
                return collection
            collection.clips.extend(clips)

            if not page.cursor:
                return collection
            cursor = page.cursor

    async def _resolve_user_id(self, user_name: str, headers: Mapping[str, str]) -> str:
        """Map a login name to the broadcaster ID."""
        response = await self.api_client.get_users(user_name, headers)

        if isinstance(response, ApiRejection):
            logger.error(f"User lookup rejected: {response.payload!r}")
            raise APIError(
                f"User lookup rejected ({response.status_code}): {response.message}",
                status_code=response.status_code,
                payload=response.payload,
            )
        if not isinstance(response, ApiSuccess):
            logger.error(f"User lookup failed: {response.reason}")
            raise APIError(f"User lookup failed: {response.reason}")

        users = response.data.users
        if not users:
            logger.error("No user found by that name")
            raise UserNotFoundError(user_name)
        if len(users) > 1:
            logger.warning("More than one user by that name, assuming first")

        return str(users[0]["id"])
