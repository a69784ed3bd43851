"""Abstract base class for clip metadata retrieval."""

from abc import ABC, abstractmethod
from typing import Mapping

from clip_downloader.domain.models.clip import ClipCollection


class ClipRepository(ABC):
    """
    Abstract repository for clip metadata.

    Implementations resolve a user name to an account and walk the clip
    listing until it is exhausted.
    """

    @abstractmethod
    async def fetch_all_clips(
        self, user_name: str, headers: Mapping[str, str]
    ) -> ClipCollection:
        """
        Retrieve every clip of a broadcaster.

        A page that fails mid-listing stops the walk; the clips gathered so
        far are returned with ``truncated`` set instead of raising.

        Args:
            user_name: Login name of the broadcaster
            headers: Authenticated request headers

        Returns:
            Clips in upstream order

        Raises:
            UserNotFoundError: If no account matches the user name
            APIError: If the user lookup is rejected or gets no response
        """
        pass
