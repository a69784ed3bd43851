"""Abstract base classes for persisted state."""

from abc import ABC, abstractmethod
from pathlib import Path

from clip_downloader.domain.models.clip import ClipCollection
from clip_downloader.domain.models.credential import Credential


class CredentialStore(ABC):
    """Persistence for the credential between runs."""

    @abstractmethod
    def load(self) -> Credential:
        """
        Load the stored credential.

        Returns:
            The stored credential, or an empty one when nothing usable is stored
        """
        pass

    @abstractmethod
    def save(self, credential: Credential) -> None:
        """
        Overwrite the stored credential.

        Raises:
            StorageError: If the credential cannot be written
        """
        pass


class ClipStore(ABC):
    """Persistence for clip collections."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Whether a clip collection is stored at ``path``."""
        pass

    @abstractmethod
    def load(self, path: Path) -> ClipCollection:
        """
        Load a clip collection.

        Raises:
            StorageError: If the file is missing or cannot be parsed
        """
        pass

    @abstractmethod
    def save(self, path: Path, collection: ClipCollection) -> None:
        """
        Write a clip collection, replacing any previous content.

        Raises:
            StorageError: If the file cannot be written
        """
        pass
