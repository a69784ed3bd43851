"""JSON file persistence for credentials and clip collections."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from clip_downloader.domain.exceptions import StorageError
from clip_downloader.domain.models.clip import ClipCollection
from clip_downloader.domain.models.credential import Credential
from clip_downloader.domain.services.storage import ClipStore, CredentialStore

logger = logging.getLogger(__name__)


def _write_json(path: Path, data: Any) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise StorageError(str(path), f"Could not write to file ({e})", e) from e


class JsonCredentialStore(CredentialStore):
    """Stores the credential in a JSON state file."""

    def __init__(self, state_file: str | Path) -> None:
        self.state_file = Path(state_file)

    def load(self) -> Credential:
        """Load the credential, falling back to an empty one."""
        logger.debug("Trying to read state file")
        if not self.state_file.exists():
            logger.info("Could not open state file, may not exist yet")
            return Credential()

        try:
            with open(self.state_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Credential.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.info(f"Could not parse state file: {e}")
            return Credential()

    def save(self, credential: Credential) -> None:
        logger.debug("Attempting to save state file")
        _write_json(self.state_file, credential.to_dict())


class JsonClipStore(ClipStore):
    """Stores clip collections as pretty-printed JSON files."""

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def load(self, path: Path) -> ClipCollection:
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise StorageError(str(path), "Clip info file does not exist", e) from e
        except (OSError, ValueError) as e:
            raise StorageError(str(path), "Clip info file was not able to be parsed", e) from e

        try:
            return ClipCollection.from_dict(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise StorageError(str(path), "Clip info file was not able to be parsed", e) from e

    def save(self, path: Path, collection: ClipCollection) -> None:
        _write_json(Path(path), collection.to_dict())
        logger.info(f"Wrote {len(collection)} clips to {path}")
