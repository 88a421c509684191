"""Flat-file JSON storage for the user collection."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError as SchemaError

from profilehub.core.exceptions import InternalError
from profilehub.models.user import UserCollection

logger = logging.getLogger(__name__)


class RecordStore:
    """Load and persist the whole user collection as one JSON document.

    Every ``save`` rewrites the file in full, so callers read, modify and write
    back the entire collection. There is no locking: two writers that both
    load before either saves will lose the first writer's change. Within one
    worker the request handlers call the store without awaiting in between, so
    their read-modify-write cycles do not interleave on the event loop.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def ensure(self) -> None:
        """Create the backing file with an empty collection if it is missing."""
        if self.path.exists():
            return
        self.save(UserCollection())
        logger.info("Initialized empty user store at %s", self.path)

    def load(self) -> UserCollection:
        self.ensure()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise InternalError("Could not read user store") from exc

        if not raw.strip():
            return UserCollection()
        try:
            return UserCollection.model_validate(json.loads(raw))
        except (json.JSONDecodeError, SchemaError) as exc:
            logger.warning("User store %s is unreadable, treating it as empty: %s", self.path, exc)
            return UserCollection()

    def save(self, collection: UserCollection) -> None:
        payload = collection.model_dump(by_alias=True)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            raise InternalError("Could not write user store") from exc
