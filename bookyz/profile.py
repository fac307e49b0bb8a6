# bookyz/profile.py

import logging
from typing import Optional

from pydantic import ValidationError

from .config import PROFILE_KEY
from .schemas import UserProfile, ProfileUpdate
from .storage import KeyValueStore

log = logging.getLogger(__name__)


class ProfileStore:
    def __init__(self, storage: KeyValueStore, key: str = PROFILE_KEY):
        self.storage = storage
        self.key = key
        self.current = self.load()

    def load(self) -> UserProfile:
        """Read the stored profile, falling back to the default one when missing or unreadable."""
        raw: Optional[str] = self.storage.get(self.key)
        if raw is None:
            return UserProfile()
        try:
            return UserProfile.model_validate_json(raw)
        except ValidationError as exc:
            log.warning("Stored profile could not be decoded, using default: %s", exc)
            return UserProfile()

    def _save(self) -> None:
        self.storage.set(self.key, self.current.model_dump_json())
        log.info("Profile %s saved", self.current.id)

    def update(self, changes: ProfileUpdate) -> UserProfile:
        fields = changes.model_dump(exclude_unset=True, exclude_none=True)
        self.current = self.current.model_copy(update=fields)
        self._save()
        return self.current

    def set_notifications(self, enabled: bool) -> UserProfile:
        self.current.notifications_enabled = enabled
        self._save()
        return self.current

    def logout(self) -> UserProfile:
        self.storage.delete(self.key)
        self.current = UserProfile()
        log.info("Logged out, stored profile cleared")
        return self.current
