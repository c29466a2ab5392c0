"""Load-mutate-save plumbing shared by the per-user collection services."""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from koma_api.core.config import Settings, get_settings
from koma_api.core.errors import ConcurrentUpdateError, NotFoundError
from koma_api.domain.users import UserDocument
from koma_api.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UserDocumentService:
    """Base for services that read-modify-write one user document per call."""

    def __init__(self, repository: UserRepository, settings: Optional[Settings] = None) -> None:
        self.repository = repository
        self.settings = settings or get_settings()

    def _load(self, user_id: str) -> UserDocument:
        user = self.repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def _mutate(self, user_id: str, mutation: Callable[[UserDocument], T]) -> T:
        """
        Apply `mutation` to a freshly loaded document and persist it.

        In last-write-wins mode the save is unconditional. In compare-and-swap
        mode a save that loses the race reloads and reapplies the mutation, up
        to `save_max_retries` attempts.
        """
        cas = self.settings.compare_and_swap
        attempts = self.settings.save_max_retries if cas else 1
        for attempt in range(1, attempts + 1):
            user = self._load(user_id)
            result = mutation(user)
            if self.repository.save(user, expected_version=user.version if cas else None):
                return result
            if not cas:
                # row vanished between load and save
                raise NotFoundError("User not found")
            logger.warning("Version conflict saving user %s (attempt %d/%d)", user_id, attempt, attempts)
        raise ConcurrentUpdateError("User was modified concurrently, please retry")
