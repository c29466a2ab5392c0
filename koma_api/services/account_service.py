"""
Signup, login and profile update use cases.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from koma_api.core.errors import BadRequestError, ConflictError, NotFoundError, UnauthorizedError
from koma_api.core.security import hash_password, verify_password
from koma_api.domain.users import PROFILE_FIELDS, UPDATABLE_FIELDS, UserDocument, profile_value
from koma_api.services.document_service import UserDocumentService

logger = logging.getLogger(__name__)


def _require_password(value: Any) -> None:
    # same rule on signup and on update: a password must be present and non-empty
    if value is None or str(value) == "":
        raise BadRequestError("password must not be empty")


class AccountService(UserDocumentService):
    """Handles registration, login and profile updates."""

    # -------------------------------------- signup --------------------------------------
    def signup(
        self,
        *,
        username: str,
        password: str,
        first_name: Any = None,
        last_name: Any = None,
        gender: Any = None,
        dob: Any = None,
        address: Any = None,
        contact: Any = None,
        email: Any = None,
    ) -> UserDocument:
        """Register a user; profile values are stored as text, the password only as a hash."""
        username = profile_value("username", username)
        _require_password(password)
        if self.repository.find_by_username(username):
            raise ConflictError("Username already taken")
        document = UserDocument(
            username=username,
            password_hash=hash_password(str(password)),
            first_name=profile_value("firstName", first_name),
            last_name=profile_value("lastName", last_name),
            gender=profile_value("gender", gender),
            dob=profile_value("dob", dob),
            address=profile_value("address", address),
            contact=profile_value("contact", contact),
            email=profile_value("email", email),
        )
        created = self.repository.create(document)
        logger.info("Registered user %s (%s)", username, created.id)
        return created

    # -------------------------------------- login --------------------------------------
    def login(self, username: str, password: str) -> dict:
        """Return the user record without its password; no session is issued."""
        user = self.repository.find_by_username(username)
        if not user:
            raise NotFoundError("User not found")
        if not verify_password(password, user.password_hash):
            logger.info("Rejected login for %s", username)
            raise UnauthorizedError("Incorrect password")
        return user.public_dict()

    # -------------------------------------- profile --------------------------------------
    def update_profile(self, user_id: str, updates: Optional[Mapping[str, Any]]) -> dict:
        """
        Apply the allow-listed fields of `updates`; anything else is ignored.
        A new password is hashed before it reaches the document. Username
        uniqueness is left to the store's index, not checked here.
        """
        keys = [key for key in (updates or {}) if key in UPDATABLE_FIELDS]
        if not keys:
            raise BadRequestError("No valid fields to update")

        changes: dict[str, Any] = {}
        for key in keys:
            value = updates[key]
            if key == "password":
                _require_password(value)
                changes["password_hash"] = hash_password(str(value))
            else:
                changes[PROFILE_FIELDS[key]] = profile_value(key, value)

        def _apply(user: UserDocument) -> dict:
            for attr, value in changes.items():
                setattr(user, attr, value)
            return user.public_dict()

        return self._mutate(user_id, _apply)
