"""User document repository backed by SQLAlchemy."""
from __future__ import annotations

import copy
import logging
from contextlib import contextmanager
from typing import Callable, ContextManager, Optional, Protocol

from sqlalchemy import select, text, update
from sqlalchemy.exc import IntegrityError, OperationalError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from koma_api.core.errors import ConflictError, StoreUnavailableError
from koma_api.core.utils import generate_document_id
from koma_api.db.models import User
from koma_api.db.session import get_session
from koma_api.domain.users import UserDocument

logger = logging.getLogger(__name__)

_DOCUMENT_COLUMNS = (
    "username",
    "password_hash",
    "first_name",
    "last_name",
    "gender",
    "dob",
    "address",
    "contact",
    "email",
    "wishlist",
    "orders",
    "cart",
)


class UserRepository(Protocol):
    """Read-modify-write contract over whole user documents."""

    def find_by_id(self, user_id: str) -> Optional[UserDocument]: ...

    def find_by_username(self, username: str) -> Optional[UserDocument]: ...

    def create(self, document: UserDocument) -> UserDocument: ...

    def save(self, document: UserDocument, *, expected_version: Optional[int] = None) -> bool: ...

    def ping(self) -> None: ...


class SQLUserRepository:
    """Stores each user, embedded collections included, as one row."""

    def __init__(self, session_factory: Callable[[], ContextManager[Session]] = get_session):
        self._session_factory = session_factory

    @contextmanager
    def _session(self):
        try:
            with self._session_factory() as session:
                yield session
        except (OperationalError, PoolTimeoutError) as exc:
            logger.error("Store call failed: %s", exc)
            reason = str(getattr(exc, "orig", None) or exc).splitlines()[0]
            raise StoreUnavailableError(f"Store unavailable: {reason}") from exc

    @staticmethod
    def _to_document(entity: User) -> UserDocument:
        values = {name: getattr(entity, name) for name in _DOCUMENT_COLUMNS}
        for name in ("wishlist", "orders", "cart"):
            values[name] = copy.deepcopy(values[name] or [])
        return UserDocument(id=entity.id, version=entity.version, **values)

    @staticmethod
    def _to_values(document: UserDocument) -> dict:
        return {name: getattr(document, name) for name in _DOCUMENT_COLUMNS}

    # -------------------------- reads --------------------------
    def find_by_id(self, user_id: str) -> Optional[UserDocument]:
        if not user_id:
            return None
        with self._session() as session:
            entity = session.get(User, user_id)
            return self._to_document(entity) if entity else None

    def find_by_username(self, username: str) -> Optional[UserDocument]:
        with self._session() as session:
            stmt = select(User).where(User.username == username)
            entity = session.execute(stmt).scalar_one_or_none()
            return self._to_document(entity) if entity else None

    # -------------------------- writes --------------------------
    def create(self, document: UserDocument) -> UserDocument:
        user_id = generate_document_id()
        with self._session() as session:
            session.add(User(id=user_id, version=1, **self._to_values(document)))
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise ConflictError("Username already taken") from exc
        document.id = user_id
        document.version = 1
        return document

    def save(self, document: UserDocument, *, expected_version: Optional[int] = None) -> bool:
        """
        Write the whole document back. Without expected_version the last writer
        wins; with it the write only lands if nobody saved in between.
        Returns False when no row was written.
        """
        stmt = update(User).where(User.id == document.id)
        if expected_version is not None:
            stmt = stmt.where(User.version == expected_version)
        stmt = stmt.values(version=User.version + 1, **self._to_values(document)).execution_options(
            synchronize_session=False
        )
        with self._session() as session:
            result = session.execute(stmt)
            session.commit()
        if result.rowcount == 0:
            return False
        document.version = (expected_version if expected_version is not None else document.version) + 1
        return True

    def ping(self) -> None:
        with self._session() as session:
            session.execute(text("SELECT 1"))
