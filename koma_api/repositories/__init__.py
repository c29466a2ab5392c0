"""
Persistence adapters.

Services depend on the UserRepository interface (find by id/username, whole
document save) rather than touching SQLAlchemy sessions directly.
"""

from .user_repository import SQLUserRepository, UserRepository

__all__ = ["SQLUserRepository", "UserRepository"]
