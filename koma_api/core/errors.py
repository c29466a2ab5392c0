"""Error taxonomy for the account API; each error knows its HTTP status."""

from __future__ import annotations


class AccountError(Exception):
    """Base class for domain errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AccountError):
    status_code = 404


class ConflictError(AccountError):
    # duplicates are reported as 400 on the public surface
    status_code = 400


class BadRequestError(AccountError):
    status_code = 400


class UnauthorizedError(AccountError):
    status_code = 401


class ConcurrentUpdateError(AccountError):
    status_code = 409


class StoreUnavailableError(AccountError):
    status_code = 503
