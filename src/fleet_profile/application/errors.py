from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ServiceError(Exception):
    message: str
    status_code: int = 500

    def __str__(self) -> str:
        return self.message

    @property
    def is_internal(self) -> bool:
        return self.status_code >= 500


class UnauthorizedError(ServiceError):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(message=message, status_code=401)


class ForbiddenError(ServiceError):
    def __init__(self, message: str):
        super().__init__(message=message, status_code=403)


class NotFoundError(ServiceError):
    def __init__(self, message: str):
        super().__init__(message=message, status_code=404)


class DataIntegrityError(ServiceError):
    """Stored data the service cannot interpret (unknown role, unknown hull, bad session)."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=500)


class StoreError(ServiceError):
    """A data-store read failed (connection, timeout, malformed result)."""

    def __init__(self, message: str):
        super().__init__(message=message, status_code=500)
