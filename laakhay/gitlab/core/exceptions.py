"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class GitLabError(Exception):
    """Base exception for all library errors."""

    pass


class EncodingError(GitLabError):
    """Query descriptor field cannot be encoded.

    Raised synchronously, before any request is sent, when a field value
    violates its encoding contract (unknown enum value, unsupported type,
    non-finite number).
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class TransportError(GitLabError):
    """Network, connection or timeout failure below the HTTP layer."""

    pass


class ServiceError(GitLabError):
    """Non-success HTTP status returned by the service."""

    def __init__(
        self,
        message: str,
        status_code: int,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class AuthenticationError(ServiceError):
    """Token missing, invalid, or lacking permission (401/403)."""

    pass


class NotFoundError(ServiceError):
    """Resource does not exist or is not visible (404)."""

    pass


class MalformedResponseError(GitLabError):
    """Successful response whose body cannot be decoded."""

    pass


class MalformedPageError(MalformedResponseError):
    """Pagination metadata is unparsable or the service stopped advancing.

    Distinct from TransportError and ServiceError so callers can tell a
    misbehaving service apart from a broken network.
    """

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


def service_error_for(status_code: int, payload: Any = None) -> ServiceError:
    """Build the most specific ServiceError for a status code."""
    message = _error_message(payload) or f"HTTP {status_code}"
    message = f"GitLab API error {status_code}: {message}"
    if status_code in (401, 403):
        return AuthenticationError(message, status_code=status_code, payload=payload)
    if status_code == 404:
        return NotFoundError(message, status_code=status_code, payload=payload)
    return ServiceError(message, status_code=status_code, payload=payload)


def _error_message(payload: Any) -> str | None:
    # GitLab reports errors under "message" or "error"; "message" may be a dict of field errors
    if isinstance(payload, dict):
        value = payload.get("message", payload.get("error"))
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)
    if isinstance(payload, str) and payload:
        return payload
    return None
