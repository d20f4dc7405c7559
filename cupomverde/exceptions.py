# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3
"""
Cupom Verde Exception Hierarchy

Every failure reported by the SDK is one of five kinds. All of them inherit
from CupomVerdeError so a caller can catch everything with a single except
clause, or branch on ``error.kind`` without comparing class names.

Example:
    try:
        CPV.enviar_cupom_fiscal(xml, cpf)
    except ConflictError:
        ...  # receipt already sent
    except CupomVerdeError as e:
        show_message(e.message)
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Tag identifying which of the five error kinds was raised."""

    UNAUTHORIZED = "UnauthorizedError"
    NOT_FOUND = "NotFoundError"
    CONFLICT = "ConflictError"
    VALIDATION = "ValidationError"
    UNEXPECTED = "UnexpectedError"


class CupomVerdeError(Exception):
    """Base exception for all Cupom Verde errors.

    Attributes:
        message: Human readable message, from the remote API or local validation
        status_code: HTTP status of the response that caused it, if any
    """

    kind: ErrorKind

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message or "")
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message or ""

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
        }


class UnauthorizedError(CupomVerdeError):
    """API key missing, malformed at the server side, or rejected (401)."""

    kind = ErrorKind.UNAUTHORIZED


class NotFoundError(CupomVerdeError):
    """The store referenced by the receipt does not exist in Cupom Verde (404)."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(CupomVerdeError):
    """A receipt with the same key was already sent (409)."""

    kind = ErrorKind.CONFLICT


class ValidationError(CupomVerdeError):
    """Invalid input, detected locally or by the API (422).

    The API rejects XML larger than 1 Mb, malformed XML and invalid CPFs.
    """

    kind = ErrorKind.VALIDATION


class UnexpectedError(CupomVerdeError):
    """Any other status code, network failure, timeout or malformed response."""

    kind = ErrorKind.UNEXPECTED


def error_from_status(
    status_code: int | None,
    message: str | None = None,
    conflict_allowed: bool = True,
) -> CupomVerdeError:
    """
    Classify a failed HTTP exchange into one of the five error kinds.

    Args:
        status_code: HTTP status, or None when no response was received
        message: ``message`` field of the response body, if present
        conflict_allowed: Whether 409 means a duplicate receipt for this call

    Returns:
        CupomVerdeError: The classified error, ready to be raised
    """
    if status_code == 401:
        return UnauthorizedError(message, status_code)
    if status_code == 404:
        return NotFoundError(message, status_code)
    if status_code == 409 and conflict_allowed:
        return ConflictError(message, status_code)
    if status_code == 422:
        return ValidationError(message, status_code)
    return UnexpectedError(message, status_code)


__all__ = [
    "ErrorKind",
    "CupomVerdeError",
    "UnauthorizedError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "UnexpectedError",
    "error_from_status",
]
