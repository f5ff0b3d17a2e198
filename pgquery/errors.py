from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppError(Exception):
    """Base class for errors reported to clients as a failure envelope."""

    message: str
    http_status: int = 400

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationError(AppError):
    """The request payload is missing or malformed; nothing reached the database."""

    message: str = "Query is required and must be a string"


@dataclass
class ForbiddenOperationError(AppError):
    """The query text matched the dangerous-fragment denylist."""

    message: str = "Dangerous operations are not allowed"
    http_status: int = 403


@dataclass
class ExecutionError(AppError):
    """The database rejected or failed the statement."""


@dataclass
class IntrospectionError(AppError):
    """A catalog query failed while listing the schema."""
