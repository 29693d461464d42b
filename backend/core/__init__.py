"""
Core business logic module.

Contains the exception hierarchy and framework-free helpers shared by
services: password hashing, token handling, slug generation.
"""

from backend.core.exceptions import (
    LearnHubException,
    ValidationError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    ServiceError,
)

__all__ = [
    "LearnHubException",
    "ValidationError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "ServiceError",
]
