"""
Route error handling utilities.

Provides a decorator giving every endpoint the same failure behaviour:
domain errors pass through to the global handlers, unique-constraint
violations become conflicts, anything else is logged and reported with an
operation-specific message.

Dependencies: backend.core.exceptions, sqlalchemy
System role: Uniform endpoint error translation
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from sqlalchemy.exc import IntegrityError

from backend.core.exceptions import ConflictError, LearnHubException, ServiceError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_api_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator factory translating unexpected failures into ServiceError.

    Args:
        failure_message: Message reported to the client on unexpected failure,
            e.g. "Failed to fetch lectures"

    Usage:
        @router.get("/lectures/{lecture_id}")
        @handle_api_errors("Failed to fetch lecture")
        async def get_lecture(...): ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except LearnHubException as e:
                logger.info(
                    "Request rejected",
                    extra={
                        "endpoint": func.__name__,
                        "status_code": e.status_code,
                        "error": e.message,
                    },
                )
                raise

            except IntegrityError as e:
                logger.warning(
                    "Integrity constraint violated",
                    extra={"endpoint": func.__name__, "error": str(e.orig)},
                )
                raise ConflictError("Resource already exists") from e

            except Exception as e:
                logger.exception(
                    failure_message,
                    extra={"endpoint": func.__name__, "error_type": type(e).__name__},
                )
                raise ServiceError(failure_message) from e

        return wrapper  # type: ignore

    return decorator
