import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)


class AppException(HTTPException):
    """Base for errors rendered as ``{success: false, message, errors?}``"""

    def __init__(self, status_code: int, message: str, errors: Optional[List[dict]] = None):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.errors = errors


# 400
class ValidationException(AppException):
    def __init__(self, errors: List[dict]):
        super().__init__(400, "Validation failed", errors)


class UserAlreadyExistsException(AppException):
    def __init__(self, errors: List[dict]):
        super().__init__(400, "A user with this username or email already exists", errors)


# 401
class AccessTokenDoesNotExistException(AppException):
    def __init__(self):
        super().__init__(401, "Access token doesn't exist")


class AccessTokenExpiredException(AppException):
    def __init__(self):
        super().__init__(401, "Access token has expired")


class AccessTokenDamagedException(AppException):
    def __init__(self):
        super().__init__(401, "Access token is invalid")


class InvalidCredentialsException(AppException):
    def __init__(self):
        super().__init__(401, "Invalid email or password")


# 404
class TaskNotFoundException(AppException):
    def __init__(self):
        # Same message whether the task is missing or owned by someone else
        super().__init__(404, "Task not found")


# 500
class InternalServerException(AppException):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(500, message)


@contextmanager
def server_errors(action: str) -> Iterator[None]:
    """Turn storage and unexpected faults into a generic 500, keeping the detail in the log"""
    try:
        yield
    except AppException:
        raise
    except Exception:
        logger.exception("Server error %s", action)
        raise InternalServerException(f"Server error {action}")
