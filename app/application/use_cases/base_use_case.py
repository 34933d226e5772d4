"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic
from dataclasses import dataclass
from enum import IntEnum

from app.domain.models.base import DomainException, ErrorKind


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class ApiStatusCode(IntEnum):
    """Status codes a use case can report. Values match HTTP."""
    SUCCESS = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500


STATUS_BY_ERROR_KIND: Dict[ErrorKind, ApiStatusCode] = {
    ErrorKind.VALIDATION_ERROR: ApiStatusCode.BAD_REQUEST,
    ErrorKind.NOT_FOUND: ApiStatusCode.NOT_FOUND,
    ErrorKind.DUPLICATE_CODE: ApiStatusCode.BAD_REQUEST,
    ErrorKind.DUPLICATE_NAME: ApiStatusCode.BAD_REQUEST,
    ErrorKind.PROJECT_NOT_FOUND: ApiStatusCode.BAD_REQUEST,
    ErrorKind.TASK_NOT_FOUND: ApiStatusCode.BAD_REQUEST,
    ErrorKind.TASK_INACTIVE: ApiStatusCode.BAD_REQUEST,
    ErrorKind.DAILY_CAP_EXCEEDED: ApiStatusCode.BAD_REQUEST,
    ErrorKind.HAS_DEPENDENTS: ApiStatusCode.BAD_REQUEST,
    ErrorKind.INVALID_PERIOD: ApiStatusCode.BAD_REQUEST,
    ErrorKind.INTERNAL_ERROR: ApiStatusCode.INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred while processing the request"


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    data: Optional[T] = None
    status_code: ApiStatusCode = ApiStatusCode.SUCCESS
    message: str = ""
    error_kind: Optional[ErrorKind] = None

    @property
    def is_success(self) -> bool:
        return self.status_code == ApiStatusCode.SUCCESS

    @classmethod
    def success_result(cls, data: T, message: str = "Operation completed successfully") -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(data=data, status_code=ApiStatusCode.SUCCESS, message=message)

    @classmethod
    def error_result(
        cls,
        message: str,
        error_kind: ErrorKind,
        status_code: Optional[ApiStatusCode] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            data=None,
            status_code=status_code or STATUS_BY_ERROR_KIND[error_kind],
            message=message,
            error_kind=error_kind
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.kind)
        return cls.error_result(INTERNAL_ERROR_MESSAGE, ErrorKind.INTERNAL_ERROR)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": self.data,
            "status_code": int(self.status_code),
            "message": self.message,
            "is_success": self.is_success,
        }


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Rule violations and store failures never escape execute(); they are
    returned as error results.
    """

    success_message: str = "Operation completed successfully"

    async def execute(self, request: T) -> UseCaseResult[R]:
        """
        Execute the use case with proper error handling and logging.
        """
        name = type(self).__name__
        logger.info(f"{name} started")

        try:
            await self._validate_request(request)
            result = await self._execute_business_logic(request)

        except DomainException as exc:
            logger.warning(f"{name} rejected ({exc.kind.value}): {exc.message}")
            return UseCaseResult.from_exception(exc)

        except Exception as exc:
            logger.exception(f"{name} failed with {type(exc).__name__}")
            return UseCaseResult.from_exception(exc)

        logger.info(f"{name} succeeded")
        return UseCaseResult.success_result(result, self._success_message(result))

    def _success_message(self, result: R) -> str:
        """Message reported on success. Override to describe the result."""
        return self.success_message

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        Request DTOs arrive already shape-validated by pydantic.
        """
        pass

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    All rule checks run in _execute_command_logic before the single write.
    """

    async def _execute_business_logic(self, request: T) -> R:
        return await self._execute_command_logic(request)

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass


# Specific use case patterns
class CreateUseCase(CommandUseCase[T, R]):
    """Base class for entity creation use cases."""
    success_message = "Created successfully"


class UpdateUseCase(CommandUseCase[T, R]):
    """Base class for entity update use cases."""
    success_message = "Updated successfully"


class DeleteUseCase(CommandUseCase[int, R]):
    """
    Base class for entity deletion use cases. The request is the entity id.
    An id matching no entity, zero and negatives included, is NotFound.
    """

    success_message = "Deleted successfully"


class GetByIdUseCase(QueryUseCase[int, R]):
    """Base class for get-by-id use cases. The request is the entity id."""

    success_message = "Retrieved successfully"


class ListUseCase(QueryUseCase[T, R]):
    """Base class for list use cases."""

    def _success_message(self, result: R) -> str:
        count = len(result) if result is not None else 0
        return f"Retrieved {count} item(s)"
