"""
Base entity and domain exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Any, Dict
from abc import ABC
from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Tag carried by every rule violation so callers can branch on it."""
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    DUPLICATE_CODE = "duplicate_code"
    DUPLICATE_NAME = "duplicate_name"
    PROJECT_NOT_FOUND = "project_not_found"
    TASK_NOT_FOUND = "task_not_found"
    TASK_INACTIVE = "task_inactive"
    DAILY_CAP_EXCEEDED = "daily_cap_exceeded"
    HAS_DEPENDENTS = "has_dependents"
    INVALID_PERIOD = "invalid_period"
    INTERNAL_ERROR = "internal_error"


@dataclass(kw_only=True)
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Identity is assigned by the store; a new entity has no id.
    """

    id: Optional[int] = None

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        data = {}
        for key, value in self.__dict__.items():
            if not key.startswith('_'):
                if isinstance(value, (datetime, date)):
                    data[key] = value.isoformat()
                elif isinstance(value, Decimal):
                    data[key] = float(value)
                elif isinstance(value, BaseEntity):
                    data[key] = value.to_dict()
                else:
                    data[key] = value
        return data


class DomainException(Exception):
    """Base exception for domain errors."""

    kind: ErrorKind = ErrorKind.VALIDATION_ERROR

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.kind.value.upper()
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity validation fails."""

    kind = ErrorKind.VALIDATION_ERROR

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidPeriodError(ValidationError):
    """Exception raised when a reporting period is out of range."""

    kind = ErrorKind.INVALID_PERIOD


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    kind = ErrorKind.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    """Exception raised when an entity addressed by id is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """Exception raised when trying to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: Any, message: Optional[str] = None):
        message = message or f"{entity_type} with {field}='{value}' already exists"
        super().__init__(message)
        self.entity_type = entity_type
        self.field = field
        self.value = value


class DuplicateProjectCodeError(DuplicateEntityError):
    """Another project already uses this code."""

    kind = ErrorKind.DUPLICATE_CODE

    def __init__(self, code: str):
        super().__init__(
            "Project", "code", code,
            message=f"Project with code '{code}' already exists"
        )


class DuplicateTaskNameError(DuplicateEntityError):
    """Another task in the same project already uses this name."""

    kind = ErrorKind.DUPLICATE_NAME

    def __init__(self, name: str, project_id: int):
        super().__init__(
            "Task", "name", name,
            message=f"Task with name '{name}' already exists in project {project_id}"
        )
        self.project_id = project_id


class ReferencedEntityNotFoundError(BusinessRuleViolation):
    """
    A referenced parent entity does not exist.
    Unlike EntityNotFoundError this is a problem with the request payload,
    not with the addressed resource.
    """

    def __init__(self, entity_type: str, entity_id: Any, message: Optional[str] = None):
        super().__init__(message or f"{entity_type} with id {entity_id} does not exist")
        self.entity_type = entity_type
        self.entity_id = entity_id


class ProjectNotFoundError(ReferencedEntityNotFoundError):
    kind = ErrorKind.PROJECT_NOT_FOUND

    def __init__(self, project_id: int):
        super().__init__("Project", project_id)


class TaskNotFoundError(ReferencedEntityNotFoundError):
    kind = ErrorKind.TASK_NOT_FOUND

    def __init__(self, task_id: int):
        super().__init__("Task", task_id, message=f"Task with id {task_id} not found")


class InactiveTaskError(BusinessRuleViolation):
    """Time cannot be recorded against an inactive task."""

    kind = ErrorKind.TASK_INACTIVE

    def __init__(self, task_name: str):
        super().__init__(
            f"Task '{task_name}' is inactive. "
            f"Time entries cannot be created for inactive tasks"
        )
        self.task_name = task_name


class DailyHoursExceededError(BusinessRuleViolation):
    """The hours recorded for one calendar day would go over the daily cap."""

    kind = ErrorKind.DAILY_CAP_EXCEEDED

    def __init__(self, entry_date: date, current_hours: Decimal, added_hours: Decimal, max_hours: Decimal):
        self.entry_date = entry_date
        self.current_hours = current_hours
        self.added_hours = added_hours
        self.total_hours = current_hours + added_hours
        self.max_hours = max_hours
        super().__init__(
            f"Daily hours limit exceeded for {entry_date.isoformat()}: "
            f"current total {current_hours}h, adding {added_hours}h "
            f"would make {self.total_hours}h (maximum {max_hours}h)"
        )


class DependentEntitiesError(BusinessRuleViolation):
    """The entity still owns children and cannot be deleted."""

    kind = ErrorKind.HAS_DEPENDENTS

    def __init__(self, entity_type: str, name: str, dependent_type: str, count: int):
        super().__init__(
            f"Cannot delete {entity_type.lower()} '{name}': "
            f"it has {count} related {dependent_type}"
        )
        self.entity_type = entity_type
        self.dependent_type = dependent_type
        self.count = count
