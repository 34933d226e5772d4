"""
Unit tests for the base use case patterns.
"""

import pytest
from unittest.mock import Mock

from app.application.use_cases.base_use_case import (
    ApiStatusCode, UseCaseResult, BaseUseCase, GetByIdUseCase, INTERNAL_ERROR_MESSAGE
)
from app.domain.models.base import (
    ErrorKind, EntityNotFoundError, InactiveTaskError, TaskNotFoundError
)


class TestUseCaseResult:
    """Test cases for UseCaseResult."""

    def test_success_result(self):
        """Test creating successful result."""
        result = UseCaseResult.success_result({"id": 1, "name": "test"}, "Done")

        assert result.is_success is True
        assert result.status_code == ApiStatusCode.SUCCESS
        assert result.data == {"id": 1, "name": "test"}
        assert result.message == "Done"
        assert result.error_kind is None

    def test_error_result_maps_kind_to_status(self):
        """Test that the status code follows the error kind."""
        result = UseCaseResult.error_result("Missing", ErrorKind.NOT_FOUND)

        assert result.is_success is False
        assert result.status_code == ApiStatusCode.NOT_FOUND
        assert result.data is None

    def test_referenced_parent_missing_is_bad_request(self):
        """Test that a missing task referenced by a payload is a 400, not a 404."""
        result = UseCaseResult.from_exception(TaskNotFoundError(5))

        assert result.status_code == ApiStatusCode.BAD_REQUEST
        assert result.error_kind == ErrorKind.TASK_NOT_FOUND

    def test_unexpected_exception_hides_details(self):
        """Test that a non-domain error becomes a generic internal error."""
        result = UseCaseResult.from_exception(RuntimeError("connection string with password"))

        assert result.status_code == ApiStatusCode.INTERNAL_SERVER_ERROR
        assert result.message == INTERNAL_ERROR_MESSAGE
        assert "password" not in result.message

    def test_to_dict(self):
        result = UseCaseResult.success_result([1, 2], "Retrieved 2 item(s)")

        assert result.to_dict() == {
            "data": [1, 2],
            "status_code": 200,
            "message": "Retrieved 2 item(s)",
            "is_success": True,
        }


class LookupUseCase(BaseUseCase[int, str]):
    """Use case delegating to a mocked collaborator."""

    success_message = "Looked up"

    def __init__(self, lookup):
        self.lookup = lookup

    async def _execute_business_logic(self, request: int) -> str:
        return self.lookup(request)


class TestBaseUseCaseExecution:
    """Test cases for execute() error conversion."""

    @pytest.mark.asyncio
    async def test_success(self):
        """Test that the business result is wrapped."""
        use_case = LookupUseCase(Mock(return_value="found"))

        result = await use_case.execute(3)

        assert result.is_success
        assert result.data == "found"
        assert result.message == "Looked up"

    @pytest.mark.asyncio
    async def test_domain_exception_becomes_error_result(self):
        """Test that a rule violation is returned, not raised."""
        use_case = LookupUseCase(Mock(side_effect=InactiveTaskError("Design")))

        result = await use_case.execute(3)

        assert result.is_success is False
        assert result.status_code == ApiStatusCode.BAD_REQUEST
        assert result.error_kind == ErrorKind.TASK_INACTIVE
        assert "Design" in result.message

    @pytest.mark.asyncio
    async def test_store_failure_becomes_internal_error(self):
        """Test that an unexpected failure is reported as 500."""
        use_case = LookupUseCase(Mock(side_effect=ConnectionError("database is locked")))

        result = await use_case.execute(3)

        assert result.status_code == ApiStatusCode.INTERNAL_SERVER_ERROR
        assert result.error_kind == ErrorKind.INTERNAL_ERROR
        assert result.message == INTERNAL_ERROR_MESSAGE


class FindThing(GetByIdUseCase[str]):

    def __init__(self, lookup):
        self.lookup = lookup

    async def _execute_business_logic(self, request: int) -> str:
        found = self.lookup(request)
        if found is None:
            raise EntityNotFoundError("Thing", request)
        return found


class TestGetByIdUseCase:
    """Test cases for get-by-id use cases."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity_id", [0, -4])
    async def test_non_positive_id_is_not_found(self, entity_id):
        """Test that ids no entity can have are looked up like any other."""
        lookup = Mock(return_value=None)

        result = await FindThing(lookup).execute(entity_id)

        assert result.status_code == ApiStatusCode.NOT_FOUND
        assert result.error_kind == ErrorKind.NOT_FOUND
        lookup.assert_called_once_with(entity_id)

    @pytest.mark.asyncio
    async def test_missing_entity_is_not_found(self):
        result = await FindThing(Mock(return_value=None)).execute(8)

        assert result.status_code == ApiStatusCode.NOT_FOUND
        assert result.message == "Thing with id 8 not found"
