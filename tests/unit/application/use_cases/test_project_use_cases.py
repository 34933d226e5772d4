"""
Unit tests for project use cases.
"""

import pytest

from app.application.dto.project_dto import CreateProjectRequestDTO, UpdateProjectRequestDTO
from app.application.use_cases.base_use_case import ApiStatusCode
from app.application.use_cases.project_use_cases import (
    CreateProjectUseCase, UpdateProjectUseCase, DeleteProjectUseCase,
    GetProjectByIdUseCase, ListProjectsUseCase
)
from app.domain.models.base import ErrorKind
from app.domain.models.project import Project
from app.domain.models.task import Task


class TestCreateProjectUseCase:
    """Test cases for project creation."""

    @pytest.mark.asyncio
    async def test_create_project(self, project_repository):
        """Test that a project is stored and returned with its id."""
        use_case = CreateProjectUseCase(project_repository)

        result = await use_case.execute(CreateProjectRequestDTO(name="Website", code="WEB"))

        assert result.is_success
        assert result.message == "Project created successfully"
        assert result.data.id == 1
        assert result.data.code == "WEB"
        assert result.data.is_active is True

    @pytest.mark.asyncio
    async def test_duplicate_code_rejected(self, project_repository, project):
        """Test that codes are unique across all projects."""
        use_case = CreateProjectUseCase(project_repository)

        result = await use_case.execute(CreateProjectRequestDTO(name="Other", code=project.code))

        assert result.status_code == ApiStatusCode.BAD_REQUEST
        assert result.error_kind == ErrorKind.DUPLICATE_CODE
        assert project_repository.save_count == 1


class TestUpdateProjectUseCase:
    """Test cases for project updates."""

    @pytest.mark.asyncio
    async def test_update_overwrites_fields(self, project_repository, project):
        use_case = UpdateProjectUseCase(project_repository)

        result = await use_case.execute(
            UpdateProjectRequestDTO(id=project.id, name="Portal", code="PORTAL", is_active=False)
        )

        assert result.is_success
        stored = project_repository.find_by_id(project.id)
        assert stored.name == "Portal"
        assert stored.code == "PORTAL"
        assert stored.is_active is False

    @pytest.mark.asyncio
    async def test_keeping_own_code_is_allowed(self, project_repository, project):
        """Test that a project may be saved with its unchanged code."""
        use_case = UpdateProjectUseCase(project_repository)

        result = await use_case.execute(
            UpdateProjectRequestDTO(id=project.id, name="Renamed", code=project.code)
        )

        assert result.is_success
        assert result.data.name == "Renamed"

    @pytest.mark.asyncio
    async def test_taking_another_code_rejected(self, project_repository, project):
        other = project_repository.save(Project.create(name="Mobile", code="MOB"))
        use_case = UpdateProjectUseCase(project_repository)

        result = await use_case.execute(
            UpdateProjectRequestDTO(id=other.id, name="Mobile", code=project.code)
        )

        assert result.error_kind == ErrorKind.DUPLICATE_CODE
        assert project_repository.find_by_id(other.id).code == "MOB"

    @pytest.mark.asyncio
    async def test_missing_project_is_not_found(self, project_repository):
        use_case = UpdateProjectUseCase(project_repository)

        result = await use_case.execute(UpdateProjectRequestDTO(id=42, name="X", code="X"))

        assert result.status_code == ApiStatusCode.NOT_FOUND


class TestDeleteProjectUseCase:
    """Test cases for project deletion."""

    @pytest.mark.asyncio
    async def test_delete_empty_project(self, project_repository, task_repository, project):
        use_case = DeleteProjectUseCase(project_repository, task_repository)

        result = await use_case.execute(project.id)

        assert result.is_success
        assert result.data is True
        assert project_repository.find_by_id(project.id) is None

    @pytest.mark.asyncio
    async def test_project_with_tasks_is_kept(self, project_repository, task_repository, project):
        """Test that a project owning tasks cannot be deleted."""
        task_repository.save(Task.create(name="Design", project_id=project.id))
        task_repository.save(Task.create(name="Build", project_id=project.id))
        use_case = DeleteProjectUseCase(project_repository, task_repository)

        result = await use_case.execute(project.id)

        assert result.status_code == ApiStatusCode.BAD_REQUEST
        assert result.error_kind == ErrorKind.HAS_DEPENDENTS
        assert "2" in result.message
        assert project_repository.find_by_id(project.id) is not None

    @pytest.mark.asyncio
    async def test_delete_after_tasks_removed(self, project_repository, task_repository, project, task):
        use_case = DeleteProjectUseCase(project_repository, task_repository)

        refused = await use_case.execute(project.id)
        task_repository.delete(task.id)
        result = await use_case.execute(project.id)

        assert refused.error_kind == ErrorKind.HAS_DEPENDENTS
        assert result.is_success
        assert project_repository.find_by_id(project.id) is None

    @pytest.mark.asyncio
    async def test_missing_project_is_not_found(self, project_repository, task_repository):
        result = await DeleteProjectUseCase(project_repository, task_repository).execute(99)

        assert result.status_code == ApiStatusCode.NOT_FOUND


class TestProjectQueries:
    """Test cases for project lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, project_repository, project):
        result = await GetProjectByIdUseCase(project_repository).execute(project.id)

        assert result.is_success
        assert result.data.name == "Website"

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, project_repository):
        result = await GetProjectByIdUseCase(project_repository).execute(7)

        assert result.status_code == ApiStatusCode.NOT_FOUND
        assert result.data is None

    @pytest.mark.asyncio
    async def test_list_ordered_by_name(self, project_repository):
        """Test that projects come back ordered by name."""
        project_repository.save(Project.create(name="Zeta", code="Z"))
        project_repository.save(Project.create(name="Alpha", code="A"))

        result = await ListProjectsUseCase(project_repository).execute(None)

        assert [p.name for p in result.data] == ["Alpha", "Zeta"]
        assert result.message == "Retrieved 2 project(s)"

    @pytest.mark.asyncio
    async def test_list_empty(self, project_repository):
        result = await ListProjectsUseCase(project_repository).execute(None)

        assert result.is_success
        assert result.data == []
