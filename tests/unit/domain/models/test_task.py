"""
Unit tests for Task domain model.
"""

import pytest
from app.domain.models.base import ValidationError
from app.domain.models.project import Project
from app.domain.models.task import Task, TASK_NAME_MAX_LENGTH


class TestTask:
    """Test cases for Task domain model."""

    def test_create_task_success(self):
        """Test successful task creation."""
        task = Task.create(name="Design", project_id=1)

        assert task.name == "Design"
        assert task.project_id == 1
        assert task.is_active is True
        assert task.project is None
        assert task.accepts_time_entries is True

    def test_inactive_task_refuses_time(self):
        """Test that an inactive task does not accept time entries."""
        task = Task.create(name="Design", project_id=1, is_active=False)

        assert task.accepts_time_entries is False

    def test_blank_name_rejected(self):
        """Test that a blank task name is rejected."""
        with pytest.raises(ValidationError):
            Task.create(name=" ", project_id=1)

    def test_name_length_limit(self):
        """Test the task name length limit."""
        Task.create(name="t" * TASK_NAME_MAX_LENGTH, project_id=1)

        with pytest.raises(ValidationError):
            Task.create(name="t" * (TASK_NAME_MAX_LENGTH + 1), project_id=1)

    def test_project_id_required(self):
        """Test that a non-positive project id is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Task.create(name="Design", project_id=0)

        assert exc_info.value.field == "project_id"

    def test_update_keeps_project_when_not_moved(self):
        """Test that the attached project survives an update in place."""
        project = Project(id=1, name="Website", code="WEB")
        task = Task(id=5, name="Design", project_id=1, project=project)

        task.update_info(name="Design v2", project_id=1, is_active=False)

        assert task.name == "Design v2"
        assert task.is_active is False
        assert task.project is project

    def test_update_drops_project_when_moved(self):
        """Test that moving a task detaches the old project."""
        project = Project(id=1, name="Website", code="WEB")
        task = Task(id=5, name="Design", project_id=1, project=project)

        task.update_info(name="Design", project_id=2, is_active=True)

        assert task.project_id == 2
        assert task.project is None

    def test_to_dict_nests_project(self):
        """Test dictionary conversion with the project attached."""
        project = Project(id=1, name="Website", code="WEB")
        task = Task(id=5, name="Design", project_id=1, project=project)

        data = task.to_dict()

        assert data["name"] == "Design"
        assert data["project"]["code"] == "WEB"
