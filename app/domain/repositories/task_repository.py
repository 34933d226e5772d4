"""
Task repository interface.
Defines the contract for task data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.task import Task


class TaskRepository(ABC):
    """
    Repository interface for Task entity.
    Tasks returned by find methods carry their owning project.
    """

    @abstractmethod
    def save(self, task: Task) -> Task:
        """
        Insert a new task or overwrite an existing one, then commit.
        Returns the saved task with its ID and owning project attached.
        """
        pass

    @abstractmethod
    def find_by_id(self, task_id: int) -> Optional[Task]:
        """
        Find a task by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def find_by_name(self, project_id: int, name: str) -> Optional[Task]:
        """
        Find a task by exact name within a project.
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Task]:
        """
        Find all tasks ordered by name.
        """
        pass

    @abstractmethod
    def find_active(self) -> List[Task]:
        """
        Find active tasks ordered by name.
        """
        pass

    @abstractmethod
    def count_by_project(self, project_id: int) -> int:
        """
        Count the tasks owned by a project.
        """
        pass

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """
        Delete a task and commit.
        Returns False if there was nothing to delete.
        """
        pass
