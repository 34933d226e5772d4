"""
Project repository interface.
Defines the contract for project data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.project import Project


class ProjectRepository(ABC):
    """
    Repository interface for Project aggregate.
    Defines all operations needed for project data persistence.
    """

    @abstractmethod
    def save(self, project: Project) -> Project:
        """
        Insert a new project or overwrite an existing one, then commit.
        Returns the saved project with its store-assigned ID.
        """
        pass

    @abstractmethod
    def find_by_id(self, project_id: int) -> Optional[Project]:
        """
        Find a project by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[Project]:
        """
        Find a project by its code (exact, case-sensitive match).
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Project]:
        """
        Find all projects ordered by name.
        """
        pass

    @abstractmethod
    def delete(self, project_id: int) -> bool:
        """
        Delete a project and commit.
        Returns False if there was nothing to delete.
        """
        pass
