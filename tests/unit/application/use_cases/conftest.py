"""
In-memory repositories for use case tests.
They honour the same contracts as the SQLAlchemy repositories: ids assigned on
save, orderings, and owning entities attached on read.
"""

import copy
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

import pytest

from app.domain.models.project import Project
from app.domain.models.task import Task
from app.domain.models.time_entry import TimeEntry
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.task_repository import TaskRepository
from app.domain.repositories.time_entry_repository import TimeEntryRepository


class InMemoryProjectRepository(ProjectRepository):

    def __init__(self):
        self.projects: Dict[int, Project] = {}
        self.next_id = 1
        self.save_count = 0

    def save(self, project: Project) -> Project:
        stored = copy.deepcopy(project)
        if stored.id is None:
            stored.id = self.next_id
            self.next_id += 1
        self.projects[stored.id] = stored
        self.save_count += 1
        return copy.deepcopy(stored)

    def find_by_id(self, project_id: int) -> Optional[Project]:
        project = self.projects.get(project_id)
        return copy.deepcopy(project) if project else None

    def find_by_code(self, code: str) -> Optional[Project]:
        for project in self.projects.values():
            if project.code == code:
                return copy.deepcopy(project)
        return None

    def find_all(self) -> List[Project]:
        return [copy.deepcopy(p) for p in sorted(self.projects.values(), key=lambda p: (p.name, p.id))]

    def delete(self, project_id: int) -> bool:
        return self.projects.pop(project_id, None) is not None


class InMemoryTaskRepository(TaskRepository):

    def __init__(self, project_repository: InMemoryProjectRepository):
        self.project_repository = project_repository
        self.tasks: Dict[int, Task] = {}
        self.next_id = 1
        self.save_count = 0

    def _attach(self, task: Task) -> Task:
        attached = copy.deepcopy(task)
        attached.project = self.project_repository.find_by_id(task.project_id)
        return attached

    def save(self, task: Task) -> Task:
        stored = copy.deepcopy(task)
        stored.project = None
        if stored.id is None:
            stored.id = self.next_id
            self.next_id += 1
        self.tasks[stored.id] = stored
        self.save_count += 1
        return self._attach(stored)

    def find_by_id(self, task_id: int) -> Optional[Task]:
        task = self.tasks.get(task_id)
        return self._attach(task) if task else None

    def find_by_name(self, project_id: int, name: str) -> Optional[Task]:
        for task in self.tasks.values():
            if task.project_id == project_id and task.name == name:
                return self._attach(task)
        return None

    def find_all(self) -> List[Task]:
        return [self._attach(t) for t in sorted(self.tasks.values(), key=lambda t: (t.name, t.id))]

    def find_active(self) -> List[Task]:
        return [task for task in self.find_all() if task.is_active]

    def count_by_project(self, project_id: int) -> int:
        return sum(1 for task in self.tasks.values() if task.project_id == project_id)

    def delete(self, task_id: int) -> bool:
        return self.tasks.pop(task_id, None) is not None


class InMemoryTimeEntryRepository(TimeEntryRepository):

    def __init__(self, task_repository: InMemoryTaskRepository):
        self.task_repository = task_repository
        self.entries: Dict[int, TimeEntry] = {}
        self.next_id = 1
        self.save_count = 0

    def _attach(self, entry: TimeEntry) -> TimeEntry:
        attached = copy.deepcopy(entry)
        attached.task = self.task_repository.find_by_id(entry.task_id)
        return attached

    def save(self, time_entry: TimeEntry) -> TimeEntry:
        stored = copy.deepcopy(time_entry)
        stored.task = None
        stored.id = self.next_id
        self.next_id += 1
        self.entries[stored.id] = stored
        self.save_count += 1
        return self._attach(stored)

    def find_all(self) -> List[TimeEntry]:
        ordered = sorted(self.entries.values(), key=lambda e: e.id)
        ordered = sorted(ordered, key=lambda e: e.date, reverse=True)
        return [self._attach(e) for e in ordered]

    def find_by_date(self, entry_date: date) -> List[TimeEntry]:
        ordered = sorted(self.entries.values(), key=lambda e: e.id)
        return [self._attach(e) for e in ordered if e.date == entry_date]

    def find_by_date_range(self, start_date: date, end_date: date) -> List[TimeEntry]:
        return [e for e in self.find_all() if start_date <= e.date < end_date]

    def get_total_hours_for_date(self, entry_date: date) -> Decimal:
        return sum((e.hours for e in self.entries.values() if e.date == entry_date), Decimal("0"))

    def count_by_task(self, task_id: int) -> int:
        return sum(1 for entry in self.entries.values() if entry.task_id == task_id)


@pytest.fixture
def project_repository():
    return InMemoryProjectRepository()


@pytest.fixture
def task_repository(project_repository):
    return InMemoryTaskRepository(project_repository)


@pytest.fixture
def time_entry_repository(task_repository):
    return InMemoryTimeEntryRepository(task_repository)


@pytest.fixture
def project(project_repository):
    return project_repository.save(Project.create(name="Website", code="P1"))


@pytest.fixture
def task(task_repository, project):
    return task_repository.save(Task.create(name="T1", project_id=project.id))
