"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from sqlalchemy import (
    Column, Integer, String, Boolean, Numeric, Date, ForeignKey,
    Index, UniqueConstraint, CheckConstraint
)
from sqlalchemy.orm import relationship

from app.infrastructure.db.database import Base


class ProjectModel(Base):
    """Project table"""
    __tablename__ = 'projects'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    code = Column(String(50), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # Relationships
    tasks = relationship("TaskModel", back_populates="project", passive_deletes="all")

    # Indexes
    __table_args__ = (
        Index('ix_projects_code', 'code', unique=True),
    )

    def __repr__(self):
        return f"<ProjectModel(id={self.id}, code='{self.code}')>"


class TaskModel(Base):
    """Task table"""
    __tablename__ = 'tasks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(300), nullable=False)
    project_id = Column(Integer, ForeignKey('projects.id', ondelete='RESTRICT'), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # Relationships
    project = relationship("ProjectModel", back_populates="tasks")
    time_entries = relationship("TimeEntryModel", back_populates="task", passive_deletes="all")

    __table_args__ = (
        UniqueConstraint('name', 'project_id', name='uq_tasks_name_project'),
        Index('ix_tasks_project_id', 'project_id'),
    )

    def __repr__(self):
        return f"<TaskModel(id={self.id}, name='{self.name}', project_id={self.project_id})>"


class TimeEntryModel(Base):
    """Time entry table"""
    __tablename__ = 'time_entries'

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False)
    hours = Column(Numeric(4, 2), nullable=False)
    description = Column(String(500), nullable=False)
    task_id = Column(Integer, ForeignKey('tasks.id', ondelete='RESTRICT'), nullable=False)

    # Relationships
    task = relationship("TaskModel", back_populates="time_entries")

    __table_args__ = (
        CheckConstraint('hours >= 0.1 AND hours <= 24', name='ck_time_entries_hours_range'),
        Index('ix_time_entries_date', 'date'),
        Index('ix_time_entries_date_task', 'date', 'task_id'),
        Index('ix_time_entries_task_id', 'task_id'),
    )

    def __repr__(self):
        return f"<TimeEntryModel(id={self.id}, date={self.date}, hours={self.hours})>"
