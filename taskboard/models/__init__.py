"""
Database models for the task service.
"""

from .user import User
from .project import Project
from .participant import Participant
from .task import Task, task_participants

__all__ = [
    'User',
    'Project',
    'Participant',
    'Task',
    'task_participants'
]
