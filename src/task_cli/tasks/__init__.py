"""
Task subsystem.

Components:
- errors.py: TaskError and its ValidationError / NotFoundError / StorageError subclasses
- task_models.py: data structures (Task, TaskStatus, TaskPatch) and the patch merge
- task_store.py: JSON-file storage of the whole collection
- task_registry.py: in-memory CRUD + status lifecycle, saved after every mutation
"""

from .errors import NotFoundError, StorageError, TaskError, ValidationError
from .task_models import Task, TaskPatch, TaskStatus
from .task_registry import TaskRegistry
from .task_store import TaskStore

__all__ = [
    "NotFoundError",
    "StorageError",
    "Task",
    "TaskError",
    "TaskPatch",
    "TaskRegistry",
    "TaskStatus",
    "TaskStore",
    "ValidationError",
]
