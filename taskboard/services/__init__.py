from taskboard.services.tasks_service import (
    TasksService,
    TaskServiceError,
    TaskValidationError,
    TaskPermissionError,
    TaskNotFoundError,
    TaskConflictError,
    TaskPersistenceError
)

__all__ = [
    'TasksService',
    'TaskServiceError',
    'TaskValidationError',
    'TaskPermissionError',
    'TaskNotFoundError',
    'TaskConflictError',
    'TaskPersistenceError'
]
