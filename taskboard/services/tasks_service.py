"""
Task service: validation, persistence and notifications for project tasks.

Controllers stay thin and translate TaskServiceError into error responses.
"""
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from taskboard.events import emit_api_action
from taskboard.models import Task
from taskboard.models.timestamps import utcnow
from taskboard.repositories import TaskRepository, ParticipantRepository
from taskboard.schemas import load_task_payload
from taskboard.utils.input_validators import is_blank
from taskboard.utils.logging_helpers import log_project_operation


class TaskServiceError(Exception):
    """Base error carrying the HTTP status and machine readable code."""
    status_code = 500
    code = 'internal_server_error'

    def __init__(self, message, code=None, details=None):
        super().__init__(message)
        if code:
            self.code = code
        self.details = details or {}


class TaskValidationError(TaskServiceError):
    status_code = 400
    code = 'required_parameter_missing'


class TaskPermissionError(TaskServiceError):
    status_code = 403
    code = 'permission_error'


class TaskNotFoundError(TaskServiceError):
    status_code = 404
    code = 'not_found'


class TaskConflictError(TaskServiceError):
    status_code = 409
    code = 'already_is_a_participant'


class TaskPersistenceError(TaskServiceError):
    status_code = 500
    code = 'internal_server_error'


def _description_value(value):
    if value is None or isinstance(value, str):
        return value
    return str(value)


class TasksService:
    """Operations on the tasks of a single project."""

    RESOURCE_TYPE = 'task'

    def __init__(self, tasks=None, participants=None, emit=None):
        self.tasks = tasks or TaskRepository()
        self.participants = participants or ParticipantRepository()
        self.emit = emit or emit_api_action

    def list_tasks(self, project_id):
        try:
            tasks = self.tasks.list_for_project(project_id)
            return [task.to_dict() for task in tasks]
        except SQLAlchemyError as e:
            current_app.logger.error(f'List tasks error for project {project_id}: {e}', exc_info=True)
            raise TaskPersistenceError('Failed to retrieve tasks')

    def create_task(self, current_user, project_id, data):
        payload, errors = load_task_payload(data)
        title = self._require_title(payload)
        start, end = self._validate_dates(payload, errors)

        task = Task(
            title=title,
            creator_id=current_user.id,
            project_id=project_id,
            description=_description_value(payload.get('description')),
            start=start,
            end=end
        )

        try:
            task = self.tasks.add(task)
            task = self.tasks.populate(task)
            result = task.to_dict()
        except SQLAlchemyError as e:
            current_app.logger.error(f'Create task error for project {project_id}: {e}')
            raise TaskPersistenceError('Task creation failed', code='creation_failed')

        return self._announce('create', result, current_user, project_id)

    def update_task(self, current_user, project_id, task_id, data):
        task = self._load_task(project_id, task_id)

        payload, errors = load_task_payload(data)
        title = self._require_title(payload)
        start, end = self._validate_dates(payload, errors)

        task.title = title
        if 'description' in payload:
            task.description = _description_value(payload['description'])

        if start is not None and end is not None:
            task.start = start
            task.end = end
        elif start is None and end is None and task.has_dates():
            # Omitting both dates clears an existing date pair
            task.start = None
            task.end = None

        result = self._persist(task, 'Update task')
        return self._announce('update', result, current_user, project_id)

    def add_participant(self, current_user, project_id, task_id, participant_id):
        task = self._load_task(project_id, task_id)

        try:
            participant = self.participants.get_in_project(project_id, participant_id)
        except SQLAlchemyError as e:
            current_app.logger.error(f'Participant lookup error for {participant_id}: {e}', exc_info=True)
            participant = None

        if not participant:
            raise TaskNotFoundError('Participant not found in this project')

        if task.has_participant(participant):
            raise TaskConflictError('Participant is already assigned to this task')

        task.participants.append(participant)
        # A collection change alone does not touch the task row; bump it so the version advances
        task.updated_at = utcnow()

        result = self._persist(task, 'Add task participant')
        return self._announce('update', result, current_user, project_id)

    def delete_task(self, current_user, project_id, task_id):
        task = self._load_task(project_id, task_id)

        try:
            snapshot = task.to_dict()
            self.tasks.remove(task)
        except StaleDataError:
            raise TaskConflictError('Task was modified by another request', code='concurrent_modification')
        except SQLAlchemyError as e:
            current_app.logger.error(f'Delete task error for task {task_id}: {e}')
            raise TaskPersistenceError('Failed to delete task')

        return self._announce('delete', snapshot, current_user, project_id)

    def _load_task(self, project_id, task_id):
        try:
            task = self.tasks.get(task_id)
        except SQLAlchemyError as e:
            current_app.logger.error(f'Task lookup error for task {task_id}: {e}', exc_info=True)
            raise TaskPersistenceError('Failed to retrieve task')

        if not task:
            raise TaskNotFoundError('Task not found')

        if task.project_id != project_id:
            raise TaskPermissionError('Task does not belong to this project')

        return task

    def _persist(self, task, operation):
        try:
            task = self.tasks.save(task)
            task = self.tasks.populate(task)
            return task.to_dict()
        except StaleDataError:
            raise TaskConflictError('Task was modified by another request', code='concurrent_modification')
        except IntegrityError:
            # Lost a race against a concurrent add of the same participant
            raise TaskConflictError('Participant is already assigned to this task')
        except SQLAlchemyError as e:
            current_app.logger.error(f'{operation} error for task {task.id}: {e}')
            raise TaskPersistenceError('Failed to save task')

    def _announce(self, action, result, current_user, project_id):
        log_project_operation(current_user.id, project_id, action, self.RESOURCE_TYPE, result.get('id'))
        self.emit(action, self.RESOURCE_TYPE, result, current_user.to_dict())
        return result

    @staticmethod
    def _require_title(payload):
        title = payload.get('title')
        if is_blank(title):
            raise TaskValidationError('Title is required')
        return title.strip()

    @staticmethod
    def _validate_dates(payload, errors):
        if 'start' in errors or 'end' in errors:
            raise TaskValidationError(
                'Dates must be ISO-8601 formatted',
                code='invalid_date_format',
                details={key: errors[key] for key in ('start', 'end') if key in errors}
            )

        start = payload.get('start')
        end = payload.get('end')

        if (start is None) != (end is None):
            raise TaskValidationError('Provide both start and end dates or neither', code='either_both_dates_or_none')

        if start is not None and end < start:
            raise TaskValidationError('End date is before start date', code='end_date_before_start')

        return start, end
