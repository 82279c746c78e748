"""
Tasks controller: thin layer that delegates to TasksService
"""
from flask import Blueprint, request

from taskboard.services.tasks_service import TasksService, TaskServiceError
from taskboard.utils.decorators import project_participant_required
from taskboard.utils.response_helpers import success_response, error_response

tasks_bp = Blueprint('tasks', __name__)


def get_request_body():
    """JSON body, falling back to form fields."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    return data or {}


def service_error_response(error):
    return error_response(str(error), error.status_code, error.code, error.details or None)


@tasks_bp.route('', methods=['GET'], strict_slashes=False)
@project_participant_required
def list_tasks(current_user, project_id):
    """
    List project tasks
    ---
    tags:
      - Tasks
    summary: List all tasks of a project
    description: Tasks ordered by creation time (oldest first), with creator and participant users expanded.
    security:
      - Bearer: []
    parameters:
      - in: path
        name: project_id
        type: integer
        required: true
    responses:
      200:
        description: Tasks retrieved successfully
        schema:
          type: object
          properties:
            success:
              type: boolean
            data:
              type: array
              items:
                $ref: '#/definitions/Task'
      401:
        description: Unauthorized
      403:
        description: Not an active participant of the project
      500:
        description: Server error
    """
    try:
        return success_response(data=TasksService().list_tasks(project_id))
    except TaskServiceError as e:
        return service_error_response(e)


@tasks_bp.route('', methods=['POST'], strict_slashes=False)
@project_participant_required
def create_task(current_user, project_id):
    """
    Create a task
    ---
    tags:
      - Tasks
    summary: Create a task in a project
    description: The caller becomes the task creator. Dates are optional but must be given together.
    security:
      - Bearer: []
    parameters:
      - in: path
        name: project_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - title
          properties:
            title:
              type: string
            description:
              type: string
            start:
              type: string
              format: date-time
            end:
              type: string
              format: date-time
    responses:
      201:
        description: Task created
        schema:
          type: object
          properties:
            success:
              type: boolean
            data:
              $ref: '#/definitions/Task'
      400:
        description: required_parameter_missing, invalid_date_format, either_both_dates_or_none or end_date_before_start
        schema:
          $ref: '#/definitions/ErrorResponse'
      401:
        description: Unauthorized
      403:
        description: Not an active participant of the project
      500:
        description: creation_failed
    """
    try:
        data = TasksService().create_task(current_user, project_id, get_request_body())
        return success_response(data=data, status=201)
    except TaskServiceError as e:
        return service_error_response(e)


@tasks_bp.route('/<int:task_id>', methods=['PUT'])
@project_participant_required
def update_task(current_user, project_id, task_id):
    """
    Update a task
    ---
    tags:
      - Tasks
    summary: Update title, description and dates of a task
    description: |
      The title is always required. A description key, even null, replaces the stored value.
      Sending neither start nor end clears a task's existing dates.
    security:
      - Bearer: []
    parameters:
      - in: path
        name: project_id
        type: integer
        required: true
      - in: path
        name: task_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - title
          properties:
            title:
              type: string
            description:
              type: string
            start:
              type: string
              format: date-time
            end:
              type: string
              format: date-time
    responses:
      200:
        description: Task updated
        schema:
          type: object
          properties:
            success:
              type: boolean
            data:
              $ref: '#/definitions/Task'
      400:
        description: Validation error
        schema:
          $ref: '#/definitions/ErrorResponse'
      403:
        description: Task belongs to another project
      404:
        description: Task not found
      409:
        description: concurrent_modification
      500:
        description: Server error
    """
    try:
        data = TasksService().update_task(current_user, project_id, task_id, get_request_body())
        return success_response(data=data)
    except TaskServiceError as e:
        return service_error_response(e)


@tasks_bp.route('/<int:task_id>/participants/<int:participant_id>', methods=['POST'])
@project_participant_required
def add_task_participant(current_user, project_id, task_id, participant_id):
    """
    Add a participant to a task
    ---
    tags:
      - Tasks
    summary: Assign a project participant to a task
    security:
      - Bearer: []
    parameters:
      - in: path
        name: project_id
        type: integer
        required: true
      - in: path
        name: task_id
        type: integer
        required: true
      - in: path
        name: participant_id
        type: integer
        required: true
    responses:
      200:
        description: Participant added
        schema:
          type: object
          properties:
            success:
              type: boolean
            data:
              $ref: '#/definitions/Task'
      403:
        description: Task belongs to another project
      404:
        description: Task or participant not found in this project
      409:
        description: already_is_a_participant
      500:
        description: Server error
    """
    try:
        data = TasksService().add_participant(current_user, project_id, task_id, participant_id)
        return success_response(data=data)
    except TaskServiceError as e:
        return service_error_response(e)


@tasks_bp.route('/<int:task_id>', methods=['DELETE'])
@project_participant_required
def delete_task(current_user, project_id, task_id):
    """
    Delete a task
    ---
    tags:
      - Tasks
    summary: Permanently delete a task
    description: Returns the task as it was before removal.
    security:
      - Bearer: []
    parameters:
      - in: path
        name: project_id
        type: integer
        required: true
      - in: path
        name: task_id
        type: integer
        required: true
    responses:
      200:
        description: Task deleted
        schema:
          type: object
          properties:
            success:
              type: boolean
            data:
              $ref: '#/definitions/Task'
      403:
        description: Task belongs to another project
      404:
        description: Task not found
      500:
        description: Server error
    """
    try:
        data = TasksService().delete_task(current_user, project_id, task_id)
        return success_response(data=data)
    except TaskServiceError as e:
        return service_error_response(e)
