"""
Logging helpers for structured audit logging of project-scoped access.
"""

from flask import current_app


def log_project_access_attempt(user_id, project_id, guard, success=True):
    """
    Log project access attempts for security auditing.

    Args:
        user_id: ID of the user attempting access (None when unauthenticated)
        project_id: ID of the project in the request path
        guard: Name of the guard that made the decision
        success: Whether the access was allowed (default: True)
    """
    try:
        status = 'SUCCESS' if success else 'DENIED'
        log = current_app.logger.info if success else current_app.logger.warning
        log(
            f"Project access attempt: user_id={user_id or 'N/A'}, project_id={project_id}, "
            f"guard={guard}, status={status}"
        )
    except Exception as e:
        # Don't fail the request if logging fails
        current_app.logger.warning(f"Failed to log project access attempt: {str(e)}")


def log_project_operation(user_id, project_id, operation, resource_type=None, resource_id=None):
    """
    Log project-related operations for auditing.

    Args:
        user_id: ID of the user performing the operation
        project_id: ID of the project
        operation: Operation being performed (e.g., 'create', 'update', 'delete')
        resource_type: Type of resource (e.g., 'task')
        resource_id: ID of the resource (optional)
    """
    try:
        resource_info = f", resource={resource_type}" if resource_type else ""
        resource_id_info = f":{resource_id}" if resource_id else ""

        current_app.logger.info(
            f"Project operation: user_id={user_id}, project_id={project_id}, "
            f"operation={operation}{resource_info}{resource_id_info}"
        )
    except Exception as e:
        current_app.logger.warning(f"Failed to log project operation: {str(e)}")
