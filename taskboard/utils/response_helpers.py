"""
Unified API response helpers for consistent response format across all routes
"""
from flask import jsonify
from typing import Any, Optional, Dict


def success_response(data: Any = None, message: Optional[str] = None, meta: Optional[Dict] = None, status: int = 200):
    """
    Create a standardized success response.

    Args:
        data: Response data (can be any JSON-serializable type)
        message: Optional success message
        meta: Optional metadata
        status: HTTP status code (default: 200)

    Returns:
        tuple: (jsonify response, status code)

    Example:
        return success_response(data=task.to_dict(), status=201)
    """
    response = {
        'success': True,
        'data': data,
        'error': None
    }

    if message:
        response['message'] = message

    if meta:
        response['meta'] = meta

    return jsonify(response), status


def error_response(message: str, status_code: int = 400, error_code: Optional[str] = None,
                  details: Optional[Dict] = None, data: Any = None):
    """
    Create a standardized error response.

    Args:
        message: Human readable error message
        status_code: HTTP status code (default: 400)
        error_code: Machine readable code, e.g. 'required_parameter_missing'
        details: Optional additional error details
        data: Optional data to include

    Returns:
        tuple: (jsonify response, status code)

    Example:
        return error_response(
            message='End date is before start date',
            status_code=400,
            error_code='end_date_before_start'
        )
    """
    response = {
        'success': False,
        'data': data,
        'error': {
            'message': message,
            'status_code': status_code
        }
    }

    if error_code:
        response['error']['code'] = error_code

    if details:
        response['error']['details'] = details

    return jsonify(response), status_code


# Convenience functions for common HTTP status codes
def bad_request(message: str = 'Bad Request', error_code: str = 'bad_request', details: Optional[Dict] = None):
    """400 Bad Request"""
    return error_response(message, 400, error_code, details)


def unauthorized(message: str = 'Authentication required', error_code: str = 'authentication_required',
                 details: Optional[Dict] = None):
    """401 Unauthorized"""
    return error_response(message, 401, error_code, details)


def forbidden(message: str = 'Access forbidden', error_code: str = 'permission_error', details: Optional[Dict] = None):
    """403 Forbidden"""
    return error_response(message, 403, error_code, details)


def not_found(message: str = 'Resource not found', error_code: str = 'not_found', details: Optional[Dict] = None):
    """404 Not Found"""
    return error_response(message, 404, error_code, details)


def internal_error(message: str = 'Internal server error', error_code: str = 'internal_server_error',
                   details: Optional[Dict] = None):
    """500 Internal Server Error"""
    return error_response(message, 500, error_code, details)
