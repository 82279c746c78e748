"""
Application-wide error handlers rendering the standard error envelope
"""
from flask import current_app
from werkzeug.exceptions import HTTPException

from taskboard import db
from taskboard.utils.response_helpers import error_response, internal_error


def register_error_handlers(app):
    """Register handlers for errors raised outside the task service."""

    @app.errorhandler(404)
    def handle_not_found(error):
        return error_response('Resource not found', 404, 'not_found')

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return error_response('Method not allowed', 405, 'method_not_allowed')

    @app.errorhandler(413)
    def handle_payload_too_large(error):
        return error_response('Request body too large', 413, 'payload_too_large')

    @app.errorhandler(429)
    def handle_rate_limited(error):
        return error_response(f'Rate limit exceeded: {error.description}', 429, 'rate_limit_exceeded')

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.description or error.name, error.code, error.name.lower().replace(' ', '_'))

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        current_app.logger.error(f'Unhandled error: {str(error)}', exc_info=True)
        return internal_error()
