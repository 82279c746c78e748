"""
Middleware package for Flask application
"""
from taskboard.middleware.request_logging import init_request_logging, mask_sensitive_data

__all__ = ['init_request_logging', 'mask_sensitive_data']
