"""
API middleware and exception handlers.
"""
from smartpark.middleware.error_handler import setup_exception_handlers
from smartpark.middleware.request_logging import setup_request_logging

__all__ = ["setup_exception_handlers", "setup_request_logging"]
