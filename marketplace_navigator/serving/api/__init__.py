"""
API Module
"""
from .main import create_api_app, install_session
from .middleware import RequestLoggingMiddleware

__all__ = [
    "create_api_app",
    "install_session",
    "RequestLoggingMiddleware",
]
