"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict
from flask import request


def get_client_ip(request_obj=None) -> str:
    """Best-effort client address for log entries."""
    if request_obj is None:
        request_obj = request

    return request_obj.remote_addr or 'unknown'


def error_body(error: Any) -> Dict[str, Any]:
    """JSON body shared by every failed HTTP response and socket error event."""
    return {
        'success': False,
        'error': str(error)
    }
