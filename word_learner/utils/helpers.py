"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional

from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract player identity information from request."""
    if request_obj is None:
        request_obj = request

    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'session_id': getattr(request_obj, 'sid', None)  # Set on Socket.IO requests
    }


def parse_word_length(value: Any, default: int) -> int:
    """
    Reads a word length from request data.

    Raises:
        ValueError: If the value is not an integer
    """
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError("Word length must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError("Word length must be an integer")
