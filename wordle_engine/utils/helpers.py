"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from a request-like object."""
    if request_obj is None:
        return {'user_ip': 'system', 'session_id': None}

    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        # Socket.IO requests carry a sid, plain HTTP requests do not
        'session_id': getattr(request_obj, 'sid', None),
    }


def normalize_key(key) -> str:
    """Map a raw key name from a client onto ENTER, BACKSPACE or a single letter."""
    if not isinstance(key, str):
        return ''
    key = key.strip().upper()
    if key in ('ENTER', 'RETURN'):
        return 'ENTER'
    if key in ('BACKSPACE', 'DELETE', 'DEL', '⌫'):
        return 'BACKSPACE'
    return key
