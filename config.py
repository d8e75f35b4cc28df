# -*- coding: utf-8 -*-
"""
Posts browser client configuration.
"""

import os
import sys

# ============================================================================
# Paths (PyInstaller compatible)
# ============================================================================
# BASE_DIR: where the executable lives (logs and other user data)

if getattr(sys, 'frozen', False):
    BASE_DIR = os.path.dirname(sys.executable)
else:
    BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_float(name: str, default: float) -> float:
    raw = (os.environ.get(name) or '').strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_int(name: str, default: int) -> int:
    raw = (os.environ.get(name) or '').strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.environ.get(name) or '').strip().lower()
    if raw in ('1', 'true', 'yes', 'on'):
        return True
    if raw in ('0', 'false', 'no', 'off'):
        return False
    return default


# ============================================================================
# Remote API
# ============================================================================
POSTS_API_BASE_URL = (
    os.environ.get('POSTS_API_BASE_URL') or 'https://jsonplaceholder.typicode.com'
).strip().rstrip('/')
POSTS_HTTP_TIMEOUT = _env_float('POSTS_HTTP_TIMEOUT', 15.0)

# ============================================================================
# Search / startup behavior
# ============================================================================
SEARCH_DEBOUNCE_MS = _env_int('SEARCH_DEBOUNCE_MS', 500)
FETCH_ON_STARTUP = _env_bool('FETCH_ON_STARTUP', True)

# ============================================================================
# Logging
# ============================================================================
LOG_PATH = os.environ.get('POSTS_LOG_PATH') or os.path.join(BASE_DIR, 'posts_client.log')
LOG_LEVEL = (os.environ.get('LOG_LEVEL') or 'INFO').strip().upper()
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5

# ============================================================================
# App info
# ============================================================================
APP_NAME = "Posts Browser"
VERSION = "1.0.0"
