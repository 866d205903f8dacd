#!/usr/bin/env python3
"""
Origin allow-list.
Cross-origin requests from unlisted origins are refused before any route runs.
"""

import logging
from typing import Iterable, Optional
from flask import Flask, current_app, jsonify, request

logger = logging.getLogger(__name__)

PREFLIGHT_PATHS = ('/movies',)


def is_origin_allowed(origin: Optional[str], allowed_origins: Iterable[str]) -> bool:
    """Requests without an Origin header (same-origin, curl, servers) are always allowed."""
    if not origin:
        return True
    return origin in set(allowed_origins)


def _is_open_preflight() -> bool:
    # OPTIONS /movies answers every origin, see routes.movies.movies_preflight
    return request.method == 'OPTIONS' and request.path.rstrip('/') in PREFLIGHT_PATHS


def enforce_allowed_origin():
    """before_request hook: returning a response here skips the view entirely."""
    if _is_open_preflight():
        return None

    origin = request.headers.get('Origin')
    if is_origin_allowed(origin, current_app.config['ALLOWED_ORIGINS']):
        return None

    logger.warning(f"🚫 CORS: Rejected {request.method} {request.path} from origin {origin}")
    return jsonify({'error': 'CORS not allowed'}), 403


def init_origin_policy(app: Flask) -> None:
    app.before_request(enforce_allowed_origin)
