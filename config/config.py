#!/usr/bin/env python3
"""
Configuration for the Movie Catalog REST API.
Values come from the environment, with config/env loaded first for local development.
"""

import os
from typing import List
from dotenv import load_dotenv

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Load environment variables (fallback for local development)
load_dotenv(os.path.join(PROJECT_ROOT, 'config', 'env'))

DEFAULT_ALLOWED_ORIGINS = [
    'http://localhost:3000',
    'http://localhost:8080',
    'http://movies.com',
    'https://midu.dev',
]


def _parse_origins(value: str) -> List[str]:
    """Split a comma-separated origin list, dropping blanks and trailing slashes."""
    return [origin.strip().rstrip('/') for origin in value.split(',') if origin.strip()]


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Server
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', 3000))
DEBUG = _parse_bool(os.getenv('DEBUG', 'false'))

# CORS
ALLOWED_ORIGINS = _parse_origins(os.getenv('ALLOWED_ORIGINS', '')) or list(DEFAULT_ALLOWED_ORIGINS)

# Files
MOVIES_FILE = os.getenv('MOVIES_FILE', os.path.join(PROJECT_ROOT, 'data', 'movies.json'))
STATIC_FOLDER = os.getenv('STATIC_FOLDER', os.path.join(PROJECT_ROOT, 'web'))
LOG_DIR = os.getenv('LOG_DIR', os.path.join(PROJECT_ROOT, 'logs'))
