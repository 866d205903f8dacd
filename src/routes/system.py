#!/usr/bin/env python3
"""
System Routes
Welcome text and health check.
"""

from flask import Blueprint, current_app, jsonify

# Create blueprint
system_bp = Blueprint('system', __name__)

WELCOME_MESSAGE = 'Welcome to the Movies API. Use /movies to get the list of movies.'


@system_bp.route('/', methods=['GET'])
def welcome():
    return WELCOME_MESSAGE


@system_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'movies_count': current_app.extensions['movie_catalog'].count(),
        'allowed_origins_count': len(current_app.config['ALLOWED_ORIGINS']),
    })
