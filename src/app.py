#!/usr/bin/env python3
"""
Movie Catalog REST API
A Flask-based REST API exposing CRUD operations over an in-memory movie catalog,
loaded once at startup from a static JSON dataset.
"""

import os
import logging
from typing import Any, Dict, Iterable, List, Optional
from flask import Flask, jsonify
from flask_cors import CORS

from config import config
from .origin_policy import init_origin_policy
from .routes.movies import movies_bp
from .routes.system import system_bp
from .services.movie_catalog_service import MovieCatalogService, load_movies

logger = logging.getLogger(__name__)


def configure_logging(log_dir: str = config.LOG_DIR) -> None:
    """Log to logs/movie_api.log and the console."""
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'movie_api.log')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )

    # Disable Flask request logging noise
    logging.getLogger('werkzeug').setLevel(logging.WARNING)


def create_app(movies: Optional[List[Dict[str, Any]]] = None,
               movies_file: Optional[str] = None,
               allowed_origins: Optional[Iterable[str]] = None,
               static_folder: Optional[str] = None) -> Flask:
    """
    Build the application.
    An explicit movies list wins over movies_file; both default to the configured dataset.
    """
    app = Flask(__name__,
                static_folder=static_folder or config.STATIC_FOLDER,
                static_url_path='')

    app.config['ALLOWED_ORIGINS'] = list(allowed_origins if allowed_origins is not None
                                         else config.ALLOWED_ORIGINS)

    if movies is None:
        movies = load_movies(movies_file or config.MOVIES_FILE)
    app.extensions['movie_catalog'] = MovieCatalogService(movies)

    # Reject unlisted origins first, then let Flask-CORS add headers for the listed ones
    init_origin_policy(app)
    CORS(app, origins=app.config['ALLOWED_ORIGINS'], always_send=False)

    # Register blueprints
    app.register_blueprint(system_bp)
    app.register_blueprint(movies_bp)

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({'error': 'Endpoint not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 errors."""
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"❌ Unhandled error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    return app


configure_logging()
app = create_app()

if __name__ == '__main__':
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
