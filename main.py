#!/usr/bin/env python3
"""
Main entry point for the Movie Catalog REST API.
This file serves as the entry point when running the application from the project root.
"""

import logging

from config import config
from src.app import app

if __name__ == '__main__':
    logging.info(f"🎬 Server running on http://localhost:{config.PORT}")
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
