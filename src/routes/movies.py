#!/usr/bin/env python3
"""
Movie Routes
CRUD endpoints over the in-memory movie catalog.
"""

import logging
import re
from typing import Optional
from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from ..models.movie import MovieCreate, MovieUpdate, format_validation_errors
from ..services.movie_catalog_service import MovieCatalogService

logger = logging.getLogger(__name__)

# Create blueprint
movies_bp = Blueprint('movies', __name__)

PREFLIGHT_METHODS = 'GET, POST, PATCH, DELETE, OPTIONS'

# Leading whitespace, optional sign, ASCII digits; anything after them is ignored
MOVIE_ID_PATTERN = re.compile(r'\s*([+-]?[0-9]+)')


def get_catalog() -> MovieCatalogService:
    return current_app.extensions['movie_catalog']


def parse_movie_id(raw_id: str) -> Optional[int]:
    """Read the leading integer of a path id ("3abc" is 3); None when there is none."""
    match = MOVIE_ID_PATTERN.match(raw_id)
    if match is None:
        return None
    return int(match.group(1))


def movie_not_found():
    return jsonify({'error': 'Movie not found'}), 404


@movies_bp.route('/movies', methods=['GET'], provide_automatic_options=False)
def list_movies():
    """List all movies, optionally filtered by ?genre= (case-insensitive)."""
    genre = request.args.get('genre')
    movies = get_catalog().list_movies(genre)

    if genre and not movies:
        return jsonify({'error': 'No movies found for that genre'}), 404

    return jsonify(movies)


@movies_bp.route('/movies/<movie_id>', methods=['GET'])
def get_movie(movie_id):
    """Get a single movie by id."""
    parsed_id = parse_movie_id(movie_id)
    movie = get_catalog().get_movie(parsed_id) if parsed_id is not None else None

    if movie is None:
        return movie_not_found()

    return jsonify(movie)


@movies_bp.route('/movies', methods=['POST'], provide_automatic_options=False)
def create_movie():
    """Validate a complete movie and append it to the catalog."""
    try:
        movie_data = MovieCreate.model_validate(request.get_json(silent=True))
    except ValidationError as e:
        logger.info(f"Rejected movie creation: {e.error_count()} validation error(s)")
        return jsonify({'error': format_validation_errors(e)}), 400

    movie = get_catalog().create_movie(movie_data.model_dump())
    return jsonify(movie), 201


@movies_bp.route('/movies/<movie_id>', methods=['DELETE'])
def delete_movie(movie_id):
    """Delete a movie by id."""
    parsed_id = parse_movie_id(movie_id)

    if parsed_id is None or not get_catalog().delete_movie(parsed_id):
        return movie_not_found()

    return jsonify({'message': 'Movie deleted'}), 200


@movies_bp.route('/movies/<movie_id>', methods=['PATCH'])
def update_movie(movie_id):
    """Validate only the supplied fields and merge them into the movie."""
    try:
        changes = MovieUpdate.model_validate(request.get_json(silent=True))
    except ValidationError as e:
        logger.info(f"Rejected update of movie {movie_id}: {e.error_count()} validation error(s)")
        return jsonify({'error': format_validation_errors(e)}), 400

    parsed_id = parse_movie_id(movie_id)
    movie = None
    if parsed_id is not None:
        movie = get_catalog().update_movie(parsed_id, changes.model_dump(exclude_unset=True))

    if movie is None:
        return movie_not_found()

    return jsonify(movie)


@movies_bp.route('/movies', methods=['OPTIONS'])
def movies_preflight():
    """Grant the requesting origin every movie method; the allow-list is not consulted here."""
    response = current_app.make_response(('', 200))
    origin = request.headers.get('Origin')
    if origin:
        response.headers['Access-Control-Allow-Origin'] = origin
    response.headers['Access-Control-Allow-Methods'] = PREFLIGHT_METHODS
    return response
