#!/usr/bin/env python3
"""
Movie Catalog Service
Owns the in-memory movie collection and every read or write against it.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


def load_movies(movies_file: str) -> List[Dict[str, Any]]:
    """Read the initial dataset, a JSON array of movie records."""
    if not os.path.exists(movies_file):
        raise FileNotFoundError(f"Movie data file not found: {movies_file}")

    with open(movies_file, 'r', encoding='utf-8') as f:
        movies = json.load(f)

    if not isinstance(movies, list):
        raise ValueError(f"Movie data file must contain a JSON array: {movies_file}")

    logger.info(f"🎬 MovieCatalog: Loaded {len(movies)} movies from {movies_file}")
    return movies


class MovieCatalogService:
    """Single owner of the movie collection; all access goes through one lock."""

    def __init__(self, movies: List[Dict[str, Any]]):
        self._movies = copy.deepcopy(movies)
        self._lock = threading.Lock()

    def count(self) -> int:
        with self._lock:
            return len(self._movies)

    def list_movies(self, genre: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return every movie, or only those tagged with genre (case-insensitive)."""
        with self._lock:
            if not genre:
                return copy.deepcopy(self._movies)

            wanted = genre.lower()
            return [
                copy.deepcopy(movie) for movie in self._movies
                if wanted in (g.lower() for g in movie.get('genre', []))
            ]

    def get_movie(self, movie_id: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                return None
            return copy.deepcopy(self._movies[index])

    def create_movie(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Append an already validated movie.
        The id is the last record's id + 1, not the highest id in the collection.
        """
        with self._lock:
            next_id = int(self._movies[-1]['id']) + 1 if self._movies else 1
            movie = {'id': next_id, **data}
            self._movies.append(movie)
            logger.info(f"➕ MovieCatalog: Created movie {next_id}: {movie.get('title')}")
            return copy.deepcopy(movie)

    def update_movie(self, movie_id: int, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Overwrite only the supplied fields; returns None if the id is unknown."""
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                return None

            updated = {**self._movies[index], **changes}
            self._movies[index] = updated
            logger.info(f"✏️ MovieCatalog: Updated movie {movie_id}: {sorted(changes)}")
            return copy.deepcopy(updated)

    def delete_movie(self, movie_id: int) -> bool:
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                return False

            removed = self._movies.pop(index)
            logger.info(f"🗑️ MovieCatalog: Deleted movie {movie_id}: {removed.get('title')}")
            return True

    def _find_index(self, movie_id: int) -> Optional[int]:
        # Caller must hold the lock
        for index, movie in enumerate(self._movies):
            if movie.get('id') == movie_id:
                return index
        return None
