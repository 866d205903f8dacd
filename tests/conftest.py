import pytest

from src.app import create_app

ALLOWED_ORIGINS = ['http://localhost:3000', 'http://localhost:8080', 'http://movies.com', 'https://midu.dev']


def sample_movies():
    return [
        {
            'id': 1,
            'title': 'The Dark Knight',
            'year': 2008,
            'director': 'Christopher Nolan',
            'duration': 152,
            'poster': 'https://example.com/dark-knight.jpg',
            'genre': ['Action', 'Crime', 'Drama'],
            'rate': 9.0,
        },
        {
            'id': 2,
            'title': 'Forrest Gump',
            'year': 1994,
            'director': 'Robert Zemeckis',
            'duration': 142,
            'poster': 'https://example.com/forrest-gump.jpg',
            'genre': ['Drama', 'Romance'],
            'rate': 8.8,
        },
    ]


def new_movie(**overrides):
    movie = {
        'title': 'Inception',
        'year': 2010,
        'director': 'Christopher Nolan',
        'duration': 148,
        'poster': 'https://example.com/inception.jpg',
        'genre': ['Action', 'Sci-Fi'],
        'rate': 8.8,
    }
    movie.update(overrides)
    return movie


@pytest.fixture
def app():
    app = create_app(movies=sample_movies(), allowed_origins=ALLOWED_ORIGINS)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog(app):
    return app.extensions['movie_catalog']
