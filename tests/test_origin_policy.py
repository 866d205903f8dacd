#!/usr/bin/env python3
"""
Origin allow-list tests
"""

from conftest import ALLOWED_ORIGINS, new_movie
from src.origin_policy import is_origin_allowed


def test_missing_origin_is_allowed():
    assert is_origin_allowed(None, ALLOWED_ORIGINS)
    assert is_origin_allowed('', ALLOWED_ORIGINS)


def test_listed_origin_is_allowed():
    assert is_origin_allowed('https://midu.dev', ALLOWED_ORIGINS)


def test_unlisted_origin_is_rejected():
    assert not is_origin_allowed('http://evil.com', ALLOWED_ORIGINS)
    # Exact match only
    assert not is_origin_allowed('http://movies.com.evil.com', ALLOWED_ORIGINS)


def test_allowed_origin_gets_cors_headers(client):
    response = client.get('/movies', headers={'Origin': 'http://localhost:8080'})
    assert response.status_code == 200
    assert response.headers['Access-Control-Allow-Origin'] == 'http://localhost:8080'


def test_request_without_origin_is_served(client):
    response = client.get('/movies')
    assert response.status_code == 200
    assert 'Access-Control-Allow-Origin' not in response.headers


def test_unlisted_origin_is_rejected_before_the_handler(client, catalog):
    response = client.post('/movies', json=new_movie(), headers={'Origin': 'http://evil.com'})
    assert response.status_code == 403
    assert response.get_json() == {'error': 'CORS not allowed'}
    assert catalog.count() == 2

    response = client.delete('/movies/1', headers={'Origin': 'http://evil.com'})
    assert response.status_code == 403
    assert catalog.get_movie(1) is not None


def test_movies_preflight_grants_any_origin(client):
    response = client.options('/movies', headers={
        'Origin': 'http://evil.com',
        'Access-Control-Request-Method': 'DELETE',
    })
    assert response.status_code == 200
    assert response.headers['Access-Control-Allow-Origin'] == 'http://evil.com'
    assert response.headers['Access-Control-Allow-Methods'] == 'GET, POST, PATCH, DELETE, OPTIONS'


def test_movies_preflight_without_origin(client):
    response = client.options('/movies')
    assert response.status_code == 200
    assert response.headers['Access-Control-Allow-Methods'] == 'GET, POST, PATCH, DELETE, OPTIONS'
    assert 'Access-Control-Allow-Origin' not in response.headers


def test_preflight_on_other_paths_uses_the_allow_list(client):
    response = client.options('/movies/1', headers={'Origin': 'http://evil.com'})
    assert response.status_code == 403
