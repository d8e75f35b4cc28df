# -*- coding: utf-8 -*-

from __future__ import annotations

import httpx
import pytest

from client.services.api_client import (
    APIClient,
    ApiError,
    DecodeError,
    Post,
    TransportError,
    decode_posts,
)


def _api_with(handler) -> APIClient:
    api = APIClient('http://posts.test')
    api._client.close()
    api._client = httpx.Client(base_url=api.base_url, transport=httpx.MockTransport(handler))
    return api


def test_get_posts_preserves_server_order():
    payload = [
        {'userId': 1, 'id': 3, 'title': 'third', 'body': 'c'},
        {'userId': 1, 'id': 1, 'title': 'first', 'body': 'a'},
        {'userId': 2, 'id': 2, 'title': 'second', 'body': 'b'},
    ]
    captured = {}

    def _handler(request: httpx.Request) -> httpx.Response:
        captured['path'] = request.url.path
        captured['query'] = dict(request.url.params)
        return httpx.Response(200, json=payload)

    posts = _api_with(_handler).get_posts()

    assert captured == {'path': '/posts', 'query': {}}
    assert [post.id for post in posts] == [3, 1, 2]
    assert posts[0] == Post(id=3, title='third', body='c')


def test_search_posts_sends_title_filter():
    captured = {}

    def _handler(request: httpx.Request) -> httpx.Response:
        captured['query'] = dict(request.url.params)
        return httpx.Response(200, json=[{'id': 1, 'title': 'Hello', 'body': 'World'}])

    posts = _api_with(_handler).search_posts('hel lo&x')

    assert captured['query'] == {'title_like': 'hel lo&x'}
    assert posts == [Post(id=1, title='Hello', body='World')]
    assert posts[0].title == 'Hello'
    assert posts[0].body == 'World'


def test_object_body_is_decode_error():
    api = _api_with(lambda request: httpx.Response(200, json={'id': 1, 'title': 't', 'body': 'b'}))

    with pytest.raises(DecodeError):
        api.get_posts()


def test_non_json_body_is_decode_error():
    api = _api_with(lambda request: httpx.Response(200, content=b'<html>oops</html>'))

    with pytest.raises(DecodeError):
        api.get_posts()


def test_http_error_status_is_api_error():
    api = _api_with(lambda request: httpx.Response(503, json={'error': 'down'}))

    with pytest.raises(ApiError) as exc_info:
        api.get_posts()
    assert exc_info.value.status_code == 503
    assert not isinstance(exc_info.value, (TransportError, DecodeError))


def test_connection_refused_is_transport_error():
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError('connection refused', request=request)

    with pytest.raises(TransportError) as exc_info:
        _api_with(_handler).get_posts()
    assert exc_info.value.status_code == 0


@pytest.mark.parametrize(
    'item',
    [
        {'title': 'no id', 'body': 'b'},
        {'id': '1', 'title': 't', 'body': 'b'},
        {'id': True, 'title': 't', 'body': 'b'},
        {'id': 1, 'body': 'b'},
        {'id': 1, 'title': 't', 'body': None},
        ['not', 'an', 'object'],
    ],
)
def test_decode_posts_fails_closed_on_shape_mismatch(item):
    with pytest.raises(DecodeError):
        decode_posts([item])


def test_posts_compare_by_id():
    assert Post(id=7, title='a', body='b') == Post(id=7, title='changed', body='changed')
    assert len({Post(id=7, title='a', body='b'), Post(id=7, title='c', body='d')}) == 1
    assert decode_posts([]) == []
