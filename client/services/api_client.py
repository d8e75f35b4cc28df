# -*- coding: utf-8 -*-
"""
HTTP API wrapper for the posts collection resource.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx


logger = logging.getLogger(__name__)

POSTS_PATH = '/posts'
TITLE_FILTER_PARAM = 'title_like'


class ApiError(RuntimeError):
    def __init__(self, message: str, *, status_code: int = 0):
        super().__init__(message)
        self.status_code = int(status_code)


class TransportError(ApiError):
    """The request never produced an HTTP response (refused, timed out, ...)."""


class DecodeError(ApiError):
    """The response body is not a JSON array of posts."""


@dataclass(frozen=True)
class Post:
    id: int
    title: str = field(compare=False)
    body: str = field(compare=False)

    @staticmethod
    def from_dict(data: Any) -> 'Post':
        if not isinstance(data, dict):
            raise DecodeError(f'post must be an object, got {type(data).__name__}')
        post_id = data.get('id')
        title = data.get('title')
        body = data.get('body')
        # bool is an int subclass
        if not isinstance(post_id, int) or isinstance(post_id, bool):
            raise DecodeError(f'post id must be an integer, got {post_id!r}')
        if not isinstance(title, str):
            raise DecodeError(f'post {post_id} title must be a string')
        if not isinstance(body, str):
            raise DecodeError(f'post {post_id} body must be a string')
        return Post(id=post_id, title=title, body=body)


def decode_posts(payload: Any) -> list[Post]:
    if not isinstance(payload, list):
        raise DecodeError(f'expected a JSON array of posts, got {type(payload).__name__}')
    return [Post.from_dict(item) for item in payload]


class APIClient:
    def __init__(self, base_url: str, timeout: float = 15.0):
        self.base_url = base_url.rstrip('/')
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any:
        try:
            response = self._client.request(method, path, params=params, headers={'Accept': 'application/json'})
        except httpx.TransportError as exc:
            raise TransportError(f'{method} {path} failed: {exc}') from exc
        logger.debug(f'{method} {response.request.url} -> {response.status_code}')

        if response.status_code >= 400:
            raise ApiError(f'HTTP {response.status_code}', status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f'{method} {path} returned a non-JSON body',
                status_code=response.status_code,
            ) from exc

    def get_posts(self) -> list[Post]:
        return decode_posts(self._request('GET', POSTS_PATH))

    def search_posts(self, term: str) -> list[Post]:
        return decode_posts(self._request('GET', POSTS_PATH, params={TITLE_FILTER_PARAM: term}))
