"""Shared fixtures: a mocked download server and a default config."""

from typing import Callable, Dict, Iterator, Union

import httpx
import pytest

from target_matrix.fetcher import PageFetcher
from target_matrix.models import MatrixConfig

from helpers import BASE

Pages = Dict[str, Union[str, int]]


@pytest.fixture
def make_fetcher() -> Iterator[Callable[[Pages], PageFetcher]]:
    """Build a PageFetcher backed by a mock server serving `pages`.

    A str value is served as HTML with status 200, an int value as an empty
    response with that status; unknown URLs return 404.
    """
    clients = []

    def _make(pages: Pages) -> PageFetcher:
        def handler(request: httpx.Request) -> httpx.Response:
            body = pages.get(str(request.url), 404)
            if isinstance(body, int):
                return httpx.Response(body)
            return httpx.Response(200, text=body, headers={"Content-Type": "text/html"})

        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return PageFetcher(client=client)

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def config() -> MatrixConfig:
    return MatrixConfig.from_inputs("24.10.0", base_url=BASE)
