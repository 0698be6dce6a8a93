from __future__ import annotations

from typing import Callable, List, Union

import httpx
import pytest

from pyroboat.client import Client
from pyroboat.config import Config


class ScriptedServer:
    """Replays a fixed list of responses and records every request."""

    def __init__(self, replies: List[Union[httpx.Response, Exception]]):
        self.replies = list(replies)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def config() -> Config:
    return Config(show_progress=False)


@pytest.fixture
def make_client(config) -> Callable[..., Client]:
    def _make(server, roblosecurity="C", xcsrf="T1", cfg: Config | None = None) -> Client:
        transport = server if isinstance(server, httpx.AsyncBaseTransport) else server.transport
        return Client(
            roblosecurity=roblosecurity,
            config=cfg or config,
            transport=transport,
            xcsrf=xcsrf,
        )

    return _make


@pytest.fixture
def scripted() -> Callable[..., ScriptedServer]:
    return ScriptedServer
