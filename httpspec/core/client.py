from __future__ import annotations
import logging
import time
from typing import Any, Awaitable, Callable

import httpx

from httpspec.core.executor import Executor, Runner
from httpspec.core.settings import settings
from httpspec.core.structs import HttpRequest, HttpResponse

log = logging.getLogger("httpspec.client")


def _url(path: str | None) -> str:
    if not path:
        return "/"
    if path.startswith(("/", "http://", "https://")):
        return path
    return "/" + path


class HttpxExecutor(Executor):
    """Executes requests through a caller-owned ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def execute(self, request: HttpRequest, body: bytes) -> tuple[HttpResponse, bytes]:
        t0 = time.time()
        resp = await self._client.request(
            request.method.value,
            _url(request.path),
            headers=list(request.headers),
            content=body or None,
        )
        dt = round((time.time() - t0) * 1000, 1)
        log.debug(f"{request.method} {request.path} {resp.status_code} {dt}ms")
        response = HttpResponse(status=resp.status_code, headers=tuple(resp.headers.multi_items()))
        return response, resp.content


class AsgiRunner(Runner):
    """Runs specs in-process against an ASGI application.

    Each ``test`` call gets a fresh client unless the runner was started,
    in which case one client is shared until ``stop``.
    """

    def __init__(self, app, base_url: str | None = None, timeout: float | None = None):
        self.app = app
        self.base_url = base_url or settings.runner.base_url
        self.timeout = timeout if timeout is not None else settings.runner.timeout
        self._session: httpx.AsyncClient | None = None

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=self.app),
            base_url=self.base_url,
            timeout=self.timeout,
        )

    async def start(self):
        if self._session is None:
            self._session = self._client()
            log.info(f"asgi runner started base_url={self.base_url}")

    async def stop(self):
        if self._session:
            await self._session.aclose()
            self._session = None
            log.info("asgi runner closed")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, *exc):
        await self.stop()

    async def test(self, block: Callable[[Executor], Awaitable[Any]]) -> Any:
        if self._session is not None:
            return await block(HttpxExecutor(self._session))
        async with self._client() as client:
            return await block(HttpxExecutor(client))
