from __future__ import annotations
import copy
import logging
import time
from typing import TYPE_CHECKING, Callable

import msgspec

from httpspec.core.expectation import Expectation, Validator
from httpspec.core.settings import settings
from httpspec.core.structs import HttpMethod, HttpRequest

if TYPE_CHECKING:
    from httpspec.core.executor import Executor

log = logging.getLogger("httpspec.spec")


class Spec:
    """One HTTP request plus the expectations checked against its response.

    ``set_*`` and ``add_expectation`` mutate the spec in place. The fluent
    methods (``post``, ``header``, ``expect`` ...) return a modified copy and
    leave the original untouched, so chains can branch off a shared base.
    """

    def __init__(self):
        self.request = HttpRequest()
        self.payload: bytes = b""
        self._expectations: list[Expectation] = []

    @property
    def expectations(self) -> tuple[Expectation, ...]:
        return tuple(self._expectations)

    def __eq__(self, other):
        if not isinstance(other, Spec):
            return NotImplemented
        return (self.request == other.request and self.payload == other.payload
                and self._expectations == other._expectations)

    def __repr__(self) -> str:
        return (f"<Spec {self.request.method} {self.request.path!r} headers={len(self.request.headers)} "
                f"body={len(self.payload)}b expectations={len(self._expectations)}>")

    # mutating

    def set_path(self, path: str | None):
        self.request = msgspec.structs.replace(self.request, path=path)

    def set_method(self, method: HttpMethod | str):
        self.request = msgspec.structs.replace(self.request, method=HttpMethod.coerce(method))

    def set_header(self, name: str, value: str):
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError(f"header name and value must be str, got {type(name).__name__}, {type(value).__name__}")
        headers = self.request.headers + ((name, value),)
        self.request = msgspec.structs.replace(self.request, headers=headers)

    def set_body(self, body: bytes):
        if not isinstance(body, (bytes, bytearray, memoryview)):
            raise TypeError(f"body must be bytes, got {type(body).__name__}")
        self.payload = bytes(body)

    def add_expectation(self, target, validator: Validator | None = None, label: str | None = None):
        self._expectations.append(Expectation.of(target, validator, label=label))

    # modifiers

    def _modify(self, fn: Callable[["Spec"], None]) -> "Spec":
        clone = copy.copy(self)
        clone._expectations = list(self._expectations)
        fn(clone)
        return clone

    def method(self, method: HttpMethod | str) -> "Spec":
        return self._modify(lambda s: s.set_method(method))

    def path(self, path: str | None) -> "Spec":
        return self._modify(lambda s: s.set_path(path))

    def on(self, method: HttpMethod | str, path: str | None) -> "Spec":
        def apply(s: Spec):
            s.set_method(method)
            s.set_path(path)
        return self._modify(apply)

    def get(self, path: str) -> "Spec":
        return self.on(HttpMethod.GET, path)

    def post(self, path: str) -> "Spec":
        return self.on(HttpMethod.POST, path)

    def put(self, path: str) -> "Spec":
        return self.on(HttpMethod.PUT, path)

    def patch(self, path: str) -> "Spec":
        return self.on(HttpMethod.PATCH, path)

    def head(self, path: str) -> "Spec":
        return self.on(HttpMethod.HEAD, path)

    def delete(self, path: str) -> "Spec":
        return self.on(HttpMethod.DELETE, path)

    def header(self, name: str, value: str) -> "Spec":
        return self._modify(lambda s: s.set_header(name, value))

    def body(self, body: bytes) -> "Spec":
        return self._modify(lambda s: s.set_body(body))

    def expect(self, target, validator: Validator | None = None, label: str | None = None) -> "Spec":
        # resolve here so the captured call site is the caller's, not _modify's
        expectation = Expectation.of(target, validator, label=label)
        return self._modify(lambda s: s.add_expectation(expectation))

    # execution

    async def run(self, executor: "Executor"):
        """Executes the request and checks every expectation in order.

        The first failing expectation's error propagates unchanged and the
        remaining expectations are not evaluated.
        """
        req = self.request
        log.debug(f"run {req.method} {req.path} expectations={len(self._expectations)}")
        t0 = time.time()
        response, body = await executor.execute(req, self.payload)
        dt = round((time.time() - t0) * 1000, 1)
        if settings.runner.log_bodies:
            log.debug(f"{req.method} {req.path} {response.status} {dt}ms sent={len(self.payload)}b received={len(body)}b")
        else:
            log.debug(f"{req.method} {req.path} {response.status} {dt}ms")
        for i, expectation in enumerate(self._expectations):
            try:
                await expectation(response, body)
            except Exception as e:
                log.debug(f"expectation failed index={i} at={expectation.label} err={e!r}")
                raise
