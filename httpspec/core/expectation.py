from __future__ import annotations
import os
import sys
from typing import Any, Awaitable, Callable

from httpspec.core.errors import HeaderMissing, StatusMismatch
from httpspec.core.structs import HttpResponse

Block = Callable[[HttpResponse, bytes], "Awaitable[None] | None"]
Validator = Callable[[str], "Awaitable[None] | None"]

_PKG_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


def _call_site() -> str:
    frame = sys._getframe(1)
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(_PKG_DIR):
        frame = frame.f_back
    if frame is None:
        return ""
    return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"


async def _maybe_await(result: Any):
    if hasattr(result, "__await__"):
        await result


class Expectation:
    """A deferred check against a response and its body.

    The block may be a coroutine function or a plain callable; it signals
    failure by raising. ``label`` defaults to the ``file:line`` of the code
    that created the expectation and is only used for diagnostics.
    """

    def __init__(self, block: Block, label: str | None = None):
        if not callable(block):
            raise TypeError(f"expectation block must be callable, got {type(block).__name__}")
        self.block = block
        self.label = label if label is not None else _call_site()

    async def __call__(self, response: HttpResponse, body: bytes):
        await _maybe_await(self.block(response, body))

    def __repr__(self) -> str:
        return f"<Expectation {self.label or '?'}>"

    @classmethod
    def status(cls, expected: int, label: str | None = None) -> "Expectation":
        async def check(response: HttpResponse, _body: bytes):
            if response.status != expected:
                raise StatusMismatch(response.status)

        return cls(check, label=label if label is not None else _call_site())

    @classmethod
    def header(cls, name: str, validator: Validator | None = None,
               label: str | None = None) -> "Expectation":
        async def check(response: HttpResponse, _body: bytes):
            value = response.header(name)
            if value is None:
                raise HeaderMissing(name)
            if validator is not None:
                await _maybe_await(validator(value))

        return cls(check, label=label if label is not None else _call_site())

    @classmethod
    def of(cls, target, validator: Validator | None = None, label: str | None = None) -> "Expectation":
        """Builds an expectation from a status code, a header name or a block."""
        if validator is not None and not isinstance(target, str):
            raise TypeError("validator only applies to header expectations")
        if isinstance(target, Expectation):
            return target
        if isinstance(target, bool):
            raise TypeError("expected a status code, header name or block, got bool")
        if isinstance(target, int):
            return cls.status(target, label=label)
        if isinstance(target, str):
            return cls.header(target, validator, label=label)
        if callable(target):
            return cls(target, label=label)
        raise TypeError(f"cannot build an expectation from {type(target).__name__}")
