from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from httpspec.core.builder import SpecBuilder
from httpspec.core.params import BuilderParameter
from httpspec.core.spec import Spec
from httpspec.core.structs import HttpRequest, HttpResponse


def _as_spec(target) -> Spec:
    if isinstance(target, Spec):
        return target
    if isinstance(target, SpecBuilder):
        return target.build()
    if isinstance(target, (BuilderParameter, list, tuple)):
        return SpecBuilder(target).build()
    raise TypeError(f"cannot run {type(target).__name__}; expected Spec, SpecBuilder or builder parameters")


class Executor(ABC):
    """Performs the actual request for a spec."""

    @abstractmethod
    async def execute(self, request: HttpRequest, body: bytes) -> tuple[HttpResponse, bytes]:
        ...

    async def run(self, target, *more):
        """Runs specs, builders or directive blocks in order against this executor."""
        for t in (target, *more):
            await _as_spec(t).run(self)


class Runner(ABC):
    """Supplies an executor to a block of test logic."""

    @abstractmethod
    async def test(self, block: Callable[[Executor], Awaitable[Any]]) -> Any:
        ...

    async def run(self, target, *more):
        specs = [_as_spec(t) for t in (target, *more)]

        async def _block(executor: Executor):
            for spec in specs:
                await spec.run(executor)

        await self.test(_block)
