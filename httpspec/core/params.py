from abc import ABC, abstractmethod

from httpspec.core.expectation import Expectation, Validator
from httpspec.core.spec import Spec
from httpspec.core.structs import HttpMethod


class BuilderParameter(ABC):
    """A single directive of the builder DSL."""

    @abstractmethod
    def build(self, spec: Spec):
        ...


class Method(BuilderParameter):
    def __init__(self, method: HttpMethod | str):
        self.method = HttpMethod.coerce(method)

    def build(self, spec: Spec):
        spec.set_method(self.method)


class Path(BuilderParameter):
    def __init__(self, path: str | None):
        self.path = path

    def build(self, spec: Spec):
        spec.set_path(self.path)


class Header(BuilderParameter):
    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value

    def build(self, spec: Spec):
        spec.set_header(self.name, self.value)


class Body(BuilderParameter):
    def __init__(self, body: bytes):
        self.body = body

    def build(self, spec: Spec):
        spec.set_body(self.body)


class Expect(BuilderParameter):
    """Adds an expectation.

    ``Expect(200)`` checks the status, ``Expect("content-type", check)``
    checks a header and ``Expect(block)`` runs an arbitrary block.
    """

    def __init__(self, target, validator: Validator | None = None, label: str | None = None):
        self.expectation = Expectation.of(target, validator, label=label)

    def build(self, spec: Spec):
        spec.add_expectation(self.expectation)


class Combined(BuilderParameter):
    def __init__(self, params: list[BuilderParameter]):
        self.params = list(params)

    def build(self, spec: Spec):
        for p in self.params:
            p.build(spec)


class Empty(BuilderParameter):
    def build(self, spec: Spec):
        pass
