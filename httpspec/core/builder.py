from __future__ import annotations

from httpspec.core.params import BuilderParameter, Combined, Empty
from httpspec.core.spec import Spec


def block(*params) -> BuilderParameter:
    """Compiles a sequence of directives into a single node.

    ``None`` entries are skipped, nested lists and tuples are compiled
    recursively. No directives give ``Empty``, one is returned as is and
    more are wrapped in ``Combined`` preserving their order.
    """
    nodes: list[BuilderParameter] = []
    for p in params:
        if p is None:
            continue
        if isinstance(p, (list, tuple)):
            nodes.append(block(*p))
        elif isinstance(p, BuilderParameter):
            nodes.append(p)
        else:
            raise TypeError(f"expected a builder parameter, got {type(p).__name__}")
    if not nodes:
        return Empty()
    if len(nodes) == 1:
        return nodes[0]
    return Combined(nodes)


def when(condition, then, otherwise=None) -> BuilderParameter:
    if condition:
        return block(then)
    return block(otherwise)


class SpecBuilder:
    def __init__(self, *params):
        self.root = block(*params)

    def build(self) -> Spec:
        spec = Spec()
        self.root.build(spec)
        return spec
