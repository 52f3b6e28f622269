"""Ordered param registry, scoped via ContextVar.

Provides:
- ``ParamRegistry``: declared params in declaration order, unique by name.
- ``current_registry()``: the registry that ``get_*`` declarations write to.
- ``use_registry()``: scope a registry to one discovery run.

Each ``load_stack()`` call runs the user's module inside a fresh registry,
so params declared by one run never leak into the next in a long-lived
process.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from funcstack.params.types import Param, SecretParam

type DeclaredParam = Param[Any] | SecretParam


class ParamRegistry:
    """Declared params, ordered, deduplicated by name.

    Re-declaring a name drops the earlier entry and appends the new one,
    so the last declaration wins both the value and the position.
    """

    __slots__ = ("_params",)

    def __init__(self) -> None:
        self._params: list[DeclaredParam] = []

    def register[P: DeclaredParam](self, param: P) -> P:
        self._params = [p for p in self._params if p.name != param.name]
        self._params.append(param)
        return param

    def get(self, name: str) -> DeclaredParam | None:
        """Look up a param by name. Returns ``None`` if not declared."""
        for param in self._params:
            if param.name == name:
                return param
        return None

    @property
    def names(self) -> list[str]:
        return [p.name for p in self._params]

    def specs(self) -> list[dict[str, Any]]:
        """Param descriptions for the manifest, in declaration order."""
        return [p.to_spec() for p in self._params]

    def clear(self) -> None:
        """Drop every declared param. Intended for isolated test runs."""
        self._params.clear()

    def __iter__(self) -> Iterator[DeclaredParam]:
        return iter(list(self._params))

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, name: object) -> bool:
        return any(p.name == name for p in self._params)

    def __repr__(self) -> str:
        return f"ParamRegistry({self.names!r})"


_default_registry = ParamRegistry()

_registry_var: ContextVar[ParamRegistry] = ContextVar("funcstack_params")


def current_registry() -> ParamRegistry:
    """Return the registry declarations currently write to.

    Outside ``use_registry()`` this is a process-wide default registry.
    """
    return _registry_var.get(_default_registry)


@contextmanager
def use_registry(registry: ParamRegistry | None = None) -> Iterator[ParamRegistry]:
    """Make *registry* (or a new one) current for the duration of the block.

    Usage::

        with use_registry() as registry:
            load_user_module()
        registry.specs()
    """
    if registry is None:
        registry = ParamRegistry()
    token = _registry_var.set(registry)
    try:
        yield registry
    finally:
        _registry_var.reset(token)


def clear_params() -> None:
    """Reset the current registry. For tests."""
    current_registry().clear()
