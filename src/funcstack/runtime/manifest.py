"""Manifest data model and wire conversion.

``ManifestStack`` and ``ManifestEndpoint`` are frozen dataclasses built by
the loader. ``stack_to_wire()`` turns a stack into the plain camelCase dict
the deploy tool reads, rendering every deferred expression as a CEL string
on the way.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Final

from funcstack.config import SPEC_VERSION
from funcstack.expressions import Expression
from funcstack.params.types import Param
from funcstack.paths.pattern import PathPattern

# Manifest keys for the trigger payload; exactly one is set per endpoint
TRIGGER_KINDS: frozenset[str] = frozenset(
    {"httpsTrigger", "callableTrigger", "eventTrigger", "scheduleTrigger"}
)


class ResetValue:
    """Sentinel for an option that should be reset to the platform default.

    Serialized as ``null`` so the deploy tool clears any previous value.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "RESET_VALUE"


RESET_VALUE: Final = ResetValue()


@dataclass(frozen=True, slots=True)
class RequiredAPI:
    """An external API that must be enabled for an endpoint to deploy."""

    api: str
    reason: str

    def to_wire(self) -> dict[str, str]:
        return {"api": self.api, "reason": self.reason}


@dataclass(frozen=True, slots=True)
class ManifestEndpoint:
    """One discovered function.

    ``trigger_kind`` names the manifest key for ``trigger`` (for example
    ``"httpsTrigger"``). ``options`` holds the remaining endpoint settings
    under their manifest names; values may be literals, expressions, params,
    or ``RESET_VALUE``.
    """

    trigger_kind: str
    trigger: Mapping[str, Any] = field(default_factory=dict)
    entry_point: str = ""
    platform: str | None = None
    labels: Mapping[str, Any] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.trigger_kind not in TRIGGER_KINDS:
            msg = (
                f"Unknown trigger kind {self.trigger_kind!r}. "
                f"Expected one of: {', '.join(sorted(TRIGGER_KINDS))}"
            )
            raise ValueError(msg)

    def with_entry_point(self, entry_point: str) -> ManifestEndpoint:
        return replace(self, entry_point=entry_point)

    def with_platform(self, platform: str) -> ManifestEndpoint:
        return replace(self, platform=platform)


@dataclass(frozen=True, slots=True)
class ManifestStack:
    """Everything discovered in one function source."""

    endpoints: dict[str, ManifestEndpoint]
    required_apis: list[RequiredAPI] = field(default_factory=list)
    spec_version: str = SPEC_VERSION
    params: list[dict[str, Any]] = field(default_factory=list)


def to_wire_value(value: Any) -> Any:
    """Convert one option value for the wire.

    Dispatches on type, never on attribute probing: an ordinary option
    object that happens to have a ``to_cel`` method passes through as-is.
    """
    match value:
        case Expression():
            return value.to_cel()
        case Param():
            return value.expr().to_cel()
        case ResetValue():
            return None
        case PathPattern():
            return value.value
        case re.Pattern():
            return value.pattern
        case Mapping():
            return {key: to_wire_value(item) for key, item in value.items()}
        case list() | tuple():
            return [to_wire_value(item) for item in value]
        case _:
            return value


def endpoint_to_wire(endpoint: ManifestEndpoint) -> dict[str, Any]:
    wire: dict[str, Any] = {"entryPoint": endpoint.entry_point}
    if endpoint.platform is not None:
        wire["platform"] = endpoint.platform
    wire["labels"] = to_wire_value(endpoint.labels)
    wire[endpoint.trigger_kind] = to_wire_value(endpoint.trigger)
    for key, value in endpoint.options.items():
        wire[key] = to_wire_value(value)
    return wire


def stack_to_wire(stack: ManifestStack) -> dict[str, Any]:
    """Return the manifest as plain data, ready for JSON or YAML encoding.

    ``params`` is only present when the source declared at least one.
    """
    wire: dict[str, Any] = {
        "endpoints": {key: endpoint_to_wire(ep) for key, ep in stack.endpoints.items()},
        "requiredAPIs": [api.to_wire() for api in stack.required_apis],
        "specVersion": stack.spec_version,
    }
    if stack.params:
        wire["params"] = to_wire_value(stack.params)
    return wire
