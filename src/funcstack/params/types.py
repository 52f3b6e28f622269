"""Typed params backed by environment variables.

A param is a handle, not a value: ``.value`` reads the environment every
time it is accessed, so a changed variable is seen on the next read.
Lookups fall back to the declared default, then to the type's zero value.
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, ClassVar

from funcstack.errors import FuncstackError, ParamValueError
from funcstack.expressions import Comparator, CompareExpression, IfElseExpression, ParamExpression
from funcstack.params.inputs import ParamInput

logger = logging.getLogger("funcstack.params")

# Case-insensitive values read as True by BooleanParam
TRUTHY: frozenset[str] = frozenset({"true", "y", "yes", "1"})

_LIST_SEPARATOR_RE = re.compile(r",\s*")

# Leading numeric prefix; trailing text after it is ignored
_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# JSON document the platform sets with the project's resource names
PLATFORM_CONFIG_ENV = "FIREBASE_CONFIG"


class Param[T]:
    """Base class for declared params.

    Subclasses set ``value_type`` and implement the ``value`` property.
    Declare params through ``funcstack.params.get_*`` so they are recorded
    in the active registry.
    """

    value_type: ClassVar[str] = "string"

    __slots__ = ("default", "description", "input", "label", "name")

    def __init__(
        self,
        name: str,
        *,
        default: T | None = None,
        label: str | None = None,
        description: str | None = None,
        input: ParamInput | None = None,
    ) -> None:
        self.name = name
        self.default = default
        self.label = label
        self.description = description
        self.input = input

    @property
    def raw_value(self) -> str | None:
        """The environment value, or ``None`` when unset or empty."""
        return os.environ.get(self.name) or None

    @property
    def value(self) -> T:
        raise NotImplementedError

    def _text(self) -> str | None:
        raw = self.raw_value
        if raw is not None:
            return raw
        if self.default is not None:
            return str(self.default)
        return None

    def expr(self) -> ParamExpression:
        """A deferred reference to this param for use in endpoint options."""
        return ParamExpression(self)

    def cmp(self, op: Comparator, rhs: T) -> CompareExpression:
        return CompareExpression(op, self.expr(), rhs)

    def equals(self, rhs: T) -> CompareExpression:
        return self.cmp("==", rhs)

    def to_spec(self) -> dict[str, Any]:
        """Describe this param for the deploy tool."""
        spec: dict[str, Any] = {"name": self.name, "type": self.value_type}
        if self.default is not None:
            spec["default"] = self._spec_default()
        if self.label is not None:
            spec["label"] = self.label
        if self.description is not None:
            spec["description"] = self.description
        if self.input is not None:
            spec["input"] = self.input.to_spec()
        return spec

    def _spec_default(self) -> Any:
        return self.default

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class StringParam(Param[str]):
    value_type = "string"

    __slots__ = ()

    @property
    def value(self) -> str:
        return self._text() or ""


class IntParam(Param[int]):
    value_type = "int"

    __slots__ = ()

    @property
    def value(self) -> int:
        """Base-10 parse of the leading digits; ``"10abc"`` reads as 10."""
        text = self._text()
        if text is None:
            return 0
        match = _INT_PREFIX_RE.match(text)
        if match is None:
            logger.warning("Param %r: %r is not an integer, using 0", self.name, text)
            return 0
        return int(match.group(1))


class FloatParam(Param[float]):
    value_type = "float"

    __slots__ = ()

    @property
    def value(self) -> float:
        text = self._text()
        if text is None:
            return 0.0
        match = _FLOAT_PREFIX_RE.match(text)
        if match is None:
            logger.warning("Param %r: %r is not a number, using 0", self.name, text)
            return 0.0
        return float(match.group(1))


class BooleanParam(Param[bool]):
    value_type = "boolean"

    __slots__ = ()

    @property
    def value(self) -> bool:
        text = self._text()
        if text is None:
            return False
        return text.strip().lower() in TRUTHY

    def then(self, if_true: Any, if_false: Any) -> IfElseExpression:
        """Choose between two values depending on this param."""
        return IfElseExpression(self.expr(), if_true, if_false)


class ListParam(Param[list[str]]):
    value_type = "list"

    __slots__ = ()

    @property
    def value(self) -> list[str]:
        raw = self.raw_value
        if raw is not None:
            return _LIST_SEPARATOR_RE.split(raw)
        if self.default is not None:
            return list(self.default)
        return []

    def _spec_default(self) -> Any:
        return ",".join(self.default or [])


class JSONParam(Param[Any]):
    """A param holding a JSON document.

    Unlike the other types, a malformed value is an error rather than a
    silent fallback: ``.value`` raises ``ParamValueError``.
    """

    value_type = "json"

    __slots__ = ()

    @property
    def value(self) -> Any:
        raw = self.raw_value
        if raw is None:
            return self.default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = (
                f"Unable to load param {self.name!r}: "
                f"value {raw!r} could not be parsed as JSON: {exc}"
            )
            raise ParamValueError(msg) from exc


class SecretParam:
    """A param whose value lives in a secret manager.

    Secrets are not expressions: they cannot be compared or used in endpoint
    options, only passed to ``secrets=`` and read at runtime.
    """

    value_type: ClassVar[str] = "secret"

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    @property
    def value(self) -> str:
        return os.environ.get(self.name) or ""

    def to_spec(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.value_type}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class JSONSecretParam(SecretParam):
    """A secret holding a JSON document.

    Reading an unset or malformed secret raises ``ParamValueError``.
    """

    __slots__ = ()

    @property
    def value(self) -> Any:
        raw = os.environ.get(self.name)
        if not raw:
            msg = f"Secret {self.name!r} is not set"
            raise ParamValueError(msg)
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"Secret {self.name!r} could not be parsed as JSON: {exc}"
            raise ParamValueError(msg) from exc

    def to_spec(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.value_type, "format": "json"}


class BuiltinParam(StringParam):
    """A string param the platform resolves without prompting.

    The runtime value comes from one key of the ``FIREBASE_CONFIG`` JSON
    document; an unset document or missing key reads as ``""``. Built-ins
    render in expressions by name but are never declared, so they have no
    spec of their own.
    """

    __slots__ = ("config_key",)

    def __init__(self, name: str, config_key: str) -> None:
        super().__init__(name)
        self.config_key = config_key

    @property
    def value(self) -> str:
        raw = os.environ.get(PLATFORM_CONFIG_ENV)
        if not raw:
            return ""
        try:
            config = json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"{PLATFORM_CONFIG_ENV} could not be parsed as JSON: {exc}"
            raise ParamValueError(msg) from exc
        if not isinstance(config, dict):
            return ""
        return str(config.get(self.config_key) or "")

    def to_spec(self) -> dict[str, Any]:
        msg = f"Built-in param {self.name!r} is resolved by the platform and has no spec"
        raise FuncstackError(msg)
