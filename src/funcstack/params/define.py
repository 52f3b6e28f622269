"""Param declarations.

Each ``get_*`` function builds a typed param, records it in the current
registry (replacing any earlier param of the same name) and returns it::

    from funcstack.params import get_int, get_string

    MIN_INSTANCES = get_int("MIN_INSTANCES", default=0)
    WELCOME = get_string("WELCOME_MESSAGE", default="hello")
"""

from typing import Any

from funcstack.params.inputs import ParamInput
from funcstack.params.registry import DeclaredParam, ParamRegistry, current_registry
from funcstack.params.types import (
    BooleanParam,
    FloatParam,
    IntParam,
    JSONParam,
    JSONSecretParam,
    ListParam,
    SecretParam,
    StringParam,
)


def _declare[P: DeclaredParam](param: P, registry: ParamRegistry | None) -> P:
    target = registry if registry is not None else current_registry()
    return target.register(param)


def get_string(
    name: str,
    *,
    default: str | None = None,
    label: str | None = None,
    description: str | None = None,
    input: ParamInput | None = None,
    registry: ParamRegistry | None = None,
) -> StringParam:
    """Declare a string param read from the environment variable *name*."""
    param = StringParam(name, default=default, label=label, description=description, input=input)
    return _declare(param, registry)


def get_int(
    name: str,
    *,
    default: int | None = None,
    label: str | None = None,
    description: str | None = None,
    input: ParamInput | None = None,
    registry: ParamRegistry | None = None,
) -> IntParam:
    """Declare an integer param read from the environment variable *name*."""
    param = IntParam(name, default=default, label=label, description=description, input=input)
    return _declare(param, registry)


def get_float(
    name: str,
    *,
    default: float | None = None,
    label: str | None = None,
    description: str | None = None,
    input: ParamInput | None = None,
    registry: ParamRegistry | None = None,
) -> FloatParam:
    """Declare a float param read from the environment variable *name*."""
    param = FloatParam(name, default=default, label=label, description=description, input=input)
    return _declare(param, registry)


def get_boolean(
    name: str,
    *,
    default: bool | None = None,
    label: str | None = None,
    description: str | None = None,
    input: ParamInput | None = None,
    registry: ParamRegistry | None = None,
) -> BooleanParam:
    """Declare a boolean param.

    ``true``, ``y``, ``yes`` and ``1`` (any casing) read as True; any other
    set value reads as False.
    """
    param = BooleanParam(name, default=default, label=label, description=description, input=input)
    return _declare(param, registry)


def get_list(
    name: str,
    *,
    default: list[str] | None = None,
    label: str | None = None,
    description: str | None = None,
    input: ParamInput | None = None,
    registry: ParamRegistry | None = None,
) -> ListParam:
    """Declare a comma-separated list param."""
    param = ListParam(name, default=default, label=label, description=description, input=input)
    return _declare(param, registry)


def get_json(
    name: str,
    *,
    default: Any = None,
    label: str | None = None,
    description: str | None = None,
    input: ParamInput | None = None,
    registry: ParamRegistry | None = None,
) -> JSONParam:
    """Declare a JSON param.

    A malformed value raises ``ParamValueError`` when read; an unset value
    returns *default* as given.
    """
    param = JSONParam(name, default=default, label=label, description=description, input=input)
    return _declare(param, registry)


def get_secret(name: str, *, registry: ParamRegistry | None = None) -> SecretParam:
    """Declare a secret. Pass it to a trigger's ``secrets=`` option to mount it."""
    return _declare(SecretParam(name), registry)


def get_json_secret(name: str, *, registry: ParamRegistry | None = None) -> JSONSecretParam:
    """Declare a secret holding a JSON document, parsed on every read."""
    return _declare(JSONSecretParam(name), registry)
