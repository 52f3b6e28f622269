"""Endpoint option names and normalisation.

Trigger builders take snake_case keyword options and store them under the
names the manifest uses. Option values may be literals, params,
expressions, or ``RESET_VALUE``; they are kept as-is here and rendered by
``stack_to_wire()``.
"""

from collections.abc import Callable, Mapping
from typing import Any

from funcstack.params.types import Param, SecretParam
from funcstack.runtime.function import CloudFunction
from funcstack.runtime.manifest import ManifestEndpoint, RequiredAPI

# keyword option -> manifest key
OPTION_KEYS: dict[str, str] = {
    "region": "region",
    "memory": "availableMemoryMb",
    "cpu": "cpu",
    "timeout_seconds": "timeoutSeconds",
    "min_instances": "minInstances",
    "max_instances": "maxInstances",
    "concurrency": "concurrency",
    "service_account": "serviceAccountEmail",
    "ingress": "ingressSettings",
    "vpc": "vpc",
    "environment_variables": "environmentVariables",
    "secrets": "secretEnvironmentVariables",
}


def _normalize(name: str, value: Any) -> Any:
    match name, value:
        case "region", str():
            return [value]
        case "secrets", _:
            return [{"key": s.name if isinstance(s, (Param, SecretParam)) else s} for s in value]
        case _:
            return value


def build_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Map keyword options to manifest keys, dropping ``None`` values.

    Raises ``TypeError`` for an unknown option, like an unexpected keyword.
    """
    out: dict[str, Any] = {}
    for name, value in options.items():
        if value is None:
            continue
        key = OPTION_KEYS.get(name)
        if key is None:
            msg = (
                f"Unknown endpoint option {name!r}. "
                f"Expected one of: {', '.join(sorted(OPTION_KEYS))}"
            )
            raise TypeError(msg)
        out[key] = _normalize(name, value)
    return out


def make_function(
    func: Callable[..., Any],
    *,
    trigger_kind: str,
    trigger: Mapping[str, Any],
    options: Mapping[str, Any],
    labels: Mapping[str, Any] | None = None,
    platform: str | None = None,
    required_apis: tuple[RequiredAPI, ...] = (),
) -> CloudFunction:
    """Wrap *func* as a CloudFunction. Shared by every trigger builder."""
    endpoint = ManifestEndpoint(
        trigger_kind=trigger_kind,
        trigger=dict(trigger),
        platform=platform,
        labels=dict(labels or {}),
        options=build_options(options),
    )
    return CloudFunction(endpoint=endpoint, invoke=func, required_apis=required_apis)
