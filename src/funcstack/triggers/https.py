"""HTTP and callable triggers."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from funcstack.runtime.function import CloudFunction
from funcstack.triggers.options import make_function

type Decorator = Callable[[Callable[..., Any]], CloudFunction]


def on_request(
    func: Callable[..., Any] | None = None,
    *,
    invoker: str | Iterable[str] | None = None,
    labels: Mapping[str, Any] | None = None,
    **options: Any,
) -> CloudFunction | Decorator:
    """Declare an HTTPS function.

    Usable bare or with options::

        @on_request
        def hello(request): ...

        @on_request(invoker="public", region="europe-west1")
        def webhook(request): ...
    """

    def decorator(f: Callable[..., Any]) -> CloudFunction:
        trigger: dict[str, Any] = {}
        if invoker is not None:
            trigger["invoker"] = [invoker] if isinstance(invoker, str) else list(invoker)
        return make_function(
            f, trigger_kind="httpsTrigger", trigger=trigger, options=options, labels=labels
        )

    if func is not None:
        return decorator(func)
    return decorator


def on_call(
    func: Callable[..., Any] | None = None,
    *,
    labels: Mapping[str, Any] | None = None,
    **options: Any,
) -> CloudFunction | Decorator:
    """Declare a callable (client SDK) function."""

    def decorator(f: Callable[..., Any]) -> CloudFunction:
        return make_function(
            f, trigger_kind="callableTrigger", trigger={}, options=options, labels=labels
        )

    if func is not None:
        return decorator(func)
    return decorator
