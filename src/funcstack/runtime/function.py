"""CloudFunction: the value every trigger builder returns.

A plain callable paired with the endpoint description the loader needs.
The loader recognises deployable functions by this type alone; it never
looks for marker attributes on ordinary functions.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from funcstack.runtime.manifest import ManifestEndpoint, RequiredAPI


@dataclass(frozen=True, slots=True)
class CloudFunction:
    """A user function tagged with its trigger metadata.

    Calling the CloudFunction calls the wrapped function, so decorated
    handlers stay directly testable.
    """

    endpoint: ManifestEndpoint
    invoke: Callable[..., Any]
    required_apis: tuple[RequiredAPI, ...] = ()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.invoke(*args, **kwargs)

    @property
    def name(self) -> str:
        return getattr(self.invoke, "__name__", repr(self.invoke))
