"""Deploy-time input hints for params.

An input tells the deploy tool how to prompt for a param that has no value
yet: free text (optionally validated), a pick from fixed options, or a pick
from the project's resources::

    REGION = get_string("REGION", input=select("us-central1", "europe-west1"))
    ZIP = get_string("ZIP", input=TextInput(validation_regex=re.compile(r"\\d{5}")))
    BUCKET = get_string("BUCKET", input=BUCKET_PICKER)

``to_spec()`` returns the manifest shape. A compiled ``validation_regex`` is
left as-is and rendered to its pattern string by ``stack_to_wire()``.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TextInput:
    """Prompt for free text, retried until it matches *validation_regex*."""

    example: str | None = None
    validation_regex: str | re.Pattern[str] | None = None
    validation_error_message: str | None = None

    def to_spec(self) -> dict[str, Any]:
        text: dict[str, Any] = {}
        if self.example is not None:
            text["example"] = self.example
        if self.validation_regex is not None:
            text["validationRegex"] = self.validation_regex
        if self.validation_error_message is not None:
            text["validationErrorMessage"] = self.validation_error_message
        return {"text": text}


@dataclass(frozen=True, slots=True)
class SelectOption:
    value: Any
    label: str | None = None

    def to_spec(self) -> dict[str, Any]:
        if self.label is None:
            return {"value": self.value}
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True, slots=True)
class SelectInput:
    """Prompt for exactly one of *options*."""

    options: tuple[SelectOption, ...]

    def to_spec(self) -> dict[str, Any]:
        return {"select": {"options": [option.to_spec() for option in self.options]}}


@dataclass(frozen=True, slots=True)
class MultiSelectInput:
    """Prompt for any subset of *options*. Meant for list params."""

    options: tuple[SelectOption, ...]

    def to_spec(self) -> dict[str, Any]:
        return {"multiSelect": {"options": [option.to_spec() for option in self.options]}}


@dataclass(frozen=True, slots=True)
class ResourceInput:
    """Prompt for one of the project's resources of *resource_type*."""

    resource_type: str

    def to_spec(self) -> dict[str, Any]:
        return {"resource": {"resource": {"type": self.resource_type}}}


type ParamInput = TextInput | SelectInput | MultiSelectInput | ResourceInput

BUCKET_PICKER = ResourceInput("storage.googleapis.com/Bucket")


def _options(values: tuple[Any, ...]) -> tuple[SelectOption, ...]:
    match values:
        case (Mapping() as labelled,):
            return tuple(SelectOption(value, label) for label, value in labelled.items())
        case _:
            return tuple(SelectOption(value) for value in values)


def select(*values: Any) -> SelectInput:
    """Build a ``SelectInput`` from plain values or a ``{label: value}`` mapping.

    ::

        select("a", "b")
        select({"Small": 1, "Large": 4})
    """
    return SelectInput(_options(values))


def multi_select(*values: Any) -> MultiSelectInput:
    """Like ``select()`` but allows picking several options."""
    return MultiSelectInput(_options(values))
