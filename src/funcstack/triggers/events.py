"""Event triggers: generic Eventarc events, Pub/Sub topics, Storage buckets.

Event filters whose value is a path pattern with wildcards or captures
(``users/{uid}``, ``images/**``) are emitted as ``eventFilterPathPatterns``;
plain values stay exact ``eventFilters``.
"""

from collections.abc import Callable, Mapping
from typing import Any

from funcstack.paths.pattern import PathPattern
from funcstack.runtime.function import CloudFunction
from funcstack.runtime.manifest import RequiredAPI
from funcstack.triggers.options import make_function

MESSAGE_PUBLISHED_EVENT = "google.cloud.pubsub.topic.v1.messagePublished"
OBJECT_FINALIZED_EVENT = "google.cloud.storage.object.v1.finalized"

PUBSUB_API = RequiredAPI(api="pubsub.googleapis.com", reason="Needed for Pub/Sub triggers.")


def split_filters(filters: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, str]]:
    """Separate exact filters from path-pattern filters.

    Returns ``(event_filters, path_pattern_filters)``. Only strings and
    ``PathPattern`` values are inspected; params and expressions are exact.
    """
    exact: dict[str, Any] = {}
    patterns: dict[str, str] = {}
    for attribute, value in filters.items():
        match value:
            case PathPattern():
                pattern = value
            case str():
                pattern = PathPattern(value)
            case _:
                exact[attribute] = value
                continue
        if pattern.has_wildcards():
            patterns[attribute] = pattern.value
        else:
            exact[attribute] = pattern.value
    return exact, patterns


def on_event(
    event_type: str,
    *,
    filters: Mapping[str, Any] | None = None,
    channel: str | None = None,
    retry: bool = False,
    event_region: str | None = None,
    labels: Mapping[str, Any] | None = None,
    required_apis: tuple[RequiredAPI, ...] = (),
    **options: Any,
) -> Callable[[Callable[..., Any]], CloudFunction]:
    """Declare a function triggered by an event of *event_type*."""
    exact, patterns = split_filters(filters or {})

    def decorator(f: Callable[..., Any]) -> CloudFunction:
        trigger: dict[str, Any] = {"eventType": event_type, "eventFilters": exact}
        if patterns:
            trigger["eventFilterPathPatterns"] = patterns
        if channel is not None:
            trigger["channel"] = channel
        if event_region is not None:
            trigger["region"] = event_region
        trigger["retry"] = retry
        return make_function(
            f,
            trigger_kind="eventTrigger",
            trigger=trigger,
            options=options,
            labels=labels,
            required_apis=required_apis,
        )

    return decorator


def on_message_published(
    topic: Any,
    *,
    retry: bool = False,
    **options: Any,
) -> Callable[[Callable[..., Any]], CloudFunction]:
    """Declare a function triggered by messages on a Pub/Sub *topic*."""
    return on_event(
        MESSAGE_PUBLISHED_EVENT,
        filters={"topic": topic},
        retry=retry,
        required_apis=(PUBSUB_API,),
        **options,
    )


def on_object_finalized(
    bucket: Any,
    *,
    retry: bool = False,
    **options: Any,
) -> Callable[[Callable[..., Any]], CloudFunction]:
    """Declare a function triggered when an object is written to *bucket*."""
    return on_event(
        OBJECT_FINALIZED_EVENT,
        filters={"bucket": bucket},
        retry=retry,
        **options,
    )
