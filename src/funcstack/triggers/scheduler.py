"""Scheduled triggers."""

from collections.abc import Callable, Mapping
from typing import Any

from funcstack.runtime.function import CloudFunction
from funcstack.runtime.manifest import RequiredAPI
from funcstack.triggers.options import make_function

SCHEDULER_API = RequiredAPI(
    api="cloudscheduler.googleapis.com",
    reason="Needed for scheduled functions.",
)

# keyword -> retryConfig key
_RETRY_KEYS: dict[str, str] = {
    "retry_count": "retryCount",
    "max_retry_duration": "maxRetryDuration",
    "min_backoff_duration": "minBackoffDuration",
    "max_backoff_duration": "maxBackoffDuration",
    "max_doublings": "maxDoublings",
}


def on_schedule(
    schedule: Any,
    *,
    timezone: Any = None,
    labels: Mapping[str, Any] | None = None,
    retry_count: Any = None,
    max_retry_duration: Any = None,
    min_backoff_duration: Any = None,
    max_backoff_duration: Any = None,
    max_doublings: Any = None,
    **options: Any,
) -> Callable[[Callable[..., Any]], CloudFunction]:
    """Declare a function run on a cron-style *schedule*.

    *schedule* and *timezone* may be params or expressions::

        @on_schedule("every 5 minutes", timezone=TZ, retry_count=3)
        def cleanup(event): ...
    """
    retry_values = {
        "retry_count": retry_count,
        "max_retry_duration": max_retry_duration,
        "min_backoff_duration": min_backoff_duration,
        "max_backoff_duration": max_backoff_duration,
        "max_doublings": max_doublings,
    }
    retry_config = {
        _RETRY_KEYS[name]: value for name, value in retry_values.items() if value is not None
    }

    def decorator(f: Callable[..., Any]) -> CloudFunction:
        trigger: dict[str, Any] = {"schedule": schedule}
        if timezone is not None:
            trigger["timeZone"] = timezone
        if retry_config:
            trigger["retryConfig"] = retry_config
        return make_function(
            f,
            trigger_kind="scheduleTrigger",
            trigger=trigger,
            options=options,
            labels=labels,
            required_apis=(SCHEDULER_API,),
        )

    return decorator
