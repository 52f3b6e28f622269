"""Trigger builders.

Each builder is a decorator that returns a ``CloudFunction``::

    from funcstack.triggers import on_message_published, on_request

    @on_request(max_instances=10)
    def hello(request):
        return "hello"

    @on_message_published("orders")
    def process_order(event):
        ...
"""

from funcstack.triggers.events import (
    on_event,
    on_message_published,
    on_object_finalized,
)
from funcstack.triggers.https import on_call, on_request
from funcstack.triggers.scheduler import on_schedule

__all__ = [
    "on_call",
    "on_event",
    "on_message_published",
    "on_object_finalized",
    "on_request",
    "on_schedule",
]
