"""Tests for funcstack.triggers — trigger builders and endpoint options."""

import pytest

from funcstack.params import get_int, get_secret, get_string
from funcstack.paths import PathPattern
from funcstack.runtime.function import CloudFunction
from funcstack.runtime.manifest import RESET_VALUE, ManifestStack, stack_to_wire
from funcstack.triggers import (
    on_call,
    on_event,
    on_message_published,
    on_object_finalized,
    on_request,
    on_schedule,
)
from funcstack.triggers.events import split_filters
from funcstack.triggers.options import build_options


class TestBuildOptions:
    def test_renames_to_manifest_keys(self) -> None:
        assert build_options({"memory": 256, "timeout_seconds": 60}) == {
            "availableMemoryMb": 256,
            "timeoutSeconds": 60,
        }

    def test_none_is_dropped(self) -> None:
        assert build_options({"concurrency": None}) == {}

    def test_reset_value_is_kept(self) -> None:
        assert build_options({"max_instances": RESET_VALUE}) == {"maxInstances": RESET_VALUE}

    def test_region_string_becomes_list(self) -> None:
        assert build_options({"region": "europe-west1"}) == {"region": ["europe-west1"]}

    def test_secrets(self) -> None:
        api_key = get_string("API_KEY")
        assert build_options({"secrets": [api_key, "OTHER"]}) == {
            "secretEnvironmentVariables": [{"key": "API_KEY"}, {"key": "OTHER"}]
        }

    def test_unknown_option(self) -> None:
        with pytest.raises(TypeError, match="Unknown endpoint option 'memroy'"):
            build_options({"memroy": 256})


class TestHttps:
    def test_bare_decorator(self) -> None:
        @on_request
        def hello(request: str) -> str:
            return f"hello {request}"

        assert isinstance(hello, CloudFunction)
        assert hello.endpoint.trigger_kind == "httpsTrigger"
        assert hello("you") == "hello you"
        assert hello.name == "hello"

    def test_with_options(self) -> None:
        @on_request(invoker="public", region="us-central1", labels={"team": "web"})
        def hook(request: object) -> None: ...

        assert hook.endpoint.trigger == {"invoker": ["public"]}
        assert hook.endpoint.options == {"region": ["us-central1"]}
        assert hook.endpoint.labels == {"team": "web"}

    def test_callable(self) -> None:
        @on_call(concurrency=get_int("CONC").expr())
        def rpc(data: object) -> object:
            return data

        wire = stack_to_wire(ManifestStack(endpoints={"rpc": rpc.endpoint}))
        assert wire["endpoints"]["rpc"]["callableTrigger"] == {}
        assert wire["endpoints"]["rpc"]["concurrency"] == "{{ CONC }}"


class TestSchedule:
    def test_trigger(self) -> None:
        @on_schedule("every 5 minutes", timezone="UTC", retry_count=3)
        def cleanup(event: object) -> None: ...

        assert cleanup.endpoint.trigger_kind == "scheduleTrigger"
        assert cleanup.endpoint.trigger == {
            "schedule": "every 5 minutes",
            "timeZone": "UTC",
            "retryConfig": {"retryCount": 3},
        }
        assert [api.api for api in cleanup.required_apis] == ["cloudscheduler.googleapis.com"]

    def test_no_retry_config_when_unset(self) -> None:
        @on_schedule("every day 00:00")
        def nightly(event: object) -> None: ...

        assert nightly.endpoint.trigger == {"schedule": "every day 00:00"}


class TestEvents:
    def test_split_filters(self) -> None:
        exact, patterns = split_filters(
            {"bucket": "photos", "name": "users/{uid}/**", "doc": PathPattern("a/b")}
        )
        assert exact == {"bucket": "photos", "doc": "a/b"}
        assert patterns == {"name": "users/{uid}/**"}

    def test_params_are_exact_filters(self) -> None:
        topic = get_string("TOPIC")
        exact, patterns = split_filters({"topic": topic})
        assert exact == {"topic": topic}
        assert patterns == {}

    def test_generic_event(self) -> None:
        @on_event(
            "google.cloud.firestore.document.v1.written",
            filters={"database": "(default)", "document": "users/{uid}"},
            retry=True,
            event_region="nam5",
        )
        def on_user(event: object) -> None: ...

        assert on_user.endpoint.trigger == {
            "eventType": "google.cloud.firestore.document.v1.written",
            "eventFilters": {"database": "(default)"},
            "eventFilterPathPatterns": {"document": "users/{uid}"},
            "region": "nam5",
            "retry": True,
        }

    def test_message_published(self) -> None:
        @on_message_published("orders", max_instances=2)
        def process(event: object) -> None: ...

        assert process.endpoint.trigger == {
            "eventType": "google.cloud.pubsub.topic.v1.messagePublished",
            "eventFilters": {"topic": "orders"},
            "retry": False,
        }
        assert process.endpoint.options == {"maxInstances": 2}
        assert [api.api for api in process.required_apis] == ["pubsub.googleapis.com"]

    def test_object_finalized(self) -> None:
        @on_object_finalized("uploads", retry=True)
        def thumbnail(event: object) -> None: ...

        assert thumbnail.endpoint.trigger["eventFilters"] == {"bucket": "uploads"}
        assert thumbnail.endpoint.trigger["retry"] is True
        assert thumbnail.required_apis == ()


class TestSecrets:
    def test_secret_params_mount_by_name(self) -> None:
        api_key = get_secret("API_KEY")

        @on_request(secrets=[api_key, "LEGACY_TOKEN"])
        def hook(request: object) -> str:
            return api_key.value

        assert hook.endpoint.options == {
            "secretEnvironmentVariables": [{"key": "API_KEY"}, {"key": "LEGACY_TOKEN"}]
        }
