"""Tests for funcstack.config — StackConfig frozen dataclass."""

import pytest

from funcstack.config import SPEC_VERSION, StackConfig


class TestStackConfig:
    def test_defaults(self) -> None:
        cfg = StackConfig()

        assert cfg.spec_version == SPEC_VERSION == "v1alpha1"
        assert cfg.include_params is True
        assert cfg.entry_file == "main.py"
        assert cfg.platform == "gcfv2"

    def test_override(self) -> None:
        cfg = StackConfig(spec_version="v1beta1", include_params=False, entry_file="app.py")

        assert cfg.spec_version == "v1beta1"
        assert cfg.include_params is False
        assert cfg.entry_file == "app.py"

    def test_frozen(self) -> None:
        cfg = StackConfig()
        with pytest.raises(AttributeError):
            cfg.platform = "gcfv1"  # type: ignore[misc]

    def test_package_exports(self) -> None:
        import funcstack

        assert funcstack.StackConfig is StackConfig
