"""Tests for funcstack.__init__ — lazy imports cover all public names."""

import pytest

import funcstack


@pytest.mark.parametrize("name", funcstack.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(funcstack, name)
    assert obj is not None, f"funcstack.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        funcstack.__getattr__("ThisDoesNotExist")


def test_load_stack_is_the_runtime_function() -> None:
    from funcstack.runtime.loader import load_stack

    assert funcstack.load_stack is load_stack
