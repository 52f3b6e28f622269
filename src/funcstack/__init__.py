"""funcstack — deployment manifests from plain Python function sources.

Declare functions with trigger decorators and deploy-time params; funcstack
discovers them without running them and emits the manifest a deploy tool
consumes.

Basic usage::

    # main.py
    from funcstack.params import get_int
    from funcstack.triggers import on_request

    MAX = get_int("MAX_INSTANCES", default=10)

    @on_request(max_instances=MAX.expr())
    def hello(request):
        return "Hello, World!"

Discovery::

    from funcstack import load_stack, stack_to_wire

    stack = await load_stack(".")
    manifest = stack_to_wire(stack)
"""

__version__ = "0.1.0"
__all__ = [
    "RESET_VALUE",
    "CloudFunction",
    "FuncstackError",
    "InvalidExportNameError",
    "ManifestEndpoint",
    "ManifestError",
    "ManifestStack",
    "ParamValueError",
    "PathPattern",
    "RequiredAPI",
    "StackConfig",
    "load_stack",
    "stack_to_wire",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import funcstack`` fast while providing a clean top-level API.
    """
    if name == "StackConfig":
        from funcstack.config import StackConfig

        return StackConfig

    if name == "PathPattern":
        from funcstack.paths.pattern import PathPattern

        return PathPattern

    if name in ("load_stack", "CloudFunction"):
        from funcstack import runtime as _runtime

        return getattr(_runtime, name)

    if name in ("RESET_VALUE", "ManifestEndpoint", "ManifestStack", "RequiredAPI", "stack_to_wire"):
        from funcstack.runtime import manifest as _manifest

        return getattr(_manifest, name)

    if name in ("FuncstackError", "InvalidExportNameError", "ManifestError", "ParamValueError"):
        from funcstack import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
