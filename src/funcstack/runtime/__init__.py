"""Manifest discovery: load a function source, reflect it, emit the manifest."""

from funcstack.runtime.function import CloudFunction
from funcstack.runtime.loader import (
    LoadedStack,
    ModuleFormat,
    extract_endpoints,
    load_module,
    load_stack,
    load_stack_with_handlers,
    merge_required_apis,
    module_format,
)
from funcstack.runtime.manifest import (
    RESET_VALUE,
    ManifestEndpoint,
    ManifestStack,
    RequiredAPI,
    stack_to_wire,
)

__all__ = [
    "RESET_VALUE",
    "CloudFunction",
    "LoadedStack",
    "ManifestEndpoint",
    "ManifestStack",
    "ModuleFormat",
    "RequiredAPI",
    "extract_endpoints",
    "load_module",
    "load_stack",
    "load_stack_with_handlers",
    "merge_required_apis",
    "module_format",
    "stack_to_wire",
]
