"""Function source discovery.

Loads a user's function source, walks its public members, and assembles
the manifest:

- ``load_module()`` imports the source. Sources that use top-level
  ``await`` are detected up front and executed as a coroutine.
- ``extract_endpoints()`` collects every ``CloudFunction``, recursing into
  groups (local submodules, mappings, simple namespaces). Group names are
  joined with ``-`` to form endpoint keys and with ``.`` to form entry points.
- ``merge_required_apis()`` folds duplicate API requirements into one entry.
- ``load_stack()`` runs all of the above inside a fresh param registry.

The only suspension point is reading and, for async sources, executing the
module. Everything after that is synchronous.
"""

from __future__ import annotations

import ast
import importlib.util
import inspect
import logging
import re
import sys
import types
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import anyio

from funcstack.config import StackConfig
from funcstack.errors import InvalidExportNameError
from funcstack.params.registry import use_registry
from funcstack.runtime.function import CloudFunction
from funcstack.runtime.manifest import ManifestEndpoint, ManifestStack, RequiredAPI

logger = logging.getLogger("funcstack.loader")

_ASYNC_NODES = (ast.Await, ast.AsyncFor, ast.AsyncWith)

# Nodes that open a new function scope; awaits inside them are not top-level
_SCOPE_NODES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda)

_INSTALLED_DIRS = frozenset({"site-packages", "dist-packages"})


class ModuleFormat(Enum):
    """How a function source has to be executed."""

    SYNC = "sync"
    ASYNC = "async"  # Top-level await; executed as a coroutine


@dataclass(frozen=True, slots=True)
class LoadedStack:
    """A manifest plus the callables behind each endpoint key."""

    stack: ManifestStack
    handlers: dict[str, Callable[..., Any]] = field(default_factory=dict)


# -- Loading --


def resolve_entry(path: str | Path, entry_file: str = "main.py") -> tuple[Path, bool]:
    """Find the file to import for a function source.

    Accepts a ``.py`` file, a package directory, or a directory holding
    *entry_file*. Returns the resolved file and whether it is a package
    ``__init__.py``.

    Raises ``FileNotFoundError`` if none of those exist.
    """
    target = Path(path).resolve()
    if target.is_file():
        return target, target.name == "__init__.py"
    if target.is_dir():
        init_file = target / "__init__.py"
        if init_file.is_file():
            return init_file, True
        main_file = target / entry_file
        if main_file.is_file():
            return main_file, False
    msg = f"No function source found at {target} (expected a .py file, a package, or {entry_file})"
    raise FileNotFoundError(msg)


def module_format(source: str, filename: str = "<functions>") -> ModuleFormat:
    """Decide how *source* must be executed.

    A source with ``await``, ``async for`` or ``async with`` outside any
    function body cannot be imported normally and is run as a coroutine.

    Raises ``SyntaxError`` for source that does not parse.
    """
    tree = ast.parse(source, filename)
    if _has_top_level_await(tree):
        return ModuleFormat.ASYNC
    return ModuleFormat.SYNC


def _has_top_level_await(node: ast.AST) -> bool:
    for child in ast.iter_child_nodes(node):
        if isinstance(child, _SCOPE_NODES):
            continue
        if isinstance(child, _ASYNC_NODES):
            return True
        if isinstance(child, ast.comprehension) and child.is_async:
            return True
        if _has_top_level_await(child):
            return True
    return False


def _module_name(entry: Path, is_package: bool) -> str:
    base = entry.parent.name if is_package else entry.stem
    name = re.sub(r"\W", "_", base) or "functions"
    return f"_funcstack_{name}"


def _is_within(file: str | None, root: Path) -> bool:
    if not file:
        return False
    path = Path(file).resolve()
    if _INSTALLED_DIRS.intersection(path.parts):
        return False
    return path.is_relative_to(root)


async def load_module(path: str | Path, *, entry_file: str = "main.py") -> types.ModuleType:
    """Import the function source at *path* and return the module.

    The source is read once; the same text is probed and executed. Every
    call executes it again, so params and functions are re-declared on each
    discovery run. Modules imported from the source directory while loading
    are dropped from ``sys.modules`` afterwards.

    Import errors from user code propagate unchanged.
    """
    entry, is_package = resolve_entry(path, entry_file)
    root = entry.parent
    name = _module_name(entry, is_package)

    source = await anyio.Path(entry).read_text(encoding="utf-8")
    fmt = module_format(source, str(entry))
    logger.debug("Loading %s as %s module %r", entry, fmt.value, name)

    spec = importlib.util.spec_from_file_location(
        name,
        entry,
        submodule_search_locations=[str(root)] if is_package else None,
    )
    if spec is None:
        msg = f"Cannot create an import spec for {entry}"
        raise ImportError(msg, path=str(entry))

    for stale in [key for key in sys.modules if key == name or key.startswith(name + ".")]:
        del sys.modules[stale]

    before = set(sys.modules)
    added_path = False
    if not is_package and str(root) not in sys.path:
        sys.path.insert(0, str(root))
        added_path = True

    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        match fmt:
            case ModuleFormat.SYNC:
                exec(compile(source, str(entry), "exec"), module.__dict__)
            case ModuleFormat.ASYNC:
                await _exec_async(source, entry, module)
    finally:
        if added_path:
            sys.path.remove(str(root))
        for key in set(sys.modules) - before:
            loaded = sys.modules[key]
            owned = key == name or key.startswith(name + ".")
            if owned or _is_within(getattr(loaded, "__file__", None), root):
                del sys.modules[key]

    return module


async def _exec_async(source: str, entry: Path, module: types.ModuleType) -> None:
    code = compile(source, str(entry), "exec", flags=ast.PyCF_ALLOW_TOP_LEVEL_AWAIT)
    result = types.FunctionType(code, module.__dict__)()
    if inspect.iscoroutine(result):
        await result


# -- Reflection --


def _members(namespace: Any) -> Iterator[tuple[str, Any]]:
    """Yield the direct public members of a module, mapping, or namespace."""
    match namespace:
        case types.ModuleType():
            exported = getattr(namespace, "__all__", None)
            if exported is None:
                exported = [n for n in vars(namespace) if not n.startswith("_")]
            for member_name in exported:
                yield member_name, getattr(namespace, member_name)
        case Mapping():
            for key, value in namespace.items():
                if isinstance(key, str):
                    yield key, value
        case types.SimpleNamespace():
            for key, value in vars(namespace).items():
                if not key.startswith("_"):
                    yield key, value


def _is_group(value: Any, root_name: str, root_dir: Path | None) -> bool:
    match value:
        case types.ModuleType():
            module_name = value.__name__
            if module_name.startswith(root_name + "."):
                return True
            return root_dir is not None and _is_within(getattr(value, "__file__", None), root_dir)
        case Mapping() | types.SimpleNamespace():
            return True
        case _:
            return False


def extract_endpoints(
    namespace: Any,
    endpoints: dict[str, ManifestEndpoint],
    required_apis: list[RequiredAPI],
    prefix: str = "",
    handlers: dict[str, Callable[..., Any]] | None = None,
) -> None:
    """Collect every ``CloudFunction`` reachable from *namespace*.

    Results are written into *endpoints* (keyed by dash-joined name),
    *required_apis*, and, if given, *handlers*.

    Raises ``InvalidExportNameError`` if a function's name contains a dash.
    """
    root_name = namespace.__name__ if isinstance(namespace, types.ModuleType) else ""
    root_file = getattr(namespace, "__file__", None)
    root_dir = Path(root_file).resolve().parent if root_file else None
    _walk(
        namespace,
        endpoints,
        required_apis,
        prefix,
        handlers,
        root_name=root_name,
        root_dir=root_dir,
        ancestors=frozenset({id(namespace)}),
    )


def _walk(
    namespace: Any,
    endpoints: dict[str, ManifestEndpoint],
    required_apis: list[RequiredAPI],
    prefix: str,
    handlers: dict[str, Callable[..., Any]] | None,
    *,
    root_name: str,
    root_dir: Path | None,
    ancestors: frozenset[int],
) -> None:
    for member_name, value in _members(namespace):
        if isinstance(value, CloudFunction):
            if "-" in member_name:
                raise InvalidExportNameError(member_name, prefix)
            key = prefix + member_name
            endpoints[key] = value.endpoint.with_entry_point(key.replace("-", "."))
            required_apis.extend(value.required_apis)
            if handlers is not None:
                handlers[key] = value
            logger.debug("Discovered endpoint %r", key)
        elif _is_group(value, root_name, root_dir):
            if id(value) in ancestors:
                continue
            _walk(
                value,
                endpoints,
                required_apis,
                prefix + member_name + "-",
                handlers,
                root_name=root_name,
                root_dir=root_dir,
                ancestors=ancestors | {id(value)},
            )


def merge_required_apis(
    required_apis: Iterable[RequiredAPI | Mapping[str, str]],
) -> list[RequiredAPI]:
    """Fold requirements for the same API into one entry.

    Distinct reasons are kept in first-seen order and joined with a space.
    Accepts ``RequiredAPI`` values or ``{"api": ..., "reason": ...}`` mappings.
    """
    reasons_by_api: dict[str, dict[str, None]] = {}
    for item in required_apis:
        if isinstance(item, Mapping):
            item = RequiredAPI(api=item["api"], reason=item["reason"])
        reasons_by_api.setdefault(item.api, {})[item.reason] = None
    return [
        RequiredAPI(api=api, reason=" ".join(reasons)) for api, reasons in reasons_by_api.items()
    ]


# -- Assembly --


async def load_stack_with_handlers(
    directory: str | Path,
    config: StackConfig | None = None,
) -> LoadedStack:
    """Load a function source and return its manifest and handlers.

    All-or-nothing: any error while loading or reflecting aborts the run.
    """
    if config is None:
        config = StackConfig()

    endpoints: dict[str, ManifestEndpoint] = {}
    required_apis: list[RequiredAPI] = []
    handlers: dict[str, Callable[..., Any]] = {}

    with use_registry() as registry:
        module = await load_module(directory, entry_file=config.entry_file)
        extract_endpoints(module, endpoints, required_apis, "", handlers)
        params = registry.specs() if config.include_params else []

    for key, endpoint in endpoints.items():
        if endpoint.platform is None:
            endpoints[key] = endpoint.with_platform(config.platform)

    stack = ManifestStack(
        endpoints=endpoints,
        required_apis=merge_required_apis(required_apis),
        spec_version=config.spec_version,
        params=params,
    )
    logger.info(
        "Discovered %d endpoint(s) and %d param(s) in %s",
        len(endpoints),
        len(params),
        directory,
    )
    return LoadedStack(stack=stack, handlers=handlers)


async def load_stack(directory: str | Path, config: StackConfig | None = None) -> ManifestStack:
    """Load a function source and return its manifest.

    The single entry point for manifest discovery::

        stack = await load_stack("functions/")
        print(json.dumps(stack_to_wire(stack)))
    """
    loaded = await load_stack_with_handlers(directory, config)
    return loaded.stack
