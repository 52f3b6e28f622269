"""``funcstack manifest`` — print the manifest for a function source.

Loads the source, converts the stack to its wire form, and writes it to
stdout as JSON or YAML. Any failure is reported on stderr with exit code 1;
nothing is written to stdout in that case.
"""

import argparse
import functools
import json
import logging
import sys
from typing import Any

import anyio
import yaml

from funcstack.config import StackConfig
from funcstack.runtime.loader import load_stack
from funcstack.runtime.manifest import stack_to_wire

logger = logging.getLogger("funcstack.cli")


def render_manifest(wire: dict[str, Any], fmt: str) -> str:
    """Serialize a wire manifest as ``json`` or ``yaml``."""
    if fmt == "yaml":
        return yaml.safe_dump(wire, sort_keys=False)
    return json.dumps(wire, indent=2)


def run_manifest(args: argparse.Namespace) -> None:
    """Discover functions in ``args.source`` and print the manifest."""
    config = StackConfig(
        spec_version=args.spec_version,
        entry_file=args.entry_file,
        include_params=not args.no_params,
    )

    try:
        stack = anyio.run(functools.partial(load_stack, args.source, config))
    except Exception as exc:
        logger.debug("Discovery failed", exc_info=True)
        print(f"Failed to generate manifest from function source: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.debug("Rendering manifest for %d endpoint(s)", len(stack.endpoints))
    print(render_manifest(stack_to_wire(stack), args.format))
