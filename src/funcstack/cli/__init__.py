"""Funcstack CLI — manifest discovery from the command line.

Entry point registered as ``funcstack`` in ``pyproject.toml``::

    [project.scripts]
    funcstack = "funcstack.cli:main"
"""

import argparse
import logging
import sys

from funcstack.config import SPEC_VERSION


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``funcstack`` command."""
    parser = argparse.ArgumentParser(
        prog="funcstack",
        description="funcstack — discover deployable functions and emit their manifest.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- funcstack manifest -----------------------------------------------
    manifest_parser = subparsers.add_parser(
        "manifest", help="Print the deployment manifest for a function source"
    )
    manifest_parser.add_argument(
        "source",
        nargs="?",
        default=".",
        help="Function source: a .py file, a package, or a directory with main.py",
    )
    manifest_parser.add_argument(
        "--format",
        choices=("json", "yaml"),
        default="json",
        help="Output format (default: json)",
    )
    manifest_parser.add_argument(
        "--entry-file",
        default="main.py",
        help="Entry module looked up in a non-package directory (default: main.py)",
    )
    manifest_parser.add_argument(
        "--spec-version",
        default=SPEC_VERSION,
        help=f"Manifest spec version (default: {SPEC_VERSION})",
    )
    manifest_parser.add_argument(
        "--no-params",
        action="store_true",
        help="Omit declared params from the manifest",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "manifest":
        from funcstack.cli._manifest import run_manifest

        run_manifest(args)
