#!/usr/bin/env python3
"""Command-line interface for enhance."""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, NoReturn

from . import Enhancer
from .errors import EnhanceError


def _get_version() -> str:
    try:
        return version("enhance-ssr")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="enhance",
        description="Expand custom elements in an HTML document into static HTML.",
        epilog=(
            "Examples:\n"
            "  enhance page.html --elements myapp.elements:ELEMENTS\n"
            "  cat page.html | enhance - --elements myapp.elements:ELEMENTS --body-only\n"
            "  enhance page.html --elements myapp.elements:ELEMENTS --state state.json\n"
            "\n"
            "If you don't have the 'enhance' command available, use:\n"
            "  python -m enhance ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="HTML file to render, or '-' to read from stdin",
    )
    parser.add_argument(
        "--elements",
        metavar="MODULE:ATTR",
        help="Import path of a mapping from tag name to render function",
    )
    parser.add_argument(
        "--state",
        metavar="FILE",
        help="JSON file with the initial store",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--body-only",
        action="store_true",
        help="Only output the contents of <body>",
    )
    output_group.add_argument(
        "--separate",
        action="store_true",
        help="Output head and body contents as a JSON object",
    )

    parser.add_argument(
        "--no-enhanced-attr",
        action="store_false",
        dest="enhanced_attr",
        help="Do not mark expanded elements with an 'enhanced' attribute",
    )
    parser.add_argument(
        "--ignore-unknown",
        action="store_true",
        help="Leave custom elements without a render function untouched",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each expansion to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"enhance {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_html(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    return Path(path).read_text()


def _load_elements(import_path: str | None) -> dict[str, Any]:
    if not import_path:
        return {}
    module_name, _, attr = import_path.partition(":")
    module = importlib.import_module(module_name)
    return dict(getattr(module, attr or "elements"))


def _load_state(path: str | None) -> dict[str, Any]:
    if not path:
        return {}
    state = json.loads(Path(path).read_text())
    if not isinstance(state, dict):
        raise ValueError(f"{path}: initial state must be a JSON object")
    return state


def main(argv: list[str] | None = None) -> NoReturn | None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        initial_state = _load_state(args.state)
        elements = _load_elements(args.elements)
    except (ImportError, AttributeError, ValueError) as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    enhancer = Enhancer(
        initial_state=initial_state,
        elements=elements,
        body_only=args.body_only,
        separate_content=args.separate,
        enhanced_attr=args.enhanced_attr,
        ignore_unknown=args.ignore_unknown,
    )

    try:
        result = enhancer(_read_html(args.path))
    except EnhanceError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    if args.separate:
        sys.stdout.write(json.dumps(result._asdict()))
    else:
        sys.stdout.write(result)
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
