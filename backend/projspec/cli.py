"""Command-line entry point.

Usage:
    python -m projspec > spec.projections.js
    python -m projspec --format json --output cases.json

With no arguments the generated spec goes to stdout. A failed context or
transform prints one message to stdout and exits with status 1; nothing is
written until the whole run has succeeded.
"""
import argparse
import logging
import sys
from typing import List, Optional

from projspec.config import Settings
from projspec.services.errors import GenerationError
from projspec.services.generator import SpecGenerationService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projspec",
        description="Generate golden-value forward/inverse projection test specs.",
    )
    parser.add_argument(
        "--format",
        choices=["spec", "json"],
        default="spec",
        help="Output as describe/it spec text (default) or JSON test cases",
    )
    parser.add_argument("--output", "-o", help="Write to this file instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")
    return parser


def main(argv: Optional[List[str]] = None, service: Optional[SpecGenerationService] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        if service is None:
            service = SpecGenerationService(Settings.from_env())
        if args.format == "json":
            text = service.render_json()
        else:
            text = service.render_text()
    except GenerationError as exc:
        print(exc)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(text)
    else:
        sys.stdout.write(text)
    return 0
