"""
Command line access to the template analysis.

Usage:
  python -m sqlfacade variables query.sql [--mode guard-only|full]
  python -m sqlfacade addition tables.tmpl

Use "-" as FILE to read the template from stdin.
"""

import argparse
import json
import sys

from sqlfacade.core.config import configure_logging
from sqlfacade.engines.template import (
    TemplateError,
    extract_addition_from_template,
    extract_template_variables,
)
from sqlfacade.models import ExtractionMode


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlfacade",
        description="Analyse Jinja2 SQL templates.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to SQLFACADE_LOG_LEVEL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_vars = sub.add_parser("variables", help="List variables the template needs")
    p_vars.add_argument("file", help="Template file, or - for stdin")
    p_vars.add_argument(
        "--mode",
        choices=[m.value for m in ExtractionMode],
        default=None,
        help="guard-only reads if/with/for conditions only; full also reads their bodies",
    )

    p_add = sub.add_parser(
        "addition", help="Render an addition template and print its tables as JSON"
    )
    p_add.add_argument("file", help="Template file, or - for stdin")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    source = _read_source(args.file)
    try:
        if args.command == "variables":
            mode = ExtractionMode(args.mode) if args.mode else None
            for name in extract_template_variables(source, mode=mode):
                print(name)
        else:
            header = extract_addition_from_template(source)
            print(json.dumps(header.model_dump(), ensure_ascii=False, indent=2))
    except TemplateError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
