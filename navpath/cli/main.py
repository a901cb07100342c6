"""navpath command line: run a single path transform and print the result.

Examples:
    navpath canonicalize /a/./b/../c
    navpath --dialect windows relative //srv/share/x //srv/share/y/z
    navpath --json expand ~/notes
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from navpath import config as navpath_config
from navpath.cli.models import Operation, PathResult
from navpath.logging import DataRedactor, create_logger
from navpath.paths import Dialect, NavPathError, PathAlgebra, PathConfig


def _capacity(value: str) -> int:
    capacity = int(value)
    if capacity < 2:
        raise argparse.ArgumentTypeError(f"must be at least 2, got: {capacity}")
    return capacity


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="navpath", description="Textual path algebra")
    ap.add_argument("--dialect", choices=[d.value for d in Dialect], help="Path syntax")
    ap.add_argument("--capacity", type=_capacity, help="Path budget in bytes")
    ap.add_argument("--home", help="Home directory used for ~")
    ap.add_argument("--json", action="store_true", help="Print a JSON result envelope")
    ap.add_argument("-v", "--verbose", action="store_true", help="Mirror logs to stderr")

    sub = ap.add_subparsers(dest="op", required=True)
    sub.add_parser(Operation.CANONICALIZE.value, help="Canonical form").add_argument("path")
    rel = sub.add_parser(Operation.RELATIVE.value, help="Path relative to a base")
    rel.add_argument("path")
    rel.add_argument("base")
    sub.add_parser(Operation.CLASSIFY.value, help="Absolute/root flags").add_argument("path")
    sub.add_parser(Operation.EXPAND.value, help="Expand ~ and ~user").add_argument("path")
    sub.add_parser(Operation.ABBREVIATE.value, help="Shorten home to ~").add_argument("path")
    return ap


def _algebra_from_args(args: argparse.Namespace) -> PathAlgebra:
    settings = navpath_config.settings
    config = PathConfig.from_settings(settings)
    return PathAlgebra(
        PathConfig(
            dialect=args.dialect or config.dialect,
            capacity=args.capacity if args.capacity is not None else config.capacity,
            home_dir=args.home or config.home_dir,
            lookup=config.lookup,
        )
    )


def _inputs(args: argparse.Namespace) -> List[str]:
    if args.op == Operation.RELATIVE.value:
        return [args.path, args.base]
    return [args.path]


def run(args: argparse.Namespace, algebra: PathAlgebra) -> PathResult:
    op = Operation(args.op)
    result = PathResult(op=op, dialect=algebra.dialect, input=_inputs(args))

    if op is Operation.CANONICALIZE:
        result.output = algebra.canonicalize(args.path)
    elif op is Operation.RELATIVE:
        result.output = algebra.relative(args.path, args.base)
    elif op is Operation.CLASSIFY:
        result.absolute = algebra.is_absolute(args.path)
        result.root = algebra.is_root(args.path)
    elif op is Operation.EXPAND:
        result.output = algebra.expand(args.path)
    else:
        result.output = algebra.abbreviate(args.path)
    return result


def _render(result: PathResult) -> str:
    if result.op is Operation.CLASSIFY:
        return f"absolute={str(result.absolute).lower()} root={str(result.root).lower()}"
    return result.output or ""


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        algebra = _algebra_from_args(args)
    except ValueError as e:
        print(f"navpath: invalid configuration: {e}", file=sys.stderr)
        return 2
    logger = create_logger(
        "cli",
        log_dir=navpath_config.settings.log_dir,
        enable_console=args.verbose,
        redactor=DataRedactor(home_dirs=[algebra.config.home_dir]),
    )
    try:
        try:
            result = run(args, algebra)
        except NavPathError as e:
            logger.error("Path transform failed", op=args.op, error=str(e))
            result = PathResult(
                op=Operation(args.op),
                dialect=algebra.dialect,
                input=_inputs(args),
                error=str(e),
            )
            if args.json:
                print(result.model_dump_json())
            else:
                print(f"navpath: {e}", file=sys.stderr)
            return 2

        logger.info("Path transform", op=args.op, input=result.input, output=result.output)
        print(result.model_dump_json() if args.json else _render(result))
        return 0
    finally:
        logger.close()


if __name__ == "__main__":
    sys.exit(main())
