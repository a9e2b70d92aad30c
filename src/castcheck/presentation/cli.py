"""Command line entry point.

Usage:
    castcheck MODEL.json [--config pyproject.toml] [--format text|json|console]
              [--disable ID] [--severity ID=LEVEL] [--workers N] [--no-generated]
              [--verbose]

Exit status: 0 when no diagnostic has ERROR severity, 1 otherwise,
2 on invalid input.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from castcheck import __version__
from castcheck.application.descriptors import known_rule_ids
from castcheck.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from castcheck.application.services import AnalysisEngine
from castcheck.domain.exceptions import CastCheckError, ConfigError
from castcheck.domain.model.configuration import AnalysisConfig
from castcheck.infrastructure.adapters import JSONSymbolLoader, load_config, parse_severity

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from castcheck.domain.ports.reporter import ReporterProtocol
    from castcheck.domain.ports.symbol_loader import SymbolLoaderProtocol

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="castcheck",
        description=(
            "Check interfaces marked with DynamicInterfaceCastableImplementationAttribute "
            "in a JSON symbol model."
        ),
    )
    parser.add_argument("model", type=Path, help="JSON symbol model of one compilation")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="pyproject.toml with a [tool.castcheck] table",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json", "console"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="ID",
        help="Drop diagnostics of a rule id (repeatable)",
    )
    parser.add_argument(
        "--severity",
        action="append",
        default=[],
        metavar="ID=LEVEL",
        help="Override a rule's severity: error, warning or info (repeatable)",
    )
    parser.add_argument("--workers", type=int, default=None, help="Worker threads")
    parser.add_argument(
        "--no-generated",
        action="store_true",
        help="Skip types declared in generated code",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace) -> AnalysisConfig:
    """Merge the config file with command line overrides.

    Raises:
        ConfigError: On unknown rule ids or invalid values
    """
    rules = known_rule_ids()
    config = (
        load_config(args.config, known_rule_ids=rules)
        if args.config is not None
        else AnalysisConfig()
    )

    unknown = sorted(set(args.disable) - rules)
    if unknown:
        raise ConfigError("--disable", f"unknown rule id(s): {', '.join(unknown)}")

    overrides = dict(config.severity_overrides)
    for item in args.severity:
        rule_id, sep, level = item.partition("=")
        if not sep:
            raise ConfigError("--severity", f"expected ID=LEVEL, got {item!r}")
        if rule_id not in rules:
            raise ConfigError("--severity", f"unknown rule id {rule_id!r}")
        overrides[rule_id] = parse_severity(level)

    changes: dict[str, object] = {
        "disabled_rules": config.disabled_rules | frozenset(args.disable),
        "severity_overrides": MappingProxyType(overrides),
    }
    if args.workers is not None:
        changes["max_workers"] = args.workers
    if args.no_generated:
        changes["analyze_generated_code"] = False

    try:
        return dataclasses.replace(config, **changes)  # type: ignore[arg-type]
    except (ValueError, TypeError) as e:
        raise ConfigError("command line", str(e)) from e


def make_reporter(fmt: str, output: TextIO) -> ReporterProtocol:
    """Reporter for an output format name."""
    match fmt:
        case "json":
            return JSONReporter(output)
        case "console":
            return ConsoleReporter(output, ConsoleConfig(show_descriptions=True))
        case _:
            return PlainTextReporter(output)


def main(argv: Sequence[str] | None = None, *, output: TextIO | None = None) -> int:
    """Run the command line.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        output: Report destination (default: sys.stdout)

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
        loader: SymbolLoaderProtocol = JSONSymbolLoader()
        compilation = loader.load(args.model)
    except CastCheckError as e:
        logger.error("%s", e)
        return EXIT_USAGE

    reporter = make_reporter(args.format, output if output is not None else sys.stdout)
    result = AnalysisEngine.from_config(config, reporter=reporter).analyze(compilation)
    return EXIT_OK if result.passed else EXIT_ERRORS
