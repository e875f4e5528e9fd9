"""Command-line conformance runner.

Usage:
    gateway-conformance my_package.gateways:MyGateway
    gateway-conformance my_package.gateways:MyGateway --filter 'purchase' --json report.json
    gateway-conformance --list

Environment:
    GATEWAY_CONFORMANCE_FILTER  comma-separated scenario globs (default: all)
    GATEWAY_CONFORMANCE_REPORT  path of the JSON report to write (default: none)
"""

import argparse
import importlib
import json
import logging
import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

from .framework.runner import ConformanceReport, ConformanceRunner
from .scenarios import scenario_names
from .scenarios.base import ScenarioStatus

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def load_target(target: str) -> Callable:
    """Resolve ``package.module:attribute`` to a zero-argument gateway factory.

    Raises:
        ValueError: If the target is malformed or the attribute is not callable
        ImportError: If the module cannot be imported
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected 'package.module:GatewayClass', got {target!r}")

    obj = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            raise ValueError(f"{module_name!r} has no attribute {attr_path!r}") from None
    if not callable(obj):
        raise ValueError(f"{target!r} is not callable")
    return obj


def print_conformance_matrix(report: ConformanceReport):
    """Print scenario results and totals to stdout."""
    print()
    print(f"━━━ CONFORMANCE: {report.gateway}")
    print()
    print(f"  {'scenario':<22}  {'status':>6}  {'checks':>6}")
    print(f"  {'─' * 22}  {'─' * 6}  {'─' * 6}")
    for name, result in report.results.items():
        status = result.status.value.upper()
        print(f"  {name:<22}  {status:>6}  {result.checks_run:>6}")
        if result.status in (ScenarioStatus.FAIL, ScenarioStatus.ERROR):
            if result.failures:
                for failure in result.failures:
                    print(f"  {'':<22}  ✗ {failure}")
            elif result.error_message:
                print(f"  {'':<22}  ✗ {result.error_message}")
    print()
    print(
        f"  {report.passed} passed, {report.failed} failed, "
        f"{report.errors} errors, {report.skipped} skipped "
        f"({report.duration_ms:.2f}ms)"
    )
    print()


def write_report(report: ConformanceReport, path: Path):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(report.to_dict(), f, indent=2)


def _split_env_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gateway-conformance",
        description="Check a payment gateway implementation against the shared gateway contract.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="Gateway factory as 'package.module:GatewayClass'",
    )
    parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        default=None,
        metavar="GLOB",
        help="Only run scenarios matching GLOB (repeatable)",
    )
    parser.add_argument(
        "--json",
        dest="json_path",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write the report as JSON to PATH",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List scenario names and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for name in scenario_names():
            print(name)
        return EXIT_OK

    if not args.target:
        parser.print_usage(sys.stderr)
        print("error: a gateway target is required", file=sys.stderr)
        return EXIT_USAGE

    try:
        factory = load_target(args.target)
    except (ImportError, ValueError) as e:
        print(f"error: cannot load {args.target}: {e}", file=sys.stderr)
        return EXIT_USAGE

    filters = args.filters or _split_env_list(os.environ.get("GATEWAY_CONFORMANCE_FILTER"))
    json_path = args.json_path
    if json_path is None and os.environ.get("GATEWAY_CONFORMANCE_REPORT"):
        json_path = Path(os.environ["GATEWAY_CONFORMANCE_REPORT"])

    runner = ConformanceRunner(factory, filter_patterns=filters)
    report = runner.run()
    print_conformance_matrix(report)

    if json_path is not None:
        write_report(report, json_path)
        print(f"Report written to {json_path}")

    return EXIT_OK if report.success else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
