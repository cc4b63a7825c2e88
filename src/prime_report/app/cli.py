from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from prime_report.adapters.log_sinks import JsonlLogSink, NullLogSink, StdoutLogSink, build_log_sink
from prime_report.adapters.report_store import FileReportStore, file_report_store
from prime_report.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from prime_report.config.models import AppConfig, LoggingConfig, RangeConfig
from prime_report.domain.bounds import BoundRange
from prime_report.domain.errors import StorageError
from prime_report.ports.prime_checker import PrimeChecker
from prime_report.services.prime_checker import build_prime_checker
from prime_report.usecases.reporting import classify_range, enumerate_and_report

EXIT_OK = 0
EXIT_STORAGE_ERROR = 1
EXIT_CONFIG_ERROR = 2

# The CLI is a thin console collaborator: it owns every human-readable message,
# while the use case only returns the prime sequence and artifact content.


@dataclass(frozen=True, slots=True)
class Components:
    checker: PrimeChecker
    store: FileReportStore
    log_sink: StdoutLogSink | JsonlLogSink | NullLogSink


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prime-report", description="Enumerate primes in a range and write a report")
    parser.add_argument("--config", help="Path to YAML config (defaults to the packaged config)")
    parser.add_argument("--start", type=int, help="Override range start")
    parser.add_argument("--end", type=int, help="Override range end")
    parser.add_argument("--output", help="Override report file path")
    parser.add_argument("--checker", choices=["trial", "sieve"], help="Override primality strategy")
    parser.add_argument("--log", choices=["stdout", "jsonl", "none"], help="Override log sink")
    parser.add_argument("--log-path", help="Override JSONL log file path")
    parser.add_argument("--list", action="store_true", help="Print a prime/not-prime verdict for every number")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config; results are re-validated like config input.
    try:
        if args.start is not None or args.end is not None:
            config.range = RangeConfig(
                start=args.start if args.start is not None else config.range.start,
                end=args.end if args.end is not None else config.range.end,
            )
        if args.output is not None:
            config.output.file_path = args.output
        if args.checker is not None:
            config.checker.kind = args.checker
        if args.log is not None or args.log_path is not None:
            config.logging = LoggingConfig(
                sink=args.log if args.log is not None else ("jsonl" if args.log_path else config.logging.sink),
                level=config.logging.level,
                path=args.log_path if args.log_path is not None else config.logging.path,
            )
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def build_components(config: AppConfig) -> Components:
    try:
        store = file_report_store(config.output.settings())
        log_sink = build_log_sink(config.logging.sink, level=config.logging.level, path=config.logging.path)
        checker = build_prime_checker(config.checker.kind, max_n=config.range.end)
    except (ValueError, OSError) as exc:
        raise ConfigError(str(exc)) from exc
    return Components(checker=checker, store=store, log_sink=log_sink)


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config) if args.config else DEFAULT_CONFIG_PATH)
        apply_overrides(config, args)
        components = build_components(config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    start, end = config.range.start, config.range.end
    print(f"Scanning primes in [{start}, {end}]")

    if args.list:
        for verdict in classify_range(BoundRange(start=start, end=end), components.checker):
            print(f"{verdict.value} is {'prime' if verdict.is_prime else 'not prime'}")

    try:
        report = enumerate_and_report(
            start,
            end,
            components.store,
            checker=components.checker,
            log_sink=components.log_sink,
        )
    except StorageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_STORAGE_ERROR
    finally:
        components.log_sink.close()

    print(f"Found {report.count} primes")
    print(f"Contents of {report.location}:")
    print(report.content, end="")
    return EXIT_OK
