"""CLI argument validation and conversion."""

from __future__ import annotations

import argparse
import math
import re

from pydantic import ValidationError

from funcbench.config.exceptions import ConfigurationError
from funcbench.config.models import RunConfig
from funcbench.config.settings import BenchmarkSettings

__all__ = ["build_run_config", "parse_duration"]

_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d+)?)(h|ms|m|s)")
_UNIT_SECONDS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 0.001}


def parse_duration(value: str) -> int:
    """Convert a duration string to whole seconds.

    Accepts plain seconds (``90``) or Go style durations (``2h``,
    ``1h30m``, ``45s``). Fractions of a second are rounded up.

    Raises:
        ConfigurationError: If the value is not a valid duration.

    """
    text = value.strip()
    if text.isdigit():
        return int(text)

    position = 0
    total = 0.0
    for match in _DURATION_PART_RE.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        position = match.end()
    if not text or position != len(text):
        raise ConfigurationError(f"invalid duration {value!r}")
    # A non-zero duration must never become 0, which disables the timeout.
    return math.ceil(round(total, 3))


def build_run_config(args: argparse.Namespace, settings: BenchmarkSettings) -> RunConfig:
    """Merge parsed CLI arguments over the environment settings.

    Raises:
        ConfigurationError: If the resulting configuration is invalid.

    """
    timeout_seconds = settings.timeout_seconds
    if args.timeout is not None:
        timeout_seconds = parse_duration(args.timeout)

    try:
        return RunConfig(
            target=args.target,
            bench_func=args.function_regex,
            bench_time=args.bench_time or settings.bench_time,
            timeout_seconds=timeout_seconds,
            verbose=args.verbose,
            dry_run=args.dry_run,
            owner=args.owner,
            repo=args.repo,
            pr_number=args.pr_number,
        )
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e
