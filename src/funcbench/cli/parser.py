"""CLI argument parser configuration.

This module provides the argument parser for the funcbench CLI.
"""

import argparse

from funcbench import __version__
from funcbench.config.defaults import (
    DEFAULT_BENCH_FUNC,
    DEFAULT_GITHUB_OWNER,
    DEFAULT_GITHUB_REPO,
)

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="funcbench",
        description="Benchmark and compare your Go code between sub benchmarks or commits.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compare the current checkout against main
  funcbench main

  # Only run benchmarks matching a regex
  funcbench main 'BenchmarkQuery.*'

  # Compare repeated sub-benchmarks of the current checkout
  funcbench . 'BenchmarkQuery.*'

  # Run for a pull request inside GitHub Actions without posting comments
  funcbench --github-pr 1234 --dryrun main
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose mode. Errors include traces and command output is streamed.",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON instead of formatted console output",
    )
    parser.add_argument(
        "--dryrun",
        action="store_true",
        dest="dry_run",
        help="Do not call the GitHub API; comments are logged instead",
    )

    # GitHub
    parser.add_argument(
        "--owner",
        type=str,
        default=DEFAULT_GITHUB_OWNER,
        help=f"GitHub owner or organisation name (default: {DEFAULT_GITHUB_OWNER})",
    )
    parser.add_argument(
        "--repo",
        type=str,
        default=DEFAULT_GITHUB_REPO,
        help=f"GitHub repository name (default: {DEFAULT_GITHUB_REPO})",
    )
    parser.add_argument(
        "--github-pr",
        type=int,
        metavar="NUMBER",
        dest="pr_number",
        help="Pull request to pull changes from and to post benchmark results to",
    )

    # Benchmark execution
    parser.add_argument(
        "--bench-time",
        "-t",
        type=str,
        metavar="DURATION",
        help="Minimum run time per benchmark, passed to go test -benchtime (e.g. 1s, 100x)",
    )
    parser.add_argument(
        "--timeout",
        type=str,
        metavar="DURATION",
        help=(
            "Timeout per benchmark run as seconds or a duration like 2h or 1h30m; "
            "0 disables it"
        ),
    )

    parser.add_argument(
        "target",
        type=str,
        help=(
            "'.' or the branch name to compare against. With '.', funcbench runs "
            "once and compares repeated sub-benchmarks; it errors out if there are none."
        ),
    )
    parser.add_argument(
        "function_regex",
        type=str,
        nargs="?",
        default=DEFAULT_BENCH_FUNC,
        help="Benchmark regex, fully anchored (default: run all benchmarks)",
    )

    return parser
