"""CLI main entry point.

This module provides the main entry point for the funcbench CLI.
"""

from __future__ import annotations

import asyncio
import sys
import traceback

from pydantic import ValidationError

from funcbench.cli.command import CompareCommand
from funcbench.cli.parser import create_parser
from funcbench.cli.validators import build_run_config
from funcbench.config.exceptions import ConfigurationError
from funcbench.config.settings import get_settings
from funcbench.exceptions import FuncbenchError
from funcbench.logging_config import configure_logging, get_logger
from funcbench.pipeline.exceptions import PipelineCancelledError

__all__ = ["main"]

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, json_output=args.json_logs)

    try:
        settings = get_settings()
        config = build_run_config(args, settings.benchmark)
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        asyncio.run(CompareCommand(config, settings).execute())

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return EXIT_INTERRUPTED

    except PipelineCancelledError as e:
        print(f"Cancelled: {e}", file=sys.stderr)
        return EXIT_INTERRUPTED

    except FuncbenchError as e:
        logger.error("running_command_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            traceback.print_exc()
        return EXIT_FAILURE

    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info("exiting")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
