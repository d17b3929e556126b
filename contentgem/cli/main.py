"""
CLI main application module.

This module contains the main application entry point: it loads the
configuration, builds the client, runs the selected command and maps
its outcome to an exit code.
"""

import json
import logging
import sys
from typing import Optional, Sequence

from ..api import (
    JobFailedError,
    JobTimeoutError,
    TransportError,
    create_client,
)
from ..config import ConfigError, Env
from ..constants import (
    EXIT_API_FAILURES,
    EXIT_CONFIG_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_JOB_FAILED,
    EXIT_JOB_TIMEOUT,
    EXIT_UNEXPECTED_ERROR,
)
from ..models import is_success
from ..utils import setup_logging
from .parser import create_argument_parser

logger = logging.getLogger(__name__)


def print_result(result) -> None:
    """Print a command result as indented JSON on stdout."""
    print(json.dumps(result, indent=2, ensure_ascii=False, default=str))


def main(argv: Optional[Sequence[str]] = None):
    """Main entry point for the CLI."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        env = Env.load(cli_args=args)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    client = create_client()
    try:
        result = args.handler(client, args, env)
        print_result(result)

        if isinstance(result, dict) and not is_success(result):
            logger.error(f"API reported failure: {result.get('message') or result.get('error')}")
            sys.exit(EXIT_API_FAILURES)

    except TransportError as e:
        logger.error(str(e))
        sys.exit(EXIT_API_FAILURES)
    except JobFailedError as e:
        logger.error(f"{e} (job {e.job_id})")
        if e.snapshot is not None:
            print_result(e.snapshot)
        sys.exit(EXIT_JOB_FAILED)
    except JobTimeoutError as e:
        logger.error(f"{e} (job {e.job_id})")
        if e.snapshot is not None:
            print_result(e.snapshot)
        sys.exit(EXIT_JOB_TIMEOUT)
    except (ValueError, OSError) as e:
        logger.error(f"Invalid input: {e}")
        sys.exit(EXIT_INPUT_ERROR)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.error(f"Unexpected error: {type(e).__name__}: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)
    finally:
        client.close()
