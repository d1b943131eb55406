"""Entry point for ``python -m chrono_ai``.

Provides a CLI that takes a free-form schedule description, extracts events
and tasks from it, and adds them to Google Calendar and Google Tasks.  Uses
stdlib :mod:`argparse` for argument parsing.

Input is taken from the positional text, from ``--file``, or from stdin
when the text is ``-``.

Exit codes:
    0 -- Extraction (and dispatch, unless ``--dry-run``) completed,
         including runs with zero items.
    1 -- An error occurred (empty input, config, provider, parse or store
         error).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from chrono_ai.config import ConfigError, load_settings
from chrono_ai.demo_output import print_dispatch_result, print_extraction_result
from chrono_ai.exceptions import PipelineError
from chrono_ai.llm import ExtractionClient
from chrono_ai.log import setup_logging
from chrono_ai.pipeline import extract_schedule
from chrono_ai.stores import StoreError, build_stores, get_google_credentials
from chrono_ai.sync import dispatch_items

_EMPTY_INPUT_MESSAGE = "Please describe your schedule first."


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="chrono-ai",
        description=(
            "Turn a free-form description of your schedule into calendar "
            "events and tasks."
        ),
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Schedule description, or '-' to read it from stdin.",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=str,
        default=None,
        help="Read the schedule description from a text file.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Extract and print items without adding them to Google.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Provider request timeout in seconds (defaults to CHRONO_TIMEOUT).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def _read_input(args: argparse.Namespace) -> str:
    """Return the schedule description selected by *args*.

    Raises:
        OSError: If ``--file`` cannot be read.
        UnicodeDecodeError: If the input is not valid UTF-8.
    """
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text == ["-"]:
        return sys.stdin.read()
    return " ".join(args.text)


def main(argv: list[str] | None = None) -> int:
    """Run the chrono-ai CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    # --- Read and validate input --------------------------------------
    try:
        input_text = _read_input(args)
    except (OSError, UnicodeDecodeError) as exc:
        source = args.file if args.file is not None else "stdin"
        print(f"Error: Cannot read {source}: {exc}", file=sys.stderr)
        return 1

    if not input_text.strip():
        print(f"Error: {_EMPTY_INPUT_MESSAGE}", file=sys.stderr)
        return 1

    # --- Configuration and logging ------------------------------------
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        setup_logging("DEBUG" if args.verbose else settings.log_level)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # --- Extract ------------------------------------------------------
    client = ExtractionClient(api_key=settings.api_key, endpoint=settings.api_url)
    timeout = args.timeout if args.timeout is not None else settings.timeout

    try:
        result = extract_schedule(
            input_text,
            client,
            model=settings.model,
            timeout=timeout,
        )
    except PipelineError as exc:
        print(f"Error: Processing failed: {exc}", file=sys.stderr)
        return 1

    print_extraction_result(result)

    if args.dry_run or not result.items:
        return 0

    # --- Dispatch -----------------------------------------------------
    try:
        credentials = get_google_credentials(
            credentials_path=settings.google_credentials_path,
            token_path=settings.google_token_path,
        )
        calendar, tasks = build_stores(credentials, timezone_name=settings.timezone)
    except StoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_dispatch_result(dispatch_items(result.items, calendar, tasks))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
