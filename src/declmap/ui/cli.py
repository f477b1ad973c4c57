from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from declmap.adapters.shapes import SceneFormatError
from declmap.app import build_shape_mapper, replay_scene_file
from declmap.config import (
    LOG_LEVELS,
    ConfigurationError,
    configure_logging,
    get_logging_config,
    get_mapper_config,
    parse_log_level,
)
from declmap.domain.mapping import DuplicateIdPolicy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile declared shapes onto a canvas")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Logging level (defaults to DECLMAP_LOG_LEVEL or info)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    replay = subparsers.add_parser("replay", help="Replay a JSON-lines scene file")
    replay.add_argument("scene", type=Path, help="Scene file, one pass per line")
    replay.add_argument(
        "--duplicate-ids",
        choices=[policy.value for policy in DuplicateIdPolicy],
        default=None,
        help="Policy for repeated ids within one pass (defaults to config)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        level = (
            parse_log_level(parsed_args.log_level)
            if parsed_args.log_level
            else get_logging_config().level
        )
        configure_logging(level=level)
        duplicate_ids = (
            DuplicateIdPolicy(parsed_args.duplicate_ids) if parsed_args.duplicate_ids else None
        )
        config = get_mapper_config(duplicate_ids=duplicate_ids)
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)

    try:
        if parsed_args.command == "replay":
            replay_scene_file(parsed_args.scene, mapper=build_shape_mapper(config=config))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (OSError, SceneFormatError):
        log.exception("Cannot read scene")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during replay")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    signal(SIGINT, sigint_handler)
    main()
