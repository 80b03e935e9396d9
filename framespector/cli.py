# framespector/cli.py
# !/usr/env/bin python3

"""
cli.py
~~~~~~~~~~~~~~~

This module provides the command-line interface for the framespector library.
"""

import argparse
import json
import logging
import os
import sys

from .inspector import FrameInspector
from ._exceptions import FramespectorError
from .format_handlers.mp3.mp3_utils import MIN_FRAMES_AFTER_RESYNC


def check_source_path(path):
    """Custom type function for argparse to validate that a path is a file."""
    if not os.path.isfile(path):
        raise argparse.ArgumentTypeError(
            f"The path '{path}' does not exist or is not a file."
        )
    return path


def check_min_run(value):
    """Custom type function for argparse to validate the minimum frame run."""
    try:
        run = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer.")
    if run < 1:
        raise argparse.ArgumentTypeError("The minimum run must be at least 1.")
    return run


def count(args):
    """Handles the 'count' subcommand."""
    try:
        inspector = FrameInspector(args.filepath, min_frames_after_resync=args.min_run)
        print(json.dumps({"frameCount": inspector.count_frames()}))
    except (FramespectorError, FileNotFoundError, IOError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def list_(args):
    """Handles the 'list' subcommand."""
    try:
        inspector = FrameInspector(args.filepath, min_frames_after_resync=args.min_run)
        frames = [frame.to_dict() for frame in inspector.list_frames()]
        print(json.dumps(frames, indent=2))
    except (FramespectorError, FileNotFoundError, IOError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv=None):
    """Defines the command-line entry point for the tool."""
    parser = argparse.ArgumentParser(
        description="Count and list the MPEG audio frames of MP3 files.",
        epilog="Use 'framespector <command> --help' for more information on a specific command.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log scan diagnostics (tag size, every frame) to stderr.",
    )

    subparsers = parser.add_subparsers(
        dest="command", required=True, help="Available commands"
    )

    # --- Shared arguments ---
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "filepath",
        type=check_source_path,
        help="The full path to the MP3 file to scan.",
    )
    common.add_argument(
        "--min-run",
        type=check_min_run,
        default=MIN_FRAMES_AFTER_RESYNC,
        help=(
            "Frames required when the scan had to resync before the first frame "
            f"(default: {MIN_FRAMES_AFTER_RESYNC})."
        ),
    )

    # --- Parser for the 'count' command ---
    count_parser = subparsers.add_parser(
        "count",
        parents=[common],
        help="Print the number of audio frames as JSON.",
        epilog="Example: framespector count /path/to/song.mp3",
    )
    count_parser.set_defaults(func=count)

    # --- Parser for the 'list' command ---
    list_parser = subparsers.add_parser(
        "list",
        parents=[common],
        help="Print the offset and size of every audio frame as JSON.",
        epilog="Example: framespector list /path/to/song.mp3",
    )
    list_parser.set_defaults(func=list_)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
        )

    if hasattr(args, "func"):
        args.func(args)


if __name__ == "__main__":
    main()
