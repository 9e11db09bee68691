#!/usr/bin/env python3
"""
Command line client for a facebox instance.

Usage:
    fbx similar --file face.jpg              # Flat list of similar faces (legacy)
    fbx similar --url https://.../face.jpg   # Let the box fetch the image
    fbx similar --id 123                     # Faces similar to a trained face
    fbx similars --file group.jpg --limit 3  # Up to 3 matches per detected face
    fbx --addr http://box:8080 similars --base64 <data>
"""

import argparse
import logging
import sys

import config
from logging_utils import configure_logging, add_logging_args
from cli.similar import add_similar_subparsers

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fbx",
        description="Query a facebox instance for similar faces",
    )
    add_logging_args(parser)
    parser.add_argument(
        "--addr",
        default=config.FACEBOX_ADDR,
        help=f"Box address (default: {config.FACEBOX_ADDR})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.HTTP_TIMEOUT_SECONDS,
        help=f"Request timeout in seconds (default: {config.HTTP_TIMEOUT_SECONDS})",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    add_similar_subparsers(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    cmd = getattr(args, "_cmd", None)
    if cmd is None:
        parser.print_help()
        return 1
    return cmd(args)


if __name__ == "__main__":
    sys.exit(main())
