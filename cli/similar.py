"""Similarity search CLI commands."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import requests

import config
from facebox import Client, FaceboxError

logger = logging.getLogger(__name__)


def _add_image_source_args(parser: argparse.ArgumentParser, with_id: bool) -> None:
    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        "--file",
        dest="image_path",
        help="Image file to upload ('-' reads stdin)",
    )
    source_group.add_argument(
        "--url",
        dest="image_url",
        help="Absolute URL the box should fetch the image from",
    )
    source_group.add_argument(
        "--base64",
        dest="image_base64",
        help="Base64 encoded image",
    )
    if with_id:
        source_group.add_argument(
            "--id",
            dest="face_id",
            help="ID of a face already trained on the box",
        )


def add_similar_subparsers(subparsers: argparse._SubParsersAction) -> None:
    similar_parser = subparsers.add_parser(
        "similar",
        help="Flat list of similar faces (legacy endpoint)",
    )
    _add_image_source_args(similar_parser, with_id=True)
    similar_parser.set_defaults(_cmd=cmd_similar)

    similars_parser = subparsers.add_parser(
        "similars",
        help="Similar faces for each face in the image",
    )
    _add_image_source_args(similars_parser, with_id=False)
    similars_parser.add_argument(
        "--limit",
        type=int,
        default=config.SIMILARS_DEFAULT_LIMIT,
        help=f"Maximum matches per face (default: {config.SIMILARS_DEFAULT_LIMIT})",
    )
    similars_parser.set_defaults(_cmd=cmd_similars)


def _build_client(args: argparse.Namespace) -> Client:
    return Client(args.addr, timeout=args.timeout)


def _read_image(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _print_results(results: list) -> None:
    print(json.dumps([result.model_dump() for result in results], indent=2))


def cmd_similar(args: argparse.Namespace) -> int:
    client = _build_client(args)
    try:
        if args.image_path is not None:
            results = client.similar(_read_image(args.image_path))
        elif args.image_url is not None:
            results = client.similar_url(args.image_url)
        elif args.image_base64 is not None:
            results = client.similar_base64(args.image_base64)
        else:
            results = client.similar_id(args.face_id)
    except (FaceboxError, requests.RequestException, OSError) as e:
        logger.error("similar failed: %s", e)
        return 1
    logger.info("Found %s similar faces", len(results))
    _print_results(results)
    return 0


def cmd_similars(args: argparse.Namespace) -> int:
    client = _build_client(args)
    try:
        if args.image_path is not None:
            faces = client.similars(_read_image(args.image_path), args.limit)
        elif args.image_url is not None:
            faces = client.similars_url(args.image_url, args.limit)
        else:
            faces = client.similars_base64(args.image_base64, args.limit)
    except (FaceboxError, requests.RequestException, OSError) as e:
        logger.error("similars failed: %s", e)
        return 1
    logger.info(
        "Found %s faces, %s matches",
        len(faces),
        sum(len(face.similar_faces) for face in faces),
    )
    _print_results(faces)
    return 0
