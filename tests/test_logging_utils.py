"""Tests for logging_utils level resolution."""

import argparse
import logging

import pytest

from logging_utils import add_logging_args, configure_logging, resolve_log_level


@pytest.mark.parametrize("verbose,quiet,expected", [
    (0, 0, logging.INFO),
    (1, 0, logging.DEBUG),
    (2, 0, logging.DEBUG),
    (0, 1, logging.WARNING),
    (0, 2, logging.ERROR),
    (1, 1, logging.INFO),
])
def test_resolve_from_modifiers(verbose, quiet, expected):
    assert resolve_log_level(verbose=verbose, quiet=quiet) == expected


def test_explicit_level_wins():
    assert resolve_log_level("error", verbose=2) == logging.ERROR


def test_parser_flags():
    parser = argparse.ArgumentParser()
    add_logging_args(parser)
    args = parser.parse_args(["-vv", "--log-level", "warning"])
    assert args.verbose == 2
    assert args.log_level == "warning"


def test_urllib3_quiet_unless_debug():
    configure_logging(verbose=0)
    assert logging.getLogger("urllib3").level == logging.WARNING
    configure_logging(verbose=1)
    assert logging.getLogger("urllib3").level == logging.DEBUG
    configure_logging(verbose=0)
