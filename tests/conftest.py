"""Pytest configuration: offline by default.

Live tests (talking to a running facebox) are skipped unless --live is passed.
Run the full suite:   pytest --live --facebox-addr http://localhost:8080
Run offline only:     pytest          (default)

Offline tests send through a real requests.Session whose transport adapter
records each prepared request and replies with a scripted response.
"""
from __future__ import annotations

import json
from urllib.parse import parse_qs

import pytest
import requests
from requests.adapters import BaseAdapter

from config import FACEBOX_ADDR
from facebox import Client

BOX_ADDR = "http://facebox.test:8080"


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run live tests against a running facebox",
    )
    parser.addoption(
        "--facebox-addr",
        default=FACEBOX_ADDR,
        help="Box address used by live tests",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "live: needs a running facebox (pass --live)")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--live"):
        return  # run everything
    skip_live = pytest.mark.skip(reason="live test skipped, pass --live to include")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


class RecordingAdapter(BaseAdapter):
    """Transport adapter that records requests and returns a scripted reply."""

    def __init__(self):
        super().__init__()
        self.requests: list[requests.PreparedRequest] = []
        self.send_kwargs: list[dict] = []
        self.status_code = 200
        self.reason = "OK"
        self.body = b'{"success": true}'
        self.error: Exception | None = None

    def reply(self, payload=None, status_code=200, reason="OK", body: bytes | None = None):
        self.status_code = status_code
        self.reason = reason
        self.body = body if body is not None else json.dumps(payload).encode("utf-8")

    def fail_with(self, error: Exception):
        self.error = error

    def send(self, request, **kwargs):
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        if self.error is not None:
            raise self.error
        response = requests.Response()
        response.status_code = self.status_code
        response.reason = self.reason
        response._content = self.body
        response._content_consumed = True
        response.headers["Content-Type"] = "application/json; charset=utf-8"
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass

    @property
    def last(self) -> requests.PreparedRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_form(self) -> dict[str, list[str]]:
        """Decode the URL-encoded body of the last request."""
        body = self.last.body
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        return parse_qs(body, keep_blank_values=True)


@pytest.fixture
def transport():
    return RecordingAdapter()


@pytest.fixture
def session(transport):
    s = requests.Session()
    s.mount("http://", transport)
    s.mount("https://", transport)
    return s


@pytest.fixture
def client(session):
    return Client(BOX_ADDR, session=session)


@pytest.fixture
def live_addr(request):
    return request.config.getoption("--facebox-addr")
