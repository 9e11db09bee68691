"""
Client for the facebox similarity endpoints.

Every operation is one blocking request: validate the configuration, send
through the injected ``requests.Session``, check the status, decode the
envelope. The ``similar*`` family hits the legacy ``/facebox/similar``
endpoint and returns a flat list of matches; it is kept for older callers,
new code should use the per-face ``similars*`` family instead.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, TypeVar, Union
from urllib.parse import urlparse

import requests
from pydantic import ValidationError

import config
from .errors import ConfigurationError, DecodeError, HTTPStatusError, ServerError
from .types import Envelope, Similar, SimilarFace, SimilarResponse, SimilarsResponse

logger = logging.getLogger(__name__)

ImageData = Union[bytes, BinaryIO]
E = TypeVar("E", bound=Envelope)


def is_absolute_url(url: str) -> bool:
    """Return True if the URL has both a scheme and a host."""
    parsed = urlparse(url)
    return bool(parsed.scheme) and bool(parsed.netloc)


def normalize_limit(limit: int) -> int:
    """Replace a per-face limit below 1 with the default."""
    if limit < 1:
        return config.SIMILARS_DEFAULT_LIMIT
    return limit


class Client:
    """Talks to a single facebox instance.

    Args:
        addr: Base address of the box, e.g. ``http://localhost:8080``.
        session: HTTP transport; a new ``requests.Session`` when omitted.
        timeout: Seconds allowed per request, or None for no timeout.
    """

    def __init__(
        self,
        addr: str,
        session: requests.Session | None = None,
        timeout: float | None = config.HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self.addr = addr.rstrip("/")
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"Client(addr={self.addr!r}, timeout={self.timeout!r})"

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if this client created it; injected ones are left open."""
        if self._owns_session:
            self.session.close()

    # -------------------------------------------------------------------------
    # Legacy single-list operations
    # -------------------------------------------------------------------------

    def similar(self, image: ImageData) -> list[Similar]:
        """Find gallery faces similar to the faces in the image bytes.

        Deprecated: use :meth:`similars` to get matches per face.
        """
        url = self._endpoint(config.SIMILAR_PATH)
        response = self._send(url, files=_image_files(image))
        return self._decode(response, SimilarResponse)

    def similar_url(self, image_url: str) -> list[Similar]:
        """Find gallery faces similar to the image at ``image_url``.

        Deprecated: use :meth:`similars_url` to get matches per face.
        """
        url = self._endpoint(config.SIMILAR_PATH)
        _require_absolute_image_url(image_url)
        response = self._send(url, form={"url": image_url})
        return self._decode(response, SimilarResponse)

    def similar_id(self, id: str) -> list[Similar]:
        """Find gallery faces similar to the already-trained face ``id``."""
        url = self._endpoint(config.SIMILAR_PATH)
        if not id:
            raise ConfigurationError("id can not be empty")
        response = self._send(url, method="GET", params={"id": id})
        return self._decode(response, SimilarResponse)

    def similar_base64(self, data: str) -> list[Similar]:
        """Find gallery faces similar to a Base64 encoded image.

        Deprecated: use :meth:`similars_base64` to get matches per face.
        """
        url = self._endpoint(config.SIMILAR_PATH)
        response = self._send(url, form={"base64": data})
        return self._decode(response, SimilarResponse)

    # -------------------------------------------------------------------------
    # Per-face operations
    # -------------------------------------------------------------------------

    def similars(self, image: ImageData, limit: int = config.SIMILARS_DEFAULT_LIMIT) -> list[SimilarFace]:
        """Find up to ``limit`` similar gallery faces for each face in the image bytes."""
        url = self._endpoint(config.SIMILARS_PATH)
        response = self._send(
            url,
            files=_image_files(image),
            params={"limit": normalize_limit(limit)},
        )
        return self._decode(response, SimilarsResponse)

    def similars_url(self, image_url: str, limit: int = config.SIMILARS_DEFAULT_LIMIT) -> list[SimilarFace]:
        """Find up to ``limit`` similar gallery faces for each face in the image at ``image_url``."""
        url = self._endpoint(config.SIMILARS_PATH)
        _require_absolute_image_url(image_url)
        response = self._send(url, form={"url": image_url, "limit": normalize_limit(limit)})
        return self._decode(response, SimilarsResponse)

    def similars_base64(self, data: str, limit: int = config.SIMILARS_DEFAULT_LIMIT) -> list[SimilarFace]:
        """Find up to ``limit`` similar gallery faces for each face in a Base64 encoded image."""
        url = self._endpoint(config.SIMILARS_PATH)
        response = self._send(url, form={"base64": data, "limit": normalize_limit(limit)})
        return self._decode(response, SimilarsResponse)

    # -------------------------------------------------------------------------
    # Request plumbing
    # -------------------------------------------------------------------------

    def _endpoint(self, path: str) -> str:
        """Resolve an endpoint path against the box address."""
        url = self.addr + path
        if not is_absolute_url(url):
            raise ConfigurationError("box address must be absolute")
        return url

    def _send(
        self,
        url: str,
        method: str = "POST",
        form: dict | None = None,
        files: dict | None = None,
        params: dict | None = None,
    ) -> requests.Response:
        """Send one request and return the response once its status is 2xx.

        ``form`` is sent URL-encoded, ``files`` as multipart. With neither
        the request has no body.
        """
        headers = {"Accept": config.ACCEPT_JSON}
        if form is not None:
            # multipart requests get their boundary header from requests itself
            headers["Content-Type"] = config.FORM_CONTENT_TYPE

        logger.debug("%s %s params=%s", method, url, params or {})
        response = self.session.request(
            method,
            url,
            headers=headers,
            params=params,
            data=form,
            files=files,
            timeout=self.timeout,
        )
        if not 200 <= response.status_code < 300:
            raise HTTPStatusError(response.status_code, response.reason)
        return response

    def _decode(self, response: requests.Response, envelope_type: type[E]) -> list:
        """Decode a similarity envelope and return its result list."""
        try:
            envelope = envelope_type.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"decoding response: {exc}") from exc
        if not envelope.success:
            raise ServerError(envelope.error)
        return envelope.results()


def _image_files(image: ImageData) -> dict:
    return {config.IMAGE_FIELD: (config.IMAGE_FILENAME, image)}


def _require_absolute_image_url(image_url: str) -> None:
    if not is_absolute_url(image_url):
        raise ConfigurationError("url must be absolute")
