"""
Client library for the facebox face similarity service.

This package provides the HTTP client, the value types it returns, and the
errors it raises.
"""

from .client import Client, is_absolute_url, normalize_limit
from .errors import ConfigurationError, DecodeError, FaceboxError, HTTPStatusError, ServerError
from .types import Rect, Similar, SimilarFace, SimilarResponse, SimilarsResponse

__all__ = [
    "Client",
    "is_absolute_url",
    "normalize_limit",
    "FaceboxError",
    "ConfigurationError",
    "HTTPStatusError",
    "DecodeError",
    "ServerError",
    "Rect",
    "Similar",
    "SimilarFace",
    "SimilarResponse",
    "SimilarsResponse",
]
