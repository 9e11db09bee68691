"""
Value types returned by the facebox similarity endpoints.

These mirror the JSON the box sends back. Missing keys and ``null`` values
decode to zero values, keys match regardless of case, and unknown keys are
ignored, so older or newer boxes still decode.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WireModel(BaseModel):
    """Base for models decoded from box responses."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, values):
        """Lower-case keys and drop nulls so field defaults apply.

        When a key arrives in both spellings, the exact (lower-case) one wins.
        """
        if not isinstance(values, dict):
            return values
        normalized = {}
        for key, value in values.items():
            if value is None:
                continue
            name = key.lower() if isinstance(key, str) else key
            if name in normalized and key != name:
                continue
            normalized[name] = value
        return normalized


class Rect(WireModel):
    """Face bounding box in image pixels, as reported by the box."""

    top: int = 0
    left: int = 0
    width: int = 0
    height: int = 0

    model_config = ConfigDict(frozen=True)


class Similar(WireModel):
    """A gallery entry that resembles a submitted face."""

    id: str = ""
    confidence: float = 0.0
    name: str = ""

    model_config = ConfigDict(frozen=True)


class SimilarFace(WireModel):
    """A face found in the submitted image with its ranked gallery matches.

    Attributes:
        rect: Where the face is in the image.
        similar_faces: Matches in the order the box ranked them.
    """

    rect: Rect = Field(default_factory=Rect)
    similar_faces: list[Similar] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------

class Envelope(WireModel, ABC):
    """Fields shared by every similarity response."""

    success: bool = False
    error: str = ""

    @abstractmethod
    def results(self) -> list:
        """The payload list carried by a successful response."""
        pass


class SimilarResponse(Envelope):
    """Body of /facebox/similar: one flat list across all faces."""

    similar: list[Similar] = Field(default_factory=list)

    def results(self) -> list[Similar]:
        return list(self.similar)


class SimilarsResponse(Envelope):
    """Body of /facebox/similars: matches grouped per face."""

    faces: list[SimilarFace] = Field(default_factory=list)

    def results(self) -> list[SimilarFace]:
        return list(self.faces)
