"""
Domain Layer - Static Data Models

This module defines the value objects the restoration workflow passes around:
the encoded image itself, the user's restoration options and the artifact
handed to the presentation layer for download. All of them are immutable;
a new value is created whenever something changes.
"""

import base64
import binascii
import re
from dataclasses import dataclass, replace
from enum import Enum

_MIME_TYPE = re.compile(r"^[\w.+-]+/[\w.+-]+$")
_DATA_URI = re.compile(r"^data:(?P<mime>[^;,]+);base64,(?P<data>.*)$", re.DOTALL)


class Quality(str, Enum):
    """
    Restoration quality tier. Each tier asks the remote model for more
    aggressive damage removal and detail reconstruction than the previous one.
    """
    STANDARD = "Standard"
    HIGH = "High"
    ULTRA = "Ultra"


class ArtStyle(str, Enum):
    """Rendering style of the restored image."""
    REALISTIC = "Realistic"
    OIL_PAINTING = "OilPainting"


@dataclass(frozen=True)
class ImageAsset:
    """
    An encoded image: raw bytes plus the declared media type.

    Attributes:
        data: The binary payload (never empty).
        mime_type: Declared media type, e.g. "image/jpeg".
    """
    data: bytes
    mime_type: str

    def __post_init__(self):
        if not self.data:
            raise ValueError("Image payload is empty")
        if not self.mime_type or not _MIME_TYPE.match(self.mime_type):
            raise ValueError(f"Invalid media type: {self.mime_type!r}")

    @property
    def size(self) -> int:
        return len(self.data)

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def to_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.to_base64()}"

    def with_mime_type(self, mime_type: str) -> "ImageAsset":
        return replace(self, mime_type=mime_type)

    @classmethod
    def from_data_uri(cls, uri: str) -> "ImageAsset":
        """
        Decodes a base64 data URI ("data:image/png;base64,....").

        Raises:
            ValueError: If the URI is not a base64 data URI or the payload
                is not valid base64.
        """
        match = _DATA_URI.match(uri.strip())
        if not match:
            raise ValueError("Not a base64 data URI")
        try:
            data = base64.b64decode(match.group("data"), validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 payload: {e}") from e
        return cls(data=data, mime_type=match.group("mime"))


@dataclass(frozen=True)
class RestorationOptions:
    """
    The user's restoration choices. A snapshot of this object is taken
    when a restoration starts; later changes only affect the next request.

    Attributes:
        quality: Quality tier of the restoration.
        colorize: Colorize the photo (True) or keep it grayscale (False).
        style: Realistic photo or oil painting rendition.
    """
    quality: Quality = Quality.STANDARD
    colorize: bool = True
    style: ArtStyle = ArtStyle.REALISTIC


@dataclass(frozen=True)
class DownloadArtifact:
    """
    What the presentation layer needs to save the restored image locally.

    Attributes:
        filename: Suggested file name for the saved image.
        asset: The restored image.
    """
    filename: str
    asset: ImageAsset

    @property
    def data_uri(self) -> str:
        return self.asset.to_data_uri()
