"""
Domain Layer - Static Data Models

Defines the immutable value objects of a restoration session: images,
restoration options and download artifacts.
"""

from img_restore.domain.models import (
    ArtStyle,
    DownloadArtifact,
    ImageAsset,
    Quality,
    RestorationOptions,
)

__all__ = [
    "ArtStyle",
    "DownloadArtifact",
    "ImageAsset",
    "Quality",
    "RestorationOptions",
]
