"""
Restoration Layer - Prompt Construction and Remote Request

Defines the deterministic prompt builder and the single-attempt request
that turns an image plus instruction into a restored image.
"""

from img_restore.restoration.prompts import build_prompt
from img_restore.restoration.request import RestorationRequest

__all__ = [
    "build_prompt",
    "RestorationRequest",
]
