"""
Restoration Request - Remote Call Layer

RestorationRequest wraps the image generation provider for a single
restoration. It encodes the image and instruction into the provider's
request shape, performs exactly one call, and decodes the reply into an
ImageAsset or a typed RestorationError. There is no retry and no caching;
retrying is always a fresh, explicit request.
"""

import logging

from ..domain.models import ImageAsset
from ..providers.interface import ImageGenerationProvider
from ..schemas.generation import GenerationRequest, GenerationResponse, InlineData, Part
from ..services.exceptions import NoImageReturned, RemoteError

logger = logging.getLogger(__name__)

# Whatever the service declares, results are handed on as PNG.
RESULT_MIME_TYPE = "image/png"


class RestorationRequest:
    def __init__(self, provider: ImageGenerationProvider, model_name: str):
        self.provider = provider
        self.model_name = model_name

    async def restore(self, image: ImageAsset, instruction: str) -> ImageAsset:
        """
        Sends one image plus instruction to the provider.

        Returns:
            The first inline image of the response, declared as image/png.

        Raises:
            ValueError: If the image has no payload or media type.
            RemoteError: If the provider call itself fails.
            NoImageReturned: If the response carries no image data.
        """
        if not image.data or not image.mime_type:
            raise ValueError("Image must carry a payload and a media type")

        # Exactly two ordered parts: the image, then the instruction.
        request = GenerationRequest(
            model=self.model_name,
            parts=[
                Part(inline_data=InlineData(data=image.data, mime_type=image.mime_type)),
                Part(text=instruction),
            ],
        )

        try:
            response = await self.provider.generate_content(request)
        except Exception as e:
            logger.error(f"Restoration call to '{self.model_name}' failed: {e}")
            raise RemoteError(str(e) or type(e).__name__) from e

        return self._first_image(response)

    def _first_image(self, response: GenerationResponse) -> ImageAsset:
        # Only the first candidate is considered; first image part wins.
        if not response.candidates:
            raise NoImageReturned()

        for part in response.candidates[0].parts:
            if part.inline_data is not None and part.inline_data.data:
                return ImageAsset(data=part.inline_data.data, mime_type=RESULT_MIME_TYPE)
            if part.text:
                logger.debug(f"Discarding text part from model: {part.text[:200]}")

        raise NoImageReturned()
