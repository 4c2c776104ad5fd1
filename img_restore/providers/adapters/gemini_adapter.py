import logging
from typing import List, Optional

from google import genai
from google.genai import types

from ..interface import ImageGenerationProvider
from ...schemas.generation import (
    Candidate,
    GenerationRequest,
    GenerationResponse,
    InlineData,
    Part,
)

logger = logging.getLogger(__name__)


class GeminiAdapter(ImageGenerationProvider):
    def __init__(self, api_key: str, client: Optional[genai.Client] = None):
        self.client = client or genai.Client(api_key=api_key)

    async def generate_content(self, request: GenerationRequest) -> GenerationResponse:
        # All Gemini specifics live in this file.
        response = await self.client.aio.models.generate_content(
            model=request.model,
            contents=types.Content(
                role="user",
                parts=[self._to_sdk_part(part) for part in request.parts],
            ),
        )

        candidates = []
        for sdk_candidate in response.candidates or []:
            content = sdk_candidate.content
            parts = self._from_sdk_parts(content.parts if content else None)
            candidates.append(Candidate(parts=parts))
        return GenerationResponse(candidates=candidates)

    @staticmethod
    def _to_sdk_part(part: Part) -> types.Part:
        if part.inline_data is not None:
            return types.Part.from_bytes(
                data=part.inline_data.data,
                mime_type=part.inline_data.mime_type,
            )
        return types.Part.from_text(text=part.text)

    @staticmethod
    def _from_sdk_parts(sdk_parts: Optional[List[types.Part]]) -> List[Part]:
        parts = []
        for sdk_part in sdk_parts or []:
            blob = sdk_part.inline_data
            if blob is not None and blob.data:
                parts.append(Part(inline_data=InlineData(
                    data=blob.data,
                    mime_type=blob.mime_type or "application/octet-stream",
                )))
            elif sdk_part.text is not None:
                parts.append(Part(text=sdk_part.text))
            else:
                # Thought signatures, function calls, etc.
                logger.debug("Skipping Gemini part without text or image data")
        return parts
