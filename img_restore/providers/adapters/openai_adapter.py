import base64
from typing import Optional

from openai import AsyncOpenAI

from ..interface import ImageGenerationProvider
from ...schemas.generation import (
    Candidate,
    GenerationRequest,
    GenerationResponse,
    InlineData,
    Part,
)


class OpenAIAdapter(ImageGenerationProvider):
    def __init__(self, api_key: str, client: Optional[AsyncOpenAI] = None):
        self.client = client or AsyncOpenAI(api_key=api_key)

    async def generate_content(self, request: GenerationRequest) -> GenerationResponse:
        # The images edit endpoint takes one image and one prompt rather than
        # ordered parts, so the request is flattened here.
        image = next((p.inline_data for p in request.parts if p.inline_data), None)
        prompt = " ".join(p.text for p in request.parts if p.text)
        if image is None:
            raise ValueError("OpenAI image edits require an input image")

        extension = image.mime_type.split("/")[-1]
        result = await self.client.images.edit(
            model=request.model,
            image=(f"original.{extension}", image.data, image.mime_type),
            prompt=prompt,
        )

        # Each returned image becomes its own candidate, mirroring the
        # "n" images the endpoint can produce.
        candidates = []
        for item in result.data or []:
            parts = []
            if item.b64_json:
                parts.append(Part(inline_data=InlineData(
                    data=base64.b64decode(item.b64_json),
                    mime_type="image/png",
                )))
            if item.revised_prompt:
                parts.append(Part(text=item.revised_prompt))
            candidates.append(Candidate(parts=parts))
        return GenerationResponse(candidates=candidates)
