from abc import ABC, abstractmethod

from ..schemas.generation import GenerationRequest, GenerationResponse


class ImageGenerationProvider(ABC):
    """
    Abstract Base Class interface that defines the contract for any remote
    image generation service (Gemini, OpenAI, a local stub, etc.)
    """

    @abstractmethod
    async def generate_content(self, request: GenerationRequest) -> GenerationResponse:
        """
        Sends the ordered request parts to the model and returns every
        candidate the service produced. Failures are raised as exceptions.
        """
        pass
