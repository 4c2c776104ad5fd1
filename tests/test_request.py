"""Tests for RestorationRequest."""
import asyncio

import pytest

from img_restore.domain.models import ImageAsset
from img_restore.restoration.request import RESULT_MIME_TYPE, RestorationRequest
from img_restore.schemas.generation import (
    Candidate,
    GenerationResponse,
    InlineData,
    Part,
)
from img_restore.services.exceptions import NoImageReturned, RemoteError, RestorationError

from tests.stubs import RESTORED_BYTES, StubProvider, image_response, text_only_response


def run_restore(provider, image, instruction="Restore it."):
    request = RestorationRequest(provider=provider, model_name="gemini-2.5-flash-image")
    return asyncio.run(request.restore(image, instruction))


class TestRequestShape:
    """Tests for what is sent to the provider."""

    def test_two_ordered_parts(self, small_png):
        """Test the request holds the image first, then the instruction."""
        provider = StubProvider()
        run_restore(provider, small_png, "Make it new.")

        assert len(provider.requests) == 1
        request = provider.requests[0]
        assert request.model == "gemini-2.5-flash-image"
        assert len(request.parts) == 2
        assert request.parts[0].inline_data.data == small_png.data
        assert request.parts[0].inline_data.mime_type == "image/png"
        assert request.parts[1].text == "Make it new."

    def test_single_call_per_invocation(self, small_png):
        """Test a failure is not retried."""
        provider = StubProvider(error=ConnectionError("offline"))
        with pytest.raises(RemoteError):
            run_restore(provider, small_png)
        assert len(provider.requests) == 1


class TestResponseDecoding:
    """Tests for turning the provider reply into an ImageAsset."""

    def test_first_image_part_wins(self, small_png):
        """Test text parts are skipped and the first image is returned."""
        response = GenerationResponse(candidates=[Candidate(parts=[
            Part(text="preamble"),
            Part(inline_data=InlineData(data=b"first", mime_type="image/webp")),
            Part(inline_data=InlineData(data=b"second", mime_type="image/png")),
        ])])
        result = run_restore(StubProvider(response=response), small_png)

        assert result.data == b"first"

    def test_output_declared_as_png(self, small_png):
        """Test the media type is normalized regardless of the service."""
        result = run_restore(StubProvider(response=image_response(mime_type="image/jpeg")), small_png)

        assert result.mime_type == RESULT_MIME_TYPE == "image/png"
        assert result.data == RESTORED_BYTES

    def test_text_only_response_raises_no_image(self, small_png):
        """Test a reply without image data fails with NoImageReturned."""
        with pytest.raises(NoImageReturned) as exc_info:
            run_restore(StubProvider(response=text_only_response()), small_png)
        assert exc_info.value.kind == "NoImageReturned"

    def test_no_candidates_raises_no_image(self, small_png):
        """Test an empty candidate list fails with NoImageReturned."""
        with pytest.raises(NoImageReturned):
            run_restore(StubProvider(response=GenerationResponse(candidates=[])), small_png)

    def test_only_first_candidate_is_scanned(self, small_png):
        """Test images in later candidates are not used."""
        response = GenerationResponse(candidates=[
            Candidate(parts=[Part(text="no image here")]),
            Candidate(parts=[Part(inline_data=InlineData(data=b"late", mime_type="image/png"))]),
        ])
        with pytest.raises(NoImageReturned):
            run_restore(StubProvider(response=response), small_png)


class TestRemoteFailures:
    """Tests for provider exceptions."""

    def test_provider_error_becomes_remote_error(self, small_png):
        """Test the provider message is carried by RemoteError."""
        provider = StubProvider(error=PermissionError("API key not valid"))
        with pytest.raises(RemoteError) as exc_info:
            run_restore(provider, small_png)

        assert exc_info.value.message == "API key not valid"
        assert exc_info.value.kind == "RemoteError"
        assert isinstance(exc_info.value, RestorationError)
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_empty_error_message_uses_exception_name(self, small_png):
        """Test an exception without a message still yields a readable one."""
        with pytest.raises(RemoteError) as exc_info:
            run_restore(StubProvider(error=TimeoutError()), small_png)
        assert exc_info.value.message == "TimeoutError"


class TestImageAsset:
    """Tests for the ImageAsset value object."""

    def test_empty_payload_rejected(self):
        """Test an image must carry bytes."""
        with pytest.raises(ValueError):
            ImageAsset(data=b"", mime_type="image/png")

    def test_invalid_mime_type_rejected(self):
        """Test the media type must look like type/subtype."""
        with pytest.raises(ValueError):
            ImageAsset(data=b"abc", mime_type="png")

    def test_data_uri_round_trip(self, small_png):
        """Test encoding to and decoding from a data URI."""
        uri = small_png.to_data_uri()

        assert uri.startswith("data:image/png;base64,")
        assert ImageAsset.from_data_uri(uri) == small_png

    def test_from_data_uri_rejects_plain_text(self):
        """Test a non data URI is refused."""
        with pytest.raises(ValueError):
            ImageAsset.from_data_uri("https://example.com/photo.png")

    def test_from_data_uri_rejects_bad_base64(self):
        """Test an invalid base64 payload is refused."""
        with pytest.raises(ValueError):
            ImageAsset.from_data_uri("data:image/png;base64,@@@")
