"""Shared pytest fixtures for IMG Restore tests."""
import pytest

from img_restore.comparison.events import ContainerRect, ListenerRegistry
from img_restore.comparison.slider import ComparisonSliderController
from img_restore.domain.models import ImageAsset

from tests.stubs import MB, make_jpeg


@pytest.fixture
def jpeg_2mb() -> ImageAsset:
    return make_jpeg(2 * MB)


@pytest.fixture
def small_png() -> ImageAsset:
    return ImageAsset(data=b"\x89PNG\r\n\x1a\nsmall", mime_type="image/png")


@pytest.fixture
def events() -> ListenerRegistry:
    return ListenerRegistry()


@pytest.fixture
def container() -> dict:
    """Mutable holder so tests can resize the container mid-drag."""
    return {"rect": ContainerRect(left=100.0, width=200.0)}


@pytest.fixture
def slider(events, container) -> ComparisonSliderController:
    return ComparisonSliderController(events, lambda: container["rect"])
