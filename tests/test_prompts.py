"""Tests for restoration prompt construction."""
import itertools

import pytest

from img_restore.domain.models import ArtStyle, Quality, RestorationOptions
from img_restore.restoration.prompts import (
    IDENTITY_PRESERVATION,
    QUALITY_TIERS,
    STYLE_INSTRUCTIONS,
    build_prompt,
)

ALL_OPTIONS = [
    RestorationOptions(quality=q, colorize=c, style=s)
    for q, c, s in itertools.product(Quality, (True, False), ArtStyle)
]


class TestBuildPrompt:
    """Tests for build_prompt."""

    def test_standard_colorized_realistic_text(self):
        """Test the default options produce the exact standard instruction."""
        prompt = build_prompt(RestorationOptions())

        assert prompt == (
            "Restore this old photo, remove scratches, noise, and damage. "
            "Colorize it with natural skin tones and realistic colors. "
            "Strictly preserve the original facial features, head shape, hair texture, "
            "and shoulder lines. Do not alter the person's identity or physical structure. "
            "High quality, sharp details, professional restoration."
        )

    @pytest.mark.parametrize("options", ALL_OPTIONS)
    def test_deterministic(self, options):
        """Test repeated calls return identical strings."""
        assert build_prompt(options) == build_prompt(options)
        assert build_prompt(options) == build_prompt(RestorationOptions(
            quality=options.quality, colorize=options.colorize, style=options.style
        ))

    @pytest.mark.parametrize("options", ALL_OPTIONS)
    def test_identity_fragment_always_present(self, options):
        """Test the identity preservation instruction is never dropped."""
        assert IDENTITY_PRESERVATION in build_prompt(options)

    @pytest.mark.parametrize("options", ALL_OPTIONS)
    def test_no_double_spaces(self, options):
        """Test empty fragments leave no extra whitespace."""
        prompt = build_prompt(options)
        assert "  " not in prompt
        assert prompt == prompt.strip()

    @pytest.mark.parametrize(
        "quality,style", list(itertools.product(Quality, ArtStyle))
    )
    def test_colorize_flag_changes_color_fragment(self, quality, style):
        """Test colorize=True and colorize=False select different fragments."""
        tier = QUALITY_TIERS[quality]
        colored = build_prompt(RestorationOptions(quality=quality, colorize=True, style=style))
        gray = build_prompt(RestorationOptions(quality=quality, colorize=False, style=style))

        assert colored != gray
        assert tier.colorize in colored and tier.grayscale not in colored
        assert tier.grayscale in gray and tier.colorize not in gray

    @pytest.mark.parametrize("quality,colorize", list(itertools.product(Quality, (True, False))))
    def test_style_fragment_only_for_oil_painting(self, quality, colorize):
        """Test the style instruction is present iff style is OilPainting."""
        oil = STYLE_INSTRUCTIONS[ArtStyle.OIL_PAINTING]
        realistic = build_prompt(RestorationOptions(quality, colorize, ArtStyle.REALISTIC))
        painting = build_prompt(RestorationOptions(quality, colorize, ArtStyle.OIL_PAINTING))

        assert STYLE_INSTRUCTIONS[ArtStyle.REALISTIC] == ""
        assert oil not in realistic
        assert oil in painting

    def test_fragment_order(self):
        """Test opening, color, style, identity and closing appear in order."""
        options = RestorationOptions(Quality.ULTRA, False, ArtStyle.OIL_PAINTING)
        tier = QUALITY_TIERS[Quality.ULTRA]
        prompt = build_prompt(options)

        positions = [
            prompt.index(tier.opening),
            prompt.index(tier.grayscale),
            prompt.index(STYLE_INSTRUCTIONS[ArtStyle.OIL_PAINTING]),
            prompt.index(IDENTITY_PRESERVATION),
            prompt.index(tier.closing),
        ]
        assert positions == sorted(positions)
        assert prompt.startswith(tier.opening)
        assert prompt.endswith(tier.closing)

    def test_tiers_have_distinct_openings(self):
        """Test each quality tier starts with its own base instruction."""
        openings = {build_prompt(RestorationOptions(quality=q)).split(".")[0] for q in Quality}
        assert len(openings) == 3

    def test_ultra_uses_cinematic_colorization(self):
        """Test the ultra tier has its own colorization wording."""
        prompt = build_prompt(RestorationOptions(quality=Quality.ULTRA, colorize=True))
        assert "cinematic color grading" in prompt
