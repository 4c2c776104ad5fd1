"""
Prompt building for restoration requests.

Maps the user's RestorationOptions to the single instruction sent with the
image. The output is deterministic: identical options always produce the
identical string, so results stay comparable across sessions.

Assembly order:
    tier opening, colorization, style, identity preservation, tier closing
"""

from dataclasses import dataclass

from ..domain.models import ArtStyle, Quality, RestorationOptions

# =============================================================================
# TEMPLATES
# =============================================================================


@dataclass(frozen=True)
class QualityTier:
    opening: str
    colorize: str
    grayscale: str
    closing: str


COLORIZE = "Colorize it with natural skin tones and realistic colors."
KEEP_GRAYSCALE = (
    "Keep the photo in its original black and white or grayscale tones. "
    "Do not add any new colors."
)
STANDARD_CLOSING = "High quality, sharp details, professional restoration."

QUALITY_TIERS = {
    Quality.STANDARD: QualityTier(
        opening="Restore this old photo, remove scratches, noise, and damage.",
        colorize=COLORIZE,
        grayscale=KEEP_GRAYSCALE,
        closing=STANDARD_CLOSING,
    ),
    Quality.HIGH: QualityTier(
        opening="Restore this old photo with maximum detail, remove all scratches, noise, and damage.",
        colorize=COLORIZE,
        grayscale=KEEP_GRAYSCALE,
        closing=STANDARD_CLOSING,
    ),
    Quality.ULTRA: QualityTier(
        opening=(
            "Perform an ultra-high-definition restoration of this old photograph. "
            "Meticulously remove every scratch, dust particle, and blemish. "
            "Reconstruct missing details with AI precision."
        ),
        colorize=(
            "Apply sophisticated colorization with multi-layered skin tones, "
            "realistic textures, and cinematic color grading."
        ),
        grayscale=(
            "Maintain the original black and white aesthetic with enhanced "
            "contrast and clarity."
        ),
        closing=(
            "The output must be sharp, noise-free, and look like a modern "
            "high-resolution photograph while preserving the original essence."
        ),
    ),
}

STYLE_INSTRUCTIONS = {
    ArtStyle.REALISTIC: "",
    ArtStyle.OIL_PAINTING: (
        "Transform this photo into a beautiful oil painting. Use rich textures, "
        "visible brushstrokes, and vibrant colors typical of a classic oil on "
        "canvas masterpiece. Maintain the composition but render it in an "
        "artistic, painterly style."
    ),
}

IDENTITY_PRESERVATION = (
    "Strictly preserve the original facial features, head shape, hair texture, "
    "and shoulder lines. Do not alter the person's identity or physical structure."
)


# =============================================================================
# BUILDER FUNCTIONS
# =============================================================================

def build_prompt(options: RestorationOptions) -> str:
    """
    Build the restoration instruction for the given options.

    The identity preservation block is always included; the style block is
    empty for realistic restorations and is then skipped without leaving
    extra whitespace.
    """
    tier = QUALITY_TIERS[Quality(options.quality)]
    fragments = [
        tier.opening,
        _build_color_instruction(tier, options.colorize),
        _build_style_instruction(options.style),
        IDENTITY_PRESERVATION,
        tier.closing,
    ]
    return " ".join(fragment for fragment in fragments if fragment)


def _build_color_instruction(tier: QualityTier, colorize: bool) -> str:
    return tier.colorize if colorize else tier.grayscale


def _build_style_instruction(style: ArtStyle) -> str:
    return STYLE_INSTRUCTIONS[ArtStyle(style)]
