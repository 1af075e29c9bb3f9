"""Brand colour types, reference palettes, and per-colour accessibility profiles.

Colour types follow the brand colour records: each type has a display label,
a set of representative values, and usage guidelines. The accessibility
profile is what gets stored alongside a brand colour: ratios against white,
black and slate-500, suitability notes, WCAG pass flags and HSL/RGB values.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from contrast_checker.core.colour import Color, parse_hex_color
from contrast_checker.core.contrast import AA_LARGE, AA_NORMAL, AAA_NORMAL, contrast_ratio
from contrast_checker.core.convert import HslValue, RgbValue, hex_to_hsl, hex_to_rgb

COLOUR_TYPES: dict[str, str] = {
    'primary': 'Primary Brand Color',
    'secondary': 'Secondary Brand Color',
    'accent': 'Accent Color',
    'neutral': 'Neutral Color',
    'success': 'Success Color',
    'warning': 'Warning Color',
    'error': 'Error Color',
    'info': 'Info Color',
    'text': 'Text Color',
    'background': 'Background Color',
}

# fmt: off
TYPE_PALETTES: dict[str, tuple[str, ...]] = {
    'primary': ('#3B82F6', '#6366F1', '#8B5CF6', '#EC4899', '#10B981',
                '#F59E0B', '#EF4444', '#06B6D4', '#84CC16', '#F97316'),
    'secondary': ('#64748B', '#6B7280', '#78716C', '#A1A1AA', '#475569',
                  '#94A3B8', '#CBD5E1', '#E2E8F0', '#F8FAFC'),
    'accent': ('#F59E0B', '#EF4444', '#EC4899', '#8B5CF6', '#06B6D4',
               '#84CC16', '#F97316', '#6366F1', '#14B8A6', '#A855F7'),
    'neutral': ('#FFFFFF', '#F8FAFC', '#F1F5F9', '#E2E8F0', '#CBD5E1',
                '#94A3B8', '#64748B', '#475569', '#334155', '#1E293B'),
    'success': ('#10B981', '#059669', '#0D9488', '#047857'),
    'warning': ('#F59E0B', '#D97706', '#C2410C', '#B45309'),
    'error': ('#EF4444', '#DC2626', '#B91C1C', '#991B1B'),
    'info': ('#3B82F6', '#2563EB', '#1D4ED8', '#1E40AF'),
    'text': ('#1E293B', '#334155', '#475569', '#64748B', '#1F2937',
             '#374151', '#4B5563', '#6B7280', '#111827'),
    'background': ('#FFFFFF', '#F8FAFC', '#F1F5F9', '#F9FAFB', '#FAFAFA',
                   '#FEFEFE', '#FCFCFC', '#FBFFFD', '#FFFEFB', '#FFFDFD'),
}
# fmt: on

DEFAULT_COLOUR = '#333333'
COMMON_BACKGROUNDS: tuple[str, ...] = ('#FFFFFF', '#F8FAFC', '#000000', '#1E293B')
HIGH_CONTRAST_FALLBACKS: tuple[str, ...] = ('#FFFFFF', '#000000', '#FF0000', '#FFFF00')
TEXT_TYPES = ('text', 'primary', 'secondary')

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
SLATE_500 = Color(0x64, 0x74, 0x8B)

_GUIDELINES: dict[str, tuple[str, ...]] = {
    'primary': (
        'Use as the main brand color for primary buttons, links, and key elements.',
        'Ensure sufficient contrast (4.5:1 minimum) for accessibility.',
        'Limit use to avoid visual fatigue and maintain brand impact.',
        'Consider different shades for hover states and secondary actions.',
    ),
    'secondary': (
        'Use to support the primary color and provide visual hierarchy.',
        'Ideal for secondary buttons, borders, and decorative elements.',
        'Should complement rather than compete with the primary color.',
        'Can be adjusted in opacity for subtle backgrounds and overlays.',
    ),
    'accent': (
        'Use sparingly to draw attention to important elements and calls-to-action.',
        'Excellent for highlighting key information or new features.',
        'Avoid overuse which can diminish its impact.',
        'Consider using lighter shades for alert states and notifications.',
    ),
    'success': (
        'Use exclusively for positive actions, confirmations, and success states.',
        'Helps users identify when actions have been completed successfully.',
        'Maintain consistency across success messages and notifications.',
        'Test contrast with surrounding elements for optimal visibility.',
    ),
    'error': (
        'Use only for error states, warnings, and important alerts.',
        'Should stand out clearly to ensure users notice critical information.',
        'Avoid using variations that might be confused with other states.',
        'Always provide clear text alongside the color for clarity.',
    ),
    'neutral': (
        'Perfect for backgrounds, borders, and creating visual separation.',
        'Use as the foundation for building color hierarchies.',
        'Consider different shades for various levels of visual weight.',
        'Test combinations to ensure sufficient contrast with content.',
    ),
}
_DEFAULT_GUIDELINES = (
    'General usage guidelines should be determined based on visual context and user experience requirements.'
)


@dataclass(frozen=True)
class AccessibilityProfile:
    """Stored accessibility summary for one brand colour."""

    contrast_ratio_normal: float  # vs white
    contrast_ratio_dark: float  # vs black
    contrast_ratio_gray: float  # vs slate-500
    is_text_color: bool
    hsl_values: HslValue
    rgb_values: RgbValue
    suitability: list[str] = field(default_factory=list)

    @property
    def wcag_aa_pass(self) -> bool:
        return max(self.contrast_ratio_normal, self.contrast_ratio_dark) >= AA_NORMAL

    @property
    def wcag_aaa_pass(self) -> bool:
        return max(self.contrast_ratio_normal, self.contrast_ratio_dark) >= AAA_NORMAL

    def as_dict(self, precision: int = 2) -> dict[str, Any]:
        return {
            'contrast_ratio_normal': round(self.contrast_ratio_normal, precision),
            'contrast_ratio_dark': round(self.contrast_ratio_dark, precision),
            'contrast_ratio_gray': round(self.contrast_ratio_gray, precision),
            'is_text_color': self.is_text_color,
            'suitability': list(self.suitability),
            'wcag_aa_pass': self.wcag_aa_pass,
            'wcag_aaa_pass': self.wcag_aaa_pass,
            'hsl_values': self.hsl_values.as_dict(),
            'rgb_values': self.rgb_values.as_dict(),
        }


def label_for(colour_type: str | None) -> str | None:
    if colour_type is None:
        return None
    return COLOUR_TYPES.get(colour_type)


def infer_type(name: str) -> str | None:
    """Map a colour name like 'primary-hover' or 'text_muted' to a known type."""
    head = name.strip().lower().replace('_', '-').split('-', 1)[0]
    return head if head in COLOUR_TYPES else None


def common_backgrounds() -> list[Color]:
    return [parse_hex_color(h) for h in COMMON_BACKGROUNDS]


def usage_guidelines(colour_type: str | None) -> str:
    lines = _GUIDELINES.get(colour_type or '')
    return ' '.join(lines) if lines else _DEFAULT_GUIDELINES


def _suitability(ratio: float, surface: str) -> str | None:
    if ratio >= AAA_NORMAL:
        return f'Excellent for {surface} backgrounds'
    if ratio >= AA_NORMAL:
        return f'Good for {surface} backgrounds'
    if ratio >= AA_LARGE:
        return f'Suitable for large text on {surface} backgrounds'
    return None


def accessibility_profile(colour: Color, colour_type: str | None = None) -> AccessibilityProfile:
    """Build the accessibility summary for a colour of the given brand type.

    The contrast against white decides suitability for "dark" backgrounds and
    the contrast against black for "light" ones, matching existing records.
    """
    normal = contrast_ratio(colour, WHITE)
    dark = contrast_ratio(colour, BLACK)
    gray = contrast_ratio(colour, SLATE_500)

    suitability = [s for s in (_suitability(normal, 'dark'), _suitability(dark, 'light')) if s]

    return AccessibilityProfile(
        contrast_ratio_normal=normal,
        contrast_ratio_dark=dark,
        contrast_ratio_gray=gray,
        is_text_color=colour_type in TEXT_TYPES,
        hsl_values=hex_to_hsl(colour),
        rgb_values=hex_to_rgb(colour),
        suitability=suitability,
    )


def has_high_contrast(colour: Color, backgrounds: Iterable[Color] | None = None) -> bool:
    """True if the colour reaches AAA (7:1) against at least one background.

    Ratios are compared as stored, rounded to two places, so 6.996 counts.
    """
    bgs = common_backgrounds() if backgrounds is None else backgrounds
    return any(round(contrast_ratio(colour, bg), 2) >= AAA_NORMAL for bg in bgs)
