"""WCAG 2.x relative luminance, contrast ratio and compliance tiers.

Luminance uses the sRGB linearisation with the 0.03928 threshold and the
Rec. 709 weights. Contrast ratio is (L1 + 0.05) / (L2 + 0.05) with L1 the
lighter colour, so it is symmetric and lies in [1, 21].

Tier selection order: AAA, AA, AA (18pt+), AAA (18pt+), Fail. The
AAA (18pt+) tier shares the 4.5 cut with AA and so can never be selected;
it is kept so stored records stay comparable with existing brand data.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from contrast_checker.core.colour import Color

AA_NORMAL = 4.5
AAA_NORMAL = 7.0
AA_LARGE = 3.0
AAA_LARGE = 4.5

_LINEAR_THRESHOLD = 0.03928
_WEIGHTS = (0.2126, 0.7152, 0.0722)
_OFFSET = 0.05


class ComplianceLevel(str, Enum):
    AAA = 'AAA'
    AA = 'AA'
    AA_LARGE = 'AA (18pt+)'
    AAA_LARGE = 'AAA (18pt+)'
    FAIL = 'Fail'


@dataclass(frozen=True)
class ContrastResult:
    """Compliance record for one contrast ratio, optionally tied to a background."""

    ratio: float
    level: ComplianceLevel
    passes_aa: bool
    passes_aaa: bool
    passes_aa_large: bool
    passes_aaa_large: bool
    background: Color | None = None

    def as_dict(self, precision: int = 2) -> dict[str, Any]:
        return {
            'background': self.background.hex if self.background else None,
            'ratio': round(self.ratio, precision),
            'level': self.level.value,
            'passes_aa': self.passes_aa,
            'passes_aaa': self.passes_aaa,
            'passes_aa_large': self.passes_aa_large,
            'passes_aaa_large': self.passes_aaa_large,
        }


def _linearise(channel: int) -> float:
    c = channel / 255
    if c <= _LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(colour: Color) -> float:
    r = _linearise(colour.red)
    g = _linearise(colour.green)
    b = _linearise(colour.blue)
    return _WEIGHTS[0] * r + _WEIGHTS[1] * g + _WEIGHTS[2] * b


def contrast_ratio(foreground: Color, background: Color) -> float:
    fg = relative_luminance(foreground)
    bg = relative_luminance(background)
    lighter = max(fg, bg)
    darker = min(fg, bg)
    return (lighter + _OFFSET) / (darker + _OFFSET)


def compliance_level(ratio: float, background: Color | None = None) -> ContrastResult:
    """Classify a ratio into pass flags and the first matching tier."""
    passes_aa = ratio >= AA_NORMAL
    passes_aaa = ratio >= AAA_NORMAL
    passes_aa_large = ratio >= AA_LARGE
    passes_aaa_large = ratio >= AAA_LARGE

    if passes_aaa:
        level = ComplianceLevel.AAA
    elif passes_aa:
        level = ComplianceLevel.AA
    elif passes_aa_large:
        level = ComplianceLevel.AA_LARGE
    elif passes_aaa_large:
        level = ComplianceLevel.AAA_LARGE
    else:
        level = ComplianceLevel.FAIL

    return ContrastResult(
        ratio=ratio,
        level=level,
        passes_aa=passes_aa,
        passes_aaa=passes_aaa,
        passes_aa_large=passes_aa_large,
        passes_aaa_large=passes_aaa_large,
        background=background,
    )


def evaluate(foreground: Color, background: Color) -> ContrastResult:
    """Contrast ratio plus compliance tier for one foreground/background pair."""
    return compliance_level(contrast_ratio(foreground, background), background=background)


def contrast_ratios(colour: Color, backgrounds: Iterable[Color]) -> list[ContrastResult]:
    """Evaluate a colour against each background, in order."""
    return [evaluate(colour, bg) for bg in backgrounds]


def contrast_matrix(colours: Sequence[Color]) -> np.ndarray:
    """Pairwise contrast ratios for a palette as an n x n float64 array.

    Vectorised version of contrast_ratio: symmetric with a diagonal of 1.0.
    """
    if not colours:
        return np.zeros((0, 0), dtype=np.float64)
    channels = np.array([c.as_tuple() for c in colours], dtype=np.float64) / 255
    linear = np.where(
        channels <= _LINEAR_THRESHOLD,
        channels / 12.92,
        ((channels + 0.055) / 1.055) ** 2.4,
    )
    lum = linear[:, 0] * _WEIGHTS[0] + linear[:, 1] * _WEIGHTS[1] + linear[:, 2] * _WEIGHTS[2]
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + _OFFSET) / (darker + _OFFSET)
