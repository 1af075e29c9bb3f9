"""contrast_checker — WCAG contrast and colour accessibility for brand colours.

Library entry points are re-exported here; the CLI lives in __main__.
"""

from contrast_checker.core.colour import Color, InvalidColorFormat, ParseResult, parse_hex_color, try_parse_hex_color
from contrast_checker.core.contrast import (
    ComplianceLevel,
    ContrastResult,
    compliance_level,
    contrast_matrix,
    contrast_ratio,
    contrast_ratios,
    evaluate,
    relative_luminance,
)
from contrast_checker.core.convert import HslValue, RgbValue, hex_to_hsl, hex_to_rgb
from contrast_checker.core.palette import AccessibilityProfile, accessibility_profile, usage_guidelines

__all__ = [
    'AccessibilityProfile',
    'Color',
    'ComplianceLevel',
    'ContrastResult',
    'HslValue',
    'InvalidColorFormat',
    'ParseResult',
    'RgbValue',
    'accessibility_profile',
    'compliance_level',
    'contrast_matrix',
    'contrast_ratio',
    'contrast_ratios',
    'evaluate',
    'hex_to_hsl',
    'hex_to_rgb',
    'parse_hex_color',
    'relative_luminance',
    'try_parse_hex_color',
    'usage_guidelines',
]
