"""Tests for contrast_checker.core.palette — brand types, profiles and guidelines."""

import pytest
from contrast_checker.core import palette
from contrast_checker.core.colour import parse_hex_color
from contrast_checker.core.palette import (
    COLOUR_TYPES,
    COMMON_BACKGROUNDS,
    HIGH_CONTRAST_FALLBACKS,
    TYPE_PALETTES,
    accessibility_profile,
    common_backgrounds,
    has_high_contrast,
    infer_type,
    label_for,
    usage_guidelines,
)


class TestColourTypes:
    def test_every_type_has_palette(self):
        assert set(TYPE_PALETTES) == set(COLOUR_TYPES)

    def test_palette_values_parse(self):
        for name, values in TYPE_PALETTES.items():
            for hex_val in values:
                assert parse_hex_color(hex_val).hex == hex_val, f'{name} value {hex_val} not normalised'

    def test_labels(self):
        assert label_for('primary') == 'Primary Brand Color'
        assert label_for('background') == 'Background Color'
        assert label_for('unknown') is None
        assert label_for(None) is None

    def test_common_backgrounds(self):
        assert [c.hex for c in common_backgrounds()] == list(COMMON_BACKGROUNDS)

    def test_high_contrast_fallbacks(self):
        assert HIGH_CONTRAST_FALLBACKS == ('#FFFFFF', '#000000', '#FF0000', '#FFFF00')
        # pure red only reaches 5.25:1 against black
        assert has_high_contrast(parse_hex_color('#FFFF00'))
        assert not has_high_contrast(parse_hex_color('#FF0000'))


class TestInferType:
    @pytest.mark.parametrize(
        ('name', 'expected'),
        [
            ('primary', 'primary'),
            ('primary-hover', 'primary'),
            ('Text_Muted', 'text'),
            ('background', 'background'),
            ('brand', None),
            ('primaryish', None),
        ],
    )
    def test_infer(self, name, expected):
        assert infer_type(name) == expected


class TestAccessibilityProfile:
    def test_dark_text_colour(self):
        p = accessibility_profile(parse_hex_color('#1E293B'), 'text')
        assert p.is_text_color is True
        assert p.suitability == ['Excellent for dark backgrounds']
        assert p.wcag_aa_pass is True
        assert p.wcag_aaa_pass is True

    def test_white_background_colour(self):
        p = accessibility_profile(parse_hex_color('#FFFFFF'), 'background')
        assert p.is_text_color is False
        assert p.contrast_ratio_normal == 1.0
        assert p.contrast_ratio_dark == pytest.approx(21.0)
        assert p.suitability == ['Excellent for light backgrounds']

    def test_mid_grey_gets_both_notes(self):
        p = accessibility_profile(parse_hex_color('#808080'), 'neutral')
        assert p.suitability == [
            'Suitable for large text on dark backgrounds',
            'Good for light backgrounds',
        ]
        assert p.wcag_aa_pass is True
        assert p.wcag_aaa_pass is False

    def test_gray_reference_is_slate500(self):
        p = accessibility_profile(parse_hex_color('#64748B'), 'secondary')
        assert p.contrast_ratio_gray == 1.0

    def test_untyped_is_not_text(self):
        assert accessibility_profile(parse_hex_color('#000000')).is_text_color is False

    def test_as_dict_shape(self):
        d = accessibility_profile(parse_hex_color('#3B82F6'), 'primary').as_dict()
        assert d['contrast_ratio_normal'] == 3.68
        assert d['is_text_color'] is True
        assert d['hsl_values'] == {'hue': 217, 'saturation': 91, 'lightness': 60}
        assert d['rgb_values'] == {'red': 59, 'green': 130, 'blue': 246}
        assert set(d) == {
            'contrast_ratio_normal',
            'contrast_ratio_dark',
            'contrast_ratio_gray',
            'is_text_color',
            'suitability',
            'wcag_aa_pass',
            'wcag_aaa_pass',
            'hsl_values',
            'rgb_values',
        }


class TestHighContrast:
    def test_mid_grey_is_not_high_contrast(self):
        assert has_high_contrast(parse_hex_color('#808080')) is False

    def test_custom_backgrounds(self):
        grey = parse_hex_color('#808080')
        assert has_high_contrast(grey, [parse_hex_color('#808080')]) is False
        assert has_high_contrast(parse_hex_color('#000000'), [parse_hex_color('#FFFFFF')]) is True

    def test_compares_ratio_rounded_to_two_places(self, monkeypatch: pytest.MonkeyPatch) -> None:
        black = parse_hex_color('#000000')
        monkeypatch.setattr(palette, 'contrast_ratio', lambda fg, bg: 6.996)
        assert has_high_contrast(black, [black]) is True
        monkeypatch.setattr(palette, 'contrast_ratio', lambda fg, bg: 6.994)
        assert has_high_contrast(black, [black]) is False


class TestUsageGuidelines:
    def test_primary(self):
        text = usage_guidelines('primary')
        assert text.startswith('Use as the main brand color')
        assert '4.5:1 minimum' in text

    def test_default_for_unlisted_type(self):
        assert usage_guidelines('info') == usage_guidelines(None)
        assert usage_guidelines(None).startswith('General usage guidelines')
