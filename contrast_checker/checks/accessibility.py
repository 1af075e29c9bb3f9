"""Accessibility profile and usage guidelines per brand colour.

Contrast against white, black and slate-500, suitability notes for light
and dark backgrounds, overall WCAG AA/AAA flags, HSL and RGB values, plus
the usage guidelines for the colour's brand type.

The type comes from --type, else from the colour name (a colour named
`primary-hover` is a primary colour). Text, primary and secondary colours
are flagged as text colours.

Example:
    uv run contrast-tool accessibility text=#1E293B
    uv run contrast-tool accessibility '#10B981' --type success
"""

from contrast_checker.core.palette import accessibility_profile, has_high_contrast, label_for, usage_guidelines
from contrast_checker.core.types import Check, ColourSubject, Report

check = Check(
    name='accessibility',
    help='Accessibility profile (suitability, WCAG flags, HSL/RGB) and usage guidelines.',
)


@check.run
def run(subjects: list[ColourSubject], report: Report, args) -> None:
    override = getattr(args, 'type', None)
    for subject in subjects:
        colour_type = override or subject.colour_type
        profile = accessibility_profile(subject.colour, colour_type)
        report.add(
            subject.name,
            'accessibility',
            {
                'type': colour_type,
                'label': label_for(colour_type),
                'profile': profile.as_dict(),
                'high_contrast': has_high_contrast(subject.colour),
                'usage_guidelines': usage_guidelines(colour_type),
            },
        )
