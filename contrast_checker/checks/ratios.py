"""Stored contrast-ratio records against the common backgrounds.

Produces the `contrast_ratios` list kept on a brand colour: one entry per
background with the ratio rounded to two places, the WCAG tier, and all
four pass flags (AA, AAA, AA large, AAA large).

Example:
    uv run contrast-tool ratios primary=#3B82F6 --json
"""

from contrast_checker.core.contrast import contrast_ratios
from contrast_checker.core.palette import common_backgrounds
from contrast_checker.core.types import Check, ColourSubject, Report

check = Check(
    name='ratios',
    help='Contrast-ratio records (ratio, tier, pass flags) against the backgrounds.',
)


@check.run
def run(subjects: list[ColourSubject], report: Report, args) -> None:
    backgrounds = getattr(args, 'backgrounds', None) or common_backgrounds()
    for subject in subjects:
        results = contrast_ratios(subject.colour, backgrounds)
        report.add(subject.name, 'ratios', {'ratios': [r.as_dict() for r in results]})
