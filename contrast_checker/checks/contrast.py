"""WCAG contrast of each colour against each background, with pass/fail.

For every colour and every background (--bg, repeatable; default from
CONTRAST_BACKGROUNDS or white, slate-50, black, slate-800) computes the
contrast ratio and WCAG tier. A pair passes when its ratio reaches
--min-ratio (default 4.5, the AA threshold for normal text).

Tiers: AAA >= 7.0, AA >= 4.5, AA (18pt+) >= 3.0, otherwise Fail.

Example:
    uv run contrast-tool contrast '#3B82F6' --bg '#FFFFFF'
    uv run contrast-tool contrast --palette brand.palette --min-ratio 3
"""

from contrast_checker.core.contrast import AA_NORMAL, evaluate
from contrast_checker.core.palette import common_backgrounds
from contrast_checker.core.types import Check, ColourSubject, Report

check = Check(
    name='contrast',
    help='Contrast ratio and WCAG tier against each background. Pass/fail at --min-ratio.',
)


@check.run
def run(subjects: list[ColourSubject], report: Report, args) -> None:
    backgrounds = getattr(args, 'backgrounds', None) or common_backgrounds()
    min_ratio = getattr(args, 'min_ratio', None)
    if min_ratio is None:
        min_ratio = AA_NORMAL

    for subject in subjects:
        pairs = []
        for bg in backgrounds:
            result = evaluate(subject.colour, bg)
            passed = result.ratio >= min_ratio
            report.record_ratio(result.ratio)
            if passed:
                report.record_pass(subject.name)
            else:
                report.record_fail(subject.name)
            pairs.append(
                {
                    'background': bg.hex,
                    'ratio': round(result.ratio, 2),
                    'level': result.level.value,
                    'pass': passed,
                }
            )
        report.add(subject.name, 'contrast', {'min_ratio': min_ratio, 'pairs': pairs})
