"""Run every check, combine into a single report.

Runs: accessibility, contrast, convert, matrix, ratios.
Skips: swatch (writes PNG files — run explicitly if needed).
Skips: matrix when fewer than two colours are given.

Example:
    uv run contrast-tool all --palette brand.palette
    uv run contrast-tool all --palette brand.palette --json
    uv run contrast-tool all --palette brand.palette --fail-under=4.5
"""

from contrast_checker.core.types import Check, ColourSubject, Report

check = Check(
    name='all',
    help='Run every check (except swatch). Combine into a single report.',
)

# Checks never run automatically
SKIP = {'all', 'swatch'}


@check.run
def run(subjects: list[ColourSubject], report: Report, args) -> None:
    from contrast_checker.registry import all_checks

    for name, chk in sorted(all_checks().items()):
        if name in SKIP:
            continue
        if name == 'matrix' and len(subjects) < 2:
            continue
        chk.execute(subjects, report, args)
