"""Hex, RGB and HSL values for each colour.

Example:
    uv run contrast-tool convert '#808080' ff0000
"""

from contrast_checker.core.convert import hex_to_hsl, hex_to_rgb
from contrast_checker.core.types import Check, ColourSubject, Report

check = Check(name='convert', help='Hex, RGB and HSL decomposition of each colour.')


@check.run
def run(subjects: list[ColourSubject], report: Report, args) -> None:
    for subject in subjects:
        report.add(
            subject.name,
            'convert',
            {
                'hex': subject.colour.hex,
                'rgb': hex_to_rgb(subject.colour).as_dict(),
                'hsl': hex_to_hsl(subject.colour).as_dict(),
            },
        )
