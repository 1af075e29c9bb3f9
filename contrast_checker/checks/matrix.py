"""Pairwise contrast matrix across every colour in the palette.

Useful for finding which brand colours can be layered on each other. Each
colour's row lists its ratio against every other colour, rounded to two
places. Needs at least two colours; with fewer the row is empty.

Example:
    uv run contrast-tool matrix --palette brand.palette
"""

from contrast_checker.core.contrast import contrast_matrix
from contrast_checker.core.types import Check, ColourSubject, Report

check = Check(name='matrix', help='Pairwise contrast ratios between all palette colours.')


@check.run
def run(subjects: list[ColourSubject], report: Report, args) -> None:
    matrix = contrast_matrix([s.colour for s in subjects])
    names = [s.name for s in subjects]
    for i, subject in enumerate(subjects):
        row = {names[j]: round(float(matrix[i, j]), 2) for j in range(len(subjects))}
        report.add(subject.name, 'matrix', {'row': row})
