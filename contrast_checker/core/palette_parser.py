"""Regex-based parser for brand palette files.

One colour per line, either `name = #RRGGBB` or `name: #RRGGBB`; the hex may
be quoted. Lines starting with // are comments, and /// lines directly above
a colour become its doc. The brand type is inferred from the name prefix
(`primary-hover` is a primary colour).

Example:

    /// Main call-to-action colour
    primary      = #3B82F6
    primary-dark: '#1D4ED8'
    // neutrals
    text = #1E293B
"""

import re

from contrast_checker.core.colour import InvalidColorFormat, parse_hex_color
from contrast_checker.core.palette import infer_type
from contrast_checker.core.types import ColourSubject

_LINE_RE = re.compile(r"""^([A-Za-z][\w.-]*)\s*[:=]\s*['"]?([^'"\s]+)['"]?\s*$""")


def parse_palette_file(path: str) -> list[ColourSubject]:
    """Parse a palette file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_palette_string(text)


def parse_palette_string(text: str) -> list[ColourSubject]:
    """Parse a palette from a string."""
    subjects: list[ColourSubject] = []
    seen: set[str] = set()
    doc_lines: list[str] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            doc_lines = []
            continue
        if line.startswith('///'):
            doc_lines.append(line[3:].strip())
            continue
        if line.startswith('//'):
            doc_lines = []
            continue

        m = _LINE_RE.match(line)
        if not m:
            raise ValueError(f'line {lineno}: expected "name = #RRGGBB", got {line!r}')
        name, value = m.group(1), m.group(2)
        try:
            colour = parse_hex_color(value)
        except InvalidColorFormat as e:
            raise InvalidColorFormat(value, f'line {lineno}') from e
        if name in seen:
            raise ValueError(f'line {lineno}: duplicate colour name {name!r}')
        seen.add(name)

        subjects.append(
            ColourSubject(
                name=name,
                colour=colour,
                colour_type=infer_type(name),
                doc='\n'.join(doc_lines) if doc_lines else None,
            )
        )
        doc_lines = []

    return subjects
