"""Hex colour parsing and the immutable Color value.

Accepted input: exactly six hex digits with an optional leading '#',
case-insensitive. Output is always '#RRGGBB' uppercase.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r'#?[0-9A-Fa-f]{6}')


class InvalidColorFormat(ValueError):
    """Raised when a string is not a 6-digit hex colour."""

    def __init__(self, value: object, detail: str = ''):
        self.value = value
        msg = f'invalid colour {value!r}: expected #RRGGBB'
        if detail:
            msg = f'{msg} ({detail})'
        super().__init__(msg)


@dataclass(frozen=True)
class Color:
    """A 24-bit sRGB colour. Channels are ints in [0, 255]."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ('red', 'green', 'blue'):
            value = getattr(self, name)
            # bool is an int subclass but never a valid channel
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f'{name} channel must be an int, got {value!r}')
            if not 0 <= value <= 255:
                raise ValueError(f'{name} channel out of range [0, 255]: {value}')

    @classmethod
    def from_hex(cls, text: str) -> Color:
        return parse_hex_color(text)

    def to_hex(self) -> str:
        return f'#{self.red:02X}{self.green:02X}{self.blue:02X}'

    @property
    def hex(self) -> str:
        return self.to_hex()

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class ParseResult:
    """Outcome of try_parse_hex_color: exactly one of colour/error is set."""

    colour: Color | None = None
    error: InvalidColorFormat | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_hex_color(text: str) -> Color:
    """Parse '#RRGGBB' or 'RRGGBB' into a Color.

    Raises InvalidColorFormat for anything else, including 3-digit
    shorthand and surrounding whitespace.
    """
    if not isinstance(text, str) or not _HEX_RE.fullmatch(text):
        raise InvalidColorFormat(text)
    digits = text[1:] if text.startswith('#') else text
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def try_parse_hex_color(text: str) -> ParseResult:
    """Like parse_hex_color, but returns a ParseResult instead of raising."""
    try:
        return ParseResult(colour=parse_hex_color(text))
    except InvalidColorFormat as e:
        return ParseResult(error=e)
