"""Render a PNG swatch per colour: the colour on each background.

Each background gets a 120x80 tile with sample text and a solid bar in the
colour, so contrast can be eyeballed in review. Tiles are laid out left to
right in background order. Saves to <out_dir>/<name>_swatch.png
(--out-dir, or CONTRAST_OUT_DIR, default ./swatches).

Not run by `all` since it writes files.

Example:
    uv run contrast-tool swatch --palette brand.palette --out-dir ./tmp
"""

import os
import re

from PIL import Image, ImageDraw

from contrast_checker.core.palette import common_backgrounds
from contrast_checker.core.types import Check, ColourSubject, Report

check = Check(name='swatch', help='Render a PNG swatch of each colour on each background.')

TILE_W = 120
TILE_H = 80
BAR = (10, 50, 110, 70)  # x1, y1, x2, y2 within a tile


def _safe_name(name: str) -> str:
    return re.sub(r'[^\w.-]', '_', name).strip('_') or 'colour'


def render_swatch(subject: ColourSubject, backgrounds) -> Image.Image:
    img = Image.new('RGB', (TILE_W * len(backgrounds), TILE_H))
    draw = ImageDraw.Draw(img)
    fg = subject.colour.as_tuple()
    for i, bg in enumerate(backgrounds):
        x0 = i * TILE_W
        draw.rectangle((x0, 0, x0 + TILE_W - 1, TILE_H - 1), fill=bg.as_tuple())
        draw.text((x0 + 10, 12), 'Aa 18pt', fill=fg)
        draw.rectangle((x0 + BAR[0], BAR[1], x0 + BAR[2], BAR[3]), fill=fg)
    return img


@check.run
def run(subjects: list[ColourSubject], report: Report, args) -> None:
    backgrounds = getattr(args, 'backgrounds', None) or common_backgrounds()
    out_dir = getattr(args, 'out_dir', None) or 'swatches'
    os.makedirs(out_dir, exist_ok=True)

    for subject in subjects:
        path = os.path.join(out_dir, f'{_safe_name(subject.name)}_swatch.png')
        render_swatch(subject, backgrounds).save(path)
        report.add(
            subject.name,
            'swatch',
            {'path': path, 'backgrounds': [bg.hex for bg in backgrounds]},
        )
