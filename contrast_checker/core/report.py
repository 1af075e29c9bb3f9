"""Report builder — text and JSON output for contrast-tool results."""

import json
import os
from typing import Any

from contrast_checker.core.types import Report


def _mark(passed: bool) -> str:
    return '✓' if passed else '✗'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = 'contrast-tool'
    if report.palette_path:
        header += f': {os.path.basename(report.palette_path)}'
    header += f' ({len(report.subjects)} colours)'
    lines.append(header)
    lines.append('')

    for name, entry in report.subjects.items():
        title = f'── {name} {entry.get("hex") or ""}'.rstrip()
        if entry.get('type'):
            title += f' [{entry["type"]}]'
        lines.append(title)

        for check_name, data in entry.get('checks', {}).items():
            if check_name == 'contrast' and 'pairs' in data:
                for pair in data['pairs']:
                    lines.append(
                        f'  on {pair["background"]}: {pair["ratio"]:.2f}:1  {pair["level"]}  {_mark(pair["pass"])}'
                    )
            elif check_name == 'ratios' and 'ratios' in data:
                parts = [f'{r["background"]} {r["ratio"]:.2f} {r["level"]}' for r in data['ratios']]
                lines.append(f'  ratios: {", ".join(parts)}')
            elif check_name == 'accessibility' and 'profile' in data:
                p = data['profile']
                lines.append(
                    f'  white {p["contrast_ratio_normal"]:.2f}  black {p["contrast_ratio_dark"]:.2f}'
                    f'  gray {p["contrast_ratio_gray"]:.2f}'
                    f'  AA {_mark(p["wcag_aa_pass"])}  AAA {_mark(p["wcag_aaa_pass"])}'
                )
                for note in p['suitability']:
                    lines.append(f'  - {note}')
            elif check_name == 'convert' and 'hsl' in data:
                rgb = data['rgb']
                hsl = data['hsl']
                lines.append(
                    f'  rgb({rgb["red"]}, {rgb["green"]}, {rgb["blue"]})'
                    f'  hsl({hsl["hue"]}, {hsl["saturation"]}%, {hsl["lightness"]}%)'
                )
            elif check_name == 'matrix' and 'row' in data:
                parts = [f'{other}:{ratio:.2f}' for other, ratio in data['row'].items() if other != name]
                lines.append(f'  matrix: {", ".join(parts)}')
            elif check_name == 'swatch' and 'path' in data:
                lines.append(f'  swatch: {data["path"]}')
            else:
                # Generic fallback
                for k, v in data.items():
                    lines.append(f'  {check_name}.{k}: {v}')

        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} pairs  FAIL {report.fail_count}/{total} pairs')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if report.palette_path:
        obj['palette'] = report.palette_path

    obj['colours'] = []
    for name, entry in report.subjects.items():
        obj['colours'].append(
            {
                'name': name,
                'hex': entry.get('hex'),
                'type': entry.get('type'),
                'checks': entry.get('checks', {}),
            }
        )

    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
    }
    return json.dumps(obj, indent=2)
