"""contrast-tool — WCAG contrast and accessibility checks for brand colours.

Usage: uv run contrast-tool <check> [COLOUR ...] [--palette FILE] [options]

Colours are given as `name=#RRGGBB` or bare hex (named by their hex), and/or
read from a palette file (see contrast_checker.core.palette_parser).

Checks are auto-discovered from contrast_checker/checks/.
Each check module's docstring is its documentation.
Run `contrast-tool help <check>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, contrast-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from contrast_checker import registry
from contrast_checker.core.colour import parse_hex_color
from contrast_checker.core.env import load_env, load_settings
from contrast_checker.core.palette import COLOUR_TYPES, infer_type
from contrast_checker.core.palette_parser import parse_palette_file
from contrast_checker.core.report import format_json, format_text
from contrast_checker.core.types import ColourSubject, Report


def _load_check_module(name: str) -> object:
    """Load the raw module for a check (for docstring access)."""
    return importlib.import_module(f'contrast_checker.checks.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_check_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    checks = registry.all_checks()

    epilog = (
        'Examples:\n'
        "  contrast-tool contrast '#3B82F6' --bg '#FFFFFF'\n"
        '  contrast-tool all --palette brand.palette --json\n'
        '  contrast-tool contrast --palette brand.palette --fail-under=4.5\n'
        '  contrast-tool accessibility text=#1E293B\n'
        '  contrast-tool swatch --palette brand.palette --out-dir ./tmp\n'
        '  contrast-tool help accessibility\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  CONTRAST_BACKGROUNDS=#FFFFFF,#000000   default backgrounds\n'
        '  CONTRAST_MIN_RATIO=4.5                 pass threshold for contrast\n'
        '  CONTRAST_OUT_DIR=./swatches            swatch output directory\n'
    )
    parser = argparse.ArgumentParser(
        prog='contrast-tool',
        description='WCAG contrast and accessibility checks for brand colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='check', help='Check to run')

    # Auto-register each check as a subcommand using module docstring
    for name, chk in sorted(checks.items()):
        p = sub.add_parser(name, help=_short_doc(name, chk.help))
        p.add_argument('colours', nargs='*', metavar='COLOUR', help='name=#RRGGBB or #RRGGBB')
        p.add_argument('-P', '--palette', help='Path to a palette file')
        p.add_argument(
            '-b',
            '--bg',
            action='append',
            default=None,
            metavar='HEX',
            help='Background to test against (repeatable; default from CONTRAST_BACKGROUNDS)',
        )
        p.add_argument('-t', '--type', choices=sorted(COLOUR_TYPES), help='Brand colour type for every colour')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-o', '--out-dir', default=None, help='Output directory for swatch PNGs')
        p.add_argument('-m', '--min-ratio', type=float, default=None, metavar='N', help='Pass threshold (default 4.5)')
        p.add_argument(
            '-f',
            '--fail-under',
            type=float,
            default=None,
            metavar='N',
            help='Exit 1 if any evaluated contrast ratio is below N (CI gating)',
        )

    # `help` subcommand — prints full module docstring for a check
    help_parser = sub.add_parser('help', help='Print full docs for a check')
    help_parser.add_argument('command', nargs='?', help='Check name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a check."""
    checks = registry.all_checks()

    if command is None:
        print('Available checks:\n')
        for name, chk in sorted(checks.items()):
            print(f'  {name:<14} {_short_doc(name, chk.help)}')
        print('\nRun: contrast-tool help <check> for full docs.')
        return

    if command not in checks:
        print(f'Unknown check: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(checks))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_check_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _parse_colour_arg(arg: str) -> ColourSubject:
    """Parse `name=#hex` or a bare hex colour from the command line."""
    if '=' in arg:
        name, _, value = arg.partition('=')
        name = name.strip()
        colour = parse_hex_color(value.strip())
        return ColourSubject(name=name, colour=colour, colour_type=infer_type(name))
    colour = parse_hex_color(arg)
    return ColourSubject(name=colour.hex, colour=colour)


def _load_subjects(args: argparse.Namespace) -> list[ColourSubject]:
    """Collect colours from the palette file then the command line."""
    subjects: list[ColourSubject] = []
    if args.palette:
        subjects.extend(parse_palette_file(args.palette))
    subjects.extend(_parse_colour_arg(a) for a in args.colours)

    seen: set[str] = set()
    for s in subjects:
        if s.name in seen:
            raise ValueError(f'duplicate colour name {s.name!r}')
        seen.add(s.name)
    return subjects


def _check_fail_under(report: Report, threshold: float) -> bool:
    """Return True if any recorded contrast ratio is below threshold."""
    below = [r for r in report.ratios if r < threshold]
    if below:
        print(f'\nFAIL: {len(below)} pair(s) below contrast {threshold}:1 (worst {min(below):.2f}:1)')
        return True
    return False


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'contrast-tool: loaded {env_path}', file=sys.stderr)

    if not args.check:
        parser.print_help()
        sys.exit(1)

    if args.check == 'help':
        _print_help(getattr(args, 'command', None))
        return

    try:
        settings = load_settings()
        subjects = _load_subjects(args)
        backgrounds = [parse_hex_color(h) for h in args.bg] if args.bg else settings.backgrounds
    except OSError as e:
        print(f'Error: cannot read palette: {e}', file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        # InvalidColorFormat is a ValueError
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if not subjects:
        print('Error: no colours given (pass COLOUR arguments or --palette)', file=sys.stderr)
        sys.exit(1)

    args.backgrounds = backgrounds
    if args.min_ratio is None:
        args.min_ratio = settings.min_ratio
    if args.out_dir is None:
        args.out_dir = settings.out_dir

    report = Report(palette_path=args.palette)
    for s in subjects:
        report.set_subject(s)

    registry.get(args.check).execute(subjects, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate — must happen after output so report is visible even on failure
    if args.fail_under is not None and _check_fail_under(report, args.fail_under):
        sys.exit(1)


if __name__ == '__main__':
    main()
