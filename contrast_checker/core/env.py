"""Environment and settings loading for contrast-tool.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read from the environment after loading:
  CONTRAST_BACKGROUNDS  comma-separated hex backgrounds (default: white,
                        slate-50, black, slate-800)
  CONTRAST_MIN_RATIO    minimum ratio for a pair to pass (default 4.5)
  CONTRAST_OUT_DIR      where the swatch check writes PNGs (default ./swatches)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from contrast_checker.core.colour import Color, parse_hex_color
from contrast_checker.core.contrast import AA_NORMAL
from contrast_checker.core.palette import COMMON_BACKGROUNDS

ENV_BACKGROUNDS = 'CONTRAST_BACKGROUNDS'
ENV_MIN_RATIO = 'CONTRAST_MIN_RATIO'
ENV_OUT_DIR = 'CONTRAST_OUT_DIR'


@dataclass
class Settings:
    backgrounds: list[Color] = field(default_factory=lambda: [parse_hex_color(h) for h in COMMON_BACKGROUNDS])
    min_ratio: float = AA_NORMAL
    out_dir: str = 'swatches'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings() -> Settings:
    """Build Settings from the current environment.

    Raises InvalidColorFormat for a bad background and ValueError for a
    non-numeric minimum ratio.
    """
    settings = Settings()

    raw_bgs = os.environ.get(ENV_BACKGROUNDS, '').strip()
    if raw_bgs:
        settings.backgrounds = [parse_hex_color(h.strip()) for h in raw_bgs.split(',') if h.strip()]

    raw_min = os.environ.get(ENV_MIN_RATIO, '').strip()
    if raw_min:
        try:
            settings.min_ratio = float(raw_min)
        except ValueError:
            raise ValueError(f'{ENV_MIN_RATIO} must be a number, got {raw_min!r}') from None

    out_dir = os.environ.get(ENV_OUT_DIR, '').strip()
    if out_dir:
        settings.out_dir = out_dir

    return settings
