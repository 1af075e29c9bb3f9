"""End-to-end tests for the contrast-tool CLI (contrast_checker.__main__.main)."""

import json
import os
from pathlib import Path

import pytest
from contrast_checker.__main__ import main
from contrast_checker.core.env import ENV_BACKGROUNDS, ENV_MIN_RATIO, ENV_OUT_DIR


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty repo root so no stray .env or settings leak in."""
    monkeypatch.setattr(os, 'environ', os.environ.copy())
    for key in (ENV_BACKGROUNDS, ENV_MIN_RATIO, ENV_OUT_DIR):
        os.environ.pop(key, None)
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestContrastCommand:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['contrast', '#000000', '--bg', '#FFFFFF', '--json'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['colours'][0]['name'] == '#000000'
        pair = obj['colours'][0]['checks']['contrast']['pairs'][0]
        assert pair['ratio'] == 21.0
        assert pair['level'] == 'AAA'
        assert obj['summary'] == {'total': 1, 'pass': 1, 'fail': 0}

    def test_named_colour_gets_type(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['contrast', 'primary-hover=#1D4ED8', '-b', 'FFFFFF'])
        out = capsys.readouterr().out
        assert '── primary-hover #1D4ED8 [primary]' in out

    def test_fail_under_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['contrast', '#777777', '--bg', '#FFFFFF', '--fail-under', '4.5'])
        assert exc.value.code == 1
        out = capsys.readouterr().out
        # report is still printed before the gate
        assert '#777777' in out
        assert 'FAIL: 1 pair(s) below contrast 4.5:1' in out

    def test_fail_under_passes(self) -> None:
        main(['contrast', '#767676', '--bg', '#FFFFFF', '--fail-under', '4.5'])

    def test_backgrounds_from_dotenv(self, isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (isolated / '.env').write_text('CONTRAST_BACKGROUNDS=#000000\n')
        main(['contrast', '#FFFFFF', '--json'])
        captured = capsys.readouterr()
        assert 'contrast-tool: loaded' in captured.err
        pairs = json.loads(captured.out)['colours'][0]['checks']['contrast']['pairs']
        assert [p['background'] for p in pairs] == ['#000000']


class TestPaletteInput:
    def test_palette_file(self, isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
        palette = isolated / 'brand.palette'
        palette.write_text('primary = #3B82F6\ntext = #1E293B\n')
        main(['all', '--palette', str(palette), '--json'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['palette'] == str(palette)
        assert [c['name'] for c in obj['colours']] == ['primary', 'text']
        assert 'matrix' in obj['colours'][0]['checks']

    def test_missing_palette(self, isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['contrast', '--palette', str(isolated / 'missing.palette')])
        assert exc.value.code == 1
        assert 'cannot read palette' in capsys.readouterr().err

    def test_duplicate_names(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(['convert', '#FFFFFF', 'ffffff'])
        assert 'duplicate colour name' in capsys.readouterr().err


class TestErrors:
    @pytest.mark.parametrize('value', ['notacolor', '#12345'])
    def test_invalid_colour(self, value: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['contrast', value])
        assert exc.value.code == 1
        assert 'Error: invalid colour' in capsys.readouterr().err

    def test_invalid_background(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(['contrast', '#000000', '--bg', 'white'])
        assert 'Error:' in capsys.readouterr().err

    def test_no_colours(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(['convert'])
        assert 'no colours given' in capsys.readouterr().err

    def test_no_check(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1


class TestHelp:
    def test_lists_checks(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help'])
        out = capsys.readouterr().out
        assert 'Available checks' in out
        assert 'accessibility' in out
        assert 'swatch' in out

    def test_check_docs(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help', 'contrast'])
        assert capsys.readouterr().out.startswith('WCAG contrast of each colour')

    def test_unknown(self) -> None:
        with pytest.raises(SystemExit):
            main(['help', 'nope'])


class TestSwatchCommand:
    def test_out_dir(self, isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out_dir = isolated / 'out'
        main(['swatch', 'accent=#F59E0B', '--out-dir', str(out_dir)])
        assert (out_dir / 'accent_swatch.png').exists()
        assert 'swatch:' in capsys.readouterr().out
