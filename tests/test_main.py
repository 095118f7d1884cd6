from __future__ import annotations

from pathlib import Path

import pytest

from exif_paranoia.core.config import Settings
from exif_paranoia.main import build_parser, main


@pytest.fixture
def settings(res_root: Path, write_ftl) -> Settings:
    write_ftl("en", "blank-slate-drag-here = Drop here\nblank-slate-select-folder = or pick a folder\n")
    write_ftl("fr", "blank-slate-drag-here = Déposez ici\nblank-slate-select-folder = ou choisissez\n")
    return Settings(_env_file=None, RESOURCES_DIR=str(res_root), DEBUG=False, LOG_FILE=False)


def test_renders_requested_locale(settings: Settings, capsys: pytest.CaptureFixture) -> None:
    assert main(["--locale", "fr-CA"], settings=settings) == 0

    out = capsys.readouterr().out
    assert 'lang="fr"' in out
    assert "Déposez ici" in out


def test_settings_override_used_without_flag(res_root: Path, write_ftl, capsys: pytest.CaptureFixture) -> None:
    write_ftl("en", "blank-slate-drag-here = Drop here\nblank-slate-select-folder = or pick\n")
    write_ftl("fr", "blank-slate-drag-here = Déposez ici\nblank-slate-select-folder = ou choisissez\n")
    settings = Settings(_env_file=None, RESOURCES_DIR=str(res_root), LOCALE="fr", THEME="light")

    assert main([], settings=settings) == 0

    out = capsys.readouterr().out
    assert 'lang="fr"' in out
    assert "classList.add('light')" in out


def test_unknown_locale_falls_back_to_default(settings: Settings, capsys: pytest.CaptureFixture) -> None:
    assert main(["-l", "ja", "--dark-theme"], settings=settings) == 0

    out = capsys.readouterr().out
    assert 'lang="en"' in out
    assert "Drop here" in out
    assert "classList.add('dark')" in out


def test_writes_output_file(settings: Settings, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    target = tmp_path / "page.html"
    assert main(["-l", "en", "-o", str(target)], settings=settings) == 0

    assert capsys.readouterr().out == ""
    assert "Drop here" in target.read_text(encoding="utf-8")


def test_broken_resource_exits_with_diagnostic(res_root: Path, write_ftl, capsys: pytest.CaptureFixture) -> None:
    path = write_ftl("en", "blank-slate-drag-here\n")
    settings = Settings(_env_file=None, RESOURCES_DIR=str(res_root))

    assert main(["-l", "en"], settings=settings) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Failed to parse Fluent resource: {path}" in captured.err
    assert "1:" in captured.err


def test_theme_flags_are_exclusive() -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--light-theme", "--dark-theme"])
    assert excinfo.value.code == 2


def test_invalid_locale_flag_rejected(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--locale", "not a locale"])
    assert excinfo.value.code == 2
    assert "Invalid locale identifier" in capsys.readouterr().err
