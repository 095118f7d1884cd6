from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


WriteFtl = Callable[[str, str], Path]


@pytest.fixture
def res_root(tmp_path: Path) -> Path:
    root = tmp_path / "res"
    root.mkdir()
    return root


@pytest.fixture
def write_ftl(res_root: Path) -> WriteFtl:
    def _write(locale: str, source: str) -> Path:
        locale_dir = res_root / locale
        locale_dir.mkdir(exist_ok=True)
        path = locale_dir / "messages.ftl"
        path.write_text(source, encoding="utf-8")
        return path

    return _write
