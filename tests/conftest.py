from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from stencil.package_manager import USER_AGENT_ENV  # noqa: E402


@pytest.fixture(autouse=True)
def clear_user_agent(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the invoking package manager from leaking into assertions."""

    monkeypatch.delenv(USER_AGENT_ENV, raising=False)


@pytest.fixture()
def template_tree(tmp_path: Path) -> Path:
    root = tmp_path / "template"
    (root / "docs").mkdir(parents=True)
    (root / "a.tmpl").write_text("Hello {{who}}", encoding="utf-8")
    (root / "b.txt").write_bytes(b"\x00\xff\x10binary {{ who }}\r\n")
    (root / "docs" / "guide.md.tmpl").write_text("# {{ title }}\n", encoding="utf-8")
    return root
