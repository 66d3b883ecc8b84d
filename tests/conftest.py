from __future__ import annotations

from pathlib import Path

import pytest

from repofeed.channels.bundle import Channels


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    return path


@pytest.fixture
def channels() -> Channels:
    return Channels()


@pytest.fixture
def sample_repo(tmp_path: Path) -> Path:
    """A root with one real file, one empty file and git metadata."""
    root = tmp_path / 'repo'
    root.mkdir()
    _write(root / 'a.txt', 'hello')
    _write(root / 'empty.txt', '')
    _write(root / '.git' / 'config', '[core]\n')
    return root
