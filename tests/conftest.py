"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
	"""
	Build root/{a.txt, .hidden.txt, sub/{b.txt}} and return root.
	"""
	root = tmp_path / "root"
	sub = root / "sub"
	sub.mkdir(parents=True)
	(root / "a.txt").write_text("a", encoding="utf-8")
	(root / ".hidden.txt").write_text("h", encoding="utf-8")
	(sub / "b.txt").write_text("b", encoding="utf-8")
	return root
