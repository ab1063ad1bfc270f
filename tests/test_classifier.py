#!/usr/bin/env python3
"""
Tests for per-entry print/recurse decisions.
"""

import os
from pathlib import Path

import pytest

from tree_search.classifier import Decision, EntryType, classify, entry_type_of
from tree_search.config import SearchConfig


def test_directory_always_recurses():
	cfg = SearchConfig(pattern="nomatch")
	decision = classify(cfg, "src", EntryType.DIRECTORY)
	assert decision == Decision(print=False, recurse=True)


def test_directory_printed_on_substring():
	cfg = SearchConfig(pattern="rc")
	assert classify(cfg, "src", EntryType.DIRECTORY).print is True


def test_directory_ignores_exact_match():
	cfg = SearchConfig(pattern="sr", exact_match=True)
	assert classify(cfg, "src", EntryType.DIRECTORY).print is True


def test_hidden_directory_is_printed():
	cfg = SearchConfig(show_hidden=False)
	assert classify(cfg, ".git", EntryType.DIRECTORY) == Decision(print=True, recurse=True)


def test_directory_not_printed_when_dirs_hidden():
	cfg = SearchConfig(show_dirs=False)
	assert classify(cfg, "src", EntryType.DIRECTORY) == Decision(print=False, recurse=True)


def test_file_never_recurses():
	assert classify(SearchConfig(), "a.txt", EntryType.FILE) == Decision(print=True, recurse=False)


def test_hidden_file_suppressed_by_default():
	assert classify(SearchConfig(), ".bashrc", EntryType.FILE).print is False


def test_hidden_file_shown_with_show_hidden():
	cfg = SearchConfig(show_hidden=True)
	assert classify(cfg, ".bashrc", EntryType.FILE).print is True


def test_files_suppressed():
	cfg = SearchConfig(show_files=False)
	assert classify(cfg, "a.txt", EntryType.FILE).print is False


@pytest.mark.parametrize(
	"name, expected",
	[
		("foo", True),
		("foobar", False),
		("xfoo", False),
	],
)
def test_exact_match_files(name: str, expected: bool):
	cfg = SearchConfig(pattern="foo", exact_match=True)
	assert classify(cfg, name, EntryType.FILE).print is expected


def test_substring_match_files():
	cfg = SearchConfig(pattern="foo")
	assert classify(cfg, "foobar", EntryType.FILE).print is True
	assert classify(cfg, "bar", EntryType.FILE).print is False


def test_exact_match_with_empty_pattern_prints_no_files():
	cfg = SearchConfig(exact_match=True)
	assert classify(cfg, "a.txt", EntryType.FILE).print is False


def test_other_entries_skipped():
	cfg = SearchConfig(show_hidden=True)
	assert classify(cfg, "link", EntryType.OTHER) == Decision(print=False, recurse=False)


def test_entry_type_of(tmp_path: Path):
	(tmp_path / "dir").mkdir()
	(tmp_path / "file").write_text("x", encoding="utf-8")
	os.symlink(tmp_path / "dir", tmp_path / "link")
	with os.scandir(tmp_path) as entries:
		types = {entry.name: entry_type_of(entry) for entry in entries}
	assert types == {
		"dir": EntryType.DIRECTORY,
		"file": EntryType.FILE,
		"link": EntryType.OTHER,
	}
