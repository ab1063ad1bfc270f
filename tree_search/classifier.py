#!/usr/bin/env python3
"""
Per-entry print/recurse decisions.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
import enum
import os

# local repo modules
from .config import SearchConfig

#============================================


class EntryType(enum.Enum):
	DIRECTORY = "directory"
	FILE = "file"
	OTHER = "other"


#============================================


@dataclass(slots=True, frozen=True)
class Decision:
	"""
	What the walker should do with one entry.
	"""

	print: bool
	recurse: bool


SKIP = Decision(print=False, recurse=False)

#============================================


def entry_type_of(entry: os.DirEntry) -> EntryType:
	"""
	Map a scandir entry to an EntryType without following symlinks.

	Args:
		entry: Entry from os.scandir.

	Returns:
		DIRECTORY, FILE, or OTHER for links, sockets, devices and fifos.
	"""
	try:
		if entry.is_dir(follow_symlinks=False):
			return EntryType.DIRECTORY
		if entry.is_file(follow_symlinks=False):
			return EntryType.FILE
	except OSError:
		# entry vanished or cannot be stat'ed
		return EntryType.OTHER
	return EntryType.OTHER


#============================================


def classify(config: SearchConfig, name: str, entry_type: EntryType) -> Decision:
	"""
	Decide whether an entry is printed and whether the walker descends into it.

	Directories are matched by substring only and are never hidden; the
	depth bound is enforced by the walker, not here.

	Args:
		config: Active search options.
		name: Entry base name, never "." or "..".
		entry_type: Type of the entry.

	Returns:
		Decision for the entry.
	"""
	if entry_type is EntryType.DIRECTORY:
		return Decision(print=config.show_dirs and config.pattern in name, recurse=True)
	if entry_type is not EntryType.FILE:
		return SKIP
	if not config.show_files:
		return SKIP
	if not config.show_hidden and name.startswith("."):
		return SKIP
	if config.exact_match:
		return Decision(print=name == config.pattern, recurse=False)
	return Decision(print=config.pattern in name, recurse=False)
