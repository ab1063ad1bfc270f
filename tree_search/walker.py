#!/usr/bin/env python3
"""
Depth-first directory walker that prints matching entries.
"""

from __future__ import annotations

# Standard Library
import enum
import logging
import os
import sys
from typing import TextIO

# local repo modules
from .classifier import classify, entry_type_of
from .config import SearchConfig

logger = logging.getLogger(__name__)

#============================================


class OnError(enum.Enum):
	"""
	Policy for subdirectories that cannot be listed.
	"""

	SKIP = "skip"
	ABORT = "abort"


#============================================


class WalkError(Exception):
	"""
	A directory could not be opened or listed.
	"""

	def __init__(self, path: str, error: OSError) -> None:
		self.path = path
		self.error = error
		super().__init__(path, error)

	def __str__(self) -> str:
		reason = self.error.strerror or str(self.error)
		return f"{self.path}: {reason}"


#============================================


def _unreadable(path: str, exc: OSError, fatal: bool) -> None:
	if fatal:
		raise WalkError(path, exc) from exc
	logger.warning("Skipping %s: %s", path, exc.strerror or exc)


#============================================


def _open_listing(path: str, fatal: bool):
	try:
		return os.scandir(path)
	except OSError as exc:
		_unreadable(path, exc, fatal)
	return None


#============================================


def walk(
	config: SearchConfig,
	directory: str,
	sink: TextIO,
	on_error: OnError = OnError.SKIP,
) -> int:
	"""
	List a directory, print matching entries and descend into subdirectories.

	Entries of every listed directory are printed when eligible; the walk
	only descends while depth is below config.max_depth. Pending listings
	are kept on an explicit stack, so tree depth is not limited by the
	interpreter's recursion limit. Output is in pre-order.

	Args:
		config: Active search options.
		directory: Directory path as given, never resolved.
		sink: Stream receiving one matched path per line.
		on_error: What to do when a nested directory cannot be listed.

	Returns:
		Number of paths written to sink.

	Raises:
		WalkError: The starting directory cannot be listed, or a nested one
			cannot be listed and on_error is ABORT.
	"""
	abort = on_error is OnError.ABORT
	printed = 0
	# (path, depth of its entries, open scandir iterator)
	stack = [(directory, 0, _open_listing(directory, fatal=True))]
	try:
		while stack:
			path, depth, entries = stack[-1]
			try:
				entry = next(entries, None)
			except OSError as exc:
				stack.pop()
				entries.close()
				_unreadable(path, exc, fatal=abort or depth == 0)
				continue
			if entry is None:
				stack.pop()
				entries.close()
				continue
			child = path + os.sep + entry.name
			decision = classify(config, entry.name, entry_type_of(entry))
			if decision.print:
				sink.write(child + "\n")
				printed += 1
			if decision.recurse and (config.is_unbounded or depth < config.max_depth):
				listing = _open_listing(child, fatal=abort)
				if listing is not None:
					stack.append((child, depth + 1, listing))
	finally:
		for _path, _depth, entries in stack:
			entries.close()
	return printed


#============================================


def search(
	config: SearchConfig,
	directory: str = ".",
	sink: TextIO | None = None,
	on_error: OnError = OnError.SKIP,
) -> int:
	"""
	Run a full search from a starting directory.

	Args:
		config: Active search options.
		directory: Starting directory.
		sink: Output stream, sys.stdout by default.
		on_error: Policy for unreadable nested directories.

	Returns:
		Number of matched paths printed.
	"""
	if sink is None:
		sink = sys.stdout
	logger.info("Starting search. Directory: %s; Search pattern: %s", directory, config.pattern)
	logger.info(config.describe())
	printed = walk(config, directory, sink, on_error)
	logger.info("Search finished: %d matches", printed)
	return printed
