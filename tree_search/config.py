#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, replace
from pathlib import Path
import json

# PIP3 modules
import yaml

UNBOUNDED_DEPTH = -1

_BOOL_KEYS = ("exact_match", "show_dirs", "show_files", "show_hidden")

#============================================


class ConfigError(ValueError):
	"""
	Invalid search option or user config file.
	"""


#============================================


@dataclass(slots=True, frozen=True)
class SearchConfig:
	"""
	Options for one search run.

	Attributes:
		max_depth: Deepest level whose entries are listed, or UNBOUNDED_DEPTH.
			Level 0 is the starting directory's direct children.
		exact_match: Files must be named exactly like the pattern.
		show_dirs: Print matching directories.
		show_files: Print matching regular files.
		show_hidden: Print files whose name starts with a dot.
		pattern: Name filter; empty matches everything.
	"""
	max_depth: int = UNBOUNDED_DEPTH
	exact_match: bool = False
	show_dirs: bool = True
	show_files: bool = True
	show_hidden: bool = False
	pattern: str = ""

	def __post_init__(self) -> None:
		if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
			raise ConfigError(f"max_depth must be an integer, got {self.max_depth!r}")
		if self.max_depth < UNBOUNDED_DEPTH:
			raise ConfigError(f"max_depth must be {UNBOUNDED_DEPTH} or >= 0, got {self.max_depth}")

	#============================================
	@property
	def is_unbounded(self) -> bool:
		return self.max_depth == UNBOUNDED_DEPTH

	#============================================
	@property
	def depth_limit(self) -> int:
		"""
		Number of levels listed, as given to -l, or UNBOUNDED_DEPTH.
		"""
		if self.is_unbounded:
			return UNBOUNDED_DEPTH
		return self.max_depth + 1

	#============================================
	def describe(self) -> str:
		"""
		One-line summary of the toggles, used for diagnostic logging.

		Returns:
			Human readable option summary.
		"""
		def on_off(flag: bool) -> str:
			return "ON" if flag else "OFF"

		return (
			f"Depth limit: {self.depth_limit}; Exact match {on_off(self.exact_match)}; "
			f"Show files {on_off(self.show_files)}; Show dirs {on_off(self.show_dirs)}; "
			f"Show hidden {on_off(self.show_hidden)}"
		)


#============================================


def default_config() -> SearchConfig:
	"""
	Build the default search options.

	Returns:
		Fresh SearchConfig with unbounded depth, substring matching,
		files and directories shown, hidden files suppressed.
	"""
	return SearchConfig()


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	try:
		with config_path.open("r", encoding="utf-8") as handle:
			if config_path.suffix.lower() in {".yml", ".yaml"}:
				loaded = yaml.safe_load(handle)
			else:
				loaded = json.load(handle)
	except (OSError, yaml.YAMLError, json.JSONDecodeError) as exc:
		raise ConfigError(f"{config_path}: {exc}") from exc
	if loaded is None:
		return {}
	if not isinstance(loaded, dict):
		raise ConfigError(f"{config_path}: expected a mapping at the top level")
	return loaded


#============================================


def apply_user_config(config: SearchConfig, values: dict) -> SearchConfig:
	"""
	Overlay user config values on a SearchConfig.

	Args:
		config: Base options.
		values: Mapping loaded by load_user_config.

	Returns:
		New SearchConfig with the given keys replaced.
	"""
	changes: dict = {}
	for key, value in values.items():
		if key in _BOOL_KEYS:
			if not isinstance(value, bool):
				raise ConfigError(f"{key} must be true or false, got {value!r}")
			changes[key] = value
		elif key == "max_depth":
			changes[key] = value
		elif key == "pattern":
			changes[key] = "" if value is None else str(value)
		else:
			raise ConfigError(f"unknown config key: {key}")
	return replace(config, **changes)
