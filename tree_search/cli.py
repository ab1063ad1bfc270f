#!/usr/bin/env python3
"""
Command line interface for tree-search.
"""

# Standard Library
import argparse
import io
import logging
from dataclasses import replace
from pathlib import Path
import os
import sys
from typing import TextIO

# local repo modules
from .config import ConfigError, SearchConfig, apply_user_config, default_config, load_user_config
from .walker import WalkError, search

USAGE_OPTIONS = (
	"Options:\n"
	"    * -d    Only display directories (no files)\n"
	"    * -e    Match search-pattern exactly; no partial matches reported.\n"
	"    * -f    Only display files (no directories)\n"
	"    * -l    Set a depth limit, e.g., recurse no more than 2 directories deep.\n"
	"    * -h    Display hidden files.\n"
	"    * -H    Display help/usage information\n"
	"    * -v    Verbose logging to stderr.\n"
	"    * -c    Read default options from a JSON or YAML file.\n"
)

#============================================


class _Parser(argparse.ArgumentParser):
	"""
	ArgumentParser that raises ConfigError instead of exiting.
	"""

	def error(self, message: str):
		raise ConfigError(message)


#============================================


def _depth_limit(value: str) -> int:
	try:
		limit = int(value)
	except ValueError:
		limit = 0
	if limit <= 0:
		raise argparse.ArgumentTypeError(f"Invalid limit '{value}'; expected a positive integer")
	return limit


#============================================


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the argument parser. -h means hidden files, so help is -H.
	"""
	parser = _Parser(
		prog="tree-search",
		description="Recursively search a directory for matching names.",
		add_help=False,
	)
	parser.add_argument("-d", dest="dirs_only", action="store_true")
	parser.add_argument("-e", dest="exact_match", action="store_true")
	parser.add_argument("-f", dest="files_only", action="store_true")
	parser.add_argument("-h", dest="show_hidden", action="store_true")
	parser.add_argument("-H", dest="show_usage", action="store_true")
	parser.add_argument("-l", dest="limit", type=_depth_limit, metavar="depth-limit")
	parser.add_argument("-v", dest="verbose", action="store_true")
	parser.add_argument("-c", dest="config_path", metavar="config")
	parser.add_argument("directory", nargs="?", default=".")
	parser.add_argument("pattern", nargs="?")
	return parser


#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.

	Args:
		argv: Arguments without the program name, sys.argv[1:] by default.

	Returns:
		Parsed namespace.

	Raises:
		ConfigError: Unknown option, missing option value, or bad depth limit.
	"""
	args, extra = build_parser().parse_known_args(argv)
	if extra:
		first = extra[0]
		if first.startswith("-"):
			raise ConfigError(f"Unknown option '{first}'.")
		raise ConfigError(f"Unexpected argument '{first}'.")
	return args


#============================================


def build_config(args: argparse.Namespace) -> SearchConfig:
	"""
	Build search options from a config file and command line flags.

	Flags override values read from the config file.
	"""
	config = default_config()
	if args.config_path:
		config = apply_user_config(config, load_user_config(Path(args.config_path)))
	changes: dict = {}
	if args.pattern is not None:
		changes["pattern"] = args.pattern
	if args.dirs_only:
		changes["show_files"] = False
	if args.files_only:
		changes["show_dirs"] = False
	if args.exact_match:
		changes["exact_match"] = True
	if args.show_hidden:
		changes["show_hidden"] = True
	if args.limit is not None:
		# -l N lists N levels; level 0 holds the starting directory's entries
		changes["max_depth"] = args.limit - 1
	return replace(config, **changes)


#============================================


def print_usage(prog_name: str, stream: TextIO) -> None:
	"""
	Print help/program usage information.
	"""
	stream.write(f"Usage: {prog_name} [-defhHv] [-l depth-limit] [-c config] [directory] [search-pattern]\n")
	stream.write("\n")
	stream.write(USAGE_OPTIONS)
	stream.write("\n")


#============================================


def _passthrough_stdout() -> None:
	"""
	Let undecodable file names reach stdout as their original bytes.
	"""
	if isinstance(sys.stdout, io.TextIOWrapper):
		sys.stdout.reconfigure(errors="surrogateescape")


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.

	Returns:
		Process exit status.
	"""
	prog_name = "tree-search"
	try:
		args = parse_args(argv)
		if args.show_usage:
			print_usage(prog_name, sys.stdout)
			return 1
		config = build_config(args)
	except ConfigError as exc:
		print(f"{prog_name}: {exc}", file=sys.stderr)
		print_usage(prog_name, sys.stderr)
		return 1
	if args.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	_passthrough_stdout()
	try:
		search(config, args.directory, sys.stdout)
		sys.stdout.flush()
	except WalkError as exc:
		print(f"{prog_name}: {exc}", file=sys.stderr)
		return 1
	except BrokenPipeError:
		# reader went away; silence the flush at interpreter exit
		devnull = os.open(os.devnull, os.O_WRONLY)
		os.dup2(devnull, sys.stdout.fileno())
		os.close(devnull)
		return 1
	return 0


#============================================


if __name__ == "__main__":
	sys.exit(main())
