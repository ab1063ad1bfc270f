"""
tree_search
===========

Recursive directory search that prints entries matching a name filter.
"""

__all__ = [
	"classifier",
	"cli",
	"config",
	"walker",
]
