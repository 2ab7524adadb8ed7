from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from .errors import RootNotFoundError
from .model import StructureNode

logger = logging.getLogger(__name__)


DEPENDENCY_DIRS = {"node_modules"}

FileVisitor = Callable[[str, str], Optional[StructureNode]]
DirVisitor = Callable[[StructureNode, str], None]


def is_skipped_dir(name: str) -> bool:
	return name.startswith(".") or name in DEPENDENCY_DIRS


def to_rel_path(parent_rel: str, name: str) -> str:
	# Always "/"-separated so pattern tables match on every platform
	return f"{parent_rel}/{name}" if parent_rel else name


def _walk(path: str, rel_path: str, visit_file: FileVisitor, visit_dir: Optional[DirVisitor]) -> StructureNode:
	node = StructureNode(name=os.path.basename(path), type="directory", children=[])
	if visit_dir is not None:
		visit_dir(node, rel_path)

	with os.scandir(path) as it:
		entries = sorted(it, key=lambda e: e.name)

	for entry in entries:
		entry_rel = to_rel_path(rel_path, entry.name)
		if entry.is_dir():
			if is_skipped_dir(entry.name):
				logger.debug("Skipping directory %s", entry_rel)
				continue
			node.children.append(_walk(entry.path, entry_rel, visit_file, visit_dir))
		elif entry.is_file():
			child = visit_file(entry.path, entry_rel)
			if child is not None:
				node.children.append(child)
		else:
			logger.debug("Ignoring non-regular entry %s", entry_rel)
	return node


def walk_tree(root: str, visit_file: FileVisitor, visit_dir: Optional[DirVisitor] = None) -> StructureNode:
	"""Build the nested directory tree under root.

	visit_file returns the node for a regular file, or None to leave it out.
	visit_dir may annotate each directory node in place.
	"""
	root = os.path.abspath(root)
	if not os.path.isdir(root):
		raise RootNotFoundError(root)
	logger.debug("Walking %s", root)
	return _walk(root, "", visit_file, visit_dir)
