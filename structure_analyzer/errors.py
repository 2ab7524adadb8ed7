from __future__ import annotations


class AnalyzerError(Exception):
	"""Base class for analyzer failures."""


class RootNotFoundError(AnalyzerError):
	def __init__(self, root: str):
		super().__init__(f"Invalid root path: {root}")
		self.root = root
