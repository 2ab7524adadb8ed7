"""Project structure analyzer: walks a directory tree and reports on it.

Modules:
- fs_scan.py: Recursive directory walk shared by both analyzers.
- classify.py: Tags known configuration files and directories.
- source_scan.py: Lexical scan of source files for imports, re-exports and components.
- summarize.py: Summary counts for reports.
- report.py: Console tree view and timestamped JSON reports.
- model.py: Node and report types.
"""

__all__ = [
	"fs_scan",
	"classify",
	"source_scan",
	"summarize",
	"report",
	"model",
	"errors",
]
