from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import List, Literal, Optional

from .classify import classify_tree
from .model import AnalysisReport, StructureNode
from .source_scan import scan_tree
from .summarize import summarize_scan, summarize_structure

logger = logging.getLogger(__name__)

Mode = Literal["classify", "scan"]

REPORT_PREFIXES = {
	"classify": "project-structure-simple",
	"scan": "project-structure",
}


def _node_line(node: StructureNode, indent: str, mode: Mode) -> str:
	icon = "📁" if node.is_directory else "📄"
	line = f"{indent}{icon} {node.name}"
	if mode == "classify":
		if node.is_pre_configured:
			line += " [⚙️ Pre-configured]"
		if node.config_type:
			line += f" ({node.config_type})"
		if node.source:
			line += f" [{getattr(node.source, 'value', node.source)}]"
	return line


def format_tree(node: StructureNode, mode: Mode = "classify", level: int = 0) -> List[str]:
	indent = "  " * level
	lines = [_node_line(node, indent, mode)]

	if mode == "scan" and not node.is_directory:
		for label, items in (("Imports", node.imports), ("Exports", node.exports), ("Components", node.components)):
			if items:
				lines.append(f"{indent}  {label}:")
				lines.extend(f"{indent}    - {item}" for item in items)

	for child in node.children or []:
		lines.extend(format_tree(child, mode, level + 1))
	return lines


def print_tree(node: StructureNode, mode: Mode = "classify") -> None:
	for line in format_tree(node, mode):
		print(line)


def iso_timestamp(now: Optional[datetime] = None) -> str:
	now = now or datetime.now(timezone.utc)
	return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def report_filename(mode: Mode, timestamp: str) -> str:
	safe = timestamp.replace(":", "-").replace(".", "-")
	return f"{REPORT_PREFIXES[mode]}-{safe}.json"


def build_report(structure: StructureNode, mode: Mode, timestamp: Optional[str] = None) -> AnalysisReport:
	summary = summarize_structure(structure) if mode == "classify" else summarize_scan(structure)
	return AnalysisReport(timestamp=timestamp or iso_timestamp(), structure=structure, summary=summary)


def save_report(report: AnalysisReport, output_path: str) -> str:
	output_dir = os.path.dirname(output_path)
	if output_dir:
		os.makedirs(output_dir, exist_ok=True)
	with open(output_path, "w", encoding="utf-8") as fh:
		json.dump(report.to_json_dict(), fh, indent=2, ensure_ascii=False)
	logger.debug("Wrote report to %s", output_path)
	print(f"\nProject structure has been saved to: {output_path}")
	return output_path


ANALYZERS = {
	"classify": classify_tree,
	"scan": scan_tree,
}


def analyze(root: str, mode: Mode, timestamp: Optional[str] = None) -> AnalysisReport:
	structure = ANALYZERS[mode](root)
	return build_report(structure, mode, timestamp)
