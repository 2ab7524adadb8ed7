from __future__ import annotations

from typing import Dict

from .model import ScanSummary, StructureNode, StructureSummary


def count_pre_configured(node: StructureNode) -> int:
	# Directories matched by the directory table count as well as files
	return sum(1 for n in node.iter_nodes() if n.is_pre_configured)


def source_breakdown(node: StructureNode) -> Dict[str, int]:
	breakdown: Dict[str, int] = {}
	for n in node.iter_nodes():
		if n.source:
			key = getattr(n.source, "value", n.source)
			breakdown[key] = breakdown.get(key, 0) + 1
	return breakdown


def summarize_structure(node: StructureNode) -> StructureSummary:
	return StructureSummary(
		total_pre_configured_files=count_pre_configured(node),
		source_breakdown=source_breakdown(node),
	)


def summarize_scan(node: StructureNode) -> ScanSummary:
	files = [n for n in node.iter_nodes() if not n.is_directory]
	return ScanSummary(
		total_files=len(files),
		total_imports=sum(len(f.imports or []) for f in files),
		total_exports=sum(len(f.exports or []) for f in files),
		total_components=sum(len(f.components or []) for f in files),
	)
