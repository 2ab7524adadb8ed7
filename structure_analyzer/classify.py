from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .fs_scan import walk_tree
from .model import ConfigEntry, ConfigSource, StructureNode


PRE_CONFIGURED_FILES: Dict[str, ConfigEntry] = {
	"package.json": ConfigEntry(type="Project Configuration", source=ConfigSource.SYSTEM),
	"tsconfig.json": ConfigEntry(type="TypeScript Configuration", source=ConfigSource.SYSTEM),
	"tailwind.config.ts": ConfigEntry(type="Tailwind Configuration", source=ConfigSource.SYSTEM),
	"postcss.config.js": ConfigEntry(type="PostCSS Configuration", source=ConfigSource.SYSTEM),
	"vite.config.ts": ConfigEntry(type="Vite Configuration", source=ConfigSource.VITE),
	"eslint.config.js": ConfigEntry(type="ESLint Configuration", source=ConfigSource.SYSTEM),
	".gitignore": ConfigEntry(type="Git Configuration", source=ConfigSource.SYSTEM),
	"components.json": ConfigEntry(type="UI Components Configuration", source=ConfigSource.SHADCN),
	"index.html": ConfigEntry(type="Vite Entry Point", source=ConfigSource.VITE),
	"tsconfig.app.json": ConfigEntry(type="TypeScript App Configuration", source=ConfigSource.SYSTEM),
	"tsconfig.node.json": ConfigEntry(type="TypeScript Node Configuration", source=ConfigSource.SYSTEM),
}

# Checked in order; the first substring found in a directory's relative path wins.
PRE_CONFIGURED_DIRS: List[Tuple[str, ConfigEntry]] = [
	("components/ui", ConfigEntry(type="shadcn UI Component Library", source=ConfigSource.SHADCN)),
	("lib/utils", ConfigEntry(type="Utility Functions", source=ConfigSource.SHADCN)),
	("hooks", ConfigEntry(type="React Hooks Library", source=ConfigSource.CUSTOM)),
	("public", ConfigEntry(type="Static Assets", source=ConfigSource.VITE)),
]

UI_COMPONENT_DIR = "components/ui/"
UI_COMPONENT_EXTENSIONS = (".tsx", ".ts")
UI_COMPONENT_ENTRY = ConfigEntry(type="UI Component", source=ConfigSource.SHADCN)


def match_directory(rel_path: str) -> Optional[ConfigEntry]:
	for pattern, entry in PRE_CONFIGURED_DIRS:
		if pattern in rel_path:
			return entry
	return None


def is_ui_component_file(rel_path: str) -> bool:
	return UI_COMPONENT_DIR in rel_path and rel_path.endswith(UI_COMPONENT_EXTENSIONS)


def classify_file(rel_path: str) -> StructureNode:
	name = rel_path.rsplit("/", 1)[-1]
	entry = PRE_CONFIGURED_FILES.get(name)
	if entry is None and is_ui_component_file(rel_path):
		entry = UI_COMPONENT_ENTRY
	if entry is None:
		return StructureNode(name=name, type="file", is_pre_configured=False)
	return StructureNode(
		name=name,
		type="file",
		is_pre_configured=True,
		config_type=entry.type,
		source=entry.source,
	)


def _annotate_directory(node: StructureNode, rel_path: str) -> None:
	entry = match_directory(rel_path)
	if entry is not None:
		node.is_pre_configured = True
		node.config_type = entry.type
		node.source = entry.source


def classify_tree(root: str) -> StructureNode:
	return walk_tree(
		root,
		visit_file=lambda path, rel_path: classify_file(rel_path),
		visit_dir=_annotate_directory,
	)
