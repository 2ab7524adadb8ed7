from __future__ import annotations

import ast
import logging
import os
import re
from typing import Dict, List, Optional

from .fs_scan import walk_tree
from .model import SourceFacts, StructureNode

logger = logging.getLogger(__name__)


SCANNED_EXTENSIONS: Dict[str, str] = {
	".ts": "typescript",
	".tsx": "typescript",
	".js": "javascript",
	".jsx": "javascript",
	".mjs": "javascript",
	".cjs": "javascript",
	".py": "python",
}

# String literals are matched first so comment markers inside them are left alone.
# A slash starts a regex literal only after a token that cannot end an operand.
_LEXEME_RE = re.compile(
	r"""("(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'|`(?:\\.|[^`\\])*`)"""
	r"""|(//[^\n]*|/\*.*?\*/)"""
	r"""|((?:^|[=(,:\[!&|?{};]|\breturn)[ \t]*)(/(?![/*])(?:\\.|\[(?:\\.|[^\]\\\n])*\]|[^/\\\n\[])+/[A-Za-z]*)""",
	re.DOTALL | re.MULTILINE,
)

_IMPORT_RE = re.compile(
	r"""(?:^|;)[ \t]*import\s+(?:type\s+)?(?:[\w$*{}\s,]+?\bfrom\s*)?(['"])(.+?)\1""",
	re.MULTILINE,
)
_REEXPORT_RE = re.compile(
	r"""(?:^|;)[ \t]*export\s+(?:type\s+)?(?:\*(?:\s*as\s+[\w$]+)?|\{[^}]*\})\s*from\s*(['"])(.+?)\1""",
	re.MULTILINE,
)
_DECLARATION_RE = re.compile(
	r"(?<![\w$.])(?P<kw>function|class|const|let|var)\b\s*(?:\*\s*)?(?P<name>[A-Za-z_$][\w$]*)"
)
# A further declarator after a comma: "const A = 1, B = 2"
_DECLARATOR_RE = re.compile(r"\s*([A-Za-z_$][\w$]*)[?!]?[ \t]*(?=[=:,;\n]|$)")
_VARIABLE_KEYWORDS = {"const", "let", "var"}

_OPENERS = "{(["
_CLOSERS = "})]"


def detect_language(filename: str) -> Optional[str]:
	_, ext = os.path.splitext(filename)
	return SCANNED_EXTENSIONS.get(ext.lower())


def is_component_name(name: str) -> bool:
	return bool(name) and "A" <= name[0] <= "Z"


def _blank(text: str) -> str:
	return re.sub(r"[^\n]", " ", text)


def strip_comments(text: str) -> str:
	def repl(m: re.Match) -> str:
		if m.group(2) is not None:
			return _blank(m.group(2))
		return m.group(0)

	return _LEXEME_RE.sub(repl, text)


def _blank_literals(text: str) -> str:
	# Keeps offsets stable; only the delimiters of each literal survive
	def repl(m: re.Match) -> str:
		if m.group(1) is not None:
			lit = m.group(1)
			return lit[0] + _blank(lit[1:-1]) + lit[-1]
		if m.group(2) is not None:
			return _blank(m.group(2))
		lit = m.group(4)
		end = lit.rindex("/")
		return m.group(3) + "/" + _blank(lit[1:end]) + lit[end:]

	return _LEXEME_RE.sub(repl, text)


def _more_declarators(code: str, pos: int) -> List[str]:
	"""Names of the declarators following the first one in a const/let/var list."""
	names: List[str] = []
	depth = 0
	last = ""
	i = pos
	while i < len(code):
		ch = code[i]
		if ch in _OPENERS:
			depth += 1
		elif ch in _CLOSERS:
			if depth == 0:
				break
			depth -= 1
		elif depth == 0:
			if ch == ";" or (ch == "\n" and last not in ("=", ",")):
				break
			if ch == ",":
				m = _DECLARATOR_RE.match(code, i + 1)
				if m:
					names.append(m.group(1))
					last = m.group(1)[-1]
					i = m.end(1)
					continue
		if not ch.isspace():
			last = ch
		i += 1
	return names


def _top_level_declarations(code: str) -> List[str]:
	names: List[str] = []
	depth = 0
	cursor = 0
	for match in _DECLARATION_RE.finditer(code):
		for ch in code[cursor:match.start()]:
			if ch in _OPENERS:
				depth += 1
			elif ch in _CLOSERS:
				depth = max(depth - 1, 0)
		cursor = match.start()
		if depth != 0:
			continue
		declared = [match.group("name")]
		if match.group("kw") in _VARIABLE_KEYWORDS:
			declared.extend(_more_declarators(code, match.end()))
		names.extend(n for n in declared if is_component_name(n))
	return names


def scan_script(path: str, text: str, language: str = "typescript") -> SourceFacts:
	"""Lexically scan TypeScript/JavaScript source.

	Imports and re-exports are the module specifiers of import and
	``export ... from`` statements, in source order. Components are the
	capitalized names declared by function/class/const/let/var outside any
	block, call or literal, one per declarator. Class declarations count as
	components too, unlike a function/variable-only reading of "component".
	"""
	code = strip_comments(text)
	imports = [m.group(2) for m in _IMPORT_RE.finditer(code)]
	exports = [m.group(2) for m in _REEXPORT_RE.finditer(code)]
	components = _top_level_declarations(_blank_literals(text))
	return SourceFacts(path=path, language=language, imports=imports, exports=exports, components=components)


def _import_from_target(node: ast.ImportFrom) -> str:
	return "." * (node.level or 0) + (node.module or "")


def _assigned_names(node: ast.AST) -> List[str]:
	targets: List[ast.AST] = []
	if isinstance(node, ast.Assign):
		targets = list(node.targets)
	elif isinstance(node, ast.AnnAssign):
		targets = [node.target]
	names: List[str] = []
	for target in targets:
		if isinstance(target, ast.Name):
			names.append(target.id)
		elif isinstance(target, (ast.Tuple, ast.List)):
			names.extend(e.id for e in target.elts if isinstance(e, ast.Name))
	return names


def scan_python(path: str, text: str) -> SourceFacts:
	try:
		tree = ast.parse(text, filename=path)
	except (SyntaxError, ValueError) as e:
		logger.warning("Skipping unparseable Python file %s: %s", path, e)
		return SourceFacts(path=path, language="python")

	imports: List[str] = []
	exports: List[str] = []
	components: List[str] = []

	for node in tree.body:
		if isinstance(node, ast.Import):
			for alias in node.names:
				imports.append(alias.name)
				if alias.asname == alias.name:
					exports.append(alias.name)
		elif isinstance(node, ast.ImportFrom):
			target = _import_from_target(node)
			imports.append(target)
			# "from m import *" and "from m import X as X" are re-exports
			if any(a.name == "*" or a.asname == a.name for a in node.names):
				exports.append(target)
		elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
			if is_component_name(node.name):
				components.append(node.name)
		else:
			components.extend(n for n in _assigned_names(node) if is_component_name(n))

	return SourceFacts(path=path, language="python", imports=imports, exports=exports, components=components)


def scan_file(path: str) -> SourceFacts:
	language = detect_language(path) or "unknown"
	try:
		with open(path, "r", encoding="utf-8", errors="replace") as fh:
			text = fh.read()
	except OSError as e:
		logger.warning("Cannot read %s: %s", path, e)
		return SourceFacts(path=path, language=language)

	if language == "python":
		return scan_python(path, text)
	return scan_script(path, text, language)


def _scan_node(path: str, rel_path: str) -> Optional[StructureNode]:
	if detect_language(path) is None:
		return None
	facts = scan_file(path)
	return StructureNode(
		name=os.path.basename(path),
		type="file",
		imports=facts.imports,
		exports=facts.exports,
		components=facts.components,
	)


def scan_tree(root: str) -> StructureNode:
	return walk_tree(root, visit_file=_scan_node)
