from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ConfigSource(str, Enum):
	SYSTEM = "system"
	VITE = "vite"
	SHADCN = "shadcn"
	CUSTOM = "custom"


class ConfigEntry(BaseModel):
	type: str
	source: ConfigSource


class CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True, validate_assignment=True)

	def to_json_dict(self) -> dict:
		# Unset optional fields are left out of the report entirely
		return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class StructureNode(CamelModel):
	name: str
	type: Literal["file", "directory"]
	children: Optional[List[StructureNode]] = None
	imports: Optional[List[str]] = None
	exports: Optional[List[str]] = None
	components: Optional[List[str]] = None
	is_pre_configured: Optional[bool] = None
	config_type: Optional[str] = None
	source: Optional[ConfigSource] = None

	@property
	def is_directory(self) -> bool:
		return self.type == "directory"

	def iter_nodes(self):
		yield self
		for child in self.children or []:
			yield from child.iter_nodes()


class SourceFacts(BaseModel):
	path: str
	language: str
	imports: List[str] = []
	exports: List[str] = []
	components: List[str] = []


class StructureSummary(CamelModel):
	total_pre_configured_files: int
	source_breakdown: Dict[str, int]


class ScanSummary(CamelModel):
	total_files: int
	total_imports: int
	total_exports: int
	total_components: int


class AnalysisReport(CamelModel):
	timestamp: str
	structure: StructureNode
	summary: Union[StructureSummary, ScanSummary]


StructureNode.model_rebuild()
AnalysisReport.model_rebuild()
