from structure_analyzer.classify import classify_file, classify_tree, is_ui_component_file, match_directory
from structure_analyzer.summarize import summarize_structure


def test_known_config_file():
	node = classify_file("package.json")
	assert node.is_pre_configured is True
	assert node.config_type == "Project Configuration"
	assert node.source == "system"


def test_known_config_file_matches_basename_anywhere():
	node = classify_file("apps/web/vite.config.ts")
	assert node.name == "vite.config.ts"
	assert node.source == "vite"


def test_ui_component_file():
	node = classify_file("src/components/ui/button.tsx")
	assert node.config_type == "UI Component"
	assert node.source == "shadcn"
	assert not is_ui_component_file("src/components/ui/styles.css")
	assert not is_ui_component_file("src/components/button.tsx")


def test_plain_file_is_marked_not_preconfigured():
	node = classify_file("src/main.ts")
	assert node.is_pre_configured is False
	assert node.config_type is None
	assert node.to_json_dict() == {"name": "main.ts", "type": "file", "isPreConfigured": False}


def test_match_directory_first_pattern_wins():
	assert match_directory("") is None
	assert match_directory("src") is None
	assert match_directory("src/components/ui/forms").type == "shadcn UI Component Library"
	assert match_directory("src/lib/utils").source == "shadcn"
	assert match_directory("src/hooks").type == "React Hooks Library"
	# substring match, not path-segment match
	assert match_directory("src/webhooks").source == "custom"
	assert match_directory("public").type == "Static Assets"


def _make_project(root):
	(root / ".git").mkdir()
	(root / ".git" / "config").write_text("")
	(root / "node_modules" / "x").mkdir(parents=True)
	(root / "node_modules" / "x" / "package.json").write_text("{}")
	(root / "public").mkdir()
	(root / "public" / "logo.svg").write_text("<svg/>")
	(root / "src" / "components" / "ui").mkdir(parents=True)
	(root / "src" / "components" / "ui" / "button.tsx").write_text("")
	(root / "src" / "hooks").mkdir()
	(root / "src" / "hooks" / "useThing.ts").write_text("")
	(root / "package.json").write_text("{}")
	(root / ".gitignore").write_text("node_modules\n")


def test_classify_tree(tmp_path):
	_make_project(tmp_path)
	tree = classify_tree(str(tmp_path))

	assert tree.name == tmp_path.name
	assert tree.is_pre_configured is None
	assert [c.name for c in tree.children] == [".gitignore", "package.json", "public", "src"]

	public = tree.children[2]
	assert public.is_pre_configured is True
	assert public.source == "vite"

	src = tree.to_json_dict()["children"][3]
	assert "isPreConfigured" not in src
	components = src["children"][0]
	assert components["name"] == "components"
	ui = components["children"][0]
	assert ui["configType"] == "shadcn UI Component Library"
	assert ui["children"][0]["configType"] == "UI Component"


def test_structure_summary(tmp_path):
	_make_project(tmp_path)
	summary = summarize_structure(classify_tree(str(tmp_path)))
	assert summary.total_pre_configured_files == 6
	assert summary.source_breakdown == {"system": 2, "vite": 1, "shadcn": 2, "custom": 1}
