import os

from cli import main


def test_classify_writes_report(tmp_path, capsys):
	project = tmp_path / "project"
	project.mkdir()
	(project / "tsconfig.json").write_text("{}")
	out = tmp_path / "analysis"

	assert main(["classify", str(project), "--output-dir", str(out)]) == 0

	printed = capsys.readouterr().out
	assert "Project Structure:" in printed
	assert "📄 tsconfig.json [⚙️ Pre-configured] (TypeScript Configuration) [system]" in printed
	files = os.listdir(out)
	assert len(files) == 1
	assert files[0].startswith("project-structure-simple-")


def test_scan_no_save(tmp_path, capsys):
	(tmp_path / "main.ts").write_text('import x from "x";\n')
	out = tmp_path / "analysis"
	assert main(["scan", str(tmp_path), "--no-save", "--output-dir", str(out)]) == 0
	printed = capsys.readouterr().out
	assert "    Imports:" in printed
	assert "      - x" in printed
	assert not out.exists()


def test_missing_root_exits_with_error(tmp_path, capsys):
	assert main(["scan", str(tmp_path / "missing"), "--no-save"]) == 1
	assert "Invalid root path" in capsys.readouterr().err


def test_output_dir_from_environment(tmp_path, monkeypatch, capsys):
	project = tmp_path / "project"
	project.mkdir()
	out = tmp_path / "reports"
	monkeypatch.setenv("STRUCTURE_ANALYZER_OUTPUT_DIR", str(out))

	assert main(["classify", str(project)]) == 0

	files = os.listdir(out)
	assert len(files) == 1
	assert files[0].startswith("project-structure-simple-")
