from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def _run(*args: str) -> subprocess.CompletedProcess:
    cmd = [sys.executable, "-m", *args]
    return subprocess.run(cmd, cwd=str(REPO_ROOT), capture_output=True, text=True)


class TestFolioCliContract:
    def test_new_layout_theme_pipeline(self, tmp_path: Path):
        doc_json = tmp_path / "doc.json"
        p = _run("folio.cli", "new", "--template", "three-hero", "--theme", "Ocean Blue", "--out", str(doc_json))
        assert p.returncode == 0, p.stderr
        assert p.stdout.strip() == str(doc_json)

        laid_out = tmp_path / "laid_out.json"
        p = _run("folio.cli", "layout", "--in", str(doc_json), "--template", "two-columns", "--variant", "Wide Right", "--out", str(laid_out))
        assert p.returncode == 0, p.stderr
        doc = json.loads(laid_out.read_text(encoding="utf-8"))
        assert doc["template_id"] == "two-columns"
        assert doc["theme"]["title"]["align"] == "right"
        (line,) = doc["decorations"]
        assert line["x"] + line["width"] == 816 - 32

        themed = tmp_path / "themed.json"
        p = _run("folio.cli", "theme", "--in", str(laid_out), "--theme", "Halloween", "--out", str(themed))
        assert p.returncode == 0, p.stderr
        assert json.loads(themed.read_text(encoding="utf-8"))["theme"]["name"] == "Halloween"

        p = _run("folio.cli", "calendar-style", "--in", str(themed))
        assert p.returncode == 0, p.stderr
        style = json.loads(p.stdout)
        assert style["non_current_month_cell_text_color"] == "#94a3b8"

    def test_unknown_template_warns_and_falls_back(self, tmp_path: Path):
        doc_json = tmp_path / "doc.json"
        assert _run("folio.cli", "new", "--out", str(doc_json)).returncode == 0
        p = _run("folio.cli", "layout", "--in", str(doc_json), "--template", "nope")
        assert p.returncode == 0
        assert "[folio] WARN: unknown template" in p.stderr
        assert json.loads(p.stdout)["template_id"] == "one-single"

    def test_missing_input_is_an_error(self, tmp_path: Path):
        p = _run("folio.cli", "layout", "--in", str(tmp_path / "missing.json"), "--template", "four-grid")
        assert p.returncode == 2
        assert "[folio] ERROR: Missing JSON file" in p.stderr

    def test_bad_geometry_is_an_error(self, tmp_path: Path):
        geo = tmp_path / "geo.json"
        geo.write_text(json.dumps({"gutter": 3}), encoding="utf-8")
        p = _run("folio.cli", "--geometry", str(geo), "new")
        assert p.returncode == 2
        assert "unknown geometry key" in p.stderr


class TestFolioToolsContract:
    def test_validate_catalog_tool(self):
        p = _run("folio.tools.validate_catalog")
        assert p.returncode == 0, p.stderr
        assert "[folio-validate-catalog] OK" in p.stdout

    def test_derive_style_tool_reports_exception_and_contrast(self):
        p = _run("folio.tools.derive_style", "--theme", "Default", "--report")
        assert p.returncode == 0, p.stderr
        out = json.loads(p.stdout)
        entry = out["Default"]
        assert entry["exception"] == "chalkboard"
        assert entry["style"]["cell_background_color"] == "#1f362b"
        assert entry["contrast"]["cell_text_color"] >= 4.5

    def test_derive_style_tool_applies_overrides(self, tmp_path: Path):
        ov = tmp_path / "ov.json"
        ov.write_text(json.dumps({"header_color": "#123456"}), encoding="utf-8")
        p = _run("folio.tools.derive_style", "--theme", "Ocean Blue", "--overrides", str(ov))
        assert p.returncode == 0, p.stderr
        assert json.loads(p.stdout)["Ocean Blue"]["style"]["header_color"] == "#123456"

    def test_derive_style_tool_rejects_unknown_theme(self):
        p = _run("folio.tools.derive_style", "--theme", "Nope")
        assert p.returncode == 2
        assert "[folio-derive-style] ERROR: Unknown theme" in p.stderr
