"""Integration tests for CLI commands.

Each test points the store at a temporary directory through
RNAREPORT_STORAGE_DIR, so commands never touch the user's saved report.
"""

import json

import pytest
from typer.testing import CliRunner

from rnareport.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def storage_dir(tmp_path, monkeypatch):
    directory = tmp_path / "store"
    monkeypatch.setenv("RNAREPORT_STORAGE_DIR", str(directory))
    return directory


@pytest.fixture
def report_file(tmp_path, custom_document):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps(custom_document))
    return path


@pytest.fixture
def invalid_file(tmp_path):
    path = tmp_path / "invalid.json"
    path.write_text(json.dumps({"sampleInfo": {"sampleId": "S1"}, "mutatedGenes": [{"gene": "KRAS", "tier": 5}]}))
    return path


class TestValidateCommand:
    """Tests for 'rnareport validate'."""

    @pytest.mark.integration
    def test_valid_file(self, report_file):
        result = runner.invoke(app, ["validate", str(report_file)])
        assert result.exit_code == 0
        assert "valid report" in result.stdout
        assert "S1" in result.stdout

    @pytest.mark.integration
    def test_invalid_file_lists_every_issue(self, invalid_file):
        result = runner.invoke(app, ["validate", str(invalid_file)])
        assert result.exit_code == 1
        assert "5 validation error(s)" in result.stdout
        assert "sampleInfo.patientId" in result.stdout
        assert "mutatedGenes[0].tier" in result.stdout

    @pytest.mark.integration
    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.stdout

    @pytest.mark.integration
    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.json")])
        assert result.exit_code != 0


class TestStoreCommands:
    """Tests for 'rnareport load', 'reset' and 'status'."""

    @pytest.mark.integration
    def test_status_shows_demo_data(self):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "built-in demo data" in result.stdout
        assert "PRJ230001_L2300001" in result.stdout

    @pytest.mark.integration
    def test_load_then_reset(self, report_file, storage_dir):
        result = runner.invoke(app, ["load", str(report_file)])
        assert result.exit_code == 0
        assert "Loaded patient data from custom.json" in result.stdout
        assert (storage_dir / "rnasum-patient-data.json").exists()

        result = runner.invoke(app, ["status"])
        assert "custom upload" in result.stdout
        assert "Glioma" in result.stdout

        result = runner.invoke(app, ["reset"])
        assert result.exit_code == 0
        assert not (storage_dir / "rnasum-patient-data.json").exists()

        result = runner.invoke(app, ["status"])
        assert "built-in demo data" in result.stdout

    @pytest.mark.integration
    def test_load_invalid_keeps_previous_report(self, invalid_file, storage_dir):
        result = runner.invoke(app, ["load", str(invalid_file)])
        assert result.exit_code == 1
        assert "Report failed validation with 5 errors" in result.stdout
        assert not (storage_dir / "rnasum-patient-data.json").exists()

    @pytest.mark.integration
    def test_load_rejects_non_json_extension(self, tmp_path, custom_document):
        path = tmp_path / "custom.txt"
        path.write_text(json.dumps(custom_document))
        result = runner.invoke(app, ["load", str(path)])
        assert result.exit_code == 1
        assert "JSON file" in result.stdout


class TestFindingsCommand:
    """Tests for 'rnareport findings'."""

    @pytest.mark.integration
    def test_default_findings(self):
        result = runner.invoke(app, ["findings", "--min-count", "2"])
        assert result.exit_code == 0
        assert "Findings summary (3 genes)" in result.stdout
        for gene in ("BRCA2", "CDKN2A", "PALB2"):
            assert gene in result.stdout

    @pytest.mark.integration
    def test_findings_from_file(self, report_file):
        result = runner.invoke(app, ["findings", "--file", str(report_file), "--search", "abl"])
        assert result.exit_code == 0
        assert "ABL1" in result.stdout
        assert "BCR" not in result.stdout.replace("ABL1", "")

    @pytest.mark.integration
    def test_findings_csv(self, tmp_path):
        out = tmp_path / "findings.csv"
        result = runner.invoke(app, ["findings", "-n", "2", "--csv", str(out)])
        assert result.exit_code == 0
        lines = out.read_text().strip().split("\n")
        assert lines[0] == "Gene,Mutated,Fusion,SV,CN,Immune,HRD,Resources,Count"
        assert [line.split(",")[0] for line in lines[1:]] == ["BRCA2", "CDKN2A", "PALB2"]


class TestLayoutCommand:
    """Tests for 'rnareport layout'."""

    @pytest.mark.integration
    def test_layout(self):
        result = runner.invoke(app, ["layout"])
        assert result.exit_code == 0
        assert "Chromosome arcs" in result.stdout
        assert "TMPRSS2::ERG" in result.stdout
        assert "intrachromosomal" in result.stdout

    @pytest.mark.integration
    def test_layout_interchromosomal(self, report_file):
        result = runner.invoke(app, ["layout", "--file", str(report_file), "--width", "800", "--height", "600"])
        assert result.exit_code == 0
        assert "BCR::ABL1" in result.stdout
        assert "interchromosomal" in result.stdout


class TestExportCommand:
    """Tests for 'rnareport export'."""

    @pytest.mark.integration
    def test_export_to_stdout(self):
        result = runner.invoke(app, ["export", "cnv"])
        assert result.exit_code == 0
        lines = result.stdout.strip().split("\n")
        assert lines[0] == "Gene,Cytoband,Copy number,Type,Z-score"
        assert lines[1] == "EGFR,7p11.2,6,gain,3.2"

    @pytest.mark.integration
    def test_export_tsv_with_search(self):
        result = runner.invoke(app, ["export", "drugs", "--search", "olaparib", "--tsv"])
        assert result.exit_code == 0
        lines = result.stdout.strip().split("\n")
        assert len(lines) == 2
        assert lines[1].split("\t")[:2] == ["Olaparib", "BRCA2"]

    @pytest.mark.integration
    def test_export_to_file(self, tmp_path):
        out = tmp_path / "fusions.csv"
        result = runner.invoke(app, ["export", "fusions", "-o", str(out)])
        assert result.exit_code == 0
        assert "Exported 3 rows" in result.stdout
        assert '"COSMIC; FusionGDB"' not in out.read_text()
        assert "COSMIC; FusionGDB" in out.read_text()

    @pytest.mark.integration
    def test_unknown_table(self):
        result = runner.invoke(app, ["export", "variants"])
        assert result.exit_code == 2
        assert "Unknown table" in result.stdout


class TestLogLevelOption:
    """Tests for the global --log-level option."""

    @pytest.mark.integration
    def test_invalid_log_level(self):
        result = runner.invoke(app, ["--log-level", "LOUD", "status"])
        assert result.exit_code != 0

    @pytest.mark.integration
    def test_debug_log_level(self):
        result = runner.invoke(app, ["--log-level", "DEBUG", "status"])
        assert result.exit_code == 0
