"""Tests for the command line interface."""

from click.testing import CliRunner

from app import cli


class TestCheckCommand:
    """Tests for the check command."""

    def test_pass(self):
        result = CliRunner().invoke(cli, ["check", "0357502-9"])

        assert result.exit_code == 0
        assert "Check for 0357502-9 PASS" in result.output

    def test_fail_lists_numbered_reasons(self):
        result = CliRunner().invoke(cli, ["check", "357502-9"])

        assert result.exit_code == 1
        assert "Check for 357502-9 FAIL" in result.output
        assert "  1: Too short, the required length is 9" in result.output
        assert "  2: Prefix is too short, the required length is 7" in result.output

    def test_mixed_results_fail(self):
        result = CliRunner().invoke(cli, ["check", "0357502-9", "1234567-9"])

        assert result.exit_code == 1
        assert "Check for 0357502-9 PASS" in result.output
        assert "Check for 1234567-9 FAIL" in result.output

    def test_requires_business_id(self):
        result = CliRunner().invoke(cli, ["check"])

        assert result.exit_code == 2

    def test_descriptions_option(self, tmp_path):
        path = tmp_path / "fi.yaml"
        path.write_text(
            "VERIFICATION_NUMBER_CHECKSUM: Tarkistusnumero ei täsmää\n",
            encoding="utf-8",
        )

        result = CliRunner().invoke(
            cli, ["check", "--descriptions", str(path), "1234567-9"]
        )

        assert result.exit_code == 1
        assert "  1: Tarkistusnumero ei täsmää" in result.output

    def test_invalid_descriptions_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("NOT_A_REASON: text\n", encoding="utf-8")

        result = CliRunner().invoke(
            cli, ["check", "--descriptions", str(path), "0357502-9"]
        )

        assert result.exit_code == 1
        assert "Unknown failure reason 'NOT_A_REASON'" in result.output

    def test_descriptions_from_env(self, monkeypatch, tmp_path):
        path = tmp_path / "fi.yaml"
        path.write_text("DELIMITER_MISSING: Väliviiva puuttuu\n", encoding="utf-8")
        monkeypatch.setenv("BUSINESS_ID_DESCRIPTIONS_FILE", str(path))

        result = CliRunner().invoke(cli, ["check", "035750299"])

        assert "  1: Väliviiva puuttuu" in result.output

    def test_no_color(self):
        result = CliRunner().invoke(
            cli, ["check", "--no-color", "0357502-9"], color=True
        )

        assert "\x1b[" not in result.output


class TestDemoCommand:
    """Tests for the demo command."""

    def test_runs_samples(self):
        result = CliRunner().invoke(cli, ["demo"])

        assert result.exit_code == 0
        assert result.output.count("PASS") == 1
        assert result.output.count("FAIL") == 5
        assert "Check for 0357502-9 PASS" in result.output
        assert "Contains incorrect character(s)" in result.output


class TestGroup:
    """Tests for the command group."""

    def test_help_without_command(self):
        result = CliRunner().invoke(cli, [])

        assert result.exit_code == 0
        assert "Finnish Business ID" in result.output
