#!/usr/bin/env python3
"""
Integration tests for the database CLI (vidpod-db).

Tests init, account provisioning, imports and the template command
against a temporary database.
"""
import pytest
from click.testing import CliRunner

from vidpod.database.cli import cli
from vidpod.importer.template import TEMPLATE_FILENAME, generate_template


class TestDatabaseCLI:
    """Test CLI commands with a temporary database."""

    @pytest.fixture
    def runner(self):
        """Create Click test runner."""
        return CliRunner()

    @pytest.fixture
    def test_dirs(self, tmp_path):
        """Temporary database and log locations."""
        return {
            "db_url": f"sqlite:///{tmp_path / 'cli.db'}",
            "log_dir": tmp_path / "logs",
            "tmp": tmp_path,
        }

    def invoke_cli(self, runner, test_dirs, args, **kwargs):
        """Helper to invoke CLI with test configuration."""
        base_args = [
            "--db-url", test_dirs["db_url"],
            "--log-dir", str(test_dirs["log_dir"]),
        ]
        return runner.invoke(cli, base_args + args, obj={}, **kwargs)

    def add_user(self, runner, test_dirs, username, role="teacher"):
        result = self.invoke_cli(
            runner, test_dirs, ["user", "add", username, f"{username}@school.org", "--role", role]
        )
        assert result.exit_code == 0, result.output
        return int(result.output.split("(id ")[1].rstrip(")\n"))

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "import" in result.output

    def test_init_command(self, runner, test_dirs):
        result = self.invoke_cli(runner, test_dirs, ["init"])
        assert result.exit_code == 0
        assert "Database ready" in result.output
        assert (test_dirs["tmp"] / "cli.db").exists()

    def test_user_add_and_list(self, runner, test_dirs):
        self.add_user(runner, test_dirs, "ms.rivera")
        result = self.invoke_cli(runner, test_dirs, ["user", "list"])
        assert result.exit_code == 0
        assert "ms.rivera" in result.output
        assert "teacher" in result.output

    def test_duplicate_user_fails(self, runner, test_dirs):
        self.add_user(runner, test_dirs, "ms.rivera")
        result = self.invoke_cli(
            runner, test_dirs, ["user", "add", "ms.rivera", "other@school.org"]
        )
        assert result.exit_code == 1

    def test_import_and_tags(self, runner, test_dirs, sample_csv):
        user_id = self.add_user(runner, test_dirs, "ms.rivera")
        csv_path = test_dirs["tmp"] / "ideas.csv"
        csv_path.write_bytes(sample_csv)

        result = self.invoke_cli(
            runner, test_dirs, ["import", str(csv_path), "--user-id", str(user_id)]
        )
        assert result.exit_code == 0, result.output
        assert "3 of 3 stories imported" in result.output

        result = self.invoke_cli(runner, test_dirs, ["tags"])
        assert result.exit_code == 0
        assert "Climate (2)" in result.output

    def test_import_reports_row_errors(self, runner, test_dirs):
        user_id = self.add_user(runner, test_dirs, "ms.rivera")
        csv_path = test_dirs["tmp"] / "ideas.csv"
        csv_path.write_text("title,description\nGood,\n,No title here\n")

        result = self.invoke_cli(
            runner, test_dirs, ["import", str(csv_path), "--user-id", str(user_id)]
        )
        assert result.exit_code == 0
        assert "Row 3 (Unknown)" in result.output
        assert "1 of 2 stories imported" in result.output

    def test_student_import_fails(self, runner, test_dirs, sample_csv):
        user_id = self.add_user(runner, test_dirs, "sam", role="student")
        csv_path = test_dirs["tmp"] / "ideas.csv"
        csv_path.write_bytes(sample_csv)

        result = self.invoke_cli(
            runner, test_dirs, ["import", str(csv_path), "--user-id", str(user_id)]
        )
        assert result.exit_code == 1

    def test_empty_file_fails(self, runner, test_dirs):
        user_id = self.add_user(runner, test_dirs, "ms.rivera")
        csv_path = test_dirs["tmp"] / "empty.csv"
        csv_path.write_bytes(b"")

        result = self.invoke_cli(
            runner, test_dirs, ["import", str(csv_path), "--user-id", str(user_id)]
        )
        assert result.exit_code == 1

    def test_template_to_stdout(self, runner, tmp_path):
        result = runner.invoke(cli, ["--log-dir", str(tmp_path), "template"], obj={})
        assert result.exit_code == 0
        assert result.output.startswith("idea_title,idea_description")

    def test_template_to_directory(self, runner, tmp_path):
        result = runner.invoke(cli, ["--log-dir", str(tmp_path / "logs"), "template",
                                     str(tmp_path)], obj={})
        assert result.exit_code == 0
        written = (tmp_path / TEMPLATE_FILENAME).read_bytes().decode("utf-8")
        assert written == generate_template()
