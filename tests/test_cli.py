"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from dictation_cleanup import __version__
from dictation_cleanup.cli import app
from dictation_cleanup.config import CONFIG_ENV_VAR, CleanupSettings, save_settings


runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the default settings path at an empty temp directory."""
    path = tmp_path / "home" / "settings.json"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        """Test version output."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestFilterCommand:
    """Tests for 'dictation-cleanup filter'."""

    def test_filter_argument(self):
        """Test filtering text passed as an argument."""
        result = runner.invoke(app, ["filter", "  Um, so I was, uh, thinking about this  "])

        assert result.exit_code == 0
        assert result.output == "so I was, thinking about this\n"

    def test_filter_stdin(self):
        """Test filtering text read from stdin."""
        result = runner.invoke(app, ["filter", "-"], input="I I I I think um so\n")

        assert result.exit_code == 0
        assert result.output == "I think so\n"

    def test_filter_empty_stdin(self):
        """Test empty stdin is rejected."""
        result = runner.invoke(app, ["filter", "-"], input="")

        assert result.exit_code == 1
        assert "No text received on stdin" in result.output


class TestCorrectCommand:
    """Tests for 'dictation-cleanup correct'."""

    def test_correct_with_words(self):
        """Test words given on the command line."""
        result = runner.invoke(app, ["correct", "helo wrold", "-w", "hello", "-w", "world"])

        assert result.exit_code == 0
        assert result.output == "hello world\n"

    def test_correct_threshold_override(self):
        """Test --threshold is honored."""
        result = runner.invoke(app, ["correct", "rupert", "-w", "Robert", "-t", "0"])

        assert result.exit_code == 0
        assert result.output == "rupert\n"

    def test_correct_from_default_settings(self, isolated_settings):
        """Test words come from the default settings file."""
        save_settings(CleanupSettings(custom_words=["Kubernetes"]), isolated_settings)

        result = runner.invoke(app, ["correct", "on kubernetis today"])

        assert result.exit_code == 0
        assert result.output == "on Kubernetes today\n"

    def test_correct_without_any_vocabulary(self):
        """Test no settings file and no words leaves text unchanged."""
        result = runner.invoke(app, ["correct", "helo  wrold"])

        assert result.exit_code == 0
        assert result.output == "helo  wrold\n"

    def test_show_corrections(self):
        """Test the corrections table."""
        result = runner.invoke(
            app,
            ["correct", "helo wrold", "-w", "hello", "-w", "world", "--show-corrections"],
        )

        assert result.exit_code == 0
        assert "Corrections (2)" in result.output
        assert "wrold" in result.output

    def test_show_corrections_none(self):
        """Test the message when nothing was corrected."""
        result = runner.invoke(app, ["correct", "banana", "-w", "hello", "-s"])

        assert result.exit_code == 0
        assert "No corrections applied" in result.output


class TestCleanCommand:
    """Tests for 'dictation-cleanup clean'."""

    def test_clean_with_config(self, tmp_path):
        """Test both passes with an explicit settings file."""
        config = tmp_path / "custom.json"
        config.write_text(json.dumps({"custom_words": ["Kubernetes"]}), encoding="utf-8")

        result = runner.invoke(app, ["clean", "um deploy to kubernetis uh", "--config", str(config)])

        assert result.exit_code == 0
        assert result.output == "deploy to Kubernetes\n"

    def test_clean_no_filter(self, tmp_path):
        """Test --no-filter skips filler removal."""
        result = runner.invoke(
            app,
            ["clean", "um deploy to kubernetis", "-w", "Kubernetes", "--no-filter"],
        )

        assert result.exit_code == 0
        assert result.output == "um deploy to Kubernetes\n"

    def test_clean_words_keep_default_settings(self, isolated_settings):
        """Test --word overrides the vocabulary but not the rest of the default file."""
        save_settings(CleanupSettings(filter_filler_words=False), isolated_settings)

        result = runner.invoke(app, ["clean", "um helo", "-w", "hello", "-t", "0.5"])

        assert result.exit_code == 0
        assert result.output == "um hello\n"

    def test_clean_missing_config(self, tmp_path):
        """Test an explicit missing settings file is an error."""
        result = runner.invoke(app, ["clean", "hello", "--config", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "Settings file not found" in result.output

    def test_clean_invalid_config(self, tmp_path):
        """Test a malformed settings file is an error."""
        config = tmp_path / "bad.json"
        config.write_text("[1, 2", encoding="utf-8")

        result = runner.invoke(app, ["clean", "hello", "--config", str(config)])

        assert result.exit_code == 1
        assert "configuration" in result.output
