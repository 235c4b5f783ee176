import os
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch
from sqlmodel import SQLModel, create_engine
from typer.testing import CliRunner
from thoughtvault.config import Settings
from thoughtvault.cli import app
from thoughtvault.models.record import ThoughtRecord
from thoughtvault.service import ThoughtService
from thoughtvault.storage import DirectoryStore, LocalStore
from thoughtvault.usage import UsageTracker

runner = CliRunner()

def test_settings_load():
    """Verify settings can be instantiated with dummy values."""
    os.environ["OPENAI_API_KEY"] = "sk-test-dummy-key"
    try:
        settings = Settings()
        assert settings.OPENAI_API_KEY.get_secret_value() == "sk-test-dummy-key"
        assert settings.OPENAI_MODEL_SUMMARY == "gpt-4o-mini"
        assert settings.FREE_USAGE_LIMIT == 999
        assert settings.ASSET_DIR is None
    finally:
        del os.environ["OPENAI_API_KEY"]

def test_cli_doctor(tmp_path):
    """Verify the doctor command runs without error."""
    with patch("thoughtvault.cli.settings") as mock_settings:
        mock_settings.OPENAI_API_KEY.get_secret_value.return_value = "sk-test-dummy-key"
        mock_settings.OPENAI_MODEL_SUMMARY = "gpt-4o-mini"
        mock_settings.LLM_TIMEOUT_SECONDS = 60.0
        mock_settings.FREE_USAGE_LIMIT = 999
        mock_settings.DATA_DIR = tmp_path
        mock_settings.ASSET_DIR = tmp_path

        result = runner.invoke(app, ["doctor"])
        assert result.exit_code == 0
        assert "ThoughtVault Doctor" in result.stdout
        assert "OPENAI_API_KEY:           ✅ Set" in result.stdout
        assert "[Asset Folder]            ✅ Writable" in result.stdout


def make_service(reply="## Subject\nCLI test\n\n## Output\nA file"):
    engine = create_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    client = MagicMock()
    client.summarize.return_value = reply
    return ThoughtService(client=client, store=LocalStore(engine), usage=UsageTracker(engine, limit=1))


def test_cli_summarize_and_list(tmp_path):
    transcript = tmp_path / "chat.txt"
    transcript.write_text("user: help\nassistant: sure", encoding="utf-8")
    service = make_service()

    with patch("thoughtvault.cli.get_service", return_value=service):
        result = runner.invoke(app, ["summarize", str(transcript)])
        assert result.exit_code == 0
        assert "## 🎯 Subject\n\nCLI test" in result.stdout
        assert "✅ Saved" in result.stdout

        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "Found 1 thought assets" in result.stdout
        assert "CLI test" in result.stdout


def test_cli_summarize_from_stdin_without_saving():
    service = make_service()
    with patch("thoughtvault.cli.get_service", return_value=service):
        result = runner.invoke(app, ["summarize", "--no-save"], input="some chat")
        assert result.exit_code == 0
        assert "CLI test" in result.stdout
        assert service.list_records() == []


def test_cli_summarize_usage_limit(tmp_path):
    service = make_service()
    with patch("thoughtvault.cli.get_service", return_value=service):
        assert runner.invoke(app, ["summarize", "--no-save", "--user", "u1"], input="a").exit_code == 0
        result = runner.invoke(app, ["summarize", "--no-save", "--user", "u1"], input="b")
        assert result.exit_code == 2
        assert "Usage limit reached" in result.stdout


def test_cli_summarize_failure():
    service = make_service()
    service.client.summarize.side_effect = RuntimeError("network down")
    with patch("thoughtvault.cli.get_service", return_value=service):
        result = runner.invoke(app, ["summarize"], input="chat")
        assert result.exit_code == 1
        assert "❌ Failed: network down" in result.stdout


def test_cli_summarize_unreadable_transcript(tmp_path):
    transcript = tmp_path / "chat.txt"
    transcript.write_bytes(b"user: \xff\xfe broken")
    service = make_service()
    with patch("thoughtvault.cli.get_service", return_value=service):
        result = runner.invoke(app, ["summarize", str(transcript)])
        assert result.exit_code == 1
        assert "❌ Failed to read transcript" in result.stdout
    service.client.summarize.assert_not_called()


def test_cli_summarize_reports_fallback_store(tmp_path):
    (tmp_path / "summaries.json").write_text("{not json", encoding="utf-8")
    local = make_service()
    service = ThoughtService(
        client=local.client, store=DirectoryStore(tmp_path), usage=local.usage, fallback=local.store,
    )
    with patch("thoughtvault.cli.get_service", return_value=service):
        result = runner.invoke(app, ["summarize"], input="chat")
        assert result.exit_code == 0
        assert f"to {local.store.describe()}." in result.stdout


def test_cli_show_export_delete(tmp_path):
    service = make_service()
    record = ThoughtRecord(
        id="rec1",
        created_at=datetime(2024, 2, 2, tzinfo=timezone.utc),
        subject="Stored",
        insights="Learned things",
    )
    service.save(record)

    with patch("thoughtvault.cli.get_service", return_value=service):
        result = runner.invoke(app, ["show", "rec1"])
        assert result.exit_code == 0
        assert "## 💡 Insights\n\nLearned things" in result.stdout

        result = runner.invoke(app, ["export", "rec1", "--out", str(tmp_path)])
        assert result.exit_code == 0
        exported = tmp_path / "thought-asset-2024-02-02.md"
        assert exported.read_text(encoding="utf-8") == "## 🎯 Subject\n\nStored\n\n## 💡 Insights\n\nLearned things"

        assert runner.invoke(app, ["delete", "rec1"]).exit_code == 0
        result = runner.invoke(app, ["show", "rec1"])
        assert result.exit_code == 1
        assert "No thought asset with ID rec1" in result.stdout


def test_cli_usage_commands():
    service = make_service()
    service.usage.increment("u1")
    with patch("thoughtvault.cli.get_service", return_value=service):
        result = runner.invoke(app, ["usage", "status", "u1"])
        assert "u1: 1/1" in result.stdout
        assert "limit reached" in result.stdout

        result = runner.invoke(app, ["usage", "reset", "u1"])
        assert "✅ Usage reset for u1" in result.stdout
