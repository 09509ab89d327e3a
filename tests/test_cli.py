# tests/test_cli.py
from typer.testing import CliRunner

from linkedin_logon.cli.main_cli import app
from linkedin_logon.utils import FernetEncryptor

runner = CliRunner()


def test_generate_key_prints_usable_key():
    result = runner.invoke(app, ["generate-key"])

    assert result.exit_code == 0
    FernetEncryptor(result.stdout.strip())


def test_show_config_masks_secrets(monkeypatch):
    monkeypatch.setenv("LINKEDIN_LOGON_LINKEDIN_APP_ID", "test-app-id")
    monkeypatch.setenv("LINKEDIN_LOGON_LINKEDIN_APP_SECRET", "very-secret")

    result = runner.invoke(app, ["show-config"])

    assert "test-app-id" in result.stdout
    assert "very-secret" not in result.stdout
