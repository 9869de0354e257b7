from __future__ import annotations

from fiware_orion_client.main.config import AppSettings, get_settings
from fiware_orion_client.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("ORION_BASE_URL", raising=False)
    monkeypatch.delenv("ORION_CREDENTIAL", raising=False)
    monkeypatch.delenv("ORION_CREDENTIAL_FILE", raising=False)

    settings = get_settings()

    assert settings.orion.base_url == "http://localhost:1026"
    assert settings.orion.credential == {}
    assert settings.orion.timeout == 30.0
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("ORION_BASE_URL", "https://orion.example:1026")
    monkeypatch.setenv("ORION_CREDENTIAL", '{"Authorization": "Bearer env"}')
    monkeypatch.setenv("ORION_TIMEOUT", "5")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.orion.base_url == "https://orion.example:1026"
    assert settings.orion.credential == {"Authorization": "Bearer env"}
    assert settings.orion.timeout == 5.0
    assert settings.logging.level.value == "DEBUG"


def test_get_settings_reads_credential_from_secret_file(tmp_path, monkeypatch) -> None:
    secret = tmp_path / "orion_credential"
    secret.write_text('{"Authorization": "Bearer secret"}\n', encoding="utf-8")
    # An empty value still loads from the file, and monkeypatch restores it.
    monkeypatch.setenv("ORION_CREDENTIAL", "")
    monkeypatch.setenv("ORION_CREDENTIAL_FILE", str(secret))

    settings = get_settings()

    assert settings.orion.credential == {"Authorization": "Bearer secret"}
