import pytest

from capshift.config.config import ConfigManager
from capshift.exceptions import ConfigurationError


def test_defaults(monkeypatch) -> None:
    for key in [
        "CAPSHIFT_MAX_OFFSET_MS",
        "CAPSHIFT_BACKUP_SUFFIX",
        "CAPSHIFT_LOG_LEVEL",
        "CAPSHIFT_LOG_FILE",
    ]:
        monkeypatch.delenv(key, raising=False)
    settings = ConfigManager(load_env_files=False)

    assert settings.get_max_offset_ms() == 600000
    assert settings.get_backup_suffix() == ".og"
    assert settings.get_log_level() == "WARNING"
    assert settings.get_log_file() is None


def test_values_from_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("CAPSHIFT_MAX_OFFSET_MS", "0")
    monkeypatch.setenv("CAPSHIFT_BACKUP_SUFFIX", ".bak")
    monkeypatch.setenv("CAPSHIFT_LOG_LEVEL", "debug")
    monkeypatch.setenv("CAPSHIFT_LOG_FILE", str(tmp_path / "capshift.log"))
    settings = ConfigManager(load_env_files=False)

    assert settings.get_max_offset_ms() == 0
    assert settings.get_backup_suffix() == ".bak"
    assert settings.get_log_level() == "DEBUG"
    assert settings.get_log_file() == tmp_path / "capshift.log"


def test_env_file_in_working_directory(monkeypatch, tmp_path) -> None:
    # setenv first so teardown removes the value load_dotenv writes
    monkeypatch.setenv("CAPSHIFT_BACKUP_SUFFIX", ".placeholder")
    monkeypatch.delenv("CAPSHIFT_BACKUP_SUFFIX")
    (tmp_path / ".env").write_text("CAPSHIFT_BACKUP_SUFFIX=.orig\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = ConfigManager()

    assert settings.get_backup_suffix() == ".orig"


@pytest.mark.parametrize(
    "key, value, getter",
    [
        ("CAPSHIFT_MAX_OFFSET_MS", "ten", "get_max_offset_ms"),
        ("CAPSHIFT_MAX_OFFSET_MS", "-1", "get_max_offset_ms"),
        ("CAPSHIFT_BACKUP_SUFFIX", "", "get_backup_suffix"),
        ("CAPSHIFT_LOG_LEVEL", "LOUD", "get_log_level"),
    ],
)
def test_invalid_values(monkeypatch, key, value, getter) -> None:
    monkeypatch.setenv(key, value)
    settings = ConfigManager(load_env_files=False)

    with pytest.raises(ConfigurationError) as excinfo:
        getattr(settings, getter)()
    assert excinfo.value.key == key
