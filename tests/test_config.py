from cookie_flash.config import DEFAULT_COOKIE_NAME, Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.FLASH_COOKIE_NAME == DEFAULT_COOKIE_NAME == "_flash"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_DIR is None


def test_env_overrides_cookie_name(monkeypatch):
    monkeypatch.setenv("FLASH_COOKIE_NAME", "notice")
    assert Settings(_env_file=None).FLASH_COOKIE_NAME == "notice"


def test_only_used_settings_are_declared():
    assert set(Settings.model_fields) == {
        "PROJECT_NAME",
        "VERSION",
        "FLASH_COOKIE_NAME",
        "LOG_LEVEL",
        "LOG_DIR",
    }
