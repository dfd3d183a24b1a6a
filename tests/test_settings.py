import bcrypt
import pytest
from pydantic import ValidationError

import config
from services.auth_service import verify_admin_pin


@pytest.fixture(autouse=True)
def no_dotenv(tmp_path, monkeypatch):
    # Settings also reads ./.env; run from an empty folder
    monkeypatch.chdir(tmp_path)


def test_hash_beats_plain_pin(monkeypatch):
    pin_hash = bcrypt.hashpw(b"5678", bcrypt.gensalt(rounds=4)).decode("utf-8")
    monkeypatch.setenv("GYM_ADMIN_PIN_HASH", pin_hash)
    monkeypatch.setenv("GYM_ADMIN_PIN", "9999")

    settings = config.Settings()

    assert verify_admin_pin("5678", settings.admin_pin_hash)
    assert not verify_admin_pin("9999", settings.admin_pin_hash)
    assert settings.legacy_pin_in_use is False


def test_plain_pin_is_hashed(monkeypatch, tmp_path):
    monkeypatch.setenv("GYM_ADMIN_PIN", " 2468 ")
    monkeypatch.setenv("GYM_USERS_FILE", str(tmp_path / "members.txt"))
    monkeypatch.setenv("GYM_PAYSLIP_FOLDER", str(tmp_path / "out"))
    monkeypatch.setenv("GYM_LOG_LEVEL", "debug")

    settings = config.Settings()

    assert settings.admin_pin_hash != b"2468"
    assert settings.admin_pin is None
    assert verify_admin_pin("2468", settings.admin_pin_hash)
    assert settings.users_file == tmp_path / "members.txt"
    assert settings.payslip_folder == tmp_path / "out"
    assert settings.log_level == "DEBUG"


def test_defaults_to_legacy_pin():
    settings = config.Settings()

    assert settings.legacy_pin_in_use is True
    assert verify_admin_pin(config.LEGACY_ADMIN_PIN, settings.admin_pin_hash)
    assert str(settings.users_file) == config.USERS_FILE
    assert settings.log_level == "WARNING"


def test_empty_variables_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("GYM_ADMIN_PIN", "")
    monkeypatch.setenv("GYM_USERS_FILE", "")

    settings = config.Settings()

    assert settings.legacy_pin_in_use is True
    assert str(settings.users_file) == config.USERS_FILE


@pytest.mark.parametrize("level", ["BASIC_FORMAT", "verbose", "10"])
def test_rejects_unknown_log_level(monkeypatch, level):
    monkeypatch.setenv("GYM_LOG_LEVEL", level)
    with pytest.raises(ValidationError):
        config.Settings()


def test_settings_are_frozen(settings):
    with pytest.raises(ValidationError):
        settings.admin_pin_hash = b""
