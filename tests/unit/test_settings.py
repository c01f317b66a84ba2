import pytest
from pydantic import ValidationError

from salesboard_auth.config.settings import Settings

SETTINGS_ENV = (
    "SCRYPT_COST",
    "SCRYPT_BLOCK_SIZE",
    "SCRYPT_PARALLELIZATION",
    "SCRYPT_MAXMEM_BYTES",
    "HASHER_MAX_CONCURRENCY",
    "HASHER_TIMEOUT_SECONDS",
    "PASSWORD_MIN_LENGTH",
    "BOOTSTRAP_ADMIN_USERNAME",
    "BOOTSTRAP_ADMIN_PASSWORD",
    "BOOTSTRAP_ADMIN_PASSWORD_FILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)


def test_defaults_are_deterministic() -> None:
    settings = Settings(_env_file=None)

    assert settings.scrypt_cost == 16_384
    assert settings.scrypt_block_size == 8
    assert settings.scrypt_parallelization == 1
    assert settings.scrypt_maxmem_bytes == 32 * 1024 * 1024
    assert settings.hasher_max_concurrency == 4
    assert settings.hasher_timeout_seconds is None
    assert settings.password_min_length == 6
    assert settings.bootstrap_admin_username is None
    assert settings.bootstrap_admin_password is None
    assert settings.bootstrap_admin_password_file is None
    assert settings.log_level == "INFO"


def test_env_values_override_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCRYPT_COST", "32768")
    monkeypatch.setenv("HASHER_MAX_CONCURRENCY", "2")
    monkeypatch.setenv("HASHER_TIMEOUT_SECONDS", "1.5")
    monkeypatch.setenv("BOOTSTRAP_ADMIN_USERNAME", "admin")

    settings = Settings(_env_file=None)

    assert settings.scrypt_cost == 32_768
    assert settings.hasher_max_concurrency == 2
    assert settings.hasher_timeout_seconds == 1.5
    assert settings.bootstrap_admin_username == "admin"


@pytest.mark.parametrize("value", ["0", "1", "1000", "-16"])
def test_scrypt_cost_must_be_power_of_two(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("SCRYPT_COST", value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("HASHER_MAX_CONCURRENCY", "0"),
        ("HASHER_TIMEOUT_SECONDS", "0"),
        ("PASSWORD_MIN_LENGTH", "0"),
        ("SCRYPT_MAXMEM_BYTES", "-1"),
        ("BOOTSTRAP_ADMIN_PASSWORD", ""),
    ],
)
def test_invalid_values_raise_validation_error(
    monkeypatch: pytest.MonkeyPatch,
    key: str,
    value: str,
) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
