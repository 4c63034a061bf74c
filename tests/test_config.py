"""Tests for environment-driven configuration."""

from gen4save.config import EditorConfig


def test_defaults_when_env_empty():
    config = EditorConfig.from_env({})
    assert config.log_level == "INFO"
    assert config.host == "0.0.0.0"
    assert config.port == 5000
    assert config.debug is False
    assert config.max_upload_bytes == 1024 * 1024
    assert config.secret_key


def test_reads_prefixed_variables():
    config = EditorConfig.from_env({
        "GEN4SAVE_LOG_LEVEL": "debug",
        "GEN4SAVE_HOST": "127.0.0.1",
        "GEN4SAVE_PORT": "8080",
        "GEN4SAVE_DEBUG": "yes",
        "GEN4SAVE_MAX_UPLOAD_BYTES": "2048",
        "GEN4SAVE_SECRET_KEY": "s3cret",
    })
    assert config.log_level == "DEBUG"
    assert config.host == "127.0.0.1"
    assert config.port == 8080
    assert config.debug is True
    assert config.max_upload_bytes == 2048
    assert config.secret_key == "s3cret"


def test_secret_key_not_in_repr():
    config = EditorConfig(secret_key="hidden")
    assert "hidden" not in repr(config)
