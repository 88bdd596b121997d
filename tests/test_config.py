import pytest
from loguru import logger

from wishdraw.core.config import Settings, load_settings
from wishdraw.core.logging import setup_logging


def test_settings_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_PATH", "DRAW_MAX_ATTEMPTS"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_PATH", "")
    monkeypatch.setenv("DRAW_MAX_ATTEMPTS", "250")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_path == ""
    assert settings.draw_max_attempts == 250


@pytest.mark.parametrize("value", ["many", "0", "-3"])
def test_invalid_max_attempts(monkeypatch, value):
    monkeypatch.setenv("DRAW_MAX_ATTEMPTS", value)
    with pytest.raises(ValueError):
        load_settings()


def test_setup_logging_writes_to_stderr(capsys):
    setup_logging("INFO", None)
    try:
        logger.bind(exchange_id="x1").info("Names drawn")
        logger.debug("hidden")
    finally:
        logger.remove()

    err = capsys.readouterr().err
    assert "Names drawn" in err
    assert "exchange_id" in err
    assert "hidden" not in err


def test_setup_logging_adds_file_sink(tmp_path):
    log_path = tmp_path / "wishdraw.log"
    setup_logging("WARNING", str(log_path))
    try:
        logger.debug("debug goes to file")
    finally:
        logger.remove()

    assert list(tmp_path.iterdir())
