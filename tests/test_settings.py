import pytest

from series_smoothing.settings import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("OUTPUT_PRECISION", raising=False)
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.output_precision == 6


def test_settings_from_aliases() -> None:
    settings = Settings(LOG_LEVEL="DEBUG", OUTPUT_PRECISION=2)
    assert settings.log_level == "DEBUG"
    assert settings.output_precision == 2


def test_settings_reject_negative_precision() -> None:
    with pytest.raises(ValueError):
        Settings(OUTPUT_PRECISION=-1)
