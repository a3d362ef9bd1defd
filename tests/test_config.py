import pytest

from epd_dither.config import DitherSettings
from epd_dither.errors import ConfigurationError


def test_defaults(monkeypatch):
    for name in ("PALETTE", "DITHER_MODE", "KERNEL", "SERPENTINE", "CLAMP_MODE", "REPLACE_COLORS"):
        monkeypatch.delenv(name, raising=False)

    settings = DitherSettings.from_env()

    assert settings.palette == "spectra6"
    assert settings.dither_mode == "errorDiffusion"
    assert settings.kernel == "floydSteinberg"
    assert settings.serpentine is False
    assert settings.clamp_mode == "immediate"
    assert settings.replace_colors is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PALETTE", "ACEP")
    monkeypatch.setenv("SERPENTINE", "yes")
    monkeypatch.setenv("BAYER_SIZE", "8x8")
    monkeypatch.setenv("SOURCE_RETRIES", "5")

    settings = DitherSettings.from_env()

    assert settings.palette == "acep"
    assert settings.serpentine is True
    assert settings.bayer_size == "8x8"
    assert settings.retries == 5


def test_invalid_boolean_is_rejected(monkeypatch):
    monkeypatch.setenv("SERPENTINE", "sometimes")

    with pytest.raises(ConfigurationError):
        DitherSettings.from_env()
