from __future__ import annotations

import importlib

import pytest

import chilean_rut
from chilean_rut.config import Settings, settings


def test_default_settings_range():
    assert 1 <= settings.random_min < settings.random_max


def test_settings_rejects_empty_range():
    with pytest.raises(ValueError):
        Settings(random_min=10, random_max=10)
    with pytest.raises(ValueError):
        Settings(random_min=0, random_max=10)


def test_public_api():
    rut = chilean_rut.construct("15605286", "8")
    assert chilean_rut.is_valid(rut)
    assert chilean_rut.format_rut(rut, chilean_rut.RutFormat.FULL) == "15.605.286-8"
    assert chilean_rut.parse("15605286-8") == rut
    assert chilean_rut.calc_check_digit(1234567) == "4"
    assert chilean_rut.construct("1234", "3") < chilean_rut.construct("1345", "5")
    with pytest.raises(chilean_rut.InvalidNumberFormatError):
        chilean_rut.construct("", "1")
    with pytest.raises(chilean_rut.InvalidCheckDigitError):
        chilean_rut.construct("1", "A")


def test_settings_read_random_range_from_env(monkeypatch):
    import chilean_rut.config as config

    monkeypatch.setenv("RUT_RANDOM_MIN", "1000")
    monkeypatch.setenv("RUT_RANDOM_MAX", "2000")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.settings.random_min == 1000
        assert reloaded.settings.random_max == 2000
        assert reloaded.Settings().random_max == 2000
    finally:
        monkeypatch.undo()
        importlib.reload(config)
