"""Tests for typed environment variable access."""

from datetime import timedelta

import pytest

from appcommon.params.env import (
    get_env_as_bool,
    get_env_as_duration,
    get_env_as_float,
    get_env_as_int,
    get_env_as_string,
)

VAR = "APPCOMMON_TEST_VALUE"


@pytest.fixture(autouse=True)
def unset_var(monkeypatch):
    monkeypatch.delenv(VAR, raising=False)


@pytest.mark.unit
class TestEnvGetters:
    """Unit tests for the get_env_as_* functions."""

    @pytest.mark.parametrize(
        "getter,default",
        [
            (get_env_as_string, "d"),
            (get_env_as_int, 5),
            (get_env_as_bool, True),
            (get_env_as_float, 1.5),
            (get_env_as_duration, timedelta(seconds=1)),
        ],
    )
    def test_unset_uses_default(self, getter, default):
        assert getter(VAR, default) == (default, True)

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv(VAR, "   ")

        assert get_env_as_string(VAR, "d") == ("d", True)
        assert get_env_as_int(VAR, 5) == (5, True)

    def test_string(self, monkeypatch):
        monkeypatch.setenv(VAR, " value ")

        assert get_env_as_string(VAR, "d") == ("value", False)

    def test_int(self, monkeypatch):
        monkeypatch.setenv(VAR, "8080")

        assert get_env_as_int(VAR, 0) == (8080, False)

    def test_invalid_int(self, monkeypatch):
        monkeypatch.setenv(VAR, "eighty")

        assert get_env_as_int(VAR, 80) == (80, True)

    def test_bool(self, monkeypatch):
        monkeypatch.setenv(VAR, "F")

        assert get_env_as_bool(VAR, True) == (False, False)

    def test_float(self, monkeypatch):
        monkeypatch.setenv(VAR, "2.5e-1")

        assert get_env_as_float(VAR, 0.0) == (0.25, False)

    def test_duration(self, monkeypatch):
        monkeypatch.setenv(VAR, "1m30s")

        assert get_env_as_duration(VAR, timedelta(0)) == (timedelta(seconds=90), False)
