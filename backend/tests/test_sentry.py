import logging
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bowling_score.utils import sentry as sentry_utils


@pytest.fixture()
def sentry_calls(monkeypatch):
    calls = {"init": [], "tags": {}}

    def fake_init(**kwargs):
        calls["init"].append(kwargs)

    def fake_set_tag(key, value):
        calls["tags"][key] = value

    monkeypatch.setattr(sentry_utils.sentry_sdk, "init", fake_init)
    monkeypatch.setattr(sentry_utils.sentry_sdk, "set_tag", fake_set_tag)
    for var in (
        "SENTRY_DSN",
        "SENTRY_ENVIRONMENT",
        "SENTRY_RELEASE",
        "SENTRY_TRACES_SAMPLE_RATE",
        "SENTRY_PROFILES_SAMPLE_RATE",
    ):
        monkeypatch.delenv(var, raising=False)
    return calls


def test_skips_without_dsn(sentry_calls, caplog):
    with caplog.at_level(logging.INFO):
        assert sentry_utils.init_sentry() is False
    assert sentry_calls["init"] == []
    assert "SENTRY_DSN not provided" in caplog.text


def test_initialises_with_release_and_rule_tags(sentry_calls, monkeypatch):
    monkeypatch.setenv("SENTRY_DSN", "https://key@example.invalid/1")
    monkeypatch.setenv("SENTRY_ENVIRONMENT", " staging ")
    monkeypatch.setenv("SENTRY_RELEASE", "bowling-score@1.2.3")
    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "0.25")
    monkeypatch.setattr(sentry_utils.config, "BOWLING_ENFORCE_FRAME_OVERFLOW", False)
    monkeypatch.setattr(
        sentry_utils.config, "BOWLING_TENTH_FRAME_ALWAYS_THREE_ROLLS", True
    )

    assert sentry_utils.init_sentry() is True

    (kwargs,) = sentry_calls["init"]
    assert kwargs["dsn"] == "https://key@example.invalid/1"
    assert kwargs["environment"] == "staging"
    assert kwargs["release"] == "bowling-score@1.2.3"
    assert kwargs["traces_sample_rate"] == 0.25
    assert kwargs["profiles_sample_rate"] == 0.0
    assert sentry_calls["tags"] == {
        "bowling.enforce_frame_overflow": "false",
        "bowling.tenth_frame_always_three_rolls": "true",
    }


def test_release_falls_back_to_installed_version(sentry_calls, monkeypatch):
    monkeypatch.setenv("SENTRY_DSN", "https://key@example.invalid/1")
    monkeypatch.setattr(sentry_utils.metadata, "version", lambda name: "0.1.0")

    sentry_utils.init_sentry()

    assert sentry_calls["init"][0]["release"] == "bowling-score@0.1.0"


def test_release_omitted_when_not_installed(sentry_calls, monkeypatch):
    def missing(name):
        raise sentry_utils.metadata.PackageNotFoundError(name)

    monkeypatch.setenv("SENTRY_DSN", "https://key@example.invalid/1")
    monkeypatch.setattr(sentry_utils.metadata, "version", missing)

    sentry_utils.init_sentry()

    assert sentry_calls["init"][0]["release"] is None


def test_invalid_sample_rate_uses_default(sentry_calls, monkeypatch, caplog):
    monkeypatch.setenv("SENTRY_DSN", "https://key@example.invalid/1")
    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "often")

    with caplog.at_level(logging.WARNING):
        sentry_utils.init_sentry()

    assert sentry_calls["init"][0]["traces_sample_rate"] == 0.0
    assert "SENTRY_TRACES_SAMPLE_RATE is not a valid float" in caplog.text


def test_negative_sample_rate_uses_default(sentry_calls, monkeypatch, caplog):
    monkeypatch.setenv("SENTRY_DSN", "https://key@example.invalid/1")
    monkeypatch.setenv("SENTRY_PROFILES_SAMPLE_RATE", "-0.5")

    with caplog.at_level(logging.WARNING):
        sentry_utils.init_sentry()

    assert sentry_calls["init"][0]["profiles_sample_rate"] == 0.0
    assert "SENTRY_PROFILES_SAMPLE_RATE cannot be negative" in caplog.text
