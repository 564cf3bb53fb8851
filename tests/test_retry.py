import pytest

from site_preview.errors import ConfigurationError, ProviderError
from site_preview.pipeline.anthropic_retry import call_with_retry


def test_fail_once_then_succeed(no_sleep):
    sleep, delays = no_sleep
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise ProviderError("temporary")
        return {"ok": True}

    result = call_with_retry(flaky, max_attempts=2, base_delay=1.0, sleep=sleep)

    assert result == {"ok": True}
    assert len(calls) == 2
    assert delays == [1.0]


def test_always_failing_surfaces_last_error_after_max_attempts(no_sleep):
    sleep, delays = no_sleep
    errors = [ProviderError("first"), ProviderError("second")]
    calls = []

    def broken():
        calls.append(1)
        raise errors[len(calls) - 1]

    with pytest.raises(ProviderError) as exc_info:
        call_with_retry(broken, max_attempts=2, base_delay=1.0, sleep=sleep)

    assert exc_info.value is errors[1]
    assert len(calls) == 2
    assert delays == [1.0]


def test_delay_grows_linearly(no_sleep):
    sleep, delays = no_sleep

    def broken():
        raise ProviderError("down")

    with pytest.raises(ProviderError):
        call_with_retry(broken, max_attempts=4, base_delay=0.5, sleep=sleep)

    assert delays == [0.5, 1.0, 1.5]


def test_non_provider_errors_are_not_retried(no_sleep):
    sleep, delays = no_sleep
    calls = []

    def misconfigured():
        calls.append(1)
        raise ConfigurationError("no key")

    with pytest.raises(ConfigurationError):
        call_with_retry(misconfigured, max_attempts=3, base_delay=1.0, sleep=sleep)

    assert len(calls) == 1
    assert delays == []


def test_defaults_come_from_config(monkeypatch, no_sleep):
    from site_preview import config

    monkeypatch.setattr(config, "MAX_ATTEMPTS", 3)
    monkeypatch.setattr(config, "BASE_DELAY", 2.0)
    sleep, delays = no_sleep
    calls = []

    def broken():
        calls.append(1)
        raise ProviderError("down")

    with pytest.raises(ProviderError):
        call_with_retry(broken, sleep=sleep)

    assert len(calls) == 3
    assert delays == [2.0, 4.0]
