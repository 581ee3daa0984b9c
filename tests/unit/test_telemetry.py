"""Telemetry config and the traced decorator without a configured exporter."""

import pytest

from devportal.shared.telemetry import TelemetryConfig, get_telemetry, set_telemetry, traced


def test_disabled_telemetry_sets_up_nothing() -> None:
    telemetry = TelemetryConfig("devportal-plugins", "1.0.0", enabled=False)

    assert telemetry.setup_telemetry(exporter_type="console") is None
    assert telemetry.tracer_provider is None
    telemetry.shutdown()


def test_global_telemetry_can_be_cleared() -> None:
    telemetry = TelemetryConfig("devportal-plugins", "1.0.0", enabled=False)
    set_telemetry(telemetry)
    try:
        assert get_telemetry() is telemetry
    finally:
        set_telemetry(None)
    assert get_telemetry() is None


async def test_traced_async_returns_result() -> None:
    @traced("test.async", attributes={"component": "test"})
    async def lookup(name: str) -> str:
        return name.upper()

    assert await lookup(name="ws") == "WS"
    assert lookup.__name__ == "lookup"


def test_traced_sync_reraises() -> None:
    @traced()
    def fail() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        fail()
