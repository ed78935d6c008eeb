"""Tests for container wiring and settings."""

import pytest
from pydantic import ValidationError

from macro_coherence.config import Settings
from macro_coherence.containers import build_container


def test_build_container_creates_service(settings: Settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.coherence_service.tolerance == 0.05
    assert container.coherence_service.strict_zero_expected is False


def test_settings_flow_into_service() -> None:
    settings = Settings(
        coherence_tolerance=0.1, strict_zero_expected=True, debug=True
    )

    service = build_container(settings).coherence_service

    assert service.tolerance == 0.1
    assert service.strict_zero_expected is True
    assert service.debug is True


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COHERENCE_TOLERANCE", "0.02")
    monkeypatch.setenv("STRICT_ZERO_EXPECTED", "true")

    settings = Settings()

    assert settings.coherence_tolerance == 0.02
    assert settings.strict_zero_expected is True


def test_negative_tolerance_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(coherence_tolerance=-0.1)
