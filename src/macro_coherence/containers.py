"""Dependency container wiring for the application."""

from dataclasses import dataclass

from macro_coherence.config import Settings
from macro_coherence.services.coherence import CoherenceService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    coherence_service: CoherenceService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    coherence_service = CoherenceService(
        tolerance=resolved_settings.coherence_tolerance,
        strict_zero_expected=resolved_settings.strict_zero_expected,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        coherence_service=coherence_service,
    )
