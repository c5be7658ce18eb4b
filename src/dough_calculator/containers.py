"""Dependency container wiring for the application."""

from dataclasses import dataclass

from dough_calculator.config import Settings
from dough_calculator.services.dough import DoughCalculator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dough_calculator: DoughCalculator


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    dough_calculator = DoughCalculator(
        salt_rule=resolved_settings.salt_rule_text,
        cap_note=resolved_settings.poolish_cap_note,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        dough_calculator=dough_calculator,
    )
