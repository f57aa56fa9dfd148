"""Dependency container wiring for the application."""

from dataclasses import dataclass

from recipe_nutrition.app_logging import configure_logging
from recipe_nutrition.config import Settings, parse_log_level
from recipe_nutrition.services.analysis import NutritionalAnalysisService
from recipe_nutrition.services.superfoods import SuperfoodService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: NutritionalAnalysisService
    superfood_service: SuperfoodService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(parse_log_level(resolved_settings.log_level))
    return AppContainer(
        settings=resolved_settings,
        analysis_service=NutritionalAnalysisService(
            debug=resolved_settings.analysis_debug
        ),
        superfood_service=SuperfoodService(),
    )
