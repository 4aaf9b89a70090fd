"""Dependency container wiring for the application."""

from dataclasses import dataclass

from meal_merge.config import Settings
from meal_merge.services.meals import MealMergeService
from meal_merge.services.refinement import MealRefinementService, RefinementClient


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    merge_service: MealMergeService
    refinement_service: MealRefinementService


def build_container(
    refinement_client: RefinementClient, settings: Settings | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    merge_service = MealMergeService.from_settings(resolved_settings)
    refinement_service = MealRefinementService(
        client=refinement_client,
        merge_service=merge_service,
        model=resolved_settings.refinement_model,
        temperature=resolved_settings.refinement_temperature,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        merge_service=merge_service,
        refinement_service=refinement_service,
    )
