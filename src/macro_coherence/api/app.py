"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, Request

from macro_coherence.api.models import (
    AtwaterPayload,
    DailyPayload,
    FoodsToMealPayload,
    TargetComparisonPayload,
)
from macro_coherence.app_logging import configure_logging
from macro_coherence.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/validate/atwater")
    async def validate_atwater(
        payload: AtwaterPayload, request: Request
    ) -> dict[str, object]:
        """Check a record's calories against its macros."""
        state_container: AppContainer = request.app.state.container
        result = state_container.coherence_service.check_atwater(
            payload.macros.to_domain(), payload.tolerance
        )
        return asdict(result)

    @app.post("/validate/meal")
    async def validate_meal(
        payload: FoodsToMealPayload, request: Request
    ) -> dict[str, object]:
        """Check that foods add up to the meal totals."""
        state_container: AppContainer = request.app.state.container
        result = state_container.coherence_service.validate_foods_to_meal(
            [food.to_domain() for food in payload.foods],
            payload.macros.to_domain(),
            payload.tolerance,
            payload.context,
        )
        return asdict(result)

    @app.post("/validate/hierarchy")
    async def validate_hierarchy(
        payload: DailyPayload, request: Request
    ) -> dict[str, object]:
        """Validate foods, meals and daily totals together."""
        state_container: AppContainer = request.app.state.container
        report = state_container.coherence_service.validate_hierarchy(
            payload.to_domain(), payload.tolerance
        )
        if not report.valid:
            logger.info(
                "Hierarchy incoherent: meals=%s errors=%s",
                len(payload.meals),
                len(report.errors),
            )
        return asdict(report)

    @app.post("/validate/target")
    async def validate_target(
        payload: TargetComparisonPayload, request: Request
    ) -> dict[str, object]:
        """Compare totals against a nutritional target."""
        state_container: AppContainer = request.app.state.container
        result = state_container.coherence_service.validate_against_target(
            payload.actual.to_domain(),
            payload.target.to_domain(),
            payload.tolerance,
            payload.context,
        )
        return asdict(result)

    return app
