"""FastAPI application factory."""

import logging
from datetime import date

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from burger_tracker.api.manage import UNPROCESSABLE
from burger_tracker.api.manage import router as manage_router
from burger_tracker.api.models import HomeLogRequest, StreetLogRequest
from burger_tracker.api.serializers import (
    serialize_log,
    serialize_period,
    serialize_range,
    serialize_tiers,
)
from burger_tracker.app_logging import configure_logging
from burger_tracker.containers import AppContainer
from burger_tracker.domain.entities import BurgerLog
from burger_tracker.domain.errors import EntityNotFoundError, ValidationError
from burger_tracker.domain.stats import TimeFilter
from burger_tracker.services.date_ranges import step_anchor


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Burger Tracker")
    app.state.container = container

    app.include_router(manage_router)

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=UNPROCESSABLE, content={"detail": str(exc)})

    @app.exception_handler(EntityNotFoundError)
    async def not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/stats")
    async def stats(
        request: Request,
        time_filter: TimeFilter = Query(TimeFilter.YEAR, alias="filter"),
        anchor: date | None = None,
    ) -> dict[str, object]:
        """Return total, distribution and tier list for a period."""
        state_container: AppContainer = request.app.state.container
        stats_service = state_container.stats_service
        period = stats_service.get_period(time_filter, anchor or date.today())
        rows = stats_service.get_tier_rows(period.tiers)
        return {**serialize_period(period), "tiers": serialize_tiers(rows)}

    @app.get("/logs")
    async def logs(
        request: Request,
        time_filter: TimeFilter = Query(TimeFilter.YEAR, alias="filter"),
        anchor: date | None = None,
    ) -> dict[str, object]:
        """Return the logs of a period, newest first."""
        state_container: AppContainer = request.app.state.container
        stats_service = state_container.stats_service
        resolved_anchor = anchor or date.today()
        date_range = stats_service.resolve(time_filter, resolved_anchor)
        period_logs = stats_service.get_logs(time_filter, resolved_anchor)
        return {
            "range": serialize_range(date_range),
            "logs": _serialize_logs(state_container, period_logs),
        }

    @app.get("/range/step")
    async def step_range(
        request: Request,
        time_filter: TimeFilter = Query(TimeFilter.YEAR, alias="filter"),
        anchor: date | None = None,
        direction: int = 1,
    ) -> dict[str, object]:
        """Move the anchor one unit back or forward and return the new range."""
        if direction not in {-1, 1}:
            raise HTTPException(
                status_code=UNPROCESSABLE, detail="direction must be -1 or 1"
            )
        state_container: AppContainer = request.app.state.container
        moved = step_anchor(time_filter, anchor or date.today(), direction)
        date_range = state_container.stats_service.resolve(time_filter, moved)
        return {"anchor": moved.isoformat(), "range": serialize_range(date_range)}

    @app.post("/logs/home", status_code=status.HTTP_201_CREATED)
    async def add_home_log(
        payload: HomeLogRequest, request: Request
    ) -> dict[str, object]:
        """Record home-made burgers."""
        state_container: AppContainer = request.app.state.container
        log = state_container.logbook_service.record_home(
            payload.day, payload.quantity, payload.note, payload.photo_ref
        )
        return _serialize_logs(state_container, [log])[0]

    @app.post("/logs/street", status_code=status.HTTP_201_CREATED)
    async def add_street_log(
        payload: StreetLogRequest, request: Request
    ) -> dict[str, object]:
        """Record a burger bought at a place."""
        state_container: AppContainer = request.app.state.container
        log = state_container.logbook_service.record_street(
            payload.day,
            place_id=payload.place_id,
            new_place_name=payload.new_place_name,
            burger_def_id=payload.burger_def_id,
            new_burger_name=payload.new_burger_name,
            rating=payload.rating,
            note=payload.note,
            photo_ref=payload.photo_ref,
        )
        return _serialize_logs(state_container, [log])[0]

    @app.delete("/logs/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_log(log_id: str, request: Request) -> None:
        """Delete a log."""
        state_container: AppContainer = request.app.state.container
        state_container.logbook_service.delete_log(log_id)

    return app


def _serialize_logs(
    container: AppContainer, logs: list[BurgerLog]
) -> list[dict[str, object]]:
    definitions = {
        item.id: item for item in container.store.list_burger_definitions()
    }
    places = {item.id: item for item in container.store.list_places()}
    stats_service = container.stats_service
    return [
        serialize_log(
            log,
            definitions,
            places,
            stats_service.localization,
            orphan_color=stats_service.unresolved_place_color,
            home_color=stats_service.home_color,
        )
        for log in logs
    ]
