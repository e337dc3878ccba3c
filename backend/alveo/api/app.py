"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from alveo.api.deps import configure_logging, get_cors_origins
from alveo.engine import COST_DATA_VERSION, ENGINE_VERSION
from alveo.exceptions import AlveoError, EstimationError
from alveo.models.enums import GasSystem  # noqa: TCH001
from alveo.models.project import (  # noqa: TCH001 (FastAPI resolves at runtime)
    MedicalGasRequirements,
    ProjectConfiguration,
)
from alveo.models.space_program import SpaceProgram  # noqa: TCH001

if TYPE_CHECKING:
    from collections.abc import Callable

    from alveo.engine import CostEngine
    from alveo.models.estimate import CostBreakdown

logger = logging.getLogger(__name__)


class BreakdownRequest(BaseModel):
    """Body of POST /api/breakdown."""

    total: float


def create_app(*, cost_engine: CostEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    cost_engine
        Optional pre-built cost engine (e.g. for tests). If not provided,
        one is created via create_default_engine on first request.
    """
    configure_logging()
    app = FastAPI(title="Alveo", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.cost_engine = cost_engine

    def _get_cost_engine() -> CostEngine:
        eng: CostEngine | None = app.state.cost_engine
        if eng is not None:
            return eng
        from alveo.factory import create_default_engine

        eng = create_default_engine()
        app.state.cost_engine = eng
        return eng

    def _run(operation: str, fn: Callable[[], Any]) -> Any:
        try:
            return fn()
        except EstimationError as exc:
            logger.warning("Rejected %s request: %s", operation, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except AlveoError as exc:
            logger.exception("Estimation error during %s", operation)
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "version": ENGINE_VERSION,
            "cost_data_version": COST_DATA_VERSION,
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(config: ProjectConfiguration) -> dict[str, Any]:
        engine = _get_cost_engine()
        result = _run("estimate", lambda: engine.estimate(config))
        return {
            "estimate": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(),
        }

    @app.post("/api/estimate/whole-building")
    def estimate_whole_building(config: ProjectConfiguration) -> dict[str, Any]:
        engine = _get_cost_engine()
        cost = _run(
            "whole-building estimate",
            lambda: engine.estimate_whole_building_cost(config),
        )
        return {
            "total": cost,
            "regional_multiplier": engine.repository.get_regional_multiplier(
                config.location.state,
            ),
        }

    @app.post("/api/estimate/rooms")
    def estimate_rooms(config: ProjectConfiguration) -> dict[str, Any]:
        engine = _get_cost_engine()
        result = _run(
            "room estimate",
            lambda: engine.estimate_room_configuration_cost(config),
        )
        return {**result.model_dump(mode="json"), "total_sqft": result.total_sqft}

    @app.post("/api/estimate/medical-gas")
    def estimate_medical_gas(gas: MedicalGasRequirements) -> dict[str, Any]:
        engine = _get_cost_engine()
        result = _run("medical gas estimate", lambda: engine.itemize_medical_gas(gas))
        return result.model_dump(mode="json")

    @app.post("/api/estimate/review")
    def estimate_review(config: ProjectConfiguration) -> dict[str, Any]:
        engine = _get_cost_engine()
        total = _run("review estimate", lambda: engine.estimate_review_cost(config))
        return {
            "total": total,
            "summary": engine.summarize_review_cost(total),
            "breakdown": engine.build_cost_breakdown(total).model_dump(mode="json"),
        }

    # ------------------------------------------------------------------
    # Medical gas compliance
    # ------------------------------------------------------------------

    @app.post("/api/medical-gas/compliance")
    def medical_gas_compliance(config: ProjectConfiguration) -> list[dict[str, Any]]:
        from alveo.compliance import medical_gas_compliance_alerts

        alerts = _run("compliance check", lambda: medical_gas_compliance_alerts(config))
        return [alert.model_dump(mode="json") for alert in alerts]

    @app.post("/api/medical-gas/recommended-outlets/{gas}")
    def medical_gas_recommended_outlets(
        gas: GasSystem, program: SpaceProgram,
    ) -> list[dict[str, Any]]:
        from alveo.compliance import recommended_outlets

        return [o.model_dump(mode="json") for o in recommended_outlets(program, gas)]

    # ------------------------------------------------------------------
    # POST /api/breakdown
    # ------------------------------------------------------------------

    @app.post("/api/breakdown")
    def breakdown(body: BreakdownRequest) -> dict[str, Any]:
        engine = _get_cost_engine()

        def _build() -> CostBreakdown:
            if not math.isfinite(body.total) or body.total < 0:
                msg = f"Breakdown total must be a non-negative amount, got {body.total}"
                raise EstimationError(msg)
            return engine.build_cost_breakdown(body.total)

        result = _run("breakdown", _build)
        return result.model_dump(mode="json")

    # ------------------------------------------------------------------
    # Reference data
    # ------------------------------------------------------------------

    @app.get("/api/reference/room-categories")
    def room_categories() -> list[dict[str, Any]]:
        from alveo.data.room_categories import SPACE_CATEGORY_NAMES

        engine = _get_cost_engine()
        return [
            {
                **spec.model_dump(mode="json"),
                "space_category_name": SPACE_CATEGORY_NAMES[spec.space_category],
            }
            for spec in engine.repository.get_room_categories()
        ]

    @app.get("/api/reference/regions")
    def regions() -> dict[str, Any]:
        from alveo.data.regional_multipliers import (
            DEFAULT_REGIONAL_MULTIPLIER,
            US_STATE_CODES,
        )

        engine = _get_cost_engine()
        return {
            "multipliers": engine.repository.regional_multipliers,
            "default_multiplier": DEFAULT_REGIONAL_MULTIPLIER,
            "states": list(US_STATE_CODES),
        }

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        from alveo.factory import default_room_configuration
        from alveo.models.enums import BuildingType, ProjectTimeline, ProjectType
        from alveo.models.project import Location

        sample = (
            ProjectConfiguration(
                project_name="Sample Oral Surgery Suite",
                location=Location(city="Austin", state="TX"),
                project_type=ProjectType.RENOVATION,
                building_type=BuildingType.GROUND_FLOOR,
                timeline=ProjectTimeline.STANDARD,
                total_square_footage=2500,
                room_configuration=default_room_configuration(),
            )
            .with_gas_system(GasSystem.OXYGEN, required=True, central_supply=True)
            .with_outlet(GasSystem.OXYGEN, "Operatory", 2, "Ceiling column")
            .with_gas_system(GasSystem.VACUUM, required=True, central_system=True)
            .with_outlet(GasSystem.VACUUM, "Operatory", 2, "Wall")
        )
        engine = _get_cost_engine()
        est = _run("sample estimate", lambda: engine.estimate(sample))
        return {
            "configuration": sample.model_dump(mode="json"),
            "estimate": est.model_dump(mode="json"),
            "summary": est.to_summary_dict(),
        }

    return app
