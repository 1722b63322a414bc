"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from vistara.engine import ENGINE_VERSION
from vistara.exceptions import EstimateValidationError, VistaraError
from vistara.models.project import ProjectInput  # noqa: TCH001 (FastAPI resolves at runtime)

if TYPE_CHECKING:
    from vistara.engine import CostEngine

logger = logging.getLogger(__name__)


def create_app(
    *,
    cost_engine: CostEngine | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    cost_engine
        Optional pre-built cost engine (e.g. tests). If not provided, one
        is created from environment configuration on first request.
    """
    from vistara.api.deps import get_cors_origins

    app = FastAPI(title="Vistara", version=ENGINE_VERSION)

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
        from vistara.api.deps import create_engine_from_env

        try:
            eng = create_engine_from_env()
        except VistaraError as exc:
            logger.exception("Could not configure cost engine")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        app.state.cost_engine = eng
        return eng

    def _estimate_response(project: ProjectInput) -> dict[str, Any]:
        engine = _get_cost_engine()
        try:
            result = engine.estimate(project)
        except EstimateValidationError as exc:
            raise HTTPException(
                status_code=422,
                detail={"field": exc.field, "message": exc.message},
            ) from exc
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
            "export_dict": result.to_export_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(project: ProjectInput) -> dict[str, Any]:
        return _estimate_response(project)

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        from vistara.models.enums import AreaUnit, QualityTier
        from vistara.models.project import Location

        sample_project = ProjectInput(
            project_type="residential",
            area=1000,
            area_unit=AreaUnit.SQFT,
            location=Location(city="Mumbai", state="Maharashtra"),
            complexity=5,
            civil_quality=QualityTier.STANDARD,
            plumbing=QualityTier.STANDARD,
            electrical=QualityTier.STANDARD,
            ac=QualityTier.STANDARD,
            building_envelope=QualityTier.STANDARD,
            lighting=QualityTier.STANDARD,
            windows=QualityTier.STANDARD,
            ceiling=QualityTier.STANDARD,
            surfaces=QualityTier.STANDARD,
            fixed_furniture=QualityTier.STANDARD,
            loose_furniture=QualityTier.STANDARD,
            furnishings=QualityTier.STANDARD,
            appliances=QualityTier.STANDARD,
        )
        response = _estimate_response(sample_project)
        response["project"] = sample_project.model_dump(mode="json", by_alias=True)
        return response

    # ------------------------------------------------------------------
    # GET /api/pricing-revisions
    # ------------------------------------------------------------------

    @app.get("/api/pricing-revisions")
    def pricing_revisions() -> dict[str, Any]:
        from vistara.data.revisions import PRICING_REVISIONS

        engine = _get_cost_engine()
        return {
            "active": engine.pricing_revision,
            "revisions": [
                {"revision": name, "description": table.description}
                for name, table in PRICING_REVISIONS.items()
            ],
        }

    return app
