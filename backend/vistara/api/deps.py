"""Environment-driven configuration for FastAPI endpoints."""

from __future__ import annotations

import logging
import os

from vistara.data.revisions import DEFAULT_REVISION
from vistara.engine import CostEngine
from vistara.factory import create_default_engine

logger = logging.getLogger(__name__)

PRICING_REVISION_ENV = "VISTARA_PRICING_REVISION"
CORS_ORIGINS_ENV = "VISTARA_CORS_ORIGINS"
DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]


def get_pricing_revision() -> str:
    """Pricing revision named in the environment, or the canonical one."""
    return os.environ.get(PRICING_REVISION_ENV, "").strip() or DEFAULT_REVISION


def get_cors_origins() -> list[str]:
    """Comma-separated origins from the environment."""
    raw = os.environ.get(CORS_ORIGINS_ENV, "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


def create_engine_from_env() -> CostEngine:
    """Create a CostEngine for the configured pricing revision.

    Raises UnknownPricingRevisionError if the environment names a
    revision that is not registered.
    """
    revision = get_pricing_revision()
    logger.info("Using pricing revision '%s'", revision)
    return create_default_engine(revision)
