"""Registered pricing table revisions.

Rates are INR per square metre. ``canonical`` is the revision used
unless a caller asks for another one by name; the others reproduce
constants that earlier deployments of the estimator shipped with, so
what-if comparisons can be run against them.
"""

from __future__ import annotations

from vistara.data.location_index import (
    CITY_LOCATION_MULTIPLIERS,
    DEFAULT_LOCATION_MULTIPLIER,
)
from vistara.data.pricing_tables import PricingTable, ScaleBand
from vistara.exceptions import UnknownPricingRevisionError
from vistara.models.enums import Component, ProjectType, QualityTier

_S = QualityTier.STANDARD
_P = QualityTier.PREMIUM
_L = QualityTier.LUXURY
_N = QualityTier.NOT_INCLUDED


def _tiers(standard: float, premium: float, luxury: float) -> dict[QualityTier, float]:
    return {_N: 0.0, _S: standard, _P: premium, _L: luxury}


COMPONENT_PRICES: dict[Component, dict[QualityTier, float]] = {
    # Core systems
    Component.PLUMBING: _tiers(180, 350, 700),
    Component.ELECTRICAL: _tiers(150, 300, 600),
    Component.AC: _tiers(400, 750, 1400),
    Component.ELEVATOR: _tiers(180, 380, 850),
    # Finishes
    Component.BUILDING_ENVELOPE: _tiers(150, 320, 650),
    Component.LIGHTING: _tiers(120, 280, 600),
    Component.WINDOWS: _tiers(220, 450, 950),
    Component.CEILING: _tiers(130, 270, 580),
    Component.SURFACES: _tiers(280, 550, 1100),
    # Interiors
    Component.FIXED_FURNITURE: _tiers(400, 750, 1400),
    Component.LOOSE_FURNITURE: _tiers(280, 550, 1200),
    Component.FURNISHINGS: _tiers(90, 220, 500),
    Component.APPLIANCES: _tiers(180, 380, 850),
    Component.ARTEFACTS: _tiers(70, 180, 450),
}

BASE_RATES: dict[ProjectType, float] = {
    ProjectType.RESIDENTIAL: 850.0,
    ProjectType.COMMERCIAL: 1100.0,
    ProjectType.MIXED_USE: 1300.0,
}

SMALL_PROJECT_SCALE_BANDS: list[ScaleBand] = [
    ScaleBand(below_sqm=30, factor=1.10),
    ScaleBand(below_sqm=50, factor=1.06),
    ScaleBand(below_sqm=100, factor=1.03),
]

PROJECT_TYPE_MULTIPLIERS: dict[ProjectType, float] = {
    ProjectType.RESIDENTIAL: 1.00,
    ProjectType.COMMERCIAL: 1.10,
    ProjectType.MIXED_USE: 1.20,
}


def _civil(premium: float, luxury: float) -> dict[QualityTier, float]:
    return {_N: 0.0, _S: 1.0, _P: premium, _L: luxury}


CANONICAL_PRICING = PricingTable(
    revision="canonical",
    description="Civil 1.35x/1.80x, 6% contingency, no fees or GST",
    base_rates=BASE_RATES,
    scale_bands=SMALL_PROJECT_SCALE_BANDS,
    civil_quality_multipliers=_civil(1.35, 1.80),
    component_prices=COMPONENT_PRICES,
    location_multipliers=CITY_LOCATION_MULTIPLIERS,
    default_location_multiplier=DEFAULT_LOCATION_MULTIPLIER,
    project_type_multipliers=PROJECT_TYPE_MULTIPLIERS,
    complexity_step=0.03,
    contingency_rate=0.06,
)

ENHANCED_CIVIL_PRICING = CANONICAL_PRICING.model_copy(update={
    "revision": "enhanced-civil",
    "description": "Civil 1.40x/2.00x, 8% contingency, no fees or GST",
    "civil_quality_multipliers": _civil(1.40, 2.00),
    "contingency_rate": 0.08,
})

PROFESSIONAL_PRICING = CANONICAL_PRICING.model_copy(update={
    "revision": "professional",
    "description": "Civil 1.60x/2.80x, 9% contingency, 13% professional fees, 12% GST",
    "civil_quality_multipliers": _civil(1.60, 2.80),
    "contingency_rate": 0.09,
    "professional_fee_rate": 0.13,
    "gst_rate": 0.12,
})

DEFAULT_REVISION = CANONICAL_PRICING.revision

PRICING_REVISIONS: dict[str, PricingTable] = {
    table.revision: table
    for table in (CANONICAL_PRICING, ENHANCED_CIVIL_PRICING, PROFESSIONAL_PRICING)
}


def get_pricing_table(revision: str = DEFAULT_REVISION) -> PricingTable:
    """Look up a registered revision by name."""
    table = PRICING_REVISIONS.get(revision.strip().lower())
    if table is None:
        raise UnknownPricingRevisionError(revision, sorted(PRICING_REVISIONS))
    return table
