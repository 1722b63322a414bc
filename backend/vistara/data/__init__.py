"""Pricing data layer for the Vistara estimator."""

from vistara.data.pricing_tables import PricingTable, ScaleBand
from vistara.data.repository import PricingRepository
from vistara.data.revisions import (
    CANONICAL_PRICING,
    PRICING_REVISIONS,
    get_pricing_table,
)

__all__ = [
    "CANONICAL_PRICING",
    "PRICING_REVISIONS",
    "PricingRepository",
    "PricingTable",
    "ScaleBand",
    "get_pricing_table",
]
