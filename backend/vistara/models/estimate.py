"""Cost estimate output models for the Vistara estimator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vistara.models.enums import (
    AreaUnit,
    Component,
    Confidence,
    CostCategory,
    Phase,
    ProjectScope,
    ProjectType,
    QualityTier,
)

# Shortest duration each phase may be given, in months.
PHASE_MINIMUM_MONTHS: dict[Phase, int] = {
    Phase.PLANNING: 1,
    Phase.CONSTRUCTION: 3,
    Phase.INTERIORS: 1,
}


class PhaseDurations(BaseModel):
    """Duration of each project phase in whole months."""

    model_config = ConfigDict(frozen=True)

    planning: int
    construction: int
    interiors: int

    @model_validator(mode="after")
    def phases_meet_minimums(self) -> PhaseDurations:
        for phase, minimum in PHASE_MINIMUM_MONTHS.items():
            months = getattr(self, phase.value)
            if months < minimum:
                msg = f"{phase.value} phase must last at least {minimum} month(s), got {months}"
                raise ValueError(msg)
        return self

    def total(self) -> int:
        return self.planning + self.construction + self.interiors


class Timeline(BaseModel):
    """Construction timeline derived from type, size and complexity."""

    model_config = ConfigDict(frozen=True)

    total_months: int
    phases: PhaseDurations

    @model_validator(mode="after")
    def total_matches_phases(self) -> Timeline:
        if self.total_months != self.phases.total():
            msg = (
                f"total_months ({self.total_months}) must equal the sum of "
                f"phase durations ({self.phases.total()})"
            )
            raise ValueError(msg)
        return self


class ComponentCost(BaseModel):
    """Unadjusted cost of one priced component (transparency layer)."""

    model_config = ConfigDict(frozen=True)

    component: Component
    category: CostCategory
    tier: QualityTier
    rate: float
    rate_basis: str = "per_sqm"
    cost: float
    excluded_by_scope: bool = False
    description: str = ""


class AdjustmentSummary(BaseModel):
    """How the raw subtotal became the total cost."""

    model_config = ConfigDict(frozen=True)

    subtotal: float
    location_multiplier: float
    project_multiplier: float
    adjusted_subtotal: float
    contingency: float
    professional_fees: float = 0.0
    gst: float = 0.0


class Assumption(BaseModel):
    """A documented fallback or clamp applied during estimation."""

    model_config = ConfigDict(frozen=True)

    parameter: str
    assumed_value: str
    reasoning: str
    confidence: Confidence


class ProjectSummary(BaseModel):
    """Resolved view of the project that was estimated."""

    model_config = ConfigDict(frozen=True)

    project_type: ProjectType
    scope: ProjectScope
    area: float
    area_unit: AreaUnit
    area_sqm: float
    location: str
    complexity: int


class EstimateMetadata(BaseModel):
    """Metadata about the estimation run."""

    model_config = ConfigDict(frozen=True)

    engine_version: str
    pricing_revision: str
    currency: str = "INR"
    estimation_method: str = "tiered_component_area_rate"


class CostEstimate(BaseModel):
    """Complete estimate produced by the Vistara engine.

    A new instance is produced for every computation; it is never
    mutated afterwards. Report exporters and fee calculators should
    consume it through ``to_summary_dict`` / ``to_export_dict``.

    Line items and assumptions are tuples. The category and phase
    breakdowns are plain dicts, so the freeze is shallow there: treat
    them as read-only, or work on ``model_copy(deep=True)``.
    """

    model_config = ConfigDict(frozen=True)

    project_summary: ProjectSummary
    total_cost: int = Field(ge=0)
    cost_per_unit_area: float
    category_breakdown: dict[CostCategory, float]
    phase_breakdown: dict[Phase, float]
    component_breakdown: tuple[ComponentCost, ...]
    adjustments: AdjustmentSummary
    timeline: Timeline
    assumptions: tuple[Assumption, ...]
    metadata: EstimateMetadata

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from vistara.formatting import (
            format_compact_inr,
            format_inr,
            format_months,
            format_per_area,
        )

        summary = self.project_summary
        return {
            "project_type": summary.project_type.value,
            "scope": summary.scope.value,
            "location": summary.location,
            "area_formatted": f"{summary.area:,.0f} {summary.area_unit.value}",
            "total_cost_formatted": format_inr(self.total_cost),
            "total_cost_compact": format_compact_inr(self.total_cost),
            "cost_per_unit_area_formatted": format_per_area(
                self.cost_per_unit_area, summary.area_unit,
            ),
            "timeline_formatted": format_months(self.timeline.total_months),
            "category_breakdown": [
                {"category": cat.value, "cost_formatted": format_inr(cost)}
                for cat, cost in self.category_breakdown.items()
            ],
            "phase_breakdown": [
                {
                    "phase": phase.value,
                    "cost_formatted": format_inr(cost),
                    "duration_formatted": format_months(
                        getattr(self.timeline.phases, phase.value)
                    ),
                }
                for phase, cost in self.phase_breakdown.items()
            ],
            "num_assumptions": len(self.assumptions),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce the full JSON-safe record handed to export or storage."""
        return {
            "project_summary": self.project_summary.model_dump(mode="json"),
            "total_cost": self.total_cost,
            "cost_per_unit_area": self.cost_per_unit_area,
            "category_breakdown": {
                cat.value: cost for cat, cost in self.category_breakdown.items()
            },
            "phase_breakdown": {
                phase.value: cost for phase, cost in self.phase_breakdown.items()
            },
            "components": [
                {
                    "component": c.component.value,
                    "category": c.category.value,
                    "description": c.description,
                    "tier": c.tier.value,
                    "cost": c.cost,
                }
                for c in self.component_breakdown
            ],
            "adjustments": self.adjustments.model_dump(),
            "timeline": {
                "total_months": self.timeline.total_months,
                "phases": self.timeline.phases.model_dump(),
            },
            "assumptions": [
                {
                    "parameter": a.parameter,
                    "assumed_value": a.assumed_value,
                    "reasoning": a.reasoning,
                    "confidence": a.confidence.value,
                }
                for a in self.assumptions
            ],
            "metadata": self.metadata.model_dump(),
        }
