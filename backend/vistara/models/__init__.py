"""Domain models for the Vistara estimator."""

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
from vistara.models.estimate import (
    AdjustmentSummary,
    Assumption,
    ComponentCost,
    CostEstimate,
    EstimateMetadata,
    PhaseDurations,
    ProjectSummary,
    Timeline,
)
from vistara.models.project import Location, ProjectInput

__all__ = [
    "AdjustmentSummary",
    "AreaUnit",
    "Assumption",
    "Component",
    "ComponentCost",
    "Confidence",
    "CostCategory",
    "CostEstimate",
    "EstimateMetadata",
    "Location",
    "Phase",
    "PhaseDurations",
    "ProjectInput",
    "ProjectScope",
    "ProjectSummary",
    "ProjectType",
    "QualityTier",
    "Timeline",
]
