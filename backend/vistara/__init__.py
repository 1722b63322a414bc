"""Vistara construction and interior cost estimator.

Usage::

    from vistara import ProjectInput, compute_estimate

    project = ProjectInput(project_type="residential", area=1000, area_unit="sqft")
    estimate = compute_estimate(project)
"""

from vistara.engine import CostEngine, compute_estimate
from vistara.exceptions import (
    EstimateValidationError,
    InvalidAreaError,
    MissingProjectTypeError,
    UnknownPricingRevisionError,
    VistaraError,
)
from vistara.factory import create_default_engine
from vistara.models.enums import (
    AreaUnit,
    Component,
    CostCategory,
    Phase,
    ProjectScope,
    ProjectType,
    QualityTier,
)
from vistara.models.estimate import (
    Assumption,
    CostEstimate,
    Timeline,
)
from vistara.models.project import Location, ProjectInput

__all__ = [
    "AreaUnit",
    "Assumption",
    "Component",
    "CostCategory",
    "CostEngine",
    "CostEstimate",
    "EstimateValidationError",
    "InvalidAreaError",
    "Location",
    "MissingProjectTypeError",
    "Phase",
    "ProjectInput",
    "ProjectScope",
    "ProjectType",
    "QualityTier",
    "Timeline",
    "UnknownPricingRevisionError",
    "VistaraError",
    "compute_estimate",
    "create_default_engine",
]
