"""Project input models for the Vistara estimator."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from vistara.models.enums import AreaUnit, Component, ProjectScope, QualityTier

logger = logging.getLogger(__name__)

# Spellings the wizard has used for "not included" over time.
_NOT_INCLUDED_ALIASES = frozenset({"", "none", "notincluded", "not_included", "not-included"})

_COMPONENT_FIELDS = tuple(c.value for c in Component)


def parse_tier(value: object) -> QualityTier:
    """Parse a user-supplied tier, treating anything unrecognised as not included."""
    if isinstance(value, QualityTier):
        return value
    if value is None:
        return QualityTier.NOT_INCLUDED
    text = str(value).strip().lower()
    if text in _NOT_INCLUDED_ALIASES:
        return QualityTier.NOT_INCLUDED
    try:
        return QualityTier(text)
    except ValueError:
        logger.warning("Unrecognised quality tier %r; treating as not included", value)
        return QualityTier.NOT_INCLUDED


class Location(BaseModel):
    """Project location; only the city takes part in pricing."""

    model_config = ConfigDict(frozen=True)

    city: str = ""
    state: str = ""

    @property
    def display(self) -> str:
        parts = [p for p in (self.city.strip(), self.state.strip()) if p]
        return ", ".join(parts) if parts else "Unspecified"


class ProjectInput(BaseModel):
    """Description of the project to be estimated.

    The wizard builds this one field at a time, so every field has a
    default and nothing is validated here beyond types: the engine
    decides what is fatal (no area, no project type) and what falls
    back to a documented default.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    project_type: str = ""
    scope: ProjectScope = ProjectScope.FULL_PROJECT
    area: float = 0.0
    area_unit: AreaUnit = AreaUnit.SQFT
    location: Location = Field(default_factory=Location)
    complexity: int = 5

    civil_quality: QualityTier = QualityTier.STANDARD
    plumbing: QualityTier = QualityTier.STANDARD
    electrical: QualityTier = QualityTier.STANDARD
    ac: QualityTier = QualityTier.NOT_INCLUDED
    elevator: QualityTier = QualityTier.NOT_INCLUDED
    building_envelope: QualityTier = QualityTier.NOT_INCLUDED
    lighting: QualityTier = QualityTier.NOT_INCLUDED
    windows: QualityTier = QualityTier.NOT_INCLUDED
    ceiling: QualityTier = QualityTier.NOT_INCLUDED
    surfaces: QualityTier = QualityTier.NOT_INCLUDED
    fixed_furniture: QualityTier = QualityTier.NOT_INCLUDED
    loose_furniture: QualityTier = QualityTier.NOT_INCLUDED
    furnishings: QualityTier = QualityTier.NOT_INCLUDED
    appliances: QualityTier = QualityTier.NOT_INCLUDED
    artefacts: QualityTier = QualityTier.NOT_INCLUDED

    @field_validator(*_COMPONENT_FIELDS, mode="before")
    @classmethod
    def _coerce_tier(cls, v: Any) -> QualityTier:
        return parse_tier(v)

    @field_validator("project_type", mode="before")
    @classmethod
    def _strip_project_type(cls, v: Any) -> str:
        return "" if v is None else str(v).strip()

    def tier_for(self, component: Component) -> QualityTier:
        """Return the tier selected for *component*."""
        tier: QualityTier = getattr(self, component.value)
        return tier

    def with_updates(self, **changes: Any) -> ProjectInput:
        """Return a copy with *changes* applied and re-validated.

        Accepts either field names or their camelCase aliases, which is
        how the wizard submits one field per user action.
        """
        data = self.model_dump()
        for key, value in changes.items():
            name = _ALIASES.get(key, key)
            data[name] = value
        return ProjectInput.model_validate(data)


_ALIASES: dict[str, str] = {
    to_camel(name): name for name in ProjectInput.model_fields
}
