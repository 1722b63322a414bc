"""Custom exception hierarchy for the Vistara estimator."""

from __future__ import annotations


class VistaraError(Exception):
    """Base exception for all Vistara errors."""


class EstimateValidationError(VistaraError, ValueError):
    """Raised when a project input cannot be estimated.

    ``field`` names the offending input so callers can turn the error
    into a field-level prompt.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class InvalidAreaError(EstimateValidationError):
    """Raised when the area is zero, negative or not a finite number."""

    def __init__(self, area: float) -> None:
        super().__init__(
            "area",
            f"Area must be a positive, finite number (got {area!r})",
        )
        self.area = area


class MissingProjectTypeError(EstimateValidationError):
    """Raised when no project type has been selected."""

    def __init__(self) -> None:
        super().__init__("project_type", "A project type must be selected")


class UnknownPricingRevisionError(VistaraError, KeyError):
    """Raised when a pricing revision name is not registered."""

    def __init__(self, revision: str, available: list[str]) -> None:
        super().__init__(revision)
        self.revision = revision
        self.available = available

    def __str__(self) -> str:
        return (
            f"Unknown pricing revision '{self.revision}'; "
            f"available: {', '.join(self.available)}"
        )
