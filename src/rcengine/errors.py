"""
Error taxonomy for the calculation engine.

- DomainError: input makes a formula undefined or physically meaningless.
  Raised immediately, never recovered internally.
- RangeWarning: value outside the documented engineering range of the
  design code profile. Returned alongside results, never raised.

Design findings such as over-reinforcement are result values, not errors
(see results.CapacityResult).
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class DomainError(ValueError):
    """Invalid geometry or material input for a formula."""


class RangeWarning(BaseModel):
    """
    Non-fatal finding: a parameter lies outside its engineering range.

    Attributes:
        parameter: Parameter name (e.g., "fc")
        value: Supplied value
        lo, hi: Documented inclusive range
        message: Human-readable description

    Example:
        >>> w = RangeWarning.outside("fc", 60.0, 10.0, 50.0)
        >>> print(w.message)
        fc = 60 is outside engineering range [10, 50]
    """
    model_config = ConfigDict(frozen=True)

    parameter: str
    value: float
    lo: float
    hi: float
    message: str

    @classmethod
    def outside(cls, parameter: str, value: float, lo: float, hi: float) -> "RangeWarning":
        return cls(
            parameter=parameter,
            value=value,
            lo=lo,
            hi=hi,
            message=f"{parameter} = {value:g} is outside engineering range [{lo:g}, {hi:g}]",
        )


def require_positive(name: str, value: float, unit: Optional[str] = None) -> float:
    """Raise DomainError unless value > 0."""
    if not value > 0:
        suffix = f" {unit}" if unit else ""
        raise DomainError(f"{name} = {value}{suffix} must be positive")
    return value


def require_non_negative(name: str, value: float, unit: Optional[str] = None) -> float:
    """Raise DomainError if value < 0."""
    if not value >= 0:
        suffix = f" {unit}" if unit else ""
        raise DomainError(f"{name} = {value}{suffix} must be non-negative")
    return value
