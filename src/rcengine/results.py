"""
Result models returned by the composed check functions.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .errors import RangeWarning


class DesignStatus(str, Enum):
    """Status of a design check."""
    PASS = "PASS"
    FAIL = "FAIL"
    WARNING = "WARNING"


class CapacityResult(BaseModel):
    """
    Capacity value with the classifications that belong to it.

    Attributes:
        value: Capacity (N or N·mm)
        unit: "N" or "N·mm"
        status: PASS / FAIL / WARNING
        over_reinforced: Flexural classification (None where not applicable)
        below_min_ratio: Minimum reinforcement finding (None where not applicable)
        xi: Relative compression zone height (flexure only)
        UR: Utilization ratio demand/value when a demand was supplied
        intermediates: Named intermediate quantities (x, h0, Vc, ...)
        warnings: Engineering range findings
        details: Calculation narrative
    """
    value: float
    unit: str
    status: DesignStatus
    over_reinforced: Optional[bool] = None
    below_min_ratio: Optional[bool] = None
    xi: Optional[float] = None
    UR: Optional[float] = None
    intermediates: Dict[str, float] = Field(default_factory=dict)
    warnings: List[RangeWarning] = Field(default_factory=list)
    details: str = ""

    @property
    def is_compliant(self) -> bool:
        """True unless the check failed (warnings do not fail a design)."""
        return self.status != DesignStatus.FAIL


def resolve_status(
    failed: bool,
    warnings: List[RangeWarning],
) -> DesignStatus:
    """FAIL over WARNING over PASS."""
    if failed:
        return DesignStatus.FAIL
    if warnings:
        return DesignStatus.WARNING
    return DesignStatus.PASS


def utilization(demand: Optional[float], capacity: float) -> Optional[float]:
    """demand / capacity, or None when no demand was supplied."""
    if demand is None:
        return None
    if capacity <= 0:
        return float('inf')
    return abs(demand) / capacity
