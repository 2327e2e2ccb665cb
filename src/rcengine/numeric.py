"""
Numeric utilities shared by every calculation group.

Tolerance comparisons and inclusive range checks used for input
validation gates and for "effectively zero/one" decisions.
"""

DEFAULT_TOLERANCE = 1e-9


def approx_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Check whether two values agree within an absolute tolerance.

    Args:
        a, b: Values to compare
        tolerance: Absolute tolerance (same units as a and b)

    Returns:
        True iff |a - b| <= tolerance

    Example:
        >>> approx_equal(172.3e6, 172.5e6, 5e6)
        True
    """
    if tolerance < 0:
        raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
    return abs(a - b) <= tolerance


def in_range(value: float, lo: float, hi: float) -> bool:
    """Inclusive range membership lo <= value <= hi."""
    if lo > hi:
        raise ValueError(f"Invalid range [{lo}, {hi}]: lower bound exceeds upper bound")
    return lo <= value <= hi


def is_effectively_zero(value: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True if |value| <= tolerance."""
    return approx_equal(value, 0.0, tolerance)
