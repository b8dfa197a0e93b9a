"""
Return math used by the metrics assembler.
"""


def simple_return(start: float, end: float) -> float:
    """Percentage change from *start* to *end*.

    Only meaningful for start > 0; callers are expected to guard.
    """
    return (end - start) / start * 100


def annualized_return(start: float, end: float, years: float) -> float:
    """Compound annual growth rate from *start* to *end* over *years*, in percent.

    Degenerate inputs (years <= 0 or start <= 0) yield 0.0.
    """
    if years <= 0 or start <= 0:
        return 0.0
    total = end / start
    return (total ** (1 / years) - 1) * 100
