"""
Presentation helpers: chart table and display strings for a projection.
"""

from typing import Dict, List, Optional, Union

import numpy as np

from models import ProjectionResult

NOT_ACHIEVED = "Not within projection window"


def chart_rows(result: ProjectionResult) -> List[Dict[str, Union[int, float]]]:
    """One row per simulated year, one column per trajectory."""
    table = np.column_stack([
        np.asarray(result.fire.balances, dtype=float),
        np.asarray(result.semi_fi.balances, dtype=float),
        np.asarray(result.coast_fi.balances, dtype=float),
    ])
    return [
        {"year": year, "FIRE": fire, "SemiFI": semi, "CoastFI": coast}
        for year, (fire, semi, coast) in zip(result.fire.years, table.tolist())
    ]


def format_currency(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def describe_age(age: Optional[int]) -> str:
    return NOT_ACHIEVED if age is None else str(age)


def summarize(result: ProjectionResult) -> Dict[str, str]:
    """Display strings for the targets panel."""
    t = result.targets
    retirement_age = result.inputs.retirement_age
    return {
        "fire_target": format_currency(t.fire_target),
        "fire_target_base": format_currency(t.fire_target_base),
        "cash_cushion_target": format_currency(t.cash_cushion_target),
        "semi_fi_target": format_currency(t.semi_fi_target),
        "coast_target": f"{format_currency(t.coast_target)} (grow to FIRE by age {retirement_age})",
        "real_rate": f"{t.real_rate * 100:.2f}%",
        "fire_age": describe_age(result.fire_age),
        "fire_base_age": describe_age(result.fire_base_age),
        "semi_fi_age": describe_age(result.semi_fi_age),
        "coast_fi_age": describe_age(result.coast_fi_age),
    }
