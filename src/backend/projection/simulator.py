"""
Trajectory simulator.

Advances the FIRE, Semi-FI and Coast FI balances year by year. All three
start from the same savings and receive the same annual contribution; they
differ only in when that contribution stops.
"""

from dataclasses import dataclass
from typing import List, Tuple

from config import MAX_PROJECTION_YEARS
from models import ProjectionInput, Targets


@dataclass(frozen=True)
class SimulationRun:
    """Start-of-year balances, one entry per simulated year."""
    years: Tuple[int, ...]
    fire: Tuple[float, ...]
    semi_fi: Tuple[float, ...]
    coast_fi: Tuple[float, ...]
    annual_contribution: float

    def __len__(self) -> int:
        return len(self.years)


def annual_contribution_of(inputs: ProjectionInput) -> float:
    return inputs.income * (inputs.savings_rate / 100.0)


def simulate(inputs: ProjectionInput, targets: Targets,
             max_years: int = MAX_PROJECTION_YEARS) -> SimulationRun:
    """
    Run the three contribution policies until every target has been reached
    once, or until `max_years` entries have been recorded.

    Balances are appended before the growth step, so index 0 always holds
    `current_savings`.
    """
    contribution = annual_contribution_of(inputs)
    growth = 1.0 + targets.real_rate

    fire = semi = coast = float(inputs.current_savings)
    fire_reached = semi_reached = coast_reached = False

    years: List[int] = []
    fire_path: List[float] = []
    semi_path: List[float] = []
    coast_path: List[float] = []

    for year in range(max_years):
        years.append(inputs.age + year)
        fire_path.append(fire)
        semi_path.append(semi)
        coast_path.append(coast)

        fire_reached = fire_reached or fire >= targets.fire_target
        semi_reached = semi_reached or semi >= targets.semi_fi_target
        coast_reached = coast_reached or coast >= targets.coast_target

        if fire_reached and semi_reached and coast_reached:
            break

        # FIRE: always saving
        fire = (fire + contribution) * growth

        # Semi-FI: saves whenever it sits below its target
        if semi < targets.semi_fi_target:
            semi = (semi + contribution) * growth
        else:
            semi = semi * growth

        # Coast: stops saving for good once the target has been hit
        if coast_reached:
            coast = coast * growth
        else:
            coast = (coast + contribution) * growth

    return SimulationRun(
        years=tuple(years),
        fire=tuple(fire_path),
        semi_fi=tuple(semi_path),
        coast_fi=tuple(coast_path),
        annual_contribution=contribution,
    )
