"""
Numeric settings shared by the linear and nonlinear solvers.
"""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    pivot_tolerance: float = 1e-15        # |pivot| below this counts as zero
    convergence_tolerance: float = 1e-15  # Newton stops once |step| is below this
    max_iterations: int = 12              # Newton steps taken before giving up
    round_places: int = 14                # decimal places kept in returned values

    def __post_init__(self):
        """Validate fields after initialization"""
        if self.pivot_tolerance < 0:
            raise ValueError("pivot_tolerance must be non-negative")
        if self.convergence_tolerance <= 0:
            raise ValueError("convergence_tolerance must be positive")
        if self.max_iterations < 0:
            raise ValueError("max_iterations must be non-negative")
        if not 0 <= self.round_places <= 15:
            raise ValueError("round_places must be between 0 and 15")


DEFAULT_CONFIG = SolverConfig()
