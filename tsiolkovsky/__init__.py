"""Tsiolkovsky rocket equation solver.

Solve ΔV = Isp · g0 · ln(M0 / Me) for whichever quantity is unknown, over
scalars or broadcast numpy arrays.
"""

from tsiolkovsky.core.rocket_equation import (
    ArgumentError,
    ComputationError,
    Quantity,
    RocketEquationError,
    solve,
)

__app_name__ = "Tsiolkovsky"
__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "ComputationError",
    "Quantity",
    "RocketEquationError",
    "solve",
]
