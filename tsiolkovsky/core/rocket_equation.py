"""Closed-form solutions of the Tsiolkovsky rocket equation.

    ΔV = Isp · g0 · ln(M0 / Me)

Given any three of velocity change [km/s], specific impulse [s], initial
(wet) mass [kg] and final (dry) mass [kg], ``solve`` computes the fourth.
All inputs may be scalars, sequences or numpy arrays of any shape; they are
combined with numpy broadcasting, so a column of ΔV values against a row of
Isp values yields a full grid.

Physically meaningless inputs (e.g. a dry mass above the wet mass) are not
rejected: the result simply contains NaN or Inf. Use
:func:`tsiolkovsky.utils.validation.validate_rocket_inputs` for an advisory
plausibility report.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

import numpy as np

from tsiolkovsky.utils.constants import G_0_KM

logger = logging.getLogger(__name__)


class RocketEquationError(Exception):
    """Base class for rocket equation failures."""


class ArgumentError(RocketEquationError, ValueError):
    """Raised when not exactly one of the four quantities is absent."""


class ComputationError(RocketEquationError):
    """Raised when the inputs cannot be combined, usually a shape mismatch."""


class Quantity(Enum):
    """The four quantities of the rocket equation, in argument order."""

    DELTA_V = "delta_v"
    ISP = "isp"
    INITIAL_MASS = "m0"
    FINAL_MASS = "me"

    @property
    def unit(self) -> str:
        return _UNITS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_UNITS = {
    Quantity.DELTA_V: "km/s",
    Quantity.ISP: "s",
    Quantity.INITIAL_MASS: "kg",
    Quantity.FINAL_MASS: "kg",
}

_LABELS = {
    Quantity.DELTA_V: "Velocity change ΔV",
    Quantity.ISP: "Specific impulse Isp",
    Quantity.INITIAL_MASS: "Initial (wet) mass M0",
    Quantity.FINAL_MASS: "Final (dry) mass Me",
}


# --- Closed-form rearrangements ---


def exhaust_velocity(isp: Any) -> np.ndarray:
    """Effective exhaust velocity ceff = Isp · g0 [km/s]."""
    return np.asarray(isp) * G_0_KM


def delta_v(isp: Any, m0: Any, me: Any) -> np.ndarray:
    """Velocity change [km/s] from Isp [s] and the mass ratio M0/Me."""
    ceff = exhaust_velocity(isp)
    return ceff * np.log(np.asarray(m0) / np.asarray(me))


def specific_impulse(delta_v: Any, m0: Any, me: Any) -> np.ndarray:
    """Specific impulse [s] needed for ΔV [km/s] at mass ratio M0/Me."""
    return (np.asarray(delta_v) / G_0_KM) / np.log(np.asarray(m0) / np.asarray(me))


def initial_mass(delta_v: Any, isp: Any, me: Any) -> np.ndarray:
    """Wet mass [kg] required to reach ΔV [km/s] with dry mass Me [kg]."""
    ceff = exhaust_velocity(isp)
    return np.asarray(me) * np.exp(np.asarray(delta_v) / ceff)


def final_mass(delta_v: Any, isp: Any, m0: Any) -> np.ndarray:
    """Dry mass [kg] left after spending ΔV [km/s] from wet mass M0 [kg]."""
    ceff = exhaust_velocity(isp)
    return np.asarray(m0) / np.exp(np.asarray(delta_v) / ceff)


_SOLVERS: dict[Quantity, Callable[..., np.ndarray]] = {
    Quantity.DELTA_V: delta_v,
    Quantity.ISP: specific_impulse,
    Quantity.INITIAL_MASS: initial_mass,
    Quantity.FINAL_MASS: final_mass,
}


# --- Dispatch ---


def missing_quantity(delta_v: Any, isp: Any, m0: Any, me: Any) -> Quantity:
    """Return the single quantity whose argument is ``None``.

    Raises:
        ArgumentError: If zero or more than one argument is ``None``.
    """
    values = (delta_v, isp, m0, me)
    absent = [q for q, v in zip(Quantity, values) if v is None]
    if len(absent) != 1:
        raise ArgumentError(
            "Exactly one argument must be absent (None), "
            f"got {len(absent)}: {[q.value for q in absent]}"
        )
    return absent[0]


def solve(delta_v: Any, isp: Any, m0: Any, me: Any) -> np.ndarray:
    """Solve the rocket equation for whichever argument is ``None``.

    Args:
        delta_v: Velocity change [km/s], or None to solve for it.
        isp: Specific impulse [s], or None to solve for it.
        m0: Initial (wet) mass [kg], or None to solve for it.
        me: Final (dry) mass [kg], or None to solve for it.

    Returns:
        The missing quantity as a float array, broadcast over the shapes of
        the three given inputs (0-d for scalar inputs).

    Raises:
        ArgumentError: If not exactly one argument is None.
        ComputationError: If the inputs do not broadcast together.

    Example:
        >>> float(solve(None, 300, 1000, 150))  # doctest: +ELLIPSIS
        5.581...
    """
    target = missing_quantity(delta_v, isp, m0, me)
    known = [v for v in (delta_v, isp, m0, me) if v is not None]

    try:
        # Non-physical inputs propagate as NaN/Inf without warnings
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            out = np.asarray(_SOLVERS[target](*known))
    except ValueError as exc:
        raise ComputationError(
            "Could not compute value; most likely due to a dimension mismatch."
        ) from exc

    logger.debug("Solved for %s, output shape %s", target.value, out.shape)
    return out
