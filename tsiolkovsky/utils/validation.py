"""Physical plausibility checks for rocket equation inputs.

These checks are advisory: :func:`tsiolkovsky.core.rocket_equation.solve`
never calls them and accepts any numeric input. The CLI uses them to warn
about inputs that will produce NaN or Inf.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


# --- Common validators ---


def validate_positive(name: str, value: Any, result: ValidationResult) -> None:
    """Validate that every element of a value is strictly positive."""
    arr = np.asarray(value, dtype=float)
    n_bad = int(np.count_nonzero(~(arr > 0)))
    if n_bad:
        if arr.ndim == 0:
            msg = f"{name} must be positive, got {arr.item()}"
        else:
            msg = f"{name} must be positive ({n_bad} of {arr.size} values are not)"
        result.error(name, msg, value=value, limit=0.0)


def validate_finite(name: str, value: Any, result: ValidationResult) -> None:
    """Warn if any element of a value is NaN or infinite."""
    arr = np.asarray(value, dtype=float)
    if not np.all(np.isfinite(arr)):
        result.warning(name, f"{name} contains NaN or infinite values", value=value)


def validate_rocket_inputs(
    delta_v: Any = None,
    isp: Any = None,
    m0: Any = None,
    me: Any = None,
) -> ValidationResult:
    """Check the given rocket equation inputs for physical plausibility.

    Arguments left as None are skipped. Nothing here raises for bad values;
    findings are collected in the returned result.
    """
    result = ValidationResult()

    for name, value in (("delta_v", delta_v), ("isp", isp), ("m0", m0), ("me", me)):
        if value is not None:
            validate_finite(name, value, result)

    if isp is not None:
        validate_positive("isp", isp, result)
    if m0 is not None:
        validate_positive("m0", m0, result)
    if me is not None:
        validate_positive("me", me, result)

    if delta_v is not None and np.any(np.asarray(delta_v, dtype=float) < 0):
        result.info("delta_v", "Negative ΔV values describe a mass gain")

    if m0 is not None and me is not None:
        try:
            heavier = np.asarray(me, dtype=float) > np.asarray(m0, dtype=float)
        except ValueError:
            result.info("m0", "m0 and me shapes do not broadcast; mass ratio not checked")
        else:
            if np.any(heavier):
                result.warning(
                    "me",
                    "Final mass exceeds initial mass; the mass ratio is below one",
                )

    return result
