"""Physical constants used by the rocket equation.

Values in SI units unless the name says otherwise.
"""

# Gravitational
G_0 = 9.80665  # m/s² — standard gravitational acceleration

# Conversion factors
KM_TO_M = 1.0e3
M_TO_KM = 1.0e-3

# Standard gravity in the km/s velocity unit used by the solver
G_0_KM = G_0 * M_TO_KM  # km/s²
