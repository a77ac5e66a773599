"""Utility modules for the Tsiolkovsky solver."""

from tsiolkovsky.utils.constants import G_0, G_0_KM

__all__ = ["G_0", "G_0_KM"]
