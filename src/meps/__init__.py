"""MEPS: Medical Error Prevention System."""

__version__ = "0.1.0"
