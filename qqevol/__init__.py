"""Runge-Kutta time evolution of a D-state quantum system driven by a pulsed field."""

__version__ = "0.1.0"
__all__ = ["__version__"]