"""Simulador de Compensações AT — work-accident compensation calculators."""

__version__ = "0.1.0"
