"""Solvers for days 1 to 18 of a 2021 advent puzzle calendar, one module per day."""

__version__ = "0.1.0"