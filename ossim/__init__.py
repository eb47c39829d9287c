"""Simulations of classic operating-system algorithms: scheduling, paging, memory allocation, deadlock avoidance and process basics."""

__version__ = "0.1.0"