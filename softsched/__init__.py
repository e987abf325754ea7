"""Cooperative priority task scheduler (scheduler) with software timers (stimer)."""

__version__ = "0.1.0"
__all__ = ["scheduler", "stimer"]