"""Testing support – Hypothesis strategies for Option values."""

from optval.testing.strategies import options, present_options

__all__ = ["options", "present_options"]
