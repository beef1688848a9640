"""lift-insights: training log analytics for muscle recovery and personal records."""

__version__ = "0.1.0"
