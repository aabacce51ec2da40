"""
interaction_monitor package.

Application shell around :mod:`interaction_core`: logging setup and the
demo entry point.
"""

__all__ = [
    "logger",
    "main",
]
