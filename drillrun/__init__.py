"""Compile, run and verify small programming exercises."""

__version__ = "0.1.0"