"""Assemble a diagnostic bug report for git."""

__version__ = "0.1.0"
