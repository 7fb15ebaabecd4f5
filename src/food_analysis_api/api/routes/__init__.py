"""API routes."""

from . import analyze, static

__all__ = ["analyze", "static"]
