"""Stylesheet dependency analysis."""
