"""Dependency rule formatters."""
