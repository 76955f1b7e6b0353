"""Main entry point for sass_dependencies package.

This module allows the package to be executed with `python -m sass_dependencies`.
"""

from __future__ import annotations

from .cli import app

if __name__ == "__main__":
    app()
