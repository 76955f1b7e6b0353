"""Shared test fixtures and utilities for sass-dependencies tests.

This module provides a temporary project laid out the way sass-deps expects
it: stylesheets under ``assets/css`` and framework stylesheets outside of
it, with the current directory switched to the project for the test.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from sass_dependencies.config.parser import SassDepsConfig


def write_stylesheets(root: Path, files: dict[str, str]) -> dict[str, Path]:
    """Write stylesheet files below ``root``.

    Args:
        root: Directory the relative names are resolved against
        files: Mapping of relative file name to file content

    Returns:
        Mapping of relative file name to the absolute path written

    """
    written = {}
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        written[name] = path.absolute()
    return written


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create an empty project and make it the current directory.

    Cleanup is automatic via tmp_path fixture.
    """
    project = tmp_path / "project"
    (project / "assets" / "css").mkdir(parents=True)
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def css_dir(project_dir: Path) -> Path:
    """Project root the dependency filter keeps files under."""
    return project_dir / "assets" / "css"


@pytest.fixture
def sass_project(project_dir: Path) -> Path:
    """Create a project whose main stylesheet imports partials and a framework.

    Layout::

        assets/css/main.scss          imports settings, partials/buttons, grid
        assets/css/_settings.scss
        assets/css/partials/_buttons.scss   imports ../settings
        vendor/grid/_grid.scss        only found through the search path

    """
    write_stylesheets(
        project_dir,
        {
            "assets/css/main.scss": (
                '@import "settings";\n'
                '@import "partials/buttons";\n'
                '@import "grid";\n'
                "body { color: $text-color; }\n"
            ),
            "assets/css/_settings.scss": "$text-color: #333;\n",
            "assets/css/partials/_buttons.scss": (
                '@import "../settings";\n'
                ".button { color: $text-color; }\n"
            ),
            "vendor/grid/_grid.scss": ".row { display: flex; }\n",
        },
    )
    return project_dir


@pytest.fixture
def default_config(css_dir: Path) -> SassDepsConfig:
    """Configuration with the default project root and no load paths."""
    return SassDepsConfig(project_root=css_dir)
