"""Tests for the project dependency filter."""

from __future__ import annotations

from pathlib import Path

import pytest

from sass_dependencies.analyzer.project_filter import (
    filter_project_dependencies,
    is_inside_project,
)

ROOT = "/project/assets/css"


class TestIsInsideProject:
    """Test the containment check."""

    @pytest.mark.parametrize(
        "path",
        [
            "/project/assets/css/_settings.scss",
            "/project/assets/css/partials/_a.scss",
            "/project/assets/css",
        ],
    )
    def test_paths_under_root_are_inside(self, path: str) -> None:
        """Files under the root, and the root itself, are inside."""
        assert is_inside_project(path, ROOT)

    @pytest.mark.parametrize(
        "path",
        [
            "/usr/lib/stylesheets/grid.scss",
            "/project/vendor/grid/_grid.scss",
            "/project/assets/css-legacy/_old.scss",
            "/project/assets/_shared.scss",
        ],
    )
    def test_paths_outside_root_are_rejected(self, path: str) -> None:
        """Sibling and parent directories are outside."""
        assert not is_inside_project(path, ROOT)

    def test_root_as_path_object(self) -> None:
        """The root may be given as a Path."""
        assert is_inside_project("/project/assets/css/a.scss", Path(ROOT))

    def test_relative_path_is_made_absolute(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Relative dependency paths are taken from the current directory."""
        monkeypatch.chdir(tmp_path)
        root = tmp_path / "assets" / "css"

        assert is_inside_project("assets/css/_a.scss", root)
        assert not is_inside_project("vendor/_a.scss", root)

    def test_dot_dot_prefixed_name_is_rejected(self) -> None:
        """The check looks at the relative path text, not its segments."""
        assert not is_inside_project("/project/assets/css/..hidden.scss", ROOT)


class TestFilterProjectDependencies:
    """Test filtering of a resolved dependency list."""

    def test_keeps_order_and_original_strings(self) -> None:
        """Kept paths are returned untouched, in input order."""
        dependencies = [
            "/project/assets/css/partials/_b.scss",
            "/usr/lib/stylesheets/grid.scss",
            "/project/assets/css/_a.scss",
        ]

        assert filter_project_dependencies(dependencies, ROOT) == [
            "/project/assets/css/partials/_b.scss",
            "/project/assets/css/_a.scss",
        ]

    def test_result_is_subset_of_input(self) -> None:
        """Nothing is added, only removed."""
        dependencies = [
            "/project/assets/css/_a.scss",
            "/opt/framework/_b.scss",
            "/project/assets/css/_c.scss",
        ]

        kept = filter_project_dependencies(dependencies, ROOT)

        assert set(kept) <= set(dependencies)
        assert len(kept) == 2

    def test_empty_input(self) -> None:
        """No dependencies give an empty result."""
        assert filter_project_dependencies([], ROOT) == []

    def test_everything_outside(self) -> None:
        """A list of framework files is filtered out entirely."""
        assert filter_project_dependencies(["/opt/a.scss", "/opt/b.scss"], ROOT) == []
