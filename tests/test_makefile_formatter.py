"""Tests for the Makefile dependency formatter."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from sass_dependencies.output.makefile_formatter import MakefileFormatter


class TestMakefileFormatter:
    """Test dependency rule formatting."""

    def test_rule_with_dependencies(self) -> None:
        """Dependencies are space-separated after the target."""
        formatter = MakefileFormatter(
            "main.scss",
            ["/project/assets/css/_a.scss", "/project/assets/css/partials/_b.scss"],
        )

        assert formatter.format() == (
            "main.scss: /project/assets/css/_a.scss /project/assets/css/partials/_b.scss\n"
        )

    def test_rule_without_dependencies(self) -> None:
        """An empty rule still carries the colon and space."""
        assert MakefileFormatter("main.scss", []).format() == "main.scss: \n"

    def test_target_is_kept_as_given(self) -> None:
        """The target is not normalised."""
        formatter = MakefileFormatter("./assets/css/../css/main.scss", [])

        assert formatter.format().startswith("./assets/css/../css/main.scss: ")

    def test_paths_are_not_escaped(self) -> None:
        """Spaces in paths are written as they are."""
        formatter = MakefileFormatter("main.scss", ["/my project/_a.scss"])

        assert formatter.format() == "main.scss: /my project/_a.scss\n"

    def test_write_to_stream(self) -> None:
        """The rule is written to the stream as one line."""
        stream = StringIO()

        MakefileFormatter("main.scss", ["/p/_a.scss"]).write(stream)

        assert stream.getvalue() == "main.scss: /p/_a.scss\n"

    def test_save_to_file(self, tmp_path: Path) -> None:
        """Dependency files are written, creating parent directories."""
        output = tmp_path / "build" / "deps" / "main.d"

        MakefileFormatter("main.scss", ["/p/_a.scss"]).save_to_file(output)

        assert output.read_text(encoding="utf-8") == "main.scss: /p/_a.scss\n"
