"""Sass Dependencies CLI Tool.

Prints the Makefile dependency rule of a Sass stylesheet: the stylesheet
followed by every project file it imports, directly or transitively.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console

from .analyzer.stylesheet_analyzer import find_project_dependencies
from .config.parser import SassDepsConfigParser
from .error_handling import ErrorHandler, FileAccessError, SassAnalysisError
from .output.makefile_formatter import MakefileFormatter

VERSION = "0.1.0"

app = typer.Typer(
    name="sass-deps",
    help="Print the Makefile dependency rule of a Sass stylesheet.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        Console().print(f"sass-deps version {VERSION}")
        raise typer.Exit


@app.command()
def deps(  # noqa: PLR0913
    source: str = typer.Argument(
        ...,
        help="Stylesheet whose dependencies are printed",
        show_default=False,
    ),
    search_path: str = typer.Argument(
        None,
        help="Additional directory searched when resolving imports",
        show_default=False,
    ),
    project_root: Path = typer.Option(
        None,
        "--project-root",
        "-r",
        help="Only list dependencies under this directory [default: assets/css]",
    ),
    load_paths: list[str] = typer.Option(
        [],
        "--load-path",
        "-I",
        help="Directory searched when resolving imports (can be used multiple times)",
    ),
    config_file: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file [default: ./sass-deps.toml when present]",
    ),
    output_file: Path = typer.Option(
        None,
        "--output-file",
        "-o",
        help="Write the dependency rule to a file instead of stdout",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show analysis details and error context on stderr",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging of every resolved import",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Print the Makefile dependency rule of SOURCE.

    Imports are resolved relative to the importing file, then in the load
    paths from sass-deps.toml, --load-path and SEARCH_PATH, in that order.
    Only files under the project root are listed. Nothing is printed when
    an import cannot be resolved.

    Example:
        sass-deps assets/css/main.scss
        sass-deps assets/css/main.scss vendor/foundation/scss -o build/main.d

    """
    # Status messages go to stderr, the dependency rule to stdout
    status_console = Console(file=sys.stderr)
    error_handler = ErrorHandler(console=status_console, verbose=verbose, debug=debug)

    try:
        config = SassDepsConfigParser().parse_config(Path.cwd(), config_file)
        if project_root is not None:
            config.project_root = project_root.absolute()
        for load_path in load_paths:
            config.add_load_path(load_path)
        if search_path:
            config.add_load_path(search_path)

        if verbose or debug:
            status_console.print(f"[blue]Stylesheet:[/blue] {source}")
            status_console.print(f"[blue]Project root:[/blue] {config.project_root}")
            for load_path in config.load_paths:
                status_console.print(f"[blue]Load path:[/blue] {load_path}")

        dependencies = find_project_dependencies(source, config)
        formatter = MakefileFormatter(source, dependencies)

        if output_file:
            try:
                formatter.save_to_file(output_file)
            except OSError as e:
                raise FileAccessError(
                    f"Failed to write dependency file: {e}",
                    file_path=output_file,
                    operation="write",
                    context={"original_error": str(e)},
                ) from e
        else:
            formatter.write(sys.stdout)

        if verbose or debug:
            status_console.print(
                f"[green]✓[/green] {len(dependencies)} project dependencies",
            )

    except SassAnalysisError as e:
        error_handler.handle_error(e)
        raise typer.Exit(code=1) from e
    except KeyboardInterrupt:
        status_console.print("\n[yellow]Analysis cancelled by user[/yellow]")
        raise
    except Exception as e:
        error_handler.handle_unexpected_error(e)
        raise


if __name__ == "__main__":
    app()
