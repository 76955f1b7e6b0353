"""Error handling for Sass dependency analysis.

This module provides the exception hierarchy raised while resolving the
imports of a stylesheet, and a handler that logs those errors and renders
them on the status console before the CLI aborts.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

if TYPE_CHECKING:
    from pathlib import Path


class ErrorSeverity(Enum):
    """Error severity levels for categorization."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class SassAnalysisError(Exception):
    """Base exception for Sass dependency analysis errors."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        suggestions: list[str] | None = None,
        file_path: Path | str | None = None,
        line_number: int | None = None,
    ) -> None:
        """Initialize Sass analysis error.

        Args:
            message: Error message
            severity: Error severity level
            context: Additional context information
            suggestions: Recovery suggestions
            file_path: File where error occurred
            line_number: Line number where error occurred

        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.context = context or {}
        self.suggestions = suggestions or []
        self.file_path = file_path
        self.line_number = line_number


class StylesheetParsingError(SassAnalysisError):
    """Error reported by the Sass compiler while parsing a stylesheet."""

    def __init__(
        self,
        message: str,
        file_path: Path | str | None = None,
        line_number: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize stylesheet parsing error.

        Args:
            message: Error message
            file_path: Stylesheet being parsed
            line_number: Line number where error occurred
            context: Additional context information

        """
        suggestions = self._generate_parsing_suggestions(message)

        super().__init__(
            message=message,
            severity=ErrorSeverity.ERROR,
            context=context,
            suggestions=suggestions,
            file_path=file_path,
            line_number=line_number,
        )

    def _generate_parsing_suggestions(self, message: str) -> list[str]:
        """Generate specific suggestions based on the compiler message.

        Args:
            message: Error message

        Returns:
            List of specific suggestions

        """
        suggestions = [
            "Check the stylesheet syntax around the reported line",
            "Make sure the file extension matches its syntax (.scss or .sass)",
        ]

        message_lower = message.lower()

        if "undefined variable" in message_lower or "undefined mixin" in message_lower:
            suggestions.insert(
                0,
                "Undefined name: import the partial that defines it before using it",
            )

        if "expected" in message_lower or "invalid css" in message_lower:
            suggestions.insert(
                0, "Syntax error: check for missing semicolons, braces or quotes",
            )

        return suggestions


class DependencyResolutionError(SassAnalysisError):
    """Error raised when an import cannot be resolved to a single file."""

    def __init__(
        self,
        message: str,
        source_file: Path | str | None = None,
        target_dependency: str | None = None,
        context: dict[str, Any] | None = None,
        line_number: int | None = None,
    ) -> None:
        """Initialize dependency resolution error.

        Args:
            message: Error message
            source_file: Stylesheet containing the import
            target_dependency: Import target that couldn't be resolved
            context: Additional context information
            line_number: Line number of the import, when known

        """
        suggestions = self._generate_dependency_suggestions(target_dependency)

        super().__init__(
            message=message,
            severity=ErrorSeverity.ERROR,
            context=context,
            suggestions=suggestions,
            file_path=source_file,
            line_number=line_number,
        )
        self.target_dependency = target_dependency

    def _generate_dependency_suggestions(
        self, target_dependency: str | None,
    ) -> list[str]:
        """Generate specific suggestions based on the import target.

        Args:
            target_dependency: Import target that couldn't be resolved

        Returns:
            List of specific suggestions

        """
        suggestions = [
            "Verify the imported file exists relative to the importing file",
            "Pass the directory holding the file as the extra search path",
            "Add framework directories to load_paths in sass-deps.toml",
        ]

        if target_dependency:
            if "/" in target_dependency:
                directory, _, name = target_dependency.rpartition("/")
                suggestions.insert(
                    0,
                    f"Check if '{directory}/_{name}.scss' or "
                    f"'{directory}/{name}.scss' exists",
                )
            else:
                suggestions.insert(
                    0,
                    f"Check if '_{target_dependency}.scss' or "
                    f"'{target_dependency}.scss' exists",
                )

        return suggestions


class FileAccessError(SassAnalysisError):
    """Error during file access operations."""

    def __init__(
        self,
        message: str,
        file_path: Path | str,
        operation: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize file access error.

        Args:
            message: Error message
            file_path: File that couldn't be accessed
            operation: Operation being performed (read, write, etc.)
            context: Additional context information

        """
        suggestions = [
            "Check file permissions",
            "Verify the file path exists",
            "Paths are resolved relative to the current directory",
        ]

        super().__init__(
            message=message,
            severity=ErrorSeverity.ERROR,
            context=(
                {**context, "operation": operation}
                if context
                else {"operation": operation}
            ),
            suggestions=suggestions,
            file_path=file_path,
        )


class ConfigurationError(SassAnalysisError):
    """Error in the sass-deps configuration."""

    def __init__(
        self,
        message: str,
        config_file: Path | str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            config_file: Configuration file path
            context: Additional context information

        """
        suggestions = [
            "Validate the TOML syntax of the configuration file",
            "project_root must be a string, load_paths a list of strings",
        ]

        super().__init__(
            message=message,
            severity=ErrorSeverity.ERROR,
            context=context,
            suggestions=suggestions,
            file_path=config_file,
        )


class ErrorHandler:
    """Error handler with logging and user-friendly output."""

    def __init__(
        self,
        console: Console | None = None,
        verbose: bool = False,
        debug: bool = False,
    ) -> None:
        """Initialize error handler.

        Args:
            console: Rich console for output
            verbose: Whether to show error context and info logging
            debug: Whether to enable debug logging

        """
        self.console = console or Console(file=sys.stderr)
        self.verbose = verbose or debug

        self._setup_logging(verbose, debug)

    def _setup_logging(self, verbose: bool, debug: bool) -> None:
        """Setup logging configuration.

        Args:
            verbose: Whether to enable info logging
            debug: Whether to enable debug logging

        """
        if debug:
            level = logging.DEBUG
        elif verbose:
            level = logging.INFO
        else:
            level = logging.WARNING

        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.StreamHandler(sys.stderr),
            ],
        )
        logging.getLogger("sass_dependencies").setLevel(level)

        self.logger = logging.getLogger(__name__)

    def handle_error(self, error: SassAnalysisError) -> None:
        """Log an error and display it to the user.

        Args:
            error: The error to handle

        """
        self._log_error(error)
        self._display_error(error)

    def handle_unexpected_error(self, error: Exception) -> None:
        """Wrap an error that escaped the analysis pipeline and handle it.

        Args:
            error: Original error

        """
        wrapped = SassAnalysisError(
            message=f"Analysis failed: {error}",
            severity=ErrorSeverity.CRITICAL,
            context={
                "original_error": str(error),
                "error_type": type(error).__name__,
            },
        )
        self.handle_error(wrapped)

    def _log_error(self, error: SassAnalysisError) -> None:
        """Log error with appropriate level.

        Args:
            error: Error to log

        """
        log_message = f"{error.message}"
        if error.file_path:
            log_message += f" (file: {error.file_path})"
        if error.line_number:
            log_message += f" (line: {error.line_number})"

        if error.severity == ErrorSeverity.DEBUG:
            self.logger.debug(log_message)
        elif error.severity == ErrorSeverity.INFO:
            self.logger.info(log_message)
        elif error.severity == ErrorSeverity.WARNING:
            self.logger.warning(log_message)
        elif error.severity == ErrorSeverity.ERROR:
            self.logger.error(log_message)
        elif error.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(log_message)

    def _display_error(self, error: SassAnalysisError) -> None:
        """Display error to user with rich formatting.

        Args:
            error: Error to display

        """
        if error.severity == ErrorSeverity.WARNING:
            style = "yellow"
            title = "Warning"
        elif error.severity == ErrorSeverity.ERROR:
            style = "red"
            title = "Error"
        elif error.severity == ErrorSeverity.CRITICAL:
            style = "bold red"
            title = "Critical Error"
        else:
            style = "white"
            title = "Info"

        message_lines = [error.message]

        if error.file_path:
            file_info = f"File: {error.file_path}"
            if error.line_number:
                file_info += f":{error.line_number}"
            message_lines.append(file_info)

        if self.verbose and error.context:
            message_lines.append("\nContext:")
            for key, value in error.context.items():
                message_lines.append(f"  • {key}: {value}")

        if error.suggestions:
            message_lines.append("\nSuggestions:")
            for suggestion in error.suggestions:
                message_lines.append(f"  • {suggestion}")

        full_message = "\n".join(message_lines)

        self.console.print(
            Panel(
                Text(full_message),
                title=f"[{style}]{title}[/{style}]",
                border_style=style,
                padding=(1, 2),
            ),
        )
