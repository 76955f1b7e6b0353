"""Nox configuration for sass-dependencies."""

import nox

nox.options.sessions = ["lint", "test", "type_check"]
nox.options.default_venv_backend = "uv"


@nox.session
def lint(session: nox.Session) -> None:
    """Run code formatting and linting checks."""
    session.run("uv", "sync")
    session.run("uv", "run", "ruff", "check", ".")
    session.run("uv", "run", "ruff", "format", ".")
    session.run("uv", "run", "deptry", "src")


@nox.session(python=["3.10", "3.11", "3.12", "3.13"])
def test(session: nox.Session) -> None:
    """Run tests with coverage."""
    session.run("uv", "sync", "--python", str(session.python))
    session.run(
        "uv",
        "run",
        "python",
        "-m",
        "pytest",
        "--doctest-modules",
        "src",
        "tests",
        "--cov",
        "--cov-config=pyproject.toml",
        "--cov-report=xml",
    )


@nox.session
def type_check(session: nox.Session) -> None:
    """Run type checking."""
    session.run("uv", "sync")
    session.run("uv", "run", "ty", "check")
