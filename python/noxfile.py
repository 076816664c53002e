import nox

nox.options.sessions = ["lint", "format", "type_hints", "unit_tests", "smoke_tests"]


def _install(session: nox.Session) -> None:
    session.install("-r", "requirements.txt")
    session.install("-r", "requirements_dev.txt")
    session.install("-e", "..")


@nox.session(reuse_venv=True, python="3.9")
def lint(session: nox.Session) -> None:
    """
    Lint the project's codebase with ruff.

    Args:
        session (nox.Session): The Nox session being run, providing context and methods for session actions.
    """
    session.install("ruff==0.4.8")
    session.run("ruff", "check", "--fix")


@nox.session(reuse_venv=True, python="3.9")
def format(session: nox.Session) -> None:
    """
    Format the project's codebase with ruff.
    """
    session.install("ruff==0.4.8")
    session.run("ruff", "format")


@nox.session(reuse_venv=True, python="3.9")
def type_hints(session: nox.Session) -> None:
    """
    Check type hints in the project's codebase.

    Args:
        session (nox.Session): The Nox session being run, providing context and methods for session actions.
    """
    _install(session)
    session.run("mypy", "--install-types", "--non-interactive", "Sidus")


@nox.session(reuse_venv=True, python="3.9")
def unit_tests(session: nox.Session) -> None:
    """
    Run the unit tests, each focused on a single decoding stage.
    """
    _install(session)
    session.run("pytest", "-m", "unit")


@nox.session(reuse_venv=True, python="3.9")
def smoke_tests(session: nox.Session) -> None:
    """
    Run the smoke tests, which drive the sidus command line end to end
    on synthetic catalogs.
    """
    _install(session)
    session.run("pytest", "-m", "smoke")
