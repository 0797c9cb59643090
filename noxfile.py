import os
from pathlib import Path
import nox

# Reuse existing virtualenvs for faster runs
nox.options.reuse_existing_virtualenvs = True
# Default sessions when running "nox"
nox.options.sessions = ["lint", "tests"]

# Environment variables to propagate
PASSED_ENV_VARS = [
    "DATABASE_URL",
    "SECRET_KEY",
    "ENVIRONMENT",
    "VOTING_DEADLINE",
    "REDIS_URL",
]


def _set_env(session):
    """
    Propagate database and test-related environment variables into the session.
    Also ensure the project root is on PYTHONPATH.
    """
    session.env["PYTHONPATH"] = str(Path.cwd())
    for var in PASSED_ENV_VARS:
        if var in os.environ:
            session.env[var] = os.environ[var]


@nox.session(name="lint")
def lint(session):
    """
    Code formatting, linting, and type-checks:
      - isort
      - black
      - flake8
      - mypy
    """
    _set_env(session)
    session.install("isort", "black", "flake8", "mypy")
    session.run("isort", "showcase/", "tests/")
    session.run("black", "showcase/", "tests/")
    session.run("flake8", "showcase/", "tests/")
    session.run("mypy", "showcase/")


@nox.session(name="tests")
def tests(session):
    """
    Run the test suite.
    Pass positional args to target specific tests.
    Usage:
      nox -s tests                 # runs everything under tests/
      nox -s tests -- -m concurrency
      nox -s tests -- tests/unit/test_services/test_vote_service.py
    """
    _set_env(session)
    session.install("-e", ".[test]")
    targets = session.posargs or ["tests"]
    htmlcov_path = ".nox/htmlcov"
    session.run(
        "pytest",
        *targets,
        "-vv",
        "--tb=short",
        "--cov=showcase",
        "--cov-report=term-missing",
        "--cov-report=html:" + htmlcov_path,
        "--cov-fail-under=80",
    )
