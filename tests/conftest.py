"""
Pytest configuration for the unistr test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Temporary directory fixtures
- Isolation of the config singleton and CLI mode between tests
"""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

from unistr.logging_config import setup_logging


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for quiet operation."""
    os.environ.setdefault("UNISTR_MACHINE_MODE", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


# ============================================================================
# ISOLATION FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """
    Point HOME and CWD at an empty directory so no real ~/.unistr or
    .unistr config leaks into tests.
    """
    from unistr.cli.config import CLIConfig
    from unistr.paths import reset_paths
    from unistr.user_config import reset_user_config

    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)

    reset_paths()
    reset_user_config()
    CLIConfig.reset()
    yield project
    reset_paths()
    reset_user_config()
    CLIConfig.reset()


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="unistr_test_"))
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_file(temp_dir):
    """A UTF-8 file holding 'héllo wörld\\n'."""
    path = temp_dir / "sample.txt"
    path.write_bytes("héllo wörld\n".encode("utf-8"))
    return path
