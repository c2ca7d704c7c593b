"""
unistr Path Configuration

Centralized path management for unistr data files.
Local paths are relative to the project root (current working directory).

Directory Structure:
.unistr/
├── config.json          # Project-local configuration
└── logs/                # Log files (only with UNISTR_FILE_LOGGING=1)

~/.unistr/
└── config.json          # Global configuration
"""

from pathlib import Path
from typing import Optional


class UnistrPaths:
    """
    Centralized path configuration for unistr.

    All paths are lazily resolved relative to project_root.
    Default project_root is current working directory.
    """

    # Directory name for all unistr data
    UNISTR_DIR = ".unistr"

    # File names (without paths)
    CONFIG_NAME = "config.json"
    LOG_NAME = "unistr.log"

    # Subdirectory names
    LOGS_DIR = "logs"

    def __init__(self, project_root: Optional[Path] = None, home: Optional[Path] = None):
        """
        Initialize paths configuration.

        Args:
            project_root: Root directory for the project. Defaults to CWD.
            home: Home directory holding the global config. Defaults to Path.home().
        """
        self._project_root = project_root
        self._home = home

    @property
    def project_root(self) -> Path:
        """Get the project root directory."""
        if self._project_root is None:
            return Path.cwd()
        return self._project_root

    @property
    def unistr_dir(self) -> Path:
        """Get the .unistr directory path."""
        return self.project_root / self.UNISTR_DIR

    @property
    def global_dir(self) -> Path:
        """Get the global ~/.unistr directory path."""
        home = self._home if self._home is not None else Path.home()
        return home / self.UNISTR_DIR

    @property
    def local_config(self) -> Path:
        """Get the project-local config file path."""
        return self.unistr_dir / self.CONFIG_NAME

    @property
    def global_config(self) -> Path:
        """Get the global config file path."""
        return self.global_dir / self.CONFIG_NAME

    @property
    def logs_dir(self) -> Path:
        """Get the logs directory path."""
        return self.unistr_dir / self.LOGS_DIR

    @property
    def log_file(self) -> Path:
        return self.logs_dir / self.LOG_NAME

    def ensure_dirs(self) -> None:
        """Create all necessary directories if they don't exist."""
        self.unistr_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(exist_ok=True)


# Global instance for convenience
_default_paths: Optional[UnistrPaths] = None


def get_paths(project_root: Optional[Path] = None) -> UnistrPaths:
    """
    Get the paths configuration.

    Args:
        project_root: Optional project root override

    Returns:
        UnistrPaths instance
    """
    global _default_paths
    if project_root is not None:
        return UnistrPaths(project_root)
    if _default_paths is None:
        _default_paths = UnistrPaths()
    return _default_paths


def reset_paths() -> None:
    """Reset the global paths instance (useful for testing)."""
    global _default_paths
    _default_paths = None
