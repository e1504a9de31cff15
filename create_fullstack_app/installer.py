"""Dependency installation for the freshly generated project."""

from __future__ import annotations

import subprocess
from pathlib import Path

from .config import Config
from .utils import print_info, print_warning


class DependencyInstaller:
    """Launches the package manager's install step in the new project.

    The child inherits the terminal's standard streams and is never waited
    on: the generator may exit while the install is still running, and the
    install's exit status is not observed.
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    def detach(self, directory: str | Path) -> subprocess.Popen | None:
        """Start the install in *directory* and return without waiting.

        Returns:
            The launched process handle, or ``None`` when the executable could
            not be started.
        """
        cmd = self.config.install_command
        print_info(f"Running {' '.join(cmd)} in {directory}\n")
        try:
            return subprocess.Popen(cmd, cwd=str(directory))
        except OSError as exc:
            print_warning(f"Could not start {' '.join(cmd)}: {exc}")
            return None
