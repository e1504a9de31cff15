"""Pre-flight check for the external package manager.

The generated project is installed with yarn, so the generator refuses to run
when the configured version-check command cannot be executed successfully.
"""

from __future__ import annotations

from .config import Config
from .utils import print_info, run_command


class PackageManagerNotFoundError(Exception):
    """Raised when the package manager is missing or fails its version check."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


class EnvironmentCheck:
    """Verifies that the package manager is installed and executable."""

    def __init__(self, config: Config) -> None:
        self.config = config

    async def verify(self) -> str:
        """Run the version-check command.

        No timeout is applied; a hanging tool hangs the invocation.

        Returns:
            The reported version string.

        Raises:
            PackageManagerNotFoundError: If the command is missing or exits
                non-zero.
        """
        cmd = self.config.version_command
        cmd_str = " ".join(cmd)
        hint = (
            f"{self.config.package_manager.capitalize()} not found. Please go to "
            f"{self.config.install_url} install {self.config.package_manager} "
            "and try again."
        )

        try:
            returncode, stdout, stderr = await run_command(cmd)
        except OSError as exc:
            raise PackageManagerNotFoundError(hint, command=cmd_str, stderr=str(exc)) from exc

        if returncode != 0:
            raise PackageManagerNotFoundError(hint, command=cmd_str, stderr=stderr)

        print_info(
            f"{self.config.package_manager.capitalize()} found! You're good to go!\n"
        )
        return stdout
