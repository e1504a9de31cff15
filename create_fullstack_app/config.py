"""create-fullstack-app configuration.

Centralised, typed configuration for the generator. Settings use a Pydantic v2
model so they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"

# Substrings that exclude a template path from copying. Matched against the
# remainder of the path after the first occurrence of "template".
DEFAULT_EXCLUDED_FRAGMENTS: list[str] = [
    "/package.json",
    "/README.md",
    "/node_modules",
    "/coverage",
    "/build",
]

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global generator configuration.

    Created once by the CLI entry point and passed to the ``Pipeline``, which
    hands it on to every collaborator.
    """

    templates_dir: Path = Field(default=_DEFAULT_TEMPLATES_DIR)
    package_manager: str = Field(default="yarn", min_length=1)
    version_command: list[str] = Field(
        default_factory=lambda: ["yarnpkg", "--version"],
        min_length=1,
        description="Command used to check that the package manager is installed",
    )
    install_args: list[str] = Field(default_factory=lambda: ["install"])
    install_url: str = Field(default="https://yarnpkg.com/")
    skip_install: bool = Field(default=False)

    manifest_name: str = Field(default="package.json")
    readme_name: str = Field(default="README.md")
    ignore_file_name: str = Field(default="gitignore")
    readme_separator: str = Field(default="\n\n")
    excluded_fragments: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_FRAGMENTS)
    )

    def template_path(self, kind: str) -> Path:
        """Return the source directory for a symbolic template kind."""
        return self.templates_dir / kind

    @property
    def install_command(self) -> list[str]:
        """Full argv for the dependency install step."""
        return [self.package_manager, *self.install_args]

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CFA_TEMPLATES_DIR, CFA_PACKAGE_MANAGER, CFA_VERSION_COMMAND,
            CFA_SKIP_INSTALL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CFA_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["CFA_TEMPLATES_DIR"])
        if os.environ.get("CFA_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CFA_PACKAGE_MANAGER"]
        version_command = os.environ.get("CFA_VERSION_COMMAND", "").split()
        if version_command:
            kwargs["version_command"] = version_command
        if os.environ.get("CFA_SKIP_INSTALL"):
            kwargs["skip_install"] = os.environ["CFA_SKIP_INSTALL"].strip().lower() in _TRUTHY
        return cls(**kwargs)
