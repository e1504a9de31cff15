"""Main scaffolding orchestrator.

Takes a resolved ``ProjectRequest`` plus its two located template sources and
writes the combined project onto disk:

1. Create the destination directory.
2. Copy the frontend tree, then the backend tree over it.
3. Rename ``gitignore`` to ``.gitignore``.
4. Write the merged ``package.json``.
5. Write the concatenated ``README.md``.

Nothing is rolled back on failure; a failed run can leave a partially
populated destination.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..config import Config
from ..models import ProjectRequest, TemplateSource
from ..utils import console, print_info, write_json
from .manifest import concatenate_docs, load_manifest, merge_manifests
from .templates import copy_tree


class ScaffoldError(Exception):
    """Raised when the copied tree is missing an expected file."""

    def __init__(self, message: str, path: Path):
        self.path = path
        super().__init__(message)


class ProjectGenerator:
    """Writes a project from one frontend and one backend template."""

    def __init__(self, config: Config) -> None:
        self.config = config

    # -- Public API --------------------------------------------------------

    async def generate(
        self,
        request: ProjectRequest,
        frontend: TemplateSource,
        backend: TemplateSource,
        cwd: str | Path | None = None,
    ) -> Path:
        """Generate the project and return its absolute root.

        Args:
            request: The resolved project request.
            frontend: Located frontend template; copied first.
            backend: Located backend template; copied second, so its files
                win on any path collision.
            cwd: Directory the project name is resolved against. Defaults to
                the process working directory.
        """
        base = Path(cwd) if cwd is not None else Path.cwd()
        destination = (base / request.name).resolve()

        print_info("Project will be created at:")
        print_info(f"{destination}\n")

        await asyncio.to_thread(destination.mkdir, parents=True, exist_ok=True)

        fragments = self.config.excluded_fragments
        await asyncio.to_thread(copy_tree, frontend.path, destination, fragments)
        await asyncio.to_thread(copy_tree, backend.path, destination, fragments)

        await asyncio.to_thread(self._rename_ignore_file, destination)
        await asyncio.to_thread(
            self._write_manifest, destination, frontend, backend, request.name
        )
        await asyncio.to_thread(self._write_readme, destination, frontend, backend)

        console.print(f"[green]+[/green] Scaffolded {request.name}")
        return destination

    # -- Steps -------------------------------------------------------------

    def _rename_ignore_file(self, destination: Path) -> Path:
        """Rename the shipped ``gitignore`` to ``.gitignore``.

        An existing ``.gitignore`` is replaced.
        """
        source = destination / self.config.ignore_file_name
        target = destination / f".{self.config.ignore_file_name}"
        if not source.is_file():
            raise ScaffoldError(
                f"Expected '{self.config.ignore_file_name}' in {destination} after copying templates",
                source,
            )
        return source.replace(target)

    def _write_manifest(
        self,
        destination: Path,
        frontend: TemplateSource,
        backend: TemplateSource,
        project_name: str,
    ) -> Path:
        name = self.config.manifest_name
        merged = merge_manifests(
            load_manifest(frontend.path / name),
            load_manifest(backend.path / name),
            project_name,
        )
        return write_json(merged, destination / name)

    def _write_readme(
        self, destination: Path, frontend: TemplateSource, backend: TemplateSource
    ) -> Path:
        name = self.config.readme_name
        # Line endings are kept as found in the templates.
        with open(frontend.path / name, encoding="utf-8", newline="") as f:
            frontend_doc = f.read()
        with open(backend.path / name, encoding="utf-8", newline="") as f:
            backend_doc = f.read()
        content = concatenate_docs(frontend_doc, backend_doc, self.config.readme_separator)
        out = destination / name
        out.write_text(content, encoding="utf-8", newline="")
        return out
