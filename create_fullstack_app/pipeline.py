"""create-fullstack-app pipeline orchestrator.

Runs the generator steps in order, each one finishing before the next:

1. Check that the package manager is installed.
2. Resolve project name, frontend and database (prompting when missing).
3. Locate both template directories.
4. Scaffold the project (copy, rename, manifest, README).
5. Launch the dependency install without waiting for it.

Usage::

    create-fullstack-app my-app
    create-fullstack-app my-app react-ts mongodb-server
    python -m create_fullstack_app my-app react-js postgresql-server
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.panel import Panel

from .config import Config
from .environment import EnvironmentCheck, PackageManagerNotFoundError
from .installer import DependencyInstaller
from .models import ProjectRequest, TemplateRole
from .prompts import PromptProvider, RichPromptProvider
from .scaffolder import ProjectGenerator, TemplateLocator, TemplateNotFoundError
from .utils import console, print_error, print_success, print_summary_table

EXIT_OK = 0
EXIT_FAILURE = 1

PROGRAM_NAME = "create-fullstack-app"

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MissingProjectNameError(Exception):
    """Raised when no project name was given."""

    def __init__(self) -> None:
        super().__init__("Project name has to be specified.")


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Drives one generator invocation.

    Every collaborator is injectable so the workflow can run against canned
    prompt answers and a fake package manager.  ``run`` never exits the
    process; it returns the exit code for the caller to use.

    Attributes:
        config: Generator configuration.
        prompts: Source of the template kinds not given as arguments.
        cwd: Directory the project name is resolved against.
    """

    def __init__(
        self,
        config: Config,
        prompts: PromptProvider | None = None,
        checker: EnvironmentCheck | None = None,
        locator: TemplateLocator | None = None,
        generator: ProjectGenerator | None = None,
        installer: DependencyInstaller | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.config = config
        self.prompts = prompts or RichPromptProvider()
        self.checker = checker or EnvironmentCheck(config)
        self.locator = locator or TemplateLocator(config)
        self.generator = generator or ProjectGenerator(config)
        self.installer = installer or DependencyInstaller(config)
        self.cwd = Path(cwd) if cwd is not None else None

    # ------------------------------------------------------------------
    # Input resolution
    # ------------------------------------------------------------------

    def resolve_request(
        self,
        project_name: str | None,
        frontend: str | None = None,
        database: str | None = None,
    ) -> ProjectRequest:
        """Build the ``ProjectRequest``, prompting for any missing kind.

        The name is checked before either prompt is shown.  Supplied kinds
        are used as-is.

        Raises:
            MissingProjectNameError: If *project_name* is empty or ``None``.
        """
        if not project_name:
            raise MissingProjectNameError()

        frontend = frontend or self.prompts.choose_frontend()
        database = database or self.prompts.choose_database()
        return ProjectRequest(name=project_name, frontend=frontend, database=database)

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def run(
        self,
        project_name: str | None,
        frontend: str | None = None,
        database: str | None = None,
    ) -> int:
        """Execute every step and return the process exit code."""
        try:
            await self.checker.verify()
            request = self.resolve_request(project_name, frontend, database)

            # Both templates are located before anything is written.
            backend_source = self.locator.locate(request.database, TemplateRole.BACKEND)
            frontend_source = self.locator.locate(request.frontend, TemplateRole.FRONTEND)

            console.print(
                Panel(
                    f"[bold bright_cyan]{PROGRAM_NAME}[/bold bright_cyan]\n"
                    f"Project  : {request.name}\n"
                    f"Frontend : {request.frontend}\n"
                    f"Database : {request.database}",
                    title="[bold]Scaffold[/bold]",
                    border_style="bright_cyan",
                )
            )

            destination = await self.generator.generate(
                request, frontend_source, backend_source, cwd=self.cwd
            )
        except PackageManagerNotFoundError as exc:
            print_error(str(exc))
            return EXIT_FAILURE
        except MissingProjectNameError:
            print_error("Project name has to be specified. Try for example:")
            console.print(f"  [cyan]{PROGRAM_NAME}[/cyan] [yellow]my-app[/yellow]\n")
            return EXIT_FAILURE
        except TemplateNotFoundError as exc:
            print_error(f"{exc}\n")
            return EXIT_FAILURE
        except ValidationError as exc:
            print_error(f"Invalid project request: {exc}")
            return EXIT_FAILURE
        except Exception as exc:
            print_error(f"{type(exc).__name__}: {exc}")
            return EXIT_FAILURE

        print_summary_table(
            {
                "Project": request.name,
                "Frontend": request.frontend,
                "Database": request.database,
                "Location": str(destination),
            },
            title="Project created",
        )

        if self.config.skip_install:
            print_success("Skipping dependency install.")
        else:
            self.installer.detach(destination)
        return EXIT_OK


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-fullstack-app``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Create a full-stack React project from a frontend and a database template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROGRAM_NAME} my-app\n"
            f"  {PROGRAM_NAME} my-app react-ts mongodb-server\n"
            f"  {PROGRAM_NAME} my-app react-js postgresql-server --skip-install\n"
        ),
    )
    parser.add_argument("project_name", nargs="?", help="Directory and package name of the new project")
    parser.add_argument("frontend", nargs="?", help="Frontend template (react-js, react-ts)")
    parser.add_argument(
        "database", nargs="?", help="Database template (postgresql-server, mongodb-server)"
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the package manager install after scaffolding",
    )

    args = parser.parse_args(argv)

    config = Config.from_env()
    if args.skip_install:
        config.skip_install = True

    pipeline = Pipeline(config)
    try:
        code = asyncio.run(pipeline.run(args.project_name, args.frontend, args.database))
    except KeyboardInterrupt:
        print_error("Aborted.")
        code = EXIT_FAILURE

    sys.exit(code)


if __name__ == "__main__":
    main()
