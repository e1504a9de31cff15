"""Template discovery and filtered tree copying.

Template sources live under ``<package>/templates/<kind>/`` (or the directory
configured in ``Config.templates_dir``).  Each one is copied verbatim into the
destination; there is no variable substitution.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path, PurePath

from ..config import Config
from ..models import TemplateRole, TemplateSource


class TemplateNotFoundError(Exception):
    """Raised when no template directory exists for a symbolic kind."""

    def __init__(self, role: TemplateRole, kind: str, path: Path):
        self.role = role
        self.kind = kind
        self.path = path
        super().__init__(f"{role.value} '{kind}' setup not found!")


# ---------------------------------------------------------------------------
# TemplateLocator
# ---------------------------------------------------------------------------


class TemplateLocator:
    """Maps a symbolic kind such as ``react-ts`` to its template directory."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def locate(self, kind: str, role: TemplateRole) -> TemplateSource:
        """Return the template source for *kind*.

        Raises:
            TemplateNotFoundError: If ``<templates_dir>/<kind>`` is not a
                directory.
        """
        path = self.config.template_path(kind)
        if not path.is_dir():
            raise TemplateNotFoundError(role, kind, path)
        return TemplateSource(role=role, kind=kind, path=path)


# ---------------------------------------------------------------------------
# Exclusion filter
# ---------------------------------------------------------------------------


def is_excluded(source: str | PurePath, fragments: Iterable[str]) -> bool:
    """Return ``True`` if *source* must not be copied.

    Everything up to and including the first ``template`` in the path is
    dropped, and the remainder is tested for plain substring containment of
    each fragment.  ``/build`` therefore also excludes ``/builder``.
    """
    posix = PurePath(source).as_posix()
    _, _, remainder = posix.partition("template")
    return any(fragment in remainder for fragment in fragments)


def make_ignore(fragments: Iterable[str]) -> Callable[[str, list[str]], set[str]]:
    """Build a ``shutil.copytree`` *ignore* callable from exclusion fragments."""
    fragments = list(fragments)

    def _ignore(directory: str, names: list[str]) -> set[str]:
        return {
            name
            for name in names
            if is_excluded(os.path.join(directory, name), fragments)
        }

    return _ignore


def copy_tree(source: str | Path, destination: str | Path, fragments: Iterable[str]) -> Path:
    """Copy *source* into *destination*, skipping excluded paths.

    Existing files in *destination* are overwritten; files that are not part
    of the template are left alone.
    """
    return Path(
        shutil.copytree(
            str(source),
            str(destination),
            ignore=make_ignore(fragments),
            dirs_exist_ok=True,
        )
    )
