"""Project scaffolder -- combines a frontend and a backend template.

Quick usage::

    from create_fullstack_app.config import Config
    from create_fullstack_app.models import ProjectRequest, TemplateRole
    from create_fullstack_app.scaffolder import ProjectGenerator, TemplateLocator

    config = Config()
    locator = TemplateLocator(config)
    request = ProjectRequest(name="my-app", frontend="react-ts", database="mongodb-server")
    project_path = await ProjectGenerator(config).generate(
        request,
        locator.locate(request.frontend, TemplateRole.FRONTEND),
        locator.locate(request.database, TemplateRole.BACKEND),
    )
"""

from create_fullstack_app.scaffolder.generator import ProjectGenerator, ScaffoldError
from create_fullstack_app.scaffolder.manifest import (
    ManifestError,
    concatenate_docs,
    deep_merge,
    merge_manifests,
)
from create_fullstack_app.scaffolder.templates import (
    TemplateLocator,
    TemplateNotFoundError,
    copy_tree,
    is_excluded,
)

__all__ = [
    "ManifestError",
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateLocator",
    "TemplateNotFoundError",
    "concatenate_docs",
    "copy_tree",
    "deep_merge",
    "is_excluded",
    "merge_manifests",
]
