"""Pure planning of the directories and files that make up a feature."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .catalog import CATALOG, TemplateRole
from .config import DEFAULT_BASE_PATH, DEFAULT_TEST_BASE_PATH
from .naming import FeatureName

__all__ = ["PlannedFile", "ScaffoldPlan", "build_plan"]


# Layer subdirectories created below the production feature root.
PRODUCTION_SUBDIRECTORIES: Tuple[str, ...] = (
    "",
    "data",
    "data/datasources",
    "data/models",
    "data/datasources/local",
    "data/datasources/remote",
    "data/repositories_impl",
    "domain",
    "domain/entities",
    "domain/repositories",
    "domain/usecases",
    "presentation",
    "presentation/pages",
    "presentation/widgets",
    "presentation/blocs",
)

# The test tree mirrors the layers but not the feature root itself.
TEST_SUBDIRECTORIES: Tuple[str, ...] = (
    "data",
    "data/models",
    "data/datasources",
    "data/datasources/local",
    "data/datasources/remote",
    "data/repositories_impl",
    "domain",
    "domain/entities",
    "domain/repositories",
    "domain/usecases",
    "presentation",
    "presentation/pages",
    "presentation/widgets",
    "presentation/blocs",
)

FILE_ORDER: Tuple[TemplateRole, ...] = (
    TemplateRole.DOMAIN_BARREL,
    TemplateRole.ENTITY,
    TemplateRole.REPOSITORY,
    TemplateRole.DATA_BARREL,
    TemplateRole.MODEL,
    TemplateRole.LOCAL_DATASOURCE,
    TemplateRole.REMOTE_DATASOURCE,
    TemplateRole.PRESENTATION_BARREL,
    TemplateRole.FEATURE_BARREL,
    TemplateRole.PAGE,
    TemplateRole.BLOC,
    TemplateRole.EVENT,
    TemplateRole.STATE,
)


class PlannedFile(BaseModel):
    """A file that will be written when the plan is applied."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    role: TemplateRole = Field(..., description="Template role that produced the content.")
    path: str = Field(..., description="POSIX path relative to the project root.")
    content: str = Field(..., description="Text written to the file.")


class ScaffoldPlan(BaseModel):
    """Directories to create and files to write for a single feature."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    feature: str = Field(..., description="snake_case name of the planned feature.")
    directories: Tuple[str, ...] = Field(default_factory=tuple, description="Directories in creation order.")
    files: Tuple[PlannedFile, ...] = Field(default_factory=tuple, description="Files in write order.")

    def file_for(self, role: TemplateRole) -> PlannedFile:
        """Return the planned file generated for ``role``."""

        for planned in self.files:
            if planned.role == role:
                return planned
        raise KeyError(role)


def _join(*segments: str) -> str:
    return "/".join(segment.strip("/") for segment in segments if segment)


def build_plan(
    name: FeatureName,
    *,
    base_path: str = DEFAULT_BASE_PATH,
    test_base_path: str = DEFAULT_TEST_BASE_PATH,
) -> ScaffoldPlan:
    """Return the :class:`ScaffoldPlan` for ``name``.

    The plan only depends on its arguments and never touches the filesystem.
    Test directories are planned but left empty.
    """

    feature_root = _join(base_path, name.snake_case)
    test_root = _join(test_base_path, name.snake_case)

    directories = [_join(feature_root, sub) for sub in PRODUCTION_SUBDIRECTORIES]
    directories.extend(_join(test_root, sub) for sub in TEST_SUBDIRECTORIES)

    files = [
        PlannedFile(
            role=role,
            path=_join(feature_root, CATALOG[role].target_path(name)),
            content=CATALOG[role].render(name),
        )
        for role in FILE_ORDER
    ]

    return ScaffoldPlan(feature=name.snake_case, directories=tuple(directories), files=tuple(files))
