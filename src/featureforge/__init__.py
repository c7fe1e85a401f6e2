"""Scaffolding for Flutter features laid out in data, domain and presentation layers.

The package turns a free-form feature name into snake_case and PascalCase
forms, renders a fixed catalog of Dart templates from them, writes the result
into a project and registers the feature in ``index_generator.yaml`` so the
external index generator can rebuild the barrel files.
"""

from __future__ import annotations

from .catalog import CATALOG, FileTemplate, TemplateRole
from .config import GeneratorConfig
from .errors import FeatureForgeError, MissingConfigFile, UsageError
from .index_config import feature_block, register_feature, update_index_config
from .indexer import IndexerInvoker, IndexerResult, IndexerStatus
from .naming import FeatureName, normalize, to_pascal_case, to_snake_case
from .plan import PlannedFile, ScaffoldPlan, build_plan
from .runner import RunReport, ScaffoldRun, ScaffoldStage, StageResult, generate_feature
from .template import TemplateRenderingError, render_template
from .writer import FileSystemWriter

__all__ = [
    "CATALOG",
    "FeatureForgeError",
    "FeatureName",
    "FileSystemWriter",
    "FileTemplate",
    "GeneratorConfig",
    "IndexerInvoker",
    "IndexerResult",
    "IndexerStatus",
    "MissingConfigFile",
    "PlannedFile",
    "RunReport",
    "ScaffoldPlan",
    "ScaffoldRun",
    "ScaffoldStage",
    "StageResult",
    "TemplateRenderingError",
    "TemplateRole",
    "UsageError",
    "build_plan",
    "feature_block",
    "generate_feature",
    "normalize",
    "register_feature",
    "render_template",
    "to_pascal_case",
    "to_snake_case",
    "update_index_config",
]

__version__ = "0.1.0"
