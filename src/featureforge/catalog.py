"""Registry of the Dart source templates generated for every feature.

Each :class:`TemplateRole` maps to exactly one :class:`FileTemplate`. A
template couples a path pattern, relative to the feature root, with a body.
Both are rendered from the ``snake`` and ``pascal`` forms of a
:class:`~featureforge.naming.FeatureName` and nothing else, so rendering is a
pure function of the name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .naming import FeatureName
from .template import render_template

__all__ = [
    "CATALOG",
    "FileTemplate",
    "TemplateRole",
    "render",
    "target_path",
    "template_context",
]


class TemplateRole(str, Enum):
    """Logical kind of a generated file."""

    DATA_BARREL = "data_barrel"
    MODEL = "model"
    LOCAL_DATASOURCE = "local_datasource"
    REMOTE_DATASOURCE = "remote_datasource"
    DOMAIN_BARREL = "domain_barrel"
    ENTITY = "entity"
    REPOSITORY = "repository"
    PRESENTATION_BARREL = "presentation_barrel"
    FEATURE_BARREL = "feature_barrel"
    PAGE = "page"
    BLOC = "bloc"
    EVENT = "event"
    STATE = "state"


LIBRARY_BARREL_TEMPLATE = "// GENERATED CODE - DO NOT MODIFY BY HAND\n\nlibrary;\n"

FEATURE_BARREL_TEMPLATE = (
    LIBRARY_BARREL_TEMPLATE
    + "\nexport 'data/data.dart';\nexport 'domain/domain.dart';\nexport 'presentation/presentation.dart';\n"
)

MODEL_TEMPLATE = "class {{ pascal }}Model {}\n"

LOCAL_DATASOURCE_TEMPLATE = """abstract class {{ pascal }}LocalDatasource {}

class {{ pascal }}LocalDatasourceImpl implements {{ pascal }}LocalDatasource {}
"""

REMOTE_DATASOURCE_TEMPLATE = """abstract class {{ pascal }}RemoteDatasource {}

class {{ pascal }}RemoteDatasourceImpl implements {{ pascal }}RemoteDatasource {}
"""

ENTITY_TEMPLATE = """import 'package:equatable/equatable.dart';

class {{ pascal }}Entity extends Equatable {
  const {{ pascal }}Entity();

  @override
  List<Object?> get props => [];
}
"""

REPOSITORY_TEMPLATE = "abstract class {{ pascal }}Repository {}\n"

PAGE_TEMPLATE = """import 'package:flutter/material.dart';

class {{ pascal }}Page extends StatelessWidget {
  const {{ pascal }}Page({super.key});

  @override
  Widget build(BuildContext context) {
    return Scaffold();
  }
}
"""

BLOC_TEMPLATE = """import 'package:equatable/equatable.dart';

part '{{ snake }}_event.dart';
part '{{ snake }}_state.dart';
"""

EVENT_TEMPLATE = """part of '{{ snake }}_bloc.dart';

sealed class {{ pascal }}Event {}
"""

STATE_TEMPLATE = """part of '{{ snake }}_bloc.dart';

final class {{ pascal }}State extends Equatable {
  const {{ pascal }}State();

  @override
  List<Object?> get props => [];
}
"""


@dataclass(frozen=True, slots=True)
class FileTemplate:
    """A path pattern and body rendered for a single template role."""

    role: TemplateRole
    path: str
    body: str

    def target_path(self, name: FeatureName) -> str:
        """Return the path of the generated file relative to the feature root."""

        return render_template(self.path, template_context(name))

    def render(self, name: FeatureName) -> str:
        """Return the file content generated for ``name``."""

        return render_template(self.body, template_context(name))


_TEMPLATES = (
    FileTemplate(TemplateRole.DATA_BARREL, "data/data.dart", LIBRARY_BARREL_TEMPLATE),
    FileTemplate(TemplateRole.MODEL, "data/models/{{ snake }}_model.dart", MODEL_TEMPLATE),
    FileTemplate(
        TemplateRole.LOCAL_DATASOURCE,
        "data/datasources/local/{{ snake }}_local_datasource_impl.dart",
        LOCAL_DATASOURCE_TEMPLATE,
    ),
    FileTemplate(
        TemplateRole.REMOTE_DATASOURCE,
        "data/datasources/remote/{{ snake }}_remote_datasource_impl.dart",
        REMOTE_DATASOURCE_TEMPLATE,
    ),
    FileTemplate(TemplateRole.DOMAIN_BARREL, "domain/domain.dart", LIBRARY_BARREL_TEMPLATE),
    FileTemplate(TemplateRole.ENTITY, "domain/entities/{{ snake }}_entity.dart", ENTITY_TEMPLATE),
    FileTemplate(
        TemplateRole.REPOSITORY,
        "domain/repositories/{{ snake }}_repository.dart",
        REPOSITORY_TEMPLATE,
    ),
    FileTemplate(
        TemplateRole.PRESENTATION_BARREL,
        "presentation/presentation.dart",
        LIBRARY_BARREL_TEMPLATE,
    ),
    FileTemplate(TemplateRole.FEATURE_BARREL, "{{ snake }}.dart", FEATURE_BARREL_TEMPLATE),
    FileTemplate(TemplateRole.PAGE, "presentation/pages/{{ snake }}_page.dart", PAGE_TEMPLATE),
    FileTemplate(TemplateRole.BLOC, "presentation/blocs/{{ snake }}_bloc.dart", BLOC_TEMPLATE),
    FileTemplate(TemplateRole.EVENT, "presentation/blocs/{{ snake }}_event.dart", EVENT_TEMPLATE),
    FileTemplate(TemplateRole.STATE, "presentation/blocs/{{ snake }}_state.dart", STATE_TEMPLATE),
)

CATALOG: Mapping[TemplateRole, FileTemplate] = MappingProxyType(
    {template.role: template for template in _TEMPLATES}
)


def template_context(name: FeatureName) -> Mapping[str, str]:
    """Return the placeholder values exposed to every template."""

    return {
        "name": name.raw,
        "snake": name.snake_case,
        "pascal": name.pascal_case,
    }


def target_path(role: TemplateRole, name: FeatureName) -> str:
    """Return the feature-relative path of the file generated for ``role``."""

    return CATALOG[role].target_path(name)


def render(role: TemplateRole, name: FeatureName) -> str:
    """Return the content generated for ``role``."""

    return CATALOG[role].render(name)
