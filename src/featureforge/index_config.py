"""Append-only registration of features in ``index_generator.yaml``.

The configuration is handled as opaque text. A feature is considered
registered as soon as ``<base_path>/<snake_case>`` occurs anywhere in the
document, and a new registration is appended after the existing content with
trailing whitespace removed. Nothing before that point is ever rewritten.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import DEFAULT_BASE_PATH
from .errors import MissingConfigFile
from .naming import FeatureName

__all__ = ["feature_block", "is_registered", "register_feature", "update_index_config"]

LOGGER = logging.getLogger(__name__)

_LAYER_BARRELS = ("data/data.dart", "domain/domain.dart", "presentation/presentation.dart")


def _feature_path(name: FeatureName, base_path: str) -> str:
    return f"{base_path.rstrip('/')}/{name.snake_case}"


def feature_block(name: FeatureName, base_path: str = DEFAULT_BASE_PATH) -> str:
    """Return the configuration entries registering ``name``."""

    feature_path = _feature_path(name, base_path)
    lines = [
        f"  # FEATURE : {name.upper_snake_case}",
        f"    - directory_path: {feature_path}/data",
        f"    - directory_path: {feature_path}/domain",
        f"    - directory_path: {feature_path}/presentation",
        f"    - directory_path: {feature_path}",
        "      include:",
    ]
    lines.extend(f"        - {barrel}" for barrel in _LAYER_BARRELS)
    return "\n".join(lines) + "\n"


def is_registered(document: str, name: FeatureName, base_path: str = DEFAULT_BASE_PATH) -> bool:
    """Return whether ``document`` already mentions the feature directory."""

    return _feature_path(name, base_path) in document


def register_feature(
    document: str,
    name: FeatureName,
    base_path: str = DEFAULT_BASE_PATH,
) -> str | None:
    """Return ``document`` with the registration block for ``name`` appended.

    ``None`` is returned when the feature is already registered, in which case
    the document must be left as it is.
    """

    if is_registered(document, name, base_path):
        return None
    return f"{document.rstrip()}\n{feature_block(name, base_path)}"


def update_index_config(
    path: str | Path,
    name: FeatureName,
    base_path: str = DEFAULT_BASE_PATH,
    *,
    encoding: str = "utf-8",
) -> bool:
    """Register ``name`` in the configuration file at ``path``.

    Returns ``True`` when the file was rewritten and ``False`` when the feature
    was already registered. A missing file raises :class:`MissingConfigFile`;
    it is never created because the surrounding structure is unknown.
    """

    config_path = Path(path)
    if not config_path.is_file():
        raise MissingConfigFile(config_path)

    document = config_path.read_text(encoding=encoding)
    updated = register_feature(document, name, base_path)
    if updated is None:
        LOGGER.warning("Feature already exists in %s", config_path.name)
        return False

    config_path.write_text(updated, encoding=encoding)
    LOGGER.info("Updated %s", config_path.name)
    return True
