from __future__ import annotations

import logging
from pathlib import Path

import pytest

from featureforge.errors import MissingConfigFile
from featureforge.index_config import feature_block, register_feature, update_index_config
from featureforge.naming import normalize

BASE_PATH = "lib/src/features"

INDEX_GENERATOR_YAML = """index_generator:
  libraries:
    - directory_path: lib/src/core
"""


def test_feature_block_format():
    block = feature_block(normalize("Order History"), BASE_PATH)
    assert block == (
        "  # FEATURE : ORDER_HISTORY\n"
        "    - directory_path: lib/src/features/order_history/data\n"
        "    - directory_path: lib/src/features/order_history/domain\n"
        "    - directory_path: lib/src/features/order_history/presentation\n"
        "    - directory_path: lib/src/features/order_history\n"
        "      include:\n"
        "        - data/data.dart\n"
        "        - domain/domain.dart\n"
        "        - presentation/presentation.dart\n"
    )


def test_register_feature_appends_single_block():
    document = INDEX_GENERATOR_YAML + "\n\n"
    updated = register_feature(document, normalize("Order History"), BASE_PATH)
    assert updated is not None
    assert updated.startswith(document.rstrip())
    assert updated[len(document.rstrip())] == "\n"
    assert updated.count("# FEATURE : ORDER_HISTORY") == 1


def test_register_feature_is_idempotent():
    name = normalize("Order History")
    first = register_feature(INDEX_GENERATOR_YAML, name, BASE_PATH)
    assert first is not None
    assert register_feature(first, name, BASE_PATH) is None


def test_existing_path_anywhere_counts_as_registered():
    document = "libraries:\n  - directory_path: lib/src/features/cart/data\n"
    assert register_feature(document, normalize("cart"), BASE_PATH) is None


def test_features_are_appended_in_order():
    document = register_feature(INDEX_GENERATOR_YAML, normalize("cart"), BASE_PATH)
    document = register_feature(document, normalize("user profile"), BASE_PATH)
    assert document.index("# FEATURE : CART") < document.index("# FEATURE : USER_PROFILE")


def test_update_index_config_writes_once(project: Path, caplog: pytest.LogCaptureFixture):
    path = project / "index_generator.yaml"
    name = normalize("Order History")

    assert update_index_config(path, name, BASE_PATH) is True
    after_first = path.read_text(encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="featureforge"):
        assert update_index_config(path, name, BASE_PATH) is False
    assert path.read_text(encoding="utf-8") == after_first
    assert len(path.read_bytes()) == len(after_first.encode("utf-8"))
    assert "already exists" in caplog.text


def test_update_index_config_requires_existing_file(tmp_path: Path):
    path = tmp_path / "index_generator.yaml"
    with pytest.raises(MissingConfigFile) as excinfo:
        update_index_config(path, normalize("cart"), BASE_PATH)
    assert excinfo.value.path == path
    assert not path.exists()
