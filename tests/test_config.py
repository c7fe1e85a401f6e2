from __future__ import annotations

from pathlib import Path

import pytest

from featureforge.config import DEFAULT_INDEXER_COMMAND, GeneratorConfig


def test_for_root_defaults(tmp_path: Path):
    config = GeneratorConfig.for_root(tmp_path)
    assert config.root == tmp_path.resolve()
    assert config.base_path == "lib/src/features"
    assert config.test_base_path == "test/src/features"
    assert config.config_path == tmp_path.resolve() / "index_generator.yaml"
    assert config.indexer_command == DEFAULT_INDEXER_COMMAND
    assert config.run_indexer is True


def test_for_root_uses_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert GeneratorConfig.for_root().root == tmp_path.resolve()


def test_custom_config_file_and_command(tmp_path: Path):
    absolute = tmp_path / "elsewhere" / "index.yaml"
    config = GeneratorConfig.for_root(
        tmp_path,
        config_file=absolute,
        indexer_command=["flutter", "pub", "run", "index_generator"],
    )
    assert config.config_path == absolute
    assert config.indexer_command == ("flutter", "pub", "run", "index_generator")


def test_resolve_anchors_relative_paths(tmp_path: Path):
    config = GeneratorConfig.for_root(tmp_path)
    assert config.resolve("lib/src/features") == tmp_path.resolve() / "lib/src/features"
