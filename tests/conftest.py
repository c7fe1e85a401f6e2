from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from featureforge.config import GeneratorConfig  # noqa: E402
from featureforge.indexer import IndexerInvoker, IndexerResult, IndexerStatus  # noqa: E402

INDEX_GENERATOR_YAML = """index_generator:
  page_width: 80
  exclude:
    - '**.g.dart'
  libraries:
    - directory_path: lib/src/core
"""


class RecordingIndexer(IndexerInvoker):
    """Indexer double that never spawns a process."""

    def __init__(self, status: IndexerStatus = IndexerStatus.SUCCEEDED) -> None:
        super().__init__()
        self.status = status
        self.calls = 0

    def run(self) -> IndexerResult:
        self.calls += 1
        return IndexerResult(status=self.status, command=self.command, returncode=0)


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """A Flutter project root holding a minimal index_generator.yaml."""

    root = tmp_path / "app"
    root.mkdir()
    (root / "index_generator.yaml").write_text(INDEX_GENERATOR_YAML, encoding="utf-8")
    return root


@pytest.fixture()
def config(project: Path) -> GeneratorConfig:
    return GeneratorConfig.for_root(project)


@pytest.fixture()
def indexer() -> RecordingIndexer:
    return RecordingIndexer()
