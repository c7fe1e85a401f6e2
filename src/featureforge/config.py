"""Configuration shared by the feature generator and its CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

DEFAULT_BASE_PATH = "lib/src/features"
DEFAULT_TEST_BASE_PATH = "test/src/features"
DEFAULT_CONFIG_FILE = "index_generator.yaml"
DEFAULT_INDEXER_COMMAND: tuple[str, ...] = ("dart", "pub", "global", "run", "index_generator")

__all__ = [
    "DEFAULT_BASE_PATH",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_INDEXER_COMMAND",
    "DEFAULT_TEST_BASE_PATH",
    "GeneratorConfig",
]


@dataclass(slots=True)
class GeneratorConfig:
    """Locations and tools used while generating a feature.

    Attributes
    ----------
    root:
        The Flutter project root. Every generated path is relative to it.
    base_path:
        Directory, relative to :attr:`root`, that holds production features.
        The same string is used in the ``index_generator.yaml`` entries.
    test_base_path:
        Directory, relative to :attr:`root`, that mirrors the feature tree for
        tests.
    config_file:
        The index generator configuration file. Relative paths are resolved
        against :attr:`root`.
    indexer_command:
        Command used to regenerate barrel files once the feature exists.
    run_indexer:
        When ``False`` the indexer step is recorded as skipped.
    """

    root: Path
    base_path: str = DEFAULT_BASE_PATH
    test_base_path: str = DEFAULT_TEST_BASE_PATH
    config_file: Path = Path(DEFAULT_CONFIG_FILE)
    indexer_command: tuple[str, ...] = DEFAULT_INDEXER_COMMAND
    run_indexer: bool = True

    @classmethod
    def for_root(
        cls,
        root: str | Path | None = None,
        *,
        config_file: str | Path | None = None,
        indexer_command: Sequence[str] | None = None,
        run_indexer: bool = True,
    ) -> "GeneratorConfig":
        """Build a :class:`GeneratorConfig` for the project at ``root``.

        ``root`` defaults to the current working directory.
        """

        root_path = Path(root) if root is not None else Path.cwd()
        command = tuple(indexer_command) if indexer_command else DEFAULT_INDEXER_COMMAND
        return cls(
            root=root_path.expanduser().resolve(),
            config_file=Path(config_file) if config_file is not None else Path(DEFAULT_CONFIG_FILE),
            indexer_command=command,
            run_indexer=run_indexer,
        )

    @property
    def config_path(self) -> Path:
        """Absolute location of the index generator configuration file."""

        return self.resolve(self.config_file)

    def resolve(self, relative: str | Path) -> Path:
        """Return ``relative`` anchored at :attr:`root`."""

        return self.root / relative
