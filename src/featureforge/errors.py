"""Custom exception types raised while generating a feature."""

from __future__ import annotations

from pathlib import Path


class FeatureForgeError(RuntimeError):
    """Base class for failures that abort a feature generation run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UsageError(FeatureForgeError):
    """Raised when the generator is invoked without a feature name."""


class MissingConfigFile(FeatureForgeError):
    """Raised when the index generator configuration file is absent."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path} does not exist")


__all__ = ["FeatureForgeError", "MissingConfigFile", "UsageError"]
