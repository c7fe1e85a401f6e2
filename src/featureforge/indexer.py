"""Best-effort invocation of the external ``index_generator`` tool."""

from __future__ import annotations

import logging
import subprocess
from enum import Enum
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_INDEXER_COMMAND

__all__ = ["IndexerInvoker", "IndexerResult", "IndexerStatus"]

LOGGER = logging.getLogger(__name__)


class IndexerStatus(str, Enum):
    """Outcome of an indexer run."""

    SUCCEEDED = "succeeded"
    NON_ZERO_EXIT = "non_zero_exit"
    LAUNCH_FAILED = "launch_failed"
    SKIPPED = "skipped"


class IndexerResult(BaseModel):
    """Captured result of running the indexer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: IndexerStatus = Field(..., description="How the indexer run ended.")
    command: tuple[str, ...] = Field(..., description="Command that was (or would have been) executed.")
    returncode: int | None = Field(None, description="Exit status, when the process started.")
    stdout: str = Field("", description="Captured standard output.")
    stderr: str = Field("", description="Captured diagnostic output.")
    error: str | None = Field(None, description="Launch error message, when the process could not start.")

    @property
    def succeeded(self) -> bool:
        return self.status is IndexerStatus.SUCCEEDED


class IndexerInvoker:
    """Run the indexer and translate its exit into an :class:`IndexerResult`.

    Failures never raise: a non-zero exit and a failed launch are reported as
    warnings since regenerating barrel files can always be done by hand.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_INDEXER_COMMAND, *, cwd: Path | str | None = None) -> None:
        self.command = tuple(command)
        self.cwd = Path(cwd) if cwd is not None else None

    @property
    def manual_command(self) -> str:
        return " ".join(self.command)

    def run(self) -> IndexerResult:
        LOGGER.info("Running index generator...")
        try:
            completed = subprocess.run(
                list(self.command),
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            LOGGER.warning("Failed to run index generator: %s", exc)
            LOGGER.warning("Run manually with: %s", self.manual_command)
            return IndexerResult(status=IndexerStatus.LAUNCH_FAILED, command=self.command, error=str(exc))

        if completed.returncode == 0:
            LOGGER.info("Index files generated successfully")
            status = IndexerStatus.SUCCEEDED
        else:
            LOGGER.warning("Index generator completed with warnings:")
            LOGGER.warning("%s", completed.stderr.strip())
            status = IndexerStatus.NON_ZERO_EXIT

        return IndexerResult(
            status=status,
            command=self.command,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def skipped(self) -> IndexerResult:
        """Return the result recorded when the indexer is disabled."""

        return IndexerResult(status=IndexerStatus.SKIPPED, command=self.command)
