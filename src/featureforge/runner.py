"""Linear state machine applying a feature plan to a project."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from .config import GeneratorConfig
from .index_config import update_index_config
from .indexer import IndexerInvoker, IndexerResult
from .naming import FeatureName, normalize
from .plan import ScaffoldPlan, build_plan
from .writer import FileSystemWriter

__all__ = ["RunReport", "ScaffoldRun", "ScaffoldStage", "StageResult", "generate_feature"]

LOGGER = logging.getLogger(__name__)


class ScaffoldStage(str, Enum):
    """Stages a run moves through, in order."""

    START = "start"
    DIRECTORIES_CREATED = "directories_created"
    FILES_WRITTEN = "files_written"
    CONFIG_UPDATED = "config_updated"
    INDEXER_INVOKED = "indexer_invoked"
    DONE = "done"
    FAILED = "failed"


class StageResult(BaseModel):
    """Outcome of a single transition."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stage: ScaffoldStage = Field(..., description="Stage reached (or FAILED) by the transition.")
    ok: bool = Field(..., description="Whether the transition completed.")
    message: str = Field(..., description="Human readable summary of the transition.")
    detail: str | None = Field(None, description="Stage that was being entered when a transition failed.")


class RunReport(BaseModel):
    """Summary of a finished (or aborted) run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    feature: str = Field(..., description="snake_case name of the generated feature.")
    stage: ScaffoldStage = Field(..., description="Final stage of the run.")
    history: tuple[StageResult, ...] = Field(default_factory=tuple, description="Transitions in execution order.")
    config_registered: bool | None = Field(
        None, description="True when the config was updated, False when already registered."
    )
    indexer: IndexerResult | None = Field(None, description="Result of the indexer step, if it ran.")

    @property
    def succeeded(self) -> bool:
        return self.stage is ScaffoldStage.DONE


class ScaffoldRun:
    """Generate one feature: directories, files, config entry, then indexing.

    Each call to :meth:`advance` performs exactly one transition and records
    a :class:`StageResult`. Any error raised by a stage, such as a missing config
    file or a directory or file I/O failure, moves the run to
    :attr:`ScaffoldStage.FAILED` and is re-raised; work done by earlier stages
    is kept.
    """

    def __init__(
        self,
        feature: str | FeatureName,
        config: GeneratorConfig,
        *,
        writer: FileSystemWriter | None = None,
        indexer: IndexerInvoker | None = None,
    ) -> None:
        self.name = feature if isinstance(feature, FeatureName) else normalize(feature)
        self.config = config
        self.plan: ScaffoldPlan = build_plan(
            self.name,
            base_path=config.base_path,
            test_base_path=config.test_base_path,
        )
        self._writer = writer or FileSystemWriter(config.root)
        self._indexer = indexer or IndexerInvoker(config.indexer_command, cwd=config.root)
        self._history: list[StageResult] = []
        self.stage = ScaffoldStage.START
        self.config_registered: bool | None = None
        self.indexer_result: IndexerResult | None = None

        self._transitions: dict[ScaffoldStage, tuple[ScaffoldStage, Callable[[], str]]] = {
            ScaffoldStage.START: (ScaffoldStage.DIRECTORIES_CREATED, self._create_directories),
            ScaffoldStage.DIRECTORIES_CREATED: (ScaffoldStage.FILES_WRITTEN, self._write_files),
            ScaffoldStage.FILES_WRITTEN: (ScaffoldStage.CONFIG_UPDATED, self._update_config),
            ScaffoldStage.CONFIG_UPDATED: (ScaffoldStage.INDEXER_INVOKED, self._run_indexer),
            ScaffoldStage.INDEXER_INVOKED: (ScaffoldStage.DONE, self._finish),
        }

    @property
    def history(self) -> tuple[StageResult, ...]:
        return tuple(self._history)

    @property
    def finished(self) -> bool:
        return self.stage in (ScaffoldStage.DONE, ScaffoldStage.FAILED)

    def advance(self) -> StageResult:
        """Perform the transition out of the current stage."""

        if self.finished:
            raise RuntimeError(f"run already finished in stage {self.stage.value}")

        target, step = self._transitions[self.stage]
        try:
            message = step()
        except Exception as exc:
            LOGGER.error("Stage %s failed: %s", target.value, exc)
            self.stage = ScaffoldStage.FAILED
            self._history.append(
                StageResult(stage=ScaffoldStage.FAILED, ok=False, message=str(exc), detail=target.value)
            )
            raise

        self.stage = target
        result = StageResult(stage=target, ok=True, message=message)
        self._history.append(result)
        LOGGER.debug("stage=%s message=%s", target.value, message)
        return result

    def execute(self) -> RunReport:
        """Advance until the run is done; errors propagate to the caller."""

        LOGGER.info("Generating feature: %s", self.name.raw)
        while not self.finished:
            self.advance()
        return self.report()

    def report(self) -> RunReport:
        return RunReport(
            feature=self.name.snake_case,
            stage=self.stage,
            history=self.history,
            config_registered=self.config_registered,
            indexer=self.indexer_result,
        )

    def _create_directories(self) -> str:
        created = self._writer.create_directories(self.plan.directories)
        return f"{len(created)} directories ready"

    def _write_files(self) -> str:
        written = self._writer.write_files(self.plan.files)
        return f"{len(written)} files written"

    def _update_config(self) -> str:
        config_path = self.config.config_path
        self.config_registered = update_index_config(config_path, self.name, self.config.base_path)
        if self.config_registered:
            return f"registered in {config_path.name}"
        return f"already registered in {config_path.name}"

    def _run_indexer(self) -> str:
        if not self.config.run_indexer:
            LOGGER.info("Skipping index generator")
            self.indexer_result = self._indexer.skipped()
        else:
            self.indexer_result = self._indexer.run()
        return f"index generator {self.indexer_result.status.value}"

    def _finish(self) -> str:
        LOGGER.info("Feature %s generated successfully!", self.name.snake_case)
        return "done"


def generate_feature(
    feature: str,
    config: GeneratorConfig,
    *,
    indexer: IndexerInvoker | None = None,
) -> RunReport:
    """Run every stage for ``feature`` and return the final report."""

    return ScaffoldRun(feature, config, indexer=indexer).execute()
