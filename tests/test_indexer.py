from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from featureforge.indexer import IndexerInvoker, IndexerStatus


def _fake_run(returncode: int, stderr: str = ""):
    calls: list[dict] = []

    def run(args, **kwargs):
        calls.append({"args": args, **kwargs})
        return subprocess.CompletedProcess(args, returncode, stdout="", stderr=stderr)

    return run, calls


def test_indexer_success(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    run, calls = _fake_run(0)
    monkeypatch.setattr("featureforge.indexer.subprocess.run", run)

    result = IndexerInvoker(cwd=tmp_path).run()

    assert result.status is IndexerStatus.SUCCEEDED
    assert result.succeeded
    assert calls[0]["args"] == ["dart", "pub", "global", "run", "index_generator"]
    assert calls[0]["cwd"] == tmp_path


def test_indexer_non_zero_exit_is_reported(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture):
    run, _ = _fake_run(65, stderr="could not parse index_generator.yaml")
    monkeypatch.setattr("featureforge.indexer.subprocess.run", run)

    result = IndexerInvoker().run()

    assert result.status is IndexerStatus.NON_ZERO_EXIT
    assert result.returncode == 65
    assert not result.succeeded
    assert "could not parse" in caplog.text


def test_indexer_launch_failure_is_reported(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture):
    def run(args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", args[0])

    monkeypatch.setattr("featureforge.indexer.subprocess.run", run)

    result = IndexerInvoker(["missing-tool", "run"]).run()

    assert result.status is IndexerStatus.LAUNCH_FAILED
    assert result.returncode is None
    assert result.error
    assert "Run manually with: missing-tool run" in caplog.text


def test_skipped_result():
    result = IndexerInvoker().skipped()
    assert result.status is IndexerStatus.SKIPPED
    assert result.command == ("dart", "pub", "global", "run", "index_generator")
