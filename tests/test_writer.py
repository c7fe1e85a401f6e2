from __future__ import annotations

from pathlib import Path

from featureforge.naming import normalize
from featureforge.plan import build_plan
from featureforge.writer import FileSystemWriter


def test_writer_applies_plan(tmp_path: Path):
    plan = build_plan(normalize("cart"))
    writer = FileSystemWriter(tmp_path)

    directories = writer.create_directories(plan.directories)
    files = writer.write_files(plan.files)

    assert all(path.is_dir() for path in directories)
    for planned, path in zip(plan.files, files):
        assert path.read_text(encoding="utf-8") == planned.content
    assert not any((tmp_path / "test/src/features/cart").rglob("*.dart"))


def test_writer_is_rerunnable_and_overwrites(tmp_path: Path):
    plan = build_plan(normalize("cart"))
    writer = FileSystemWriter(tmp_path)
    writer.create_directories(plan.directories)
    writer.write_files(plan.files)

    page = tmp_path / "lib/src/features/cart/presentation/pages/cart_page.dart"
    page.write_text("// edited by hand\n", encoding="utf-8")

    writer.create_directories(plan.directories)
    writer.write_files(plan.files)
    assert "class CartPage" in page.read_text(encoding="utf-8")
