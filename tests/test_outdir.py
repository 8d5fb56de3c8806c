# CLASSIFICATION: COMMUNITY
# Filename: test_outdir.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Output directory removal order and failure reporting."""

import os

import pytest

import jbuild.outdir as outdir
from jbuild.errors import CleanError


@pytest.fixture
def out(tmp_path):
    root = tmp_path / "bin"
    for rel in ["Main.class", "app/Util.class", "app/inner/Deep.class", "app-x/Other.class"]:
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("x")
    (root / "empty").mkdir()
    return root


def test_missing_directory_is_noop(tmp_path):
    before = sorted(tmp_path.rglob("*"))
    outdir.clean_output(tmp_path / "bin")
    assert sorted(tmp_path.rglob("*")) == before


def test_clean_is_idempotent(out):
    outdir.clean_output(out)
    assert not out.exists()
    outdir.clean_output(out)
    assert not out.exists()


def test_deletion_order_children_first(out):
    order = outdir.deletion_order(out)
    assert order[-1] == str(out)
    for i, entry in enumerate(order):
        for later in order[i + 1:]:
            assert not later.startswith(entry + os.sep)


def test_directories_removed_after_their_contents(out, monkeypatch):
    removed = []
    real_remove = outdir._remove

    def recording_remove(entry):
        if os.path.isdir(entry):
            assert os.listdir(entry) == [], f"{entry} removed before its contents"
        real_remove(entry)
        removed.append(entry)

    monkeypatch.setattr(outdir, "_remove", recording_remove)
    outdir.clean_output(out)
    assert removed[-1] == str(out)
    assert len(removed) == 9
    assert not out.exists()


def test_symlinked_directory_is_not_followed(tmp_path, out):
    keep = tmp_path / "keep"
    keep.mkdir()
    (keep / "precious.txt").write_text("x")
    try:
        (out / "link").symlink_to(keep, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks unavailable")
    outdir.clean_output(out)
    assert not out.exists()
    assert (keep / "precious.txt").exists()


def test_failures_reported_after_full_pass(out, monkeypatch):
    real_remove = outdir._remove
    stuck = str(out / "app" / "Util.class")

    def flaky_remove(entry):
        if entry == stuck:
            raise PermissionError("in use")
        real_remove(entry)

    monkeypatch.setattr(outdir, "_remove", flaky_remove)
    with pytest.raises(CleanError) as exc:
        outdir.clean_output(out)
    failed = [entry for entry, _ in exc.value.failures]
    assert stuck in failed
    assert str(out) in failed
    assert not (out / "Main.class").exists()
    assert not (out / "app-x").exists()
    assert (out / "app" / "Util.class").exists()


def test_symlinked_output_directory_is_unlinked_only(tmp_path):
    keep = tmp_path / "keep"
    (keep / "nested").mkdir(parents=True)
    (keep / "precious.txt").write_text("x")
    (keep / "nested" / "also.txt").write_text("x")
    link = tmp_path / "bin"
    try:
        link.symlink_to(keep, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks unavailable")
    assert outdir.deletion_order(link) == [str(link)]
    outdir.clean_output(link)
    assert not os.path.lexists(link)
    assert (keep / "precious.txt").exists()
    assert (keep / "nested" / "also.txt").exists()
