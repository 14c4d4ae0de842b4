import json
import subprocess
from pathlib import Path

import pytest

from rustdrill.project import Crate, RustAnalyzerProject


@pytest.fixture
def exercises_dir(tmp_path):
    root = tmp_path / "exercises"
    (root / "sub").mkdir(parents=True)
    (root / "a.rs").write_text("fn main() {}\n")
    (root / "sub" / "b.rs").write_text("fn main() {}\n")
    (root / "notes.txt").write_text("not rust\n")
    return root


def test_new_project_is_empty():
    project = RustAnalyzerProject()
    assert project.to_dict() == {"sysroot_src": "", "crates": []}


def test_crate_defaults():
    crate = Crate("exercises/a.rs")
    assert crate.to_dict() == {
        "root_module": "exercises/a.rs",
        "edition": "2021",
        "deps": [],
        "cfg": ["test"],
    }


def test_exercises_to_json_picks_rust_files(exercises_dir):
    project = RustAnalyzerProject()
    project.exercises_to_json(exercises_dir)
    assert [c.root_module for c in project.crates] == [
        str(exercises_dir / "a.rs"),
        str(exercises_dir / "sub" / "b.rs"),
    ]
    assert all(c.cfg == ["test"] for c in project.crates)


def test_exercises_to_json_missing_root(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "nothing")
    assert project.crates == []


def test_write_to_disk_round_trip(exercises_dir, tmp_path):
    project = RustAnalyzerProject(sysroot_src="/sysroot")
    project.exercises_to_json(exercises_dir)
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert json.loads(target.read_text()) == project.to_dict()
    assert " " not in target.read_text().replace(str(exercises_dir), "")


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/src/rust/library")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/src/rust/library"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, b"/opt/toolchain\n", b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert calls == [["rustc", "--print", "sysroot"]]
    assert project.sysroot_src == str(
        Path("/opt/toolchain", "lib", "rustlib", "src", "rust", "library")
    )
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_sysroot_missing_rustc(monkeypatch):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)

    def fake_run(args, **kwargs):
        raise FileNotFoundError("rustc")

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(FileNotFoundError):
        RustAnalyzerProject().get_sysroot_src()