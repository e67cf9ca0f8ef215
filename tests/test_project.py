import json
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from drillrun.project import Crate, RustAnalyzerProject


def test_empty_project_json_round_trip():
    project = RustAnalyzerProject()
    assert json.loads(project.to_json()) == {"sysroot_src": "", "crates": []}


def test_crate_defaults():
    crate = Crate(root_module="exercises/a.rs")
    assert crate.edition == "2021"
    assert crate.cfg == ["test"]
    assert crate.deps == []


def test_exercises_to_json_collects_rust_files(tmp_path):
    root = tmp_path / "exercises"
    (root / "intro").mkdir(parents=True)
    (root / "intro" / "intro1.rs").write_text("fn main() {}")
    (root / "intro" / "README.md").write_text("notes")
    (root / "quiz1.rs").write_text("fn main() {}")

    project = RustAnalyzerProject()
    project.exercises_to_json(root)

    roots = [crate.root_module for crate in project.crates]
    assert sorted(roots) == sorted(
        [str(root / "intro" / "intro1.rs"), str(root / "quiz1.rs")]
    )
    assert all(root_module.endswith(".rs") for root_module in roots)
    assert all(crate.cfg == ["test"] for crate in project.crates)


def test_exercises_to_json_empty_dir(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(
        sysroot_src="/sysroot", crates=[Crate(root_module="exercises/x.rs")]
    )
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data == json.loads(project.to_json())
    assert data["crates"][0]["root_module"] == "exercises/x.rs"
    assert data["crates"][0]["edition"] == "2021"


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/opt/src")
    project = RustAnalyzerProject()
    with mock.patch("subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/opt/src"
    assert run.call_count == 0


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    completed = subprocess.CompletedProcess(
        args=[], returncode=0, stdout=b"/toolchain\n", stderr=b""
    )
    project = RustAnalyzerProject()
    with mock.patch("subprocess.run", return_value=completed) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert project.sysroot_src == str(
        Path("/toolchain", "lib", "rustlib", "src", "rust", "library")
    )
    assert "Determined toolchain: /toolchain" in capsys.readouterr().out


def test_sysroot_missing_rustc(monkeypatch):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    project = RustAnalyzerProject()
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("rustc")):
        with pytest.raises(OSError):
            project.get_sysroot_src()