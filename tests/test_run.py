import subprocess

import pytest

from drillrun.exercise import Exercise, Mode
from drillrun.run import RunFailed, reset, run

PENDING = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"
FINISHED = "fn main() {\n}\n"


class FakeToolchain:
    def __init__(self):
        self.compile_rc = 0
        self.run_rc = 0
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        if args[0] == "rustc":
            return subprocess.CompletedProcess(args, self.compile_rc, b"", b"compile error")
        return subprocess.CompletedProcess(args, self.run_rc, b"program output", b"run error")


@pytest.fixture
def toolchain(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    fake = FakeToolchain()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


def make_exercise(tmp_path, name, source, mode=Mode.COMPILE):
    path = tmp_path / f"{name}.rs"
    path.write_text(source, encoding="utf-8")
    return Exercise(name=name, path=path, mode=mode, hint="Hello!")


def test_run_compile_success(toolchain, tmp_path, capsys):
    exercise = make_exercise(tmp_path, "compSuccess", FINISHED)
    run(exercise, False)
    out = capsys.readouterr().out
    assert "program output" in out
    assert "Successfully ran" in out


def test_run_compile_exercise_does_not_prompt(toolchain, tmp_path, capsys):
    exercise = make_exercise(tmp_path, "pending_exercise", PENDING)
    run(exercise, False)
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_run_compile_failure(toolchain, tmp_path, capsys):
    toolchain.compile_rc = 1
    exercise = make_exercise(tmp_path, "compFailure", FINISHED)
    with pytest.raises(RunFailed) as info:
        run(exercise, False)
    assert info.value.exercise is exercise
    out = capsys.readouterr().out
    assert "Compilation of" in out
    assert "compile error" in out


def test_run_program_failure(toolchain, tmp_path, capsys):
    toolchain.run_rc = 1
    exercise = make_exercise(tmp_path, "crash", FINISHED)
    with pytest.raises(RunFailed):
        run(exercise, False)
    out = capsys.readouterr().out
    assert "run error" in out
    assert "with errors" in out


def test_run_test_exercise_does_not_prompt(toolchain, tmp_path, capsys):
    exercise = make_exercise(tmp_path, "pending_test_exercise", PENDING, Mode.TEST)
    run(exercise, False)
    out = capsys.readouterr().out
    assert "I AM NOT DONE" not in out
    assert "program output" not in out


def test_run_test_with_output(toolchain, tmp_path, capsys):
    exercise = make_exercise(tmp_path, "testSuccess", FINISHED, Mode.TEST)
    run(exercise, True)
    assert "program output" in capsys.readouterr().out


def test_run_test_failure(toolchain, tmp_path):
    toolchain.run_rc = 1
    exercise = make_exercise(tmp_path, "testNotPassed", FINISHED, Mode.TEST)
    with pytest.raises(RunFailed):
        run(exercise, False)


def test_reset_stashes_file(monkeypatch, tmp_path):
    started = []
    monkeypatch.setattr(subprocess, "Popen", lambda args, **kw: started.append(list(args)))
    exercise = make_exercise(tmp_path, "intro1", FINISHED)
    reset(exercise)
    assert started == [["git", "stash", "--", str(exercise.path)]]


def test_reset_failure(monkeypatch, tmp_path):
    def broken(args, **kwargs):
        raise OSError("no git")

    monkeypatch.setattr(subprocess, "Popen", broken)
    exercise = make_exercise(tmp_path, "intro1", FINISHED)
    with pytest.raises(RunFailed):
        reset(exercise)