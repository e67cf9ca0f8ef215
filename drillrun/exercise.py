"""Exercise descriptions, compilation, running and progress detection."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    with contextlib.suppress(OSError):
        os.remove(temp_file())


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished command."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """A compile or run step exited unsuccessfully."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _execute(args: list[str], failure: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(args, capture_output=True)
    except OSError as err:
        raise RuntimeError(failure) from err


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self):
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseFailed with the compiler output on failure."""
        source = str(self.path)
        target = temp_file()
        failure = "Failed to run 'compile' command."
        if self.mode is Mode.COMPILE:
            result = _execute(
                ["rustc", source, "-o", target, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS],
                failure,
            )
        elif self.mode is Mode.TEST:
            result = _execute(
                ["rustc", "--test", source, "-o", target,
                 *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS],
                failure,
            )
        else:
            result = self._clippy(source, target, failure)

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(result))

    def _clippy(self, source: str, target: str, failure: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        if "NO_EMOJI" in os.environ:
            write_error = "Failed to write Clippy Cargo.toml file."
        else:
            write_error = "Failed to write 📎 Clippy 📎 Cargo.toml file."
        try:
            CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            raise RuntimeError(write_error) from err

        # A binary is built too so the exercise can be run; a failure here
        # is reported again by clippy below.
        _execute(
            ["rustc", source, "-o", target, *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS],
            "Failed to compile!",
        )
        # Clippy only reports every lint after a clean build.
        _execute(
            ["cargo", "clean", "--manifest-path", str(CLIPPY_CARGO_TOML_PATH),
             *RUSTC_COLOR_ARGS],
            "Failed to run 'cargo clean'",
        )
        return _execute(
            ["cargo", "clippy", "--manifest-path", str(CLIPPY_CARGO_TOML_PATH),
             *RUSTC_COLOR_ARGS, "--", "-D", "warnings", "-D", "clippy::float_cmp"],
            failure,
        )

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args, "Failed to run 'run' command")
        output = _output(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> list[ContextLine] | None:
        """Return None when done, else the lines around the pending marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return None

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")

        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return [
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines)
            if first <= i <= last
        ]

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return self.state() is None


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise):
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed with its output on failure."""
        return self.exercise._run()

    def close(self) -> None:
        clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml text."""
    data = tomllib.loads(text)
    try:
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in data["exercises"]
        ]
    except KeyError as err:
        raise ValueError(f"missing field {err.args[0]!r} in exercise list") from None