"""Running a single exercise and resetting it."""

from __future__ import annotations

import subprocess

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import success, warn
from .verify import VerificationFailed, test


class RunFailed(Exception):
    """Running or resetting an exercise did not succeed."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose=False) -> None:
    """Compile and run (or test) one exercise, without prompting."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as err:
            raise RunFailed(exercise) from err
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> None:
    """Reset the exercise by stashing its changes with git."""
    try:
        subprocess.Popen(["git", "stash", "--", str(exercise.path)])
    except OSError as err:
        raise RunFailed(exercise) from err


def _compile_and_run(exercise: Exercise) -> None:
    try:
        compiled = exercise.compile()
    except ExerciseFailed as err:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(err.output.stderr)
        raise RunFailed(exercise) from err

    with compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            print(err.output.stdout)
            print(err.output.stderr)
            warn(f"Ran {exercise} with errors")
            raise RunFailed(exercise) from err

    print(output.stdout)
    success(f"Successfully ran {exercise}")