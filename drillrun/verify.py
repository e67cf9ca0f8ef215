"""Checking exercises in order and prompting the learner about progress."""

from __future__ import annotations

import enum
import os

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import style, success, warn

_BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise did not compile, run or pass, or is still marked pending."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


class RunMode(enum.Enum):
    """Whether a successful test run prompts the learner afterwards."""

    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


def _progress_line(position: int, total: int, percentage: float) -> str:
    filled = min(position, total) * _BAR_WIDTH // total if total else _BAR_WIDTH
    if filled < _BAR_WIDTH:
        done, rest = "#" * filled + ">", "-" * (_BAR_WIDTH - filled - 1)
    else:
        done, rest = "#" * _BAR_WIDTH, ""
    bar = style(done, "green") + (style(rest, "red") if rest else "")
    return f"Progress: [{bar}] {position}/{total} ({percentage:.1f} %)"


def verify(exercises, progress, verbose=False, success_hints=False) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first that fails."""
    num_done, total = progress
    percentage = num_done / total * 100.0 if total else 0.0
    position = num_done
    print(_progress_line(position, total, percentage))

    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            passed = _compile_and_test(exercise, RunMode.INTERACTIVE, verbose, success_hints)
        elif exercise.mode is Mode.COMPILE:
            passed = _compile_and_run_interactively(exercise, success_hints)
        else:
            passed = _compile_only(exercise, success_hints)
        if not passed:
            raise VerificationFailed(exercise)
        if total:
            percentage += 100.0 / total
        position += 1
        print(_progress_line(position, total, percentage))


def test(exercise: Exercise, verbose=False) -> None:
    """Compile and run the exercise's test harness without prompting."""
    _compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose, False)


def _compile(exercise: Exercise) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as err:
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise VerificationFailed(exercise) from err


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _compile(exercise):
        pass
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            warn(f"Ran {exercise} with errors")
            print(err.output.stdout)
            print(err.output.stderr)
            raise VerificationFailed(exercise) from err
    return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, run_mode: RunMode, verbose: bool, success_hints: bool
) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as err:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(err.output.stdout)
            raise VerificationFailed(exercise) from err
    if verbose:
        print(output.stdout)
    if run_mode is RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None, success_hints)
    return True


def _separator() -> str:
    return style("====================", "bold")


def prompt_for_completion(exercise: Exercise, prompt_output=None, success_hints=False) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is and return False."""
    context = exercise.state()
    if context is None:
        return True

    if exercise.mode is Mode.COMPILE:
        success(f"Successfully ran {exercise}!")
    elif exercise.mode is Mode.TEST:
        success(f"Successfully tested {exercise}!")
    else:
        success(f"Successfully compiled {exercise}!")

    no_emoji = "NO_EMOJI" in os.environ
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif no_emoji:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()
    if success_hints:
        print("Hints:")
        print(_separator())
        print(exercise.hint)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{style('`I AM NOT DONE`', 'bold')} comment:"
    )
    print()
    for context_line in context:
        line = style(context_line.line, "bold") if context_line.important else context_line.line
        number = style(f"{context_line.number:>2}", "blue", "bold")
        print(f"{number} {style('|', 'blue')}  {line}")

    return False