# drillrun

drillrun is a library for working through a folder of small exercises. Each
exercise is a source file with a mistake in it. drillrun compiles the file with
`rustc`, runs the program or its tests, and reports back. An exercise counts
as finished once its `I AM NOT DONE` marker comment has been removed.

## Installing

```
pip install .
```

Compiling exercises needs `rustc` on your `PATH` (and `cargo` for lint
exercises). Paths in the exercise list are relative, so work from the
directory that holds `info.toml`.

## The exercise list

`info.toml` lists the exercises in order:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment."
```

`mode` is `compile` (build and run the program), `test` (build and run the
tests), or `clippy` (lint the program with `cargo clippy` and reject
warnings).

## Using it

```python
from drillrun.exercise import load_exercises
from drillrun.verify import VerificationFailed, verify

with open("info.toml", encoding="utf-8") as fh:
    exercises = load_exercises(fh.read())

done = sum(e.looks_done() for e in exercises)
pending = [e for e in exercises if not e.looks_done()]

try:
    verify(pending, (done, len(exercises)), verbose=False, success_hints=True)
except VerificationFailed as err:
    print("Stuck on", err.exercise.name)
    print(err.exercise.hint)
```

### `drillrun.exercise`

- `load_exercises(text)` parses `info.toml` text into a list of `Exercise`
  objects; a missing field raises `ValueError`.
- `Exercise` has `name`, `path`, `mode` (a `Mode`: `COMPILE`, `TEST`,
  `CLIPPY`) and `hint`.
- `Exercise.state()` returns `None` when the marker is gone, otherwise a list
  of `ContextLine` entries (`line`, `number`, `important`) covering two lines
  either side of the marker. `Exercise.looks_done()` is `state() is None`.
- `Exercise.compile()` returns a `CompiledExercise`, or raises
  `ExerciseFailed` whose `output` (an `ExerciseOutput` with `stdout` and
  `stderr`) holds the compiler's output. `CompiledExercise.run()` runs the
  binary and returns its `ExerciseOutput`, raising `ExerciseFailed` if it
  exits unsuccessfully. Use it as a context manager, or call `close()`, to
  remove the temporary binary (see `temp_file()` and `clean()`).

### `drillrun.verify` and `drillrun.run`

- `verify(exercises, progress, verbose, success_hints)` checks exercises in
  turn, printing a progress bar that starts from `progress = (done, total)`.
  It raises `VerificationFailed` at the first exercise that fails to build,
  run or pass, or whose marker is still present; in that last case
  `prompt_for_completion` prints the success message, the program output,
  the hint if `success_hints` is set, and the lines around the marker.
- `test(exercise, verbose)` builds and runs a test exercise without
  prompting.
- `run(exercise, verbose)` compiles and runs (or tests) one exercise without
  checking its marker; failure raises `RunFailed`.
- `reset(exercise)` starts `git stash -- <path>` for the exercise; raises
  `RunFailed` if git cannot be started.

### `drillrun.project`

`RustAnalyzerProject` builds a `rust-project.json` for rust-analyzer:
`get_sysroot_src()` takes `RUST_SRC_PATH` or asks `rustc --print sysroot`,
`exercises_to_json(root)` adds a `Crate` for every `.rs` file below `root`
(default `./exercises`), `to_json()` serialises it and `write_to_disk(path)`
writes it (default `./rust-project.json`).

### `drillrun.ui`

`style(text, *styles)` wraps text in ANSI codes (`bold`, `red`, `green`,
`blue`); `warn(message)` and `success(message)` print a red or green status
line and return it. Set `NO_EMOJI` in the environment to get plain-text
markers instead of emoji.

### `drillrun.drills`

Worked solutions to the exercises, written in Python, grouped by topic:
`basics`, `records`, `errors`, `hashmaps`, `iterators` and
`pointers_traits`.

## What it does not do

drillrun is a library only. It installs no command-line program: there is no
`watch` mode that re-checks exercises when files change, no interactive shell
for hints, and no ready-made commands for listing exercises, showing hints or
picking the next pending one. Build those on the functions above if you need
them. The drills do not include worked solutions for the type-conversion
exercises.