# rustdrill

`rustdrill` is a Python library for working through a set of small Rust
exercises. Each exercise is a `.rs` file that does not compile yet, fails its
tests, or upsets Clippy. The library compiles and runs exercises with your Rust
toolchain, tells you which ones are finished, and shows where the
`// I AM NOT DONE` marker still sits in those that are not.

It also ships worked solutions to many of the exercises, written in Python, in
the `rustdrill.lessons` package.

## Requirements

- Python 3.11 or later (no third-party dependencies)
- A Rust toolchain with `rustc` on your `PATH`, and `cargo clippy` for Clippy
  exercises

## Installation

```
pip install rustdrill
```

## The exercise list

Exercises are described in a TOML file, usually `info.toml`, in the order they
should be done:

```toml
[[exercises]]
name = "intro1"
path = "exercises/00_intro/intro1.rs"
mode = "compile"
hint = "No hints this time ;)"
```

Every entry needs `name`, `path`, `mode` and `hint`, all strings. `mode` is one of:

- `compile` – built with `rustc` as a program and run;
- `test` – built with `rustc --test` and its tests run with `--show-output`;
- `clippy` – built, then linted with `cargo clippy` with warnings denied. This
  writes a manifest to `./exercises/22_clippy/Cargo.toml`.

`rustdrill.exercise.load_exercises(path)` reads such a file and
`parse_exercises(text)` parses its text; both return a list of `Exercise`
objects and raise `ValueError` on a missing field or an unknown mode.

## Checking exercises

```python
from rustdrill.exercise import load_exercises
from rustdrill.verify import VerificationFailed, verify

exercises = load_exercises("info.toml")
try:
    verify(exercises, (0, len(exercises)), verbose=False, success_hints=True)
except VerificationFailed as failed:
    print("Stuck on", failed.exercise.name)
    print(failed.exercise.hint)
```

`verify(exercises, progress, verbose, success_hints)` checks each exercise in
turn, drawing a progress bar on standard error. `progress` is a
`(number_done, total)` pair. It stops with `VerificationFailed` at the first
exercise that fails to compile, fails when run, or still carries the marker; in
that last case it prints a success message, the program output (for `compile`
exercises), the hint when `success_hints` is true, and the lines around the
marker. `verbose` prints the output of test exercises.

`rustdrill.verify.test(exercise, verbose)` builds and runs a single test
exercise without looking at the marker, raising `VerificationFailed` if it
fails.

Working with one exercise directly:

```python
from rustdrill.exercise import ExerciseFailure

exercise = exercises[0]
print(exercise.looks_done())

state = exercise.state()
if not state.done():
    for line in state.context:
        print(line.number, line.line, "<--" if line.important else "")

try:
    with exercise.compile() as compiled:
        print(compiled.run().stdout)
except ExerciseFailure as failure:
    print(failure.output.stderr)
```

`Exercise.compile()` returns a `CompiledExercise`; leaving the `with` block (or
calling `close()`) deletes the temporary binary. Both `compile()` and `run()`
raise `ExerciseFailure`, whose `output` holds the captured `stdout` and
`stderr`.

An exercise counts as done once no line matching `// I AM NOT DONE` (any
spacing, `//` or `///`) is left in its source. This only looks at the file; it
does not prove the exercise is solved.

## rust-analyzer support

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

`get_sysroot_src()` uses the `RUST_SRC_PATH` environment variable when set,
and otherwise asks `rustc --print sysroot`. `exercises_to_json(root)` adds a
crate, with edition 2021 and `cfg = ["test"]`, for every `.rs` file under
`root`.

## Plain output

Set the `NO_EMOJI` environment variable to replace emoji in messages with plain
markers. The helpers in `rustdrill.ui` (`warn`, `success`, `bold`, `blue`,
`no_emoji`) produce the coloured lines.

## Worked solutions

The modules in `rustdrill.lessons` are plain Python answers to exercise topics:

- `quizzes` – apple pricing, a string command machine (`transformer`), `ReportCard`
- `basics` – functions, conditions, lists and strings (`bigger`, `animal_habitat`, `fill_vec`, `trim_me`, …)
- `structs` – `Order`, `Package`, and `MachineState` driven by messages
- `baskets` – fruit baskets and `build_scores_table`
- `errors` – `maybe_icecream`, `total_cost`, `parse_pos_nonzero` and its errors
- `traits` – `Wrapper`, `append_bar`, `Licensed`
- `containers` – `Rectangle` and a cons list (`Cons`, `Nil`)
- `iterators` – `capitalize_first`, `divide`, `factorial`, progress counting
- `colors` – `Color.from_values` / `Color.from_slice` raising `IntoColorError`

```python
from rustdrill.lessons.iterators import DivideByZero, divide

print(divide(81, 9))        # 9
try:
    divide(81, 0)
except DivideByZero:
    print("no dividing by zero")
```

## What it does not do

`rustdrill` has no command-line program: there is no `watch` mode that
re-checks exercises as files change, and no commands to run, reset, list or
give hints for exercises by name. Everything is reached from Python through
the functions above.