"""Check exercises one after another and report how far the learner got."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Callable

from . import ui
from .exercise import CompiledExercise, Exercise, ExerciseFailure, Mode

_BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise did not compile, did not pass, or is still marked pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


class _StepFailed(Exception):
    """A compile or run step failed; its output has already been shown."""


class _ProgressBar:
    def __init__(self, total: int, position: int) -> None:
        self.total = total
        self.position = position
        self.percentage = position / total * 100.0 if total else 0.0

    def advance(self) -> None:
        self.position += 1
        if self.total:
            self.percentage += 100.0 / self.total
        self.draw()

    def draw(self) -> None:
        fraction = min(self.position / self.total, 1.0) if self.total else 1.0
        filled = int(_BAR_WIDTH * fraction)
        bar = "#" * filled
        if filled < _BAR_WIDTH:
            bar += ">" + "-" * (_BAR_WIDTH - filled - 1)
        print(
            f"Progress: [{bar}] {self.position}/{self.total} ({self.percentage:.1f} %)",
            file=sys.stderr,
        )


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first one not done."""
    num_done, total = progress
    bar = _ProgressBar(total, num_done)
    bar.draw()

    for exercise in exercises:
        step: Callable[[], bool]
        if exercise.mode is Mode.TEST:
            step = lambda ex=exercise: _compile_and_test(ex, True, verbose, success_hints)
        elif exercise.mode is Mode.COMPILE:
            step = lambda ex=exercise: _compile_and_run_interactively(ex, success_hints)
        else:
            step = lambda ex=exercise: _compile_only(ex, success_hints)
        try:
            passed = step()
        except _StepFailed:
            passed = False
        if not passed:
            raise VerificationFailed(exercise)
        bar.advance()


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Build and run the exercise's tests without prompting; raise VerificationFailed on failure."""
    try:
        _compile_and_test(exercise, False, verbose, False)
    except _StepFailed:
        raise VerificationFailed(exercise) from None


def _compile(exercise: Exercise) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailure as failure:
        ui.warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(failure.output.stderr)
        raise _StepFailed from None


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    _compile(exercise).close()
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailure as failure:
            ui.warn(f"Ran {exercise} with errors")
            print(failure.output.stdout)
            print(failure.output.stderr)
            raise _StepFailed from None
        return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailure as failure:
            ui.warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(failure.output.stdout)
            raise _StepFailed from None
        if verbose:
            print(output.stdout)
        if interactive:
            return prompt_for_completion(exercise, None, success_hints)
        return True


def _separator() -> str:
    return ui.bold("====================")


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None = None, success_hints: bool = False
) -> bool:
    """Return True when the exercise is done; otherwise show where the marker sits and return False."""
    state = exercise.state()
    if state.done():
        return True

    verbs = {Mode.COMPILE: "ran", Mode.TEST: "tested", Mode.CLIPPY: "compiled"}
    ui.success(f"Successfully {verbs[exercise.mode]} {exercise}!")

    no_emoji = ui.no_emoji()
    clippy_msg = (
        "The code is compiling, and Clippy is happy!"
        if no_emoji
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_msg = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_msg,
    }[exercise.mode]

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
        f"or jump into the next one by removing the {ui.bold('`I AM NOT DONE`')} comment:"
    )
    print()
    for context_line in state.context or ():
        line = ui.bold(context_line.line) if context_line.important else context_line.line
        number = ui.bold(ui.blue(f"{context_line.number:>2}"))
        print(f"{number} {ui.blue('|')}  {line}")

    return False