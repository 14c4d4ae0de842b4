"""Exercises: loading the list, compiling, running and checking progress."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
RUSTC_NO_DEBUG_ARGS = ("-C", "strip=debuginfo")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/22_clippy/Cargo.toml"

_REQUIRED_FIELDS = ("name", "path", "mode", "hint")


def temp_file() -> str:
    """Name of the binary built for this process and thread."""
    thread_id = "".join(
        c for c in f"ThreadId{threading.get_ident()}" if c.isalnum()
    )
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """One line of source around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise: done when there is no pending context."""

    context: tuple[ContextLine, ...] | None = None

    def done(self) -> bool:
        return self.context is None


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished command."""

    stdout: str
    stderr: str


class ExerciseFailure(Exception):
    """A compile or run step ended unsuccessfully."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _capture(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


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


class CompiledExercise:
    """A built exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailure when it exits unsuccessfully."""
        args = [temp_file()]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        result = _capture(args)
        output = _output(result)
        if result.returncode != 0:
            raise ExerciseFailure(output)
        return output

    def close(self) -> None:
        clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class Exercise:
    """An exercise as listed in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseFailure with the compiler output on error."""
        target = temp_file()
        source = str(self.path)
        rustc_tail = [*RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS, *RUSTC_NO_DEBUG_ARGS]
        if self.mode is Mode.COMPILE:
            result = _capture(["rustc", source, "-o", target, *rustc_tail])
        elif self.mode is Mode.TEST:
            result = _capture(["rustc", "--test", source, "-o", target, *rustc_tail])
        else:
            result = self._clippy(source, target, rustc_tail)

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailure(_output(result))

    def _clippy(
        self, source: str, target: str, rustc_tail: list[str]
    ) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if "NO_EMOJI" in os.environ
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from exc
        # Build a binary too so the exercise can be run; clippy reports any
        # compile failure itself.
        _capture(["rustc", source, "-o", target, *rustc_tail])
        # A clean is needed for clippy to report every lint.
        _capture(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS]
        )
        return _capture(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def state(self) -> State:
        """Read the source and find the pending marker with its context."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"marker in {self.path} does not sit on one line")

        low = max(matched - CONTEXT, 0)
        context = tuple(
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines[low : matched + CONTEXT + 1], start=low)
        )
        return State(context)

    def looks_done(self) -> bool:
        """True when the pending marker has been removed from the source."""
        return self.state().done()


def _exercise_from_table(table: object) -> Exercise:
    if not isinstance(table, dict):
        raise ValueError("each exercise must be a table")
    missing = [key for key in _REQUIRED_FIELDS if key not in table]
    if missing:
        raise ValueError(f"exercise is missing field(s): {', '.join(missing)}")
    for key in _REQUIRED_FIELDS:
        if not isinstance(table[key], str):
            raise ValueError(f"exercise field `{key}` must be a string")
    try:
        mode = Mode(table["mode"])
    except ValueError:
        raise ValueError(f"unknown exercise mode `{table['mode']}`") from None
    return Exercise(
        name=table["name"], path=Path(table["path"]), mode=mode, hint=table["hint"]
    )


def parse_exercises(text: str) -> list[Exercise]:
    """Parse the TOML exercise list."""
    data = tomllib.loads(text)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("missing `exercises` list")
    return [_exercise_from_table(entry) for entry in entries]


def load_exercises(path: str | os.PathLike[str]) -> list[Exercise]:
    """Read and parse the exercise list stored at ``path``."""
    return parse_exercises(Path(path).read_text(encoding="utf-8"))