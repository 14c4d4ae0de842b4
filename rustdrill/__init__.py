"""Compile, run and check Rust exercises, track progress, and read worked solutions."""

__version__ = "0.1.0"