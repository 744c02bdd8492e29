"""Byte-cell tape machine: tape, operation set and execution engine."""

from .config import EngineConfig, load_config
from .engine import Engine, RunResult, run
from .errors import NonAsciiOutputError, OutOfRangeError, StepLimitExceeded, TapeVMError
from .frontend import parse, to_source
from .operations import (Decrement, Increment, Loop, MoveLeft, MoveRight, NoOp,
                         Operation, Output, count_operations, flatten, group)
from .tape import INDEX_MAX, INDEX_MIN, Tape

__all__ = [
    "Decrement", "Engine", "EngineConfig", "INDEX_MAX", "INDEX_MIN", "Increment",
    "Loop", "MoveLeft", "MoveRight", "NoOp", "NonAsciiOutputError", "Operation",
    "OutOfRangeError", "Output", "RunResult", "StepLimitExceeded", "Tape",
    "TapeVMError", "count_operations", "flatten", "group", "load_config", "parse",
    "run", "to_source",
]
