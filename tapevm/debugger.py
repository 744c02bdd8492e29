"""
Step-by-step tracer

Plugs into the engine as a step hook and prints the state of the tape,
the cursor and the output after every step.
"""

import sys
from typing import List, Optional, TextIO

from .engine import encode_byte
from .operations import Loop, Operation, Output
from .tape import Tape


class Tracer:
    """Step hook that prints machine state after each step.

    ``non_ascii`` should match the engine's policy so the traced output reads
    the same as the real output. State is reset when a run starts (step 1),
    so one Tracer can follow several runs.
    """

    def __init__(self, window: int = 10, limit: Optional[int] = None, stream: Optional[TextIO] = None,
                 non_ascii: str = "latin-1"):
        self.window = window
        self.limit = limit
        self.stream = stream or sys.stdout
        self.non_ascii = non_ascii
        self.output: List[int] = []
        self.traced = 0

    def __call__(self, op: Operation, tape: Tape, steps: int) -> None:
        if steps == 1:
            self.output = []
            self.traced = 0
        if isinstance(op, Output):
            self.output.append(tape.read())

        if self.limit is not None and self.traced >= self.limit:
            if self.traced == self.limit:
                self._print(f"\n⚠️ Trace stopped after {self.limit} steps; execution continues")
                self.traced += 1
            return
        self.traced += 1
        self._show_state(op, tape, steps)

    def _show_state(self, op: Operation, tape: Tape, steps: int) -> None:
        self._print(f"\nStep {steps}: {describe(op, tape)}")

        # Show memory tape (focused around cursor)
        start = tape.cursor - self.window // 2
        cells = tape.window(start, start + self.window)

        memory_vals = [f"{int(v):3d}" for v in cells]
        memory_ptrs = [" ^ " if start + i == tape.cursor else "   " for i in range(len(cells))]
        memory_addrs = [f"{start + i:3d}" for i in range(len(cells))]

        self._print("  Memory:   [" + "|".join(memory_vals) + "]")
        self._print("  Pointer:   " + " ".join(memory_ptrs))
        self._print("  Address:   " + " ".join(memory_addrs))

        if self.output:
            text = "".join(encode_byte(v, self.non_ascii) for v in self.output)
            self._print(f"  Output:   {text!r} → {self.output}")
        else:
            self._print("  Output:   (empty)")

    def _print(self, line: str) -> None:
        print(line, file=self.stream)


def describe(op: Operation, tape: Tape) -> str:
    """One-line description of a step that has just completed."""
    if isinstance(op, Loop):
        if tape.read() == 0:
            return f"Loop test: cell[{tape.cursor}] = 0, exit loop"
        return f"Loop test: cell[{tape.cursor}] ≠ 0, run body"
    if isinstance(op, Output):
        return f"Output cell[{tape.cursor}] = {tape.read()}"
    return f"{op!r} → cursor {tape.cursor}, cell {tape.read()}"
