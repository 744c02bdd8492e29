"""
Execution engine.

Walks an operation tree against a Tape. Loops are driven by an explicit frame
stack: entering a Loop with a non-zero cell pushes a frame for its body; when
the body frame runs out the cell is re-checked and the frame either rewinds
or is popped. Call depth stays constant however long a loop runs.

Step accounting: every primitive application and every loop test (on entry
and on each re-check) is one step. ``max_steps`` and the step hooks are how a
caller bounds programs that never halt; the engine itself imposes no limit.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TextIO

from .config import EngineConfig
from .errors import NonAsciiOutputError, StepLimitExceeded, TapeVMError
from .operations import Loop, Operation, flatten
from .tape import Tape

StepHook = Callable[[Operation, Tape, int], None]


@dataclass
class RunResult:
    tape: Tape
    output: str
    steps: int


class _Frame:
    __slots__ = ("ops", "pc", "loop")

    def __init__(self, ops: Sequence[Operation], loop: Optional[Loop]):
        self.ops = ops
        self.pc = 0
        self.loop = loop


class Engine:
    def __init__(self, config: Optional[EngineConfig] = None, sink: Optional[TextIO] = None,
                 hooks: Sequence[StepHook] = ()):
        self.config = config or EngineConfig()
        self.sink = sink
        self.hooks = list(hooks)

    def run(self, program, tape: Optional[Tape] = None) -> RunResult:
        """Execute ``program`` on ``tape`` (a fresh Tape by default).

        Any TapeVMError is re-raised with ``steps``, ``output`` and ``tape``
        filled in.
        """
        tape = tape if tape is not None else Tape()
        output: List[str] = []
        steps = 0
        stack = [_Frame(flatten(program), None)]

        try:
            while stack:
                frame = stack[-1]
                if frame.pc < len(frame.ops):
                    op = frame.ops[frame.pc]
                    frame.pc += 1
                    self._check_budget(steps)
                    if isinstance(op, Loop):
                        if tape.read() != 0:
                            stack.append(_Frame(op.body, op))
                    else:
                        value = op.apply(tape)
                        if value is not None:
                            output.append(self._emit(value))
                elif frame.loop is None:
                    stack.pop()
                    continue
                else:
                    # end of loop body: jump back while the cell is non-zero
                    op = frame.loop
                    self._check_budget(steps)
                    if tape.read() != 0:
                        frame.pc = 0
                    else:
                        stack.pop()

                steps += 1
                for hook in self.hooks:
                    hook(op, tape, steps)
        except TapeVMError as e:
            e.steps = steps
            e.output = "".join(output)
            e.tape = tape
            raise

        return RunResult(tape=tape, output="".join(output), steps=steps)

    def _check_budget(self, steps: int) -> None:
        limit = self.config.max_steps
        if limit is not None and steps >= limit:
            raise StepLimitExceeded(limit)

    def _emit(self, value: int) -> str:
        char = self.encode(value)
        if self.sink is not None:
            self.sink.write(char)
            flush = getattr(self.sink, "flush", None)
            if flush is not None:
                flush()
        return char

    def encode(self, value: int) -> str:
        """Character for a cell value under the configured non-ASCII policy."""
        return encode_byte(value, self.config.non_ascii)


def encode_byte(value: int, policy: str = "latin-1") -> str:
    """Character for a cell value under a non-ASCII policy."""
    if value < 128:
        return chr(value)
    if policy == "strict":
        raise NonAsciiOutputError(value)
    if policy == "replace":
        return "\ufffd"
    return bytes([value]).decode("latin-1")


def run(program, sink: Optional[TextIO] = None, max_steps: Optional[int] = None,
        non_ascii: Optional[str] = None, hooks: Sequence[StepHook] = (),
        tape: Optional[Tape] = None) -> RunResult:
    """Run a program once with a fresh engine."""
    config = EngineConfig(max_steps=max_steps, non_ascii=non_ascii or "latin-1")
    return Engine(config, sink=sink, hooks=hooks).run(program, tape)
