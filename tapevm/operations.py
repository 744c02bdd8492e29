"""
Operation set of the tape machine.

    MoveRight(n)   move the cursor n cells right
    MoveLeft(n)    move the cursor n cells left
    Increment(n)   add n to the current cell, wrapping mod 256
    Decrement(n)   subtract n from the current cell, wrapping mod 256
    Output()       emit the current cell as a character
    Loop(...)      repeat the body while the current cell is non-zero
    NoOp()         do nothing

A program is a flat tuple of operations; a Loop's body is another such tuple.
Nested lists/tuples passed to ``flatten``/``group``/``Loop`` are inlined, so
grouping has no effect on execution.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .tape import Tape


class Operation:
    def apply(self, tape: Tape) -> Optional[int]:
        """Apply to the tape. Returns a byte to emit, or None."""
        raise NotImplementedError


def _check_count(amount):
    if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
        raise ValueError(f"move amount must be a non-negative integer, got {amount!r}")


def _check_byte(amount):
    if not isinstance(amount, int) or isinstance(amount, bool) or not 0 <= amount <= 255:
        raise ValueError(f"amount must be an integer in [0, 255], got {amount!r}")


@dataclass(frozen=True)
class NoOp(Operation):
    def apply(self, tape: Tape) -> None:
        return None


@dataclass(frozen=True)
class MoveRight(Operation):
    amount: int = 1

    def __post_init__(self):
        _check_count(self.amount)

    def apply(self, tape: Tape) -> None:
        tape.move_by(self.amount)


@dataclass(frozen=True)
class MoveLeft(Operation):
    amount: int = 1

    def __post_init__(self):
        _check_count(self.amount)

    def apply(self, tape: Tape) -> None:
        tape.move_by(-self.amount)


@dataclass(frozen=True)
class Increment(Operation):
    amount: int = 1

    def __post_init__(self):
        _check_byte(self.amount)

    def apply(self, tape: Tape) -> None:
        tape.write((tape.read() + self.amount) % 256)


@dataclass(frozen=True)
class Decrement(Operation):
    amount: int = 1

    def __post_init__(self):
        _check_byte(self.amount)

    def apply(self, tape: Tape) -> None:
        tape.write((tape.read() - self.amount) % 256)


@dataclass(frozen=True)
class Output(Operation):
    def apply(self, tape: Tape) -> int:
        return tape.read()


@dataclass(frozen=True, init=False)
class Loop(Operation):
    """Zero-test loop: the classic ``[ ... ]``.

    Evaluation is driven by the engine, which keeps an explicit frame stack
    instead of recursing once per iteration.
    """
    body: Tuple[Operation, ...]

    def __init__(self, *items):
        object.__setattr__(self, "body", flatten(*items))

    def apply(self, tape: Tape) -> None:
        raise TypeError("Loop is evaluated by the engine, not applied directly")


def flatten(*items) -> Tuple[Operation, ...]:
    """Inline nested lists/tuples of operations into one flat tuple."""
    out = []
    stack = [iter(items)]
    while stack:
        for item in stack[-1]:
            if isinstance(item, Operation):
                out.append(item)
            elif isinstance(item, (list, tuple)):
                stack.append(iter(item))
                break
            else:
                raise TypeError(f"not an operation: {item!r}")
        else:
            stack.pop()
    return tuple(out)


# Authoring alias: a group is just its contents, inlined
group = flatten


def count_operations(program: Iterable[Operation]) -> int:
    """Total number of nodes in the tree, loops included."""
    total = 0
    pending = list(program)
    while pending:
        op = pending.pop()
        total += 1
        if isinstance(op, Loop):
            pending.extend(op.body)
    return total
