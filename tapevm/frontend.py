"""
Text front end: classic source <-> operation tree.

Recognized commands are > < + - . [ ]; every other character is a comment.
',' (input) has no operation and is treated as a comment too.
"""

from typing import List, Tuple

from .operations import (Decrement, Increment, Loop, MoveLeft, MoveRight, NoOp,
                         Operation, Output, flatten)

_RUNS = {
    '>': MoveRight,
    '<': MoveLeft,
    '+': Increment,
    '-': Decrement,
}


def parse(source: str) -> Tuple[Operation, ...]:
    """Parse source text into a program.

    Runs of the same command collapse into one operation with an amount.
    Raises SyntaxError on unbalanced brackets.
    """
    code = [(i, c) for i, c in enumerate(source) if c in '><+-.[]']

    # each open bracket gets its own list; the root is at the bottom
    stack: List[Tuple[int, List[Operation]]] = [(-1, [])]
    k = 0
    while k < len(code):
        pos, cmd = code[k]
        body = stack[-1][1]
        if cmd in _RUNS:
            count = 1
            while k + 1 < len(code) and code[k + 1][1] == cmd:
                k += 1
                count += 1
            if cmd in '+-':
                count %= 256
            body.append(_RUNS[cmd](count))
        elif cmd == '.':
            body.append(Output())
        elif cmd == '[':
            stack.append((pos, []))
        elif cmd == ']':
            if len(stack) == 1:
                raise SyntaxError(f"Unmatched ']' at position {pos}")
            _, inner = stack.pop()
            stack[-1][1].append(Loop(inner))
        k += 1

    if len(stack) > 1:
        raise SyntaxError(f"Unmatched '[' at position {stack[-1][0]}")
    return flatten(stack[0][1])


def to_source(program) -> str:
    """Render a program back to classic text. NoOp renders as nothing."""
    parts: List[str] = []
    # pending items are operations or the closing-bracket marker
    pending: List[object] = list(reversed(flatten(program)))
    while pending:
        op = pending.pop()
        if op == ']':
            parts.append(']')
        elif isinstance(op, Loop):
            parts.append('[')
            pending.append(']')
            pending.extend(reversed(op.body))
        elif isinstance(op, MoveRight):
            parts.append('>' * op.amount)
        elif isinstance(op, MoveLeft):
            parts.append('<' * op.amount)
        elif isinstance(op, Increment):
            parts.append('+' * op.amount)
        elif isinstance(op, Decrement):
            parts.append('-' * op.amount)
        elif isinstance(op, Output):
            parts.append('.')
        elif isinstance(op, NoOp):
            continue
        else:
            raise TypeError(f"cannot render {op!r}")
    return ''.join(parts)
