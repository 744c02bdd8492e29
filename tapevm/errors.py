"""Errors raised while executing a tape program."""

from typing import Optional


class TapeVMError(Exception):
    """Base class for fatal execution errors.

    The engine fills in ``steps``, ``output`` and ``tape`` before re-raising,
    so a caller can see how far the program got before it halted.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.steps: Optional[int] = None
        self.output: str = ""
        self.tape = None


class OutOfRangeError(TapeVMError):
    """Cursor arithmetic left the representable index range."""

    def __init__(self, index: int):
        super().__init__(f"cursor index {index} is outside the tape range")
        self.index = index


class NonAsciiOutputError(TapeVMError):
    """A cell value above 127 was output under the strict ASCII policy."""

    def __init__(self, value: int):
        super().__init__(f"cell value {value} is not a 7-bit ASCII character")
        self.value = value


class StepLimitExceeded(TapeVMError):
    """The step budget ran out (possible infinite loop)."""

    def __init__(self, limit: int):
        super().__init__(f"execution stopped after {limit} steps (possible infinite loop)")
        self.limit = limit
