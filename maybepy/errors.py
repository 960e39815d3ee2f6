from __future__ import annotations
from typing import Optional


class MaybeError(Exception):
    pass


class EmptyValueError(MaybeError, LookupError):
    """Raised by ``get()`` on Nothing."""


class ContractViolation(MaybeError, TypeError):
    """A value of the wrong shape was passed to (or returned into) a Maybe operation."""

    def __init__(self, op: str, expected: str, got: object, message: Optional[str] = None):
        super().__init__(message or f"{op}: expected {expected}, got {type(got).__name__}")
        self.op = op; self.expected = expected; self.got = got


class ArityError(ContractViolation):
    def __init__(self, op: str, expected: str, got: str):
        super().__init__(op, expected, got, f"{op}: expected {expected}, got {got}")
