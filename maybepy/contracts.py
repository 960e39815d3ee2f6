from __future__ import annotations
import inspect
from typing import Any, Callable, Sequence

from .errors import ArityError, ContractViolation


def require_callable(op: str, f: Any) -> None:
    if not callable(f):
        raise ContractViolation(op, "a callable", f)


def require_maybe(op: str, m: Any) -> None:
    from .maybe import Maybe
    if not isinstance(m, Maybe):
        raise ContractViolation(op, "a Maybe", m)


def require_maybe_of_callable(op: str, m: Any) -> None:
    # MaybeOf[callable]: Nothing, or Just wrapping something callable
    require_maybe(op, m)
    if m.is_just() and not callable(m.get()):
        raise ContractViolation(op, "Nothing or a Just wrapping a callable", m.get())


def require_maybes(op: str, ms: Sequence[Any], minimum: int) -> None:
    if len(ms) < minimum:
        raise ArityError(op, f"at least {minimum} Maybe argument(s)", str(len(ms)))
    for m in ms:
        require_maybe(op, m)


def require_arity(op: str, f: Callable[..., Any], args: Sequence[Any]) -> None:
    try:
        sig = inspect.signature(f)
    except (TypeError, ValueError):  # builtins without introspectable signatures
        return
    try:
        sig.bind(*args)
    except TypeError:
        raise ArityError(op, f"a function accepting {len(args)} positional argument(s)", f"{getattr(f, '__name__', f)!s}{sig}") from None
