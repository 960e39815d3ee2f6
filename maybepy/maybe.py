from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, List, Optional, TypeVar, TYPE_CHECKING

from .contracts import require_arity, require_callable, require_maybe, require_maybe_of_callable, require_maybes
from .errors import ContractViolation, EmptyValueError

if TYPE_CHECKING:  # pragma: no cover
    from .logger import ConsoleLogger

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Generic[T]):
    """A value that may be missing: either ``Just(value)`` or ``NOTHING``.

    Operations on Nothing short-circuit and never call the supplied function.
    Every operation returns a new Maybe (or NOTHING itself); nothing is mutated.
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is Maybe:
            raise TypeError("Maybe cannot be instantiated directly; use just(), nothing() or from_nullable()")
        return super().__new__(cls)

    # -- constructors ---------------------------------------------------

    @staticmethod
    def just(value: T) -> "Maybe[T]":
        return Just(value)

    @staticmethod
    def of(value: T) -> "Maybe[T]":
        return Just(value)

    @staticmethod
    def nothing() -> "Maybe[Any]":
        return NOTHING

    @staticmethod
    def from_nullable(value: Optional[T]) -> "Maybe[T]":
        return NOTHING if value is None else Just(value)

    @staticmethod
    def zip(*ms: "Maybe[Any]") -> "Maybe[List[Any]]":
        require_maybes("zip", ms, 2)
        return _collect(ms)

    @staticmethod
    def lift(f: Callable[..., U], *ms: "Maybe[Any]") -> "Maybe[U]":
        require_callable("lift", f)
        require_maybes("lift", ms, 1)

        def call(args: List[Any]) -> U:
            require_arity("lift", f, args)
            return f(*args)

        return _collect(ms).ap(Just(call))

    # -- variant protocol ------------------------------------------------

    def is_just(self) -> bool: raise NotImplementedError
    def is_nothing(self) -> bool: return not self.is_just()

    def get(self) -> T: raise NotImplementedError
    def get_or_else(self, supplier: Callable[[], U]) -> T | U: raise NotImplementedError
    def flat_map(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]": raise NotImplementedError
    def ap(self, mf: "Maybe[Callable[[T], U]]") -> "Maybe[U]": raise NotImplementedError
    def or_else(self, supplier: Callable[[], "Maybe[T]"]) -> "Maybe[T]": raise NotImplementedError

    # -- derived ---------------------------------------------------------

    def map(self, f: Callable[[T], U]) -> "Maybe[U]":
        require_callable("map", f)
        return self.flat_map(lambda v: Just(f(v)))

    def apply(self, mf: "Maybe[Callable[[T], U]]") -> "Maybe[U]":
        return self.ap(mf)

    def filter(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        require_callable("filter", predicate)
        return self.flat_map(lambda v: Just(v) if predicate(v) else NOTHING)

    def to_nullable(self) -> Optional[T]:
        return self.get_or_else(lambda: None)

    def to_list(self) -> List[T]:
        return [self.get()] if self.is_just() else []

    def log(self, logger: "ConsoleLogger", label: str = "maybe") -> "Maybe[T]":
        logger.debug(label, value=repr(self))
        return self

    def __str__(self) -> str:
        return repr(self)


@dataclass(frozen=True, repr=False)
class Just(Maybe[T]):
    value: T

    def is_just(self) -> bool: return True
    def get(self) -> T: return self.value

    def get_or_else(self, supplier: Callable[[], U]) -> T:
        require_callable("get_or_else", supplier)
        return self.value

    def flat_map(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        require_callable("flat_map", f)
        out = f(self.value)
        if not isinstance(out, Maybe):
            raise ContractViolation("flat_map", "the function to return a Maybe", out)
        return out

    def ap(self, mf: Maybe[Callable[[T], U]]) -> Maybe[U]:
        require_maybe_of_callable("ap", mf)
        return mf.flat_map(self.map)

    def or_else(self, supplier: Callable[[], Maybe[T]]) -> Maybe[T]:
        require_callable("or_else", supplier)
        return self

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


class _Nothing(Maybe[Any]):
    __slots__ = ()
    _instance: Optional["_Nothing"] = None

    def __new__(cls) -> "_Nothing":
        if _Nothing._instance is None:
            _Nothing._instance = super().__new__(cls)
        return _Nothing._instance

    def is_just(self) -> bool: return False

    def get(self) -> Any:
        raise EmptyValueError("cannot get the value of Nothing.")

    def get_or_else(self, supplier: Callable[[], U]) -> U:
        require_callable("get_or_else", supplier)
        return supplier()

    def flat_map(self, f: Callable[[Any], Maybe[U]]) -> Maybe[U]:
        require_callable("flat_map", f)
        return self

    def ap(self, mf: Maybe[Callable[[Any], U]]) -> Maybe[U]:
        require_maybe_of_callable("ap", mf)
        return self

    def or_else(self, supplier: Callable[[], Maybe[T]]) -> Maybe[T]:
        require_callable("or_else", supplier)
        out = supplier()
        require_maybe("or_else", out)
        return out

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Nothing)

    def __hash__(self) -> int:
        return hash(_Nothing)

    def __repr__(self) -> str: return "Nothing"

    # identity survives copy and pickle
    def __copy__(self) -> "_Nothing": return self
    def __deepcopy__(self, memo: dict) -> "_Nothing": return self
    def __reduce__(self) -> str: return "NOTHING"


# Created at import: the single shared Nothing.
NOTHING: Maybe[Any] = _Nothing()


def _collect(ms: "tuple[Maybe[Any], ...]") -> Maybe[List[Any]]:
    # left fold from Just([]), left to right; first Nothing sticks
    return reduce(lambda acc, m: acc.flat_map(lambda xs: m.map(lambda x: xs + [x])), ms, Just([]))


def identity(v: T) -> T:
    return v


just = Maybe.just
of = Maybe.of
nothing = Maybe.nothing
from_nullable = Maybe.from_nullable
zip_maybes = Maybe.zip
lift = Maybe.lift
