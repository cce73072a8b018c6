"""Read-only access to a tuple."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Generic, Iterator, TypeVarTuple, final

from vtuple.container import AnyTuple, Tuple
from vtuple.shape import Shape

Ts = TypeVarTuple("Ts")


def _unwrap(other: object) -> AnyTuple | None:
    match other:
        case TupleView(underlying=underlying):
            return underlying
        case Tuple():
            return other
        case _:
            return None


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True, eq=False)
class TupleView(Generic[*Ts]):
    """
    A read-only window onto a :class:`Tuple`.

    Reads see later writes made through the tuple itself, but the view offers no
    way to replace a slot. Views compare like the tuple they wrap.
    """

    underlying: Final[Tuple[*Ts]]

    @property
    def shape(self) -> Shape[*Ts]:
        return self.underlying.shape

    @property
    def arity(self) -> int:
        return self.underlying.arity

    def get(self, index: int) -> Any:
        return self.underlying.get(index)

    def __getitem__(self, index: int) -> Any:
        return self.underlying.get(index)

    def __len__(self) -> int:
        return len(self.underlying)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.underlying)

    def to_builtin(self) -> tuple[*Ts]:
        return self.underlying.to_builtin()

    def __repr__(self) -> str:
        return f"TupleView({self.underlying!r})"

    def __eq__(self, other: object) -> bool:
        unwrapped = _unwrap(other)
        if unwrapped is None:
            return NotImplemented
        return self.underlying == unwrapped

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        unwrapped = _unwrap(other)
        if unwrapped is None:
            return NotImplemented
        return self.underlying < unwrapped

    def __le__(self, other: object) -> bool:
        unwrapped = _unwrap(other)
        if unwrapped is None:
            return NotImplemented
        return self.underlying <= unwrapped

    def __gt__(self, other: object) -> bool:
        unwrapped = _unwrap(other)
        if unwrapped is None:
            return NotImplemented
        return self.underlying > unwrapped

    def __ge__(self, other: object) -> bool:
        unwrapped = _unwrap(other)
        if unwrapped is None:
            return NotImplemented
        return self.underlying >= unwrapped
