"""
Element-type lists describing the shape of a tuple.

A :class:`Shape` is the ordered list of slot types ``T_0..T_{N-1}``. It is
captured once when a tuple is created and never changes afterwards: arity and
slot types are fixed for the lifetime of the tuple.

Example::

    point = Shape(int, float, str)
    t = point(42, 3, "x")      # Tuple(42, 3.0, 'x')
    zero = point.default()     # Tuple(0, 0.0, '')
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import numbers
from typing import TYPE_CHECKING, Final, Generic, Iterable, Iterator, TypeVarTuple, final

from vtuple import chain
from vtuple.errors import ArityMismatchError, DefaultConstructionError, SlotTypeError

if TYPE_CHECKING:
    from vtuple.container import Tuple

_logger: Final[logging.Logger] = logging.getLogger(__name__)

Ts = TypeVarTuple("Ts")


@final
@dataclass(frozen=True, slots=True, weakref_slot=True, init=False)
class Shape(Generic[*Ts]):
    """
    Ordered slot types of a tuple.

    Shapes compare and hash by their types, so two tuples built from the same
    kinds of values share an equal shape.
    """

    types: tuple[type, ...]

    def __init__(self, *types: type) -> None:
        object.__setattr__(self, "types", types)

    @classmethod
    def of(cls, *values: object) -> "Shape":
        """Infer the shape of ``values``: each slot takes the value's own type."""
        return cls(*(type(value) for value in values))

    @property
    def arity(self) -> int:
        return len(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def __iter__(self) -> Iterator[type]:
        return iter(self.types)

    def __getitem__(self, index: int) -> type:
        return self.types[index]

    def __add__(self, other: "Shape") -> "Shape":
        if not isinstance(other, Shape):
            return NotImplemented
        return Shape(*self.types, *other.types)

    def __repr__(self) -> str:
        return f"Shape({', '.join(t.__qualname__ for t in self.types)})"

    def coerce(self, index: int, value: object) -> object:
        """
        Convert ``value`` into the type of slot ``index``.

        Values that already are instances of the slot type are returned
        untouched. Numbers stored in a numeric slot are passed to the slot
        type's constructor, which may lose precision (``int(1.1) == 1``) or
        raise. A ``bool`` is converted as well, so an ``int`` slot holds an
        ``int``.

        :raises SlotTypeError: for any other value.
        """
        element_type = self.types[index]
        if type(value) is element_type:
            return value
        numeric = issubclass(element_type, numbers.Number) and isinstance(
            value, numbers.Number
        )
        if isinstance(value, element_type) and not (numeric and isinstance(value, bool)):
            return value
        if not numeric:
            raise SlotTypeError(index, element_type, value)
        coerced = element_type(value)
        _logger.debug(
            "Coerced slot %d from %r to %s %r",
            index,
            value,
            element_type.__qualname__,
            coerced,
        )
        return coerced

    def coerce_all(self, values: Iterable[object]) -> Iterator[object]:
        for index, value in enumerate(values):
            yield self.coerce(index, value)

    def __call__(self, *values: object) -> "Tuple[*Ts]":
        """
        Construct a tuple of this shape, one value per slot.

        :raises ArityMismatchError: if the number of values differs from the arity.
        """
        from vtuple.container import Tuple

        if len(values) != self.arity:
            raise ArityMismatchError(self.arity, len(values), "construct")
        return Tuple._adopt(self, chain.build(tuple(self.coerce_all(values))))

    def default(self) -> "Tuple[*Ts]":
        """
        Construct a tuple whose slots are ``T_i()`` for every slot type.

        :raises DefaultConstructionError: naming the first slot whose type
            cannot be called without arguments.
        """
        from vtuple.container import Tuple

        values: list[object] = []
        for index, element_type in enumerate(self.types):
            try:
                values.append(element_type())
            except TypeError as e:
                raise DefaultConstructionError(index, element_type) from e
        return Tuple._adopt(self, chain.build(values))
