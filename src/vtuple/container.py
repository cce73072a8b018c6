"""
The heterogeneous tuple container.

A :class:`Tuple` owns a fixed number of slots, each holding a value of its own
type. The shape (arity and slot types) is captured when the tuple is created and
never changes; slot values may be replaced in place.

Operators
~~~~~~~~~

- ``+ - * /`` build a fresh tuple slot by slot. Operands must have the same
  arity; the type of each result slot is whatever the element operator yields.
- ``+= -= *= /=`` update the left operand. Each slot keeps its own type, so
  results are coerced back into it (``Tuple(1, 1) += Tuple(0.1, 0.1)`` stays
  ``Tuple(1, 1)``).
- ``== !=`` compare slot by slot; tuples of different arity are never equal.
- ``< <= > >=`` order tuples lexicographically, the shorter tuple first on ties.
- ``|`` concatenates. Both operands are moved into the result and cannot be used
  afterwards.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum, auto
import logging
import operator
from typing import (
    TYPE_CHECKING,
    Any,
    Final,
    Generic,
    Iterator,
    Literal,
    Self,
    TypeAlias,
    TypeVarTuple,
    final,
)

from typing_extensions import override

from vtuple import chain
from vtuple.errors import ArityMismatchError, MovedTupleError, SlotIndexError
from vtuple.operators import ADD, DIVIDE, MULTIPLY, SUBTRACT, ElementwiseOperator
from vtuple.shape import Shape

if TYPE_CHECKING:
    from vtuple.view import TupleView

_logger: Final[logging.Logger] = logging.getLogger(__name__)

Ts = TypeVarTuple("Ts")

AnyTuple: TypeAlias = "Tuple[*tuple[Any, ...]]"


class TupleSentinel(Enum):
    MOVED = auto()
    """Storage of a tuple whose slots were moved out by ``|``."""


@final
@dataclass(slots=True, weakref_slot=True, init=False, repr=False, eq=False)
class Tuple(Generic[*Ts]):
    """
    Fixed-arity container of heterogeneous values.

    Example::

        t = Tuple(42, 3.14, "The cake is ")
        t += Shape(int, float, str)(-42, -3.14, "a lie!")
        t.get(2)  # 'The cake is a lie!'
    """

    _shape: Shape[*Ts]
    _chain: chain.Chain | Literal[TupleSentinel.MOVED]

    def __init__(self, *values: *Ts) -> None:
        self._shape = Shape.of(*values)
        self._chain = chain.build(values)

    @classmethod
    def _adopt(cls, shape: Shape, storage: chain.Chain) -> AnyTuple:
        """Wrap an already-built chain without copying its slots."""
        assert chain.length(storage) == shape.arity
        result = cls.__new__(cls)
        result._shape = shape
        result._chain = storage
        return result

    @property
    def _live_chain(self) -> chain.Chain:
        if self._chain is TupleSentinel.MOVED:
            raise MovedTupleError("tuple was moved into a concatenation")
        return self._chain

    @property
    def shape(self) -> Shape[*Ts]:
        _ = self._live_chain
        return self._shape

    @property
    def arity(self) -> int:
        return self.shape.arity

    def _check_index(self, index: object) -> int:
        arity = self.arity
        try:
            position = operator.index(index)  # type: ignore[arg-type]
        except TypeError:
            raise SlotIndexError(index, arity) from None
        if not 0 <= position < arity:
            raise SlotIndexError(index, arity)
        return position

    def get(self, index: int) -> Any:
        """
        Return the value stored in slot ``index``.

        :raises SlotIndexError: unless ``0 <= index < arity``.
        """
        position = self._check_index(index)
        return chain.descend(self._live_chain, position).head

    def set(self, index: int, value: object) -> None:
        """
        Replace the value of slot ``index``, leaving every other slot untouched.

        The value is coerced into the slot's type, as an assignment through a
        typed reference would be.
        """
        position = self._check_index(index)
        coerced = self._shape.coerce(position, value)
        chain.descend(self._live_chain, position).head = coerced

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: object) -> None:
        self.set(index, value)

    def __len__(self) -> int:
        return self.arity

    def __iter__(self) -> Iterator[Any]:
        return chain.values(self._live_chain)

    def to_builtin(self) -> tuple[*Ts]:
        return tuple(self)  # type: ignore[return-value]

    def view(self) -> "TupleView[*Ts]":
        """Read-only access to this tuple's slots."""
        from vtuple.view import TupleView

        _ = self._live_chain
        return TupleView(underlying=self)

    def copy(self) -> Self:
        """An independent tuple of the same shape holding a copy of every slot."""
        storage = chain.build(tuple(map(copy.copy, self)))
        return self._adopt(self._shape, storage)  # type: ignore[return-value]

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> Self:
        values = tuple(self)
        result = self._adopt(self._shape, chain.build(values))
        # Slots reaching back to this tuple must find the result in ``memo``.
        memo[id(self)] = result
        result._chain = chain.build(
            tuple(copy.deepcopy(value, memo) for value in values)
        )
        return result  # type: ignore[return-value]

    @override
    def __repr__(self) -> str:
        if self._chain is TupleSentinel.MOVED:
            return "Tuple(<moved>)"
        return f"Tuple({', '.join(map(repr, self))})"

    # Element-wise arithmetic

    def _check_same_arity(self, other: AnyTuple, operation: str) -> None:
        if self.arity != other.arity:
            raise ArityMismatchError(self.arity, other.arity, operation)

    def _combine(self, other: object, elementwise: ElementwiseOperator) -> AnyTuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        left, right = self._live_chain, other._live_chain
        self._check_same_arity(other, elementwise.symbol)
        result = elementwise.combine(left, right)
        return Tuple._adopt(Shape.of(*chain.values(result)), result)

    def _combine_in_place(self, other: object, elementwise: ElementwiseOperator) -> Self:
        if not isinstance(other, Tuple):
            return NotImplemented
        left, right = self._live_chain, other._live_chain
        self._check_same_arity(other, elementwise.in_place_symbol)
        results = elementwise.combine_in_place(left, right)
        coerced = chain.build(tuple(self._shape.coerce_all(chain.values(results))))
        chain.overwrite(left, coerced)
        return self

    def __add__(self, other: object) -> AnyTuple:
        return self._combine(other, ADD)

    def __sub__(self, other: object) -> AnyTuple:
        return self._combine(other, SUBTRACT)

    def __mul__(self, other: object) -> AnyTuple:
        return self._combine(other, MULTIPLY)

    def __truediv__(self, other: object) -> AnyTuple:
        return self._combine(other, DIVIDE)

    def __iadd__(self, other: object) -> Self:
        return self._combine_in_place(other, ADD)

    def __isub__(self, other: object) -> Self:
        return self._combine_in_place(other, SUBTRACT)

    def __imul__(self, other: object) -> Self:
        return self._combine_in_place(other, MULTIPLY)

    def __itruediv__(self, other: object) -> Self:
        return self._combine_in_place(other, DIVIDE)

    # Comparison. Ordering is derived from ``_less`` alone.

    @staticmethod
    def _less(left: AnyTuple, right: AnyTuple) -> bool:
        return chain.less(left._live_chain, right._live_chain)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return chain.equal(self._live_chain, other._live_chain)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple._less(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return not Tuple._less(other, self)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple._less(other, self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return not Tuple._less(self, other)

    # Concatenation

    def __or__(self, other: object) -> AnyTuple:
        """
        Move the slots of both operands into a new tuple, ``self``'s first.

        ``other``'s storage becomes the tail of the result and ``self``'s values
        are re-linked in front of it. Both operands are left moved-from.
        """
        if not isinstance(other, Tuple):
            return NotImplemented
        if other is self:
            raise MovedTupleError(
                "a tuple cannot be concatenated with itself; concatenate a copy"
            )
        left, right = self._live_chain, other._live_chain
        shape = self._shape + other._shape
        self._chain = TupleSentinel.MOVED
        other._chain = TupleSentinel.MOVED
        _logger.debug("Moved %r and %r into a concatenation", self._shape, other._shape)
        return Tuple._adopt(shape, chain.append(left, right))


def make_tuple(*values: *Ts) -> Tuple[*Ts]:
    """
    Build a tuple whose slot types are exactly the types of ``values``.

    Example::

        make_tuple(1, 0.5, "abc").shape  # Shape(int, float, str)
    """
    return Tuple(*values)
