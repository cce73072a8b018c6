"""
Element-wise arithmetic operators.

Each :class:`ElementwiseOperator` pairs the binary function applied by the
non-mutating tuple operator (``+``) with the function applied by its in-place
counterpart (``+=``). Both delegate to the element types' own operator
protocol, so the result of slot ``i`` is whatever ``a_i OP b_i`` yields.
"""

from __future__ import annotations

from dataclasses import dataclass
import operator
from typing import Any, Callable, Final, final

from vtuple import chain


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class ElementwiseOperator:
    symbol: str
    """Python spelling of the binary operator, used in error messages."""

    function: Callable[[Any, Any], Any]
    in_place: Callable[[Any, Any], Any]
    """The in-place protocol (``operator.iadd`` etc.), which falls back to
    ``function`` for element types without an in-place method."""

    @property
    def in_place_symbol(self) -> str:
        return f"{self.symbol}="

    def combine(self, left: chain.Chain, right: chain.Chain) -> chain.Chain:
        """Fresh chain of ``left[i] OP right[i]``; chains must be equally long."""
        return chain.zip_with(self.function, left, right)

    def combine_in_place(self, left: chain.Chain, right: chain.Chain) -> chain.Chain:
        """
        Chain of ``left[i] OP= right[i]`` results, not yet coerced or assigned.

        Element types whose in-place method mutates their own object (a
        ``list`` slot under ``+=``) are updated by this call, so they stay
        updated even if a later slot fails to combine or coerce. Every other
        slot is assigned only after all of them have been computed.
        """
        return chain.zip_with(self.in_place, left, right)


ADD: Final = ElementwiseOperator(symbol="+", function=operator.add, in_place=operator.iadd)
SUBTRACT: Final = ElementwiseOperator(
    symbol="-", function=operator.sub, in_place=operator.isub
)
MULTIPLY: Final = ElementwiseOperator(
    symbol="*", function=operator.mul, in_place=operator.imul
)
DIVIDE: Final = ElementwiseOperator(
    symbol="/", function=operator.truediv, in_place=operator.itruediv
)

ARITHMETIC_OPERATORS: Final[tuple[ElementwiseOperator, ...]] = (
    ADD,
    SUBTRACT,
    MULTIPLY,
    DIVIDE,
)
