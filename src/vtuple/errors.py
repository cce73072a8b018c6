"""
Exceptions raised by vtuple.

Shape mismatches are detected when an operation is invoked, before any slot is
read or written. They subclass the builtin exception a caller would naturally
catch (``TypeError``, ``IndexError``), mirroring how a ``Mapping`` raises
``KeyError`` for a missing key.
"""

from __future__ import annotations


class ShapeError(TypeError):
    """Base class for operations rejected because of the shape of a tuple."""


class ArityMismatchError(ShapeError):
    """Operands of an arity-preserving operation have different arities."""

    def __init__(self, left_arity: int, right_arity: int, operation: str) -> None:
        super().__init__(
            f"{operation!r} requires tuples of the same arity, "
            f"got {left_arity} and {right_arity}"
        )
        self.left_arity = left_arity
        self.right_arity = right_arity
        self.operation = operation


class SlotIndexError(ShapeError, IndexError):
    """A slot index is not an integer in ``[0, arity)``."""

    def __init__(self, index: object, arity: int) -> None:
        super().__init__(f"slot index {index!r} out of range for arity {arity}")
        self.index = index
        self.arity = arity


class SlotTypeError(ShapeError):
    """A value cannot be stored in a slot of another type."""

    def __init__(self, index: int, element_type: type, value: object) -> None:
        super().__init__(
            f"slot {index} of type {element_type.__qualname__} cannot hold "
            f"{type(value).__qualname__} value {value!r}"
        )
        self.index = index
        self.element_type = element_type
        self.value = value


class DefaultConstructionError(ShapeError):
    """A slot type cannot be called without arguments."""

    def __init__(self, index: int, element_type: type) -> None:
        super().__init__(
            f"slot {index} of type {element_type.__qualname__} "
            "is not default-constructible"
        )
        self.index = index
        self.element_type = element_type


class MovedTupleError(ValueError):
    """A tuple was used after its slots were moved out by concatenation."""
