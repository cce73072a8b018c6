"""
Recursive slot chain backing every tuple.

A chain is either :attr:`EmptySentinel.EMPTY` or a :class:`Link` holding one slot
value (``head``) in front of a shorter chain (``tail``). The two cases are
different types, so every algorithm below terminates by pattern matching on the
chain itself rather than by counting.

All algorithms recurse once per slot, so their depth is bounded by the arity of
the chains involved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Final, Iterable, Iterator, Literal, TypeAlias, final


class EmptySentinel(Enum):
    """The chain with no slots."""

    EMPTY = auto()

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY: Final = EmptySentinel.EMPTY


@final
@dataclass(kw_only=True, slots=True, weakref_slot=True, eq=False)
class Link:
    """
    One slot in front of the rest of the chain.

    ``head`` is mutable so a tuple can assign into a slot in place; ``tail`` is
    never rebound, which keeps the arity of a chain fixed.
    """

    head: object
    tail: Final["Chain"]


Chain: TypeAlias = Link | Literal[EmptySentinel.EMPTY]


def build(values: Iterable[object]) -> Chain:
    """Link ``values`` in order: the first value becomes the head."""
    iterator = iter(values)
    try:
        head = next(iterator)
    except StopIteration:
        return EMPTY
    return Link(head=head, tail=build(iterator))


def length(chain: Chain) -> int:
    match chain:
        case EmptySentinel.EMPTY:
            return 0
        case Link(tail=tail):
            return 1 + length(tail)


def values(chain: Chain) -> Iterator[object]:
    match chain:
        case EmptySentinel.EMPTY:
            return
        case Link(head=head, tail=tail):
            yield head
            yield from values(tail)


def descend(chain: Chain, index: int) -> Link:
    """
    Return the link holding slot ``index``.

    :param chain: The chain to walk.
    :param index: A slot position already known to be within the chain.
    :return: The link whose ``head`` is the requested slot.
    """
    assert isinstance(chain, Link), "slot index exceeds chain length"
    if index == 0:
        return chain
    return descend(chain.tail, index - 1)


def zip_with(
    function: Callable[[object, object], object], left: Chain, right: Chain
) -> Chain:
    """
    Build a new chain whose slot ``i`` is ``function(left[i], right[i])``.

    Slots are computed in order, head first. Both chains must have the same
    length.
    """
    match left, right:
        case EmptySentinel.EMPTY, EmptySentinel.EMPTY:
            return EMPTY
        case Link(head=left_head, tail=left_tail), Link(
            head=right_head, tail=right_tail
        ):
            head = function(left_head, right_head)
            return Link(head=head, tail=zip_with(function, left_tail, right_tail))
        case _:
            raise ValueError("chains differ in length")


def equal(left: Chain, right: Chain) -> bool:
    match left, right:
        case EmptySentinel.EMPTY, EmptySentinel.EMPTY:
            return True
        case Link(head=left_head, tail=left_tail), Link(
            head=right_head, tail=right_tail
        ):
            return bool(left_head == right_head) and equal(left_tail, right_tail)
        case _:
            return False


def less(left: Chain, right: Chain) -> bool:
    """
    Lexicographic ``left < right``.

    The first slot where one side is less decides. When every common slot
    compares equal, the shorter chain is the lesser one.
    """
    match left, right:
        case _, EmptySentinel.EMPTY:
            return False
        case EmptySentinel.EMPTY, Link():
            return True
        case Link(head=left_head, tail=left_tail), Link(
            head=right_head, tail=right_tail
        ):
            if left_head < right_head:  # type: ignore[operator]
                return True
            if right_head < left_head:  # type: ignore[operator]
                return False
            return less(left_tail, right_tail)
    raise AssertionError("unreachable")


def append(left: Chain, right: Chain) -> Chain:
    """
    Link the slots of ``left`` in front of ``right``.

    ``right`` is reused as-is as the tail of the result; only ``left`` is
    re-linked. The caller must own both chains.
    """
    match left:
        case EmptySentinel.EMPTY:
            return right
        case Link(head=head, tail=tail):
            return Link(head=head, tail=append(tail, right))


def overwrite(target: Chain, source: Chain) -> None:
    """Assign the heads of ``source`` into the links of ``target``, slot by slot."""
    match target, source:
        case EmptySentinel.EMPTY, EmptySentinel.EMPTY:
            return
        case Link(tail=target_tail), Link(head=head, tail=source_tail):
            target.head = head
            overwrite(target_tail, source_tail)
        case _:
            raise ValueError("chains differ in length")
