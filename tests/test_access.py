"""Tests for indexed slot access, views and copies."""

import copy
from dataclasses import FrozenInstanceError

import pytest

from vtuple import (
    Shape,
    ShapeError,
    SlotIndexError,
    SlotTypeError,
    Tuple,
    TupleView,
    make_tuple,
)


class TestGet:
    """Test reading slots by index."""

    def test_indexing_round_trip(self) -> None:
        values = (42, 3.14, "Hello World !", None, [1, 2])
        t = make_tuple(*values)
        for index, value in enumerate(values):
            assert t.get(index) == value
            assert t[index] == value

    def test_get_returns_the_stored_object(self) -> None:
        payload = [1, 2]
        t = make_tuple("x", payload)
        assert t.get(1) is payload

    def test_get_keeps_slot_type(self) -> None:
        t = Shape(float, int)(1, 2)
        assert type(t.get(0)) is float
        assert type(t.get(1)) is int

    @pytest.mark.parametrize("index", [3, 100, -1, -3])
    def test_index_outside_range_is_rejected(self, index: int) -> None:
        t = make_tuple(1, 2, 3)
        with pytest.raises(SlotIndexError) as excinfo:
            t.get(index)
        assert excinfo.value.index == index
        assert excinfo.value.arity == 3

    def test_slot_index_error_is_an_index_error(self) -> None:
        with pytest.raises(IndexError):
            make_tuple()[0]

    @pytest.mark.parametrize("index", ["0", 0.0, slice(0, 1)])
    def test_non_integer_index_is_rejected(self, index: object) -> None:
        with pytest.raises(SlotIndexError):
            make_tuple(1).get(index)  # type: ignore[arg-type]


class TestSet:
    """Test writing slots by index."""

    def test_affectation(self) -> None:
        t = make_tuple(42, 9.4, 3.5, "Ceci est une phrase")
        t.set(0, -1)
        t.set(1, -1.0)
        t[2] = -1.0
        t[3] = "-1"
        assert t.to_builtin() == (-1, -1.0, -1.0, "-1")

    def test_mutation_locality(self) -> None:
        t = make_tuple(1, "two", 3.0, [4])
        before = t.to_builtin()
        t.set(2, 30.0)
        for index in (0, 1, 3):
            assert t.get(index) == before[index]
        assert t.get(2) == 30.0

    def test_assignment_is_coerced_into_slot_type(self) -> None:
        t = make_tuple(1, 1.0)
        t[0] = 2.7
        t[1] = 2
        assert t.to_builtin() == (2, 2.0)
        assert type(t.get(0)) is int
        assert type(t.get(1)) is float

    def test_mutable_slot_can_be_modified_through_get(self) -> None:
        t = make_tuple([1], [2])
        t.get(0).append(10)
        assert t.to_builtin() == ([1, 10], [2])

    def test_bool_is_stored_as_the_slot_type(self) -> None:
        t = make_tuple(1, 1.0, True)
        t[0] = True
        t[1] = False
        t[2] = False
        assert type(t.get(0)) is int
        assert type(t.get(1)) is float
        assert type(t.get(2)) is bool
        assert t.to_builtin() == (1, 0.0, False)

    def test_subclass_instance_is_kept(self) -> None:
        class Count(int):
            pass

        t = make_tuple(1)
        t[0] = Count(5)
        assert type(t.get(0)) is Count

    @pytest.mark.parametrize(
        ("index", "value"), [(0, "12"), (0, None), (1, [1, 2]), (1, 3), (2, "xy")]
    )
    def test_value_of_another_type_is_rejected(self, index: int, value: object) -> None:
        t = make_tuple(1, "abc", [0])
        with pytest.raises(SlotTypeError) as excinfo:
            t[index] = value
        assert excinfo.value.index == index
        assert excinfo.value.element_type is type(t.get(index))
        assert excinfo.value.value is value
        assert isinstance(excinfo.value, ShapeError)
        assert t.to_builtin() == (1, "abc", [0])

    def test_set_outside_range_is_rejected(self) -> None:
        t = make_tuple(1)
        with pytest.raises(SlotIndexError):
            t.set(1, 5)
        assert t.to_builtin() == (1,)


class TestView:
    """Test read-only access."""

    def test_view_reads_slots(self) -> None:
        view = make_tuple(5, 1.0, "abc").view()
        assert isinstance(view, TupleView)
        assert view.get(0) == 5
        assert view[1] == 1.0
        assert list(view) == [5, 1.0, "abc"]
        assert len(view) == 3
        assert view.arity == 3
        assert view.shape == Shape(int, float, str)
        assert view.to_builtin() == (5, 1.0, "abc")

    def test_view_cannot_write(self) -> None:
        view = make_tuple(5).view()
        assert not hasattr(view, "set")
        with pytest.raises(TypeError):
            view[0] = 6  # type: ignore[index]
        with pytest.raises(FrozenInstanceError):
            view.underlying = make_tuple(6)  # type: ignore[misc]

    def test_view_sees_writes_through_the_tuple(self) -> None:
        t = make_tuple(5)
        view = t.view()
        t[0] = 6
        assert view.get(0) == 6

    def test_view_compares_like_its_tuple(self) -> None:
        t = make_tuple(1, 2)
        assert t.view() == make_tuple(1, 2)
        assert make_tuple(1, 2) == t.view()
        assert t.view() == t.view()
        assert t.view() < make_tuple(1, 3)
        assert make_tuple(1, 3) > t.view()
        assert t.view() <= make_tuple(1, 2)
        assert t.view() >= make_tuple(1, 2)
        assert t.view() != make_tuple(1)

    def test_view_is_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(make_tuple(1).view())

    def test_repr(self) -> None:
        assert repr(make_tuple(1).view()) == "TupleView(Tuple(1))"


class TestContainerProtocol:
    """Test length, iteration and conversions."""

    def test_len_and_arity(self) -> None:
        assert len(make_tuple(1, "a")) == 2
        assert make_tuple(1, "a").arity == 2
        assert len(Tuple()) == 0

    def test_iteration_in_slot_order(self) -> None:
        assert list(make_tuple(3, "b", 1.0)) == [3, "b", 1.0]

    def test_to_builtin(self) -> None:
        assert make_tuple(1, "a").to_builtin() == (1, "a")
        assert Tuple().to_builtin() == ()

    def test_repr(self) -> None:
        assert repr(make_tuple(1, 0.5, "abc")) == "Tuple(1, 0.5, 'abc')"
        assert repr(Tuple()) == "Tuple()"

    def test_tuples_are_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(make_tuple(1))


class TestCopy:
    """Test that copies own their slots."""

    def test_copy_is_equal_and_independent(self) -> None:
        original = make_tuple(1, [2, 3], "x")
        duplicate = original.copy()
        assert duplicate == original
        assert duplicate is not original
        assert duplicate.shape == original.shape
        assert duplicate.get(1) is not original.get(1)
        duplicate.get(1).append(4)
        duplicate[0] = 10
        assert original.to_builtin() == (1, [2, 3], "x")

    def test_copy_module(self) -> None:
        original = make_tuple([1])
        assert copy.copy(original) == original
        assert copy.copy(original).get(0) is not original.get(0)

    def test_deepcopy_copies_nested_values(self) -> None:
        original = make_tuple([[1], [2]])
        duplicate = copy.deepcopy(original)
        duplicate.get(0)[0].append(5)
        assert original.get(0) == [[1], [2]]

    def test_deepcopy_keeps_references_back_to_the_tuple(self) -> None:
        original = make_tuple([], "x")
        original.get(0).append(original)
        duplicate = copy.deepcopy(original)
        assert duplicate is not original
        assert duplicate.get(0) is not original.get(0)
        assert duplicate.get(0)[0] is duplicate
