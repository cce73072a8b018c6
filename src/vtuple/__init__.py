"""
vtuple: fixed-arity heterogeneous tuples with element-wise operators.

## Core Design Principle: The Shape Is Decided Once

Every tuple has a shape, the ordered list of its slot types, captured when the
tuple is created:
- ``Tuple(*values)`` / ``make_tuple(*values)``: slot types inferred from the values
- ``Shape(*types)(*values)``: explicit slot types, values coerced into them
- ``Shape(*types).default()``: every slot default-constructed

Operators never change the shape of an existing tuple. Non-mutating operators
derive a new shape from the values they produce; in-place operators coerce their
results back into the left operand's slot types.

## Example

```python
from vtuple import Shape, make_tuple

t = Shape(int, float, str)(42, 3.14, "The cake is ")
t += make_tuple(-42, -3.14, "a lie!")
t.to_builtin()  # (0, 0.0, 'The cake is a lie!')

scaled = make_tuple(10, 10.0) * make_tuple(2, 2.0)
scaled.to_builtin()  # (20, 20.0)

joined = t | scaled  # t and scaled are moved into joined
len(joined)  # 5
```
"""

from vtuple.chain import EMPTY, Chain, EmptySentinel, Link
from vtuple.container import Tuple, TupleSentinel, make_tuple
from vtuple.errors import (
    ArityMismatchError,
    DefaultConstructionError,
    MovedTupleError,
    ShapeError,
    SlotIndexError,
    SlotTypeError,
)
from vtuple.operators import (
    ADD,
    ARITHMETIC_OPERATORS,
    DIVIDE,
    MULTIPLY,
    SUBTRACT,
    ElementwiseOperator,
)
from vtuple.shape import Shape
from vtuple.view import TupleView

__all__ = [
    "ADD",
    "ARITHMETIC_OPERATORS",
    "ArityMismatchError",
    "Chain",
    "DIVIDE",
    "DefaultConstructionError",
    "EMPTY",
    "ElementwiseOperator",
    "EmptySentinel",
    "Link",
    "MULTIPLY",
    "MovedTupleError",
    "SUBTRACT",
    "Shape",
    "ShapeError",
    "SlotIndexError",
    "SlotTypeError",
    "Tuple",
    "TupleSentinel",
    "TupleView",
    "make_tuple",
]
