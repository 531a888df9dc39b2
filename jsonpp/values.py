# Copyright © 2009/2023 Andrey Vlasovskikh
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this
# software and associated documentation files (the "Software"), to deal in the Software
# without restriction, including without limitation the rights to use, copy, modify,
# merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be included in all copies
# or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
# INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
# PARTICULAR PURPOSE AND NON-INFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""The in-memory representation of JSON values.

A parsed document is a tree of `Value` objects: `Null`, `Bool`, `Number`, `String`,
`Array` and `Object`. The tree is immutable. Arrays keep their items and objects keep
their members in source order, and objects keep duplicate keys as they appear.
"""

__all__ = [
    "Value",
    "Null",
    "Bool",
    "Number",
    "String",
    "Array",
    "Object",
    "Member",
    "to_python",
    "from_python",
]

import math
from dataclasses import dataclass
from typing import Any, Iterator, Tuple, Union


class Value:
    """Base class of all JSON values."""

    __slots__ = ()


@dataclass(frozen=True)
class Null(Value):
    pass


@dataclass(frozen=True)
class Bool(Value):
    value: bool


@dataclass(frozen=True)
class Number(Value):
    value: Union[int, float]


@dataclass(frozen=True)
class String(Value):
    value: str


@dataclass(frozen=True)
class Array(Value):
    items: Tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)


Member = Tuple[str, Value]


@dataclass(frozen=True)
class Object(Value):
    members: Tuple[Member, ...] = ()

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Member]:
        return iter(self.members)

    def keys(self) -> Tuple[str, ...]:
        return tuple(k for k, _ in self.members)


def to_python(value: Value) -> Any:
    """Convert a `Value` tree into plain Python objects.

    Objects become `dict`s, so duplicate keys collapse and the last one wins.

    ```pycon
    >>> to_python(Array((Null(), Bool(True), Number(1.5), String("x"))))
    [None, True, 1.5, 'x']

    ```
    """
    if isinstance(value, Null):
        return None
    elif isinstance(value, (Bool, Number, String)):
        return value.value
    elif isinstance(value, Array):
        return [to_python(x) for x in value.items]
    elif isinstance(value, Object):
        return {k: to_python(v) for k, v in value.members}
    else:
        raise TypeError("not a JSON value: %r" % (value,))


def from_python(obj: Any) -> Value:
    """Build a `Value` tree from plain Python objects.

    Accepts `None`, `bool`, `int`, `float`, `str`, lists and tuples, and dicts with
    `str` keys. Non-finite floats have no JSON representation and raise `ValueError`.
    """
    if isinstance(obj, Value):
        return obj
    elif obj is None:
        return Null()
    elif isinstance(obj, bool):
        return Bool(obj)
    elif isinstance(obj, (int, float)):
        if isinstance(obj, float) and not math.isfinite(obj):
            raise ValueError("%r is not a valid JSON number" % obj)
        return Number(obj)
    elif isinstance(obj, str):
        return String(obj)
    elif isinstance(obj, (list, tuple)):
        return Array(tuple(from_python(x) for x in obj))
    elif isinstance(obj, dict):
        members = []
        for k, v in obj.items():
            if not isinstance(k, str):
                raise TypeError("object keys must be str, not %s" % type(k).__name__)
            members.append((k, from_python(v)))
        return Object(tuple(members))
    else:
        raise TypeError(
            "object of type %s is not JSON serializable" % type(obj).__name__
        )
