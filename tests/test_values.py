# -*- coding: utf-8 -*-

import unittest

from jsonpp.values import (
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    from_python,
    to_python,
)


class ValuesTest(unittest.TestCase):
    def test_equality(self) -> None:
        self.assertEqual(Null(), Null())
        self.assertEqual(
            Array((Number(1), String("a"))), Array((Number(1), String("a")))
        )
        self.assertNotEqual(Bool(True), Number(1))
        self.assertNotEqual(String("1"), Number(1))

    def test_object_order_matters(self) -> None:
        a = Object((("a", Number(1)), ("b", Number(2))))
        b = Object((("b", Number(2)), ("a", Number(1))))
        self.assertNotEqual(a, b)
        self.assertEqual(a.keys(), ("a", "b"))

    def test_containers(self) -> None:
        arr = Array((Null(), Bool(False)))
        self.assertEqual(len(arr), 2)
        self.assertEqual(list(arr), [Null(), Bool(False)])
        obj = Object((("k", arr),))
        self.assertEqual(len(obj), 1)
        self.assertEqual(list(obj), [("k", arr)])
        self.assertEqual(len(Array()), 0)
        self.assertEqual(len(Object()), 0)

    def test_values_are_immutable(self) -> None:
        s = String("x")
        with self.assertRaises(AttributeError):
            s.value = "y"  # type: ignore

    def test_values_are_hashable(self) -> None:
        self.assertEqual(len({Number(1), Number(1), String("1")}), 2)

    def test_to_python(self) -> None:
        value = Object(
            (
                ("a", Array((Number(1), Number(2.5), Null()))),
                ("b", Object((("c", Bool(True)),))),
                ("d", String("x")),
            )
        )
        self.assertEqual(
            to_python(value), {"a": [1, 2.5, None], "b": {"c": True}, "d": "x"}
        )

    def test_to_python_duplicate_keys(self) -> None:
        value = Object((("a", Number(1)), ("a", Number(2))))
        self.assertEqual(to_python(value), {"a": 2})

    def test_to_python_not_a_value(self) -> None:
        with self.assertRaises(TypeError):
            to_python([1, 2])  # type: ignore

    def test_from_python(self) -> None:
        self.assertEqual(
            from_python({"a": [1, 2.5, None], "b": (True, "x")}),
            Object(
                (
                    ("a", Array((Number(1), Number(2.5), Null()))),
                    ("b", Array((Bool(True), String("x")))),
                )
            ),
        )

    def test_from_python_bool_is_not_a_number(self) -> None:
        self.assertEqual(from_python(True), Bool(True))
        self.assertEqual(from_python(False), Bool(False))
        self.assertIsInstance(from_python(0), Number)

    def test_from_python_keeps_values(self) -> None:
        value = Array((Null(),))
        self.assertIs(from_python(value), value)

    def test_from_python_errors(self) -> None:
        with self.assertRaises(ValueError):
            from_python(float("nan"))
        with self.assertRaises(ValueError):
            from_python([float("inf")])
        with self.assertRaises(TypeError):
            from_python({1: "a"})
        with self.assertRaises(TypeError):
            from_python({"a"})
