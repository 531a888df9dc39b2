# -*- coding: utf-8 -*-

import unittest

from jsonpp.formatter import dumps, format, format_string
from jsonpp.grammar import loads
from jsonpp.values import Array, Bool, Null, Number, Object, String


class FormatterTest(unittest.TestCase):
    def test_nested_document(self) -> None:
        data = '{"key1":10,"key2":[1,2,{"key3": ["Hello",true, false, null]}]}'
        expected = """\
{
  "key1": 10,
  "key2": [
    1,
    2,
    {
      "key3": [
        "Hello",
        true,
        false,
        null
      ]
    }
  ]
}"""
        self.assertEqual(format(loads(data)), expected)

    def test_scalars(self) -> None:
        self.assertEqual(format(Null()), "null")
        self.assertEqual(format(Bool(True)), "true")
        self.assertEqual(format(Bool(False)), "false")
        self.assertEqual(format(String("x")), '"x"')

    def test_numbers(self) -> None:
        self.assertEqual(format(Number(10)), "10")
        self.assertEqual(format(Number(-0)), "0")
        self.assertEqual(format(Number(1.5)), "1.5")
        self.assertEqual(format(Number(0.1)), "0.1")
        self.assertEqual(format(Number(1e100)), "1e+100")
        self.assertEqual(format(Number(10 ** 30)), "1" + "0" * 30)
        self.assertEqual(format(loads("2.50")), "2.5")
        self.assertEqual(format(loads("1E2")), "100")
        self.assertEqual(format(loads("10.0")), "10")
        self.assertEqual(format(Number(-2.0)), "-2")
        self.assertEqual(format(Number(1e16)), "1e+16")
        self.assertEqual(format(Number(0.5e-3)), "0.0005")

    def test_non_finite_number(self) -> None:
        with self.assertRaises(ValueError):
            format(Number(float("nan")))

    def test_empty_containers(self) -> None:
        self.assertEqual(format(loads("[]")), "[]")
        self.assertEqual(format(loads("{}")), "{}")
        self.assertEqual(
            format(loads('{"a": [], "b": {}}')), '{\n  "a": [],\n  "b": {}\n}'
        )

    def test_indent_width(self) -> None:
        value = loads('{"a": [1]}')
        self.assertEqual(format(value, 4), '{\n    "a": [\n        1\n    ]\n}')
        self.assertEqual(format(value, 0), '{\n"a": [\n1\n]\n}')

    def test_invalid_indent_width(self) -> None:
        with self.assertRaises(ValueError):
            format(Null(), -1)
        with self.assertRaises(ValueError):
            format(Null(), True)
        with self.assertRaises(ValueError):
            format(Null(), 2.0)  # type: ignore

    def test_string_escapes(self) -> None:
        self.assertEqual(format_string('a"b\\c'), '"a\\"b\\\\c"')
        self.assertEqual(format_string("\b\f\n\r\t"), '"\\b\\f\\n\\r\\t"')
        self.assertEqual(format_string("\x00\x1f"), '"\\u0000\\u001f"')
        self.assertEqual(format_string("/"), '"/"')

    def test_non_ascii_is_literal_by_default(self) -> None:
        self.assertEqual(format(String("λ\U0001f600")), '"λ\U0001f600"')

    def test_ascii_only(self) -> None:
        self.assertEqual(
            format(String("λ\U0001f600"), ascii_only=True),
            '"\\u03bb\\ud83d\\ude00"',
        )
        self.assertEqual(
            format(Object((("é", Null()),)), ascii_only=True),
            '{\n  "\\u00e9": null\n}',
        )

    def test_duplicate_keys_are_kept(self) -> None:
        self.assertEqual(format(loads('{"a":1,"a":2}')), '{\n  "a": 1,\n  "a": 2\n}')

    def test_key_order_is_kept(self) -> None:
        text = format(loads('{"c": 1, "a": 2, "b": 3}'))
        self.assertLess(text.index('"c"'), text.index('"a"'))
        self.assertLess(text.index('"a"'), text.index('"b"'))

    def test_round_trip(self) -> None:
        data = (
            '{"s": "tab\\there \\u00e9 \\ud83d\\ude00 \\"q\\" \\\\", '
            '"n": [0, -1, 1.25, 6.02e23, 1e-7, 12345678901234567890], '
            '"e": [[], {}], "l": [true, false, null], "a": {"a": {"a": []}}}'
        )
        value = loads(data)
        for ascii_only in (False, True):
            for indent in (0, 2, 3):
                text = format(value, indent, ascii_only)
                self.assertEqual(loads(text), value)

    def test_format_is_deterministic(self) -> None:
        value = loads('{"a": [1, 2, {"b": null}]}')
        self.assertEqual(format(value), format(value))

    def test_dumps_ends_with_newline(self) -> None:
        self.assertEqual(dumps(Array((Number(1),))), "[\n  1\n]\n")
        self.assertEqual(dumps(Object()), "{}\n")

    def test_not_a_value(self) -> None:
        with self.assertRaises(TypeError):
            format(Array(([1],)))  # type: ignore
