# -*- coding: utf-8 -*-

import unittest
from typing import List

import funcparserlib.lexer
from funcparserlib.lexer import TokenSpec

from jsonpp.lexer import EOF, ERROR, Token, make_tokenizer


def str_tokenize(s: str) -> List[Token]:
    specs = [
        TokenSpec("x", r"\s+"),
        TokenSpec("id", r"\w+"),
        TokenSpec("op", r"[:;=]"),
    ]
    return [t for t in make_tokenizer(specs)(s) if t.type != "x"]


class LexerTest(unittest.TestCase):
    def test_tokens(self) -> None:
        self.assertEqual(
            str_tokenize("a = b;"),
            [
                Token("id", "a"),
                Token("op", "="),
                Token("id", "b"),
                Token("op", ";"),
                Token(EOF, ""),
            ],
        )

    def test_empty_input(self) -> None:
        [eof] = str_tokenize("")
        self.assertEqual(eof, Token(EOF, ""))
        self.assertEqual(eof.start, (1, 1))
        self.assertEqual(eof.offset, 0)

    def test_offsets_and_places(self) -> None:
        foo, colon, bar, eof = str_tokenize("foo:\n  bar")
        self.assertEqual((foo.start, foo.end, foo.offset), ((1, 1), (1, 3), 0))
        self.assertEqual((colon.start, colon.end, colon.offset), ((1, 4), (1, 4), 3))
        self.assertEqual((bar.start, bar.end, bar.offset), ((2, 3), (2, 5), 7))
        self.assertEqual((eof.start, eof.offset), ((2, 6), 10))

    def test_eof_after_newline(self) -> None:
        eof = str_tokenize("a\n")[-1]
        self.assertEqual((eof.type, eof.start, eof.offset), (EOF, (2, 1), 2))

    def test_error_token_ends_the_list(self) -> None:
        tokens = str_tokenize("foo(1) bar")
        self.assertEqual(tokens, [Token("id", "foo"), Token(ERROR, "(")])
        error = tokens[-1]
        self.assertEqual(error.start, (1, 4))
        self.assertEqual(error.offset, 3)

    def test_error_on_second_line(self) -> None:
        error = str_tokenize("a\n b ?")[-1]
        self.assertEqual(error.type, ERROR)
        self.assertEqual(error.value, "?")
        self.assertEqual(error.start, (2, 4))
        self.assertEqual(error.offset, 5)

    def test_tokens_are_funcparserlib_tokens(self) -> None:
        t = Token("id", "a", (1, 1), (1, 1), 0)
        self.assertIsInstance(t, funcparserlib.lexer.Token)
        self.assertEqual(t, funcparserlib.lexer.Token("id", "a"))
        self.assertNotEqual(t, Token("op", "a"))
