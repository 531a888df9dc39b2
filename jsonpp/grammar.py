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

"""A JSON parser.

The parser is based on [the JSON grammar][1]. The text is split into tokens by a
regexp-based tokenizer, then the tokens are parsed by a grammar written with the
parsing combinators of `funcparserlib.parser`.

The token specs are deliberately more permissive than JSON, so that malformed
numbers and strings become tokens too and are rejected with a precise `ErrorKind`
when their values are decoded.

  [1]: https://www.rfc-editor.org/rfc/rfc8259
"""

__all__ = ["tokenize", "parse", "loads", "DEFAULT_MAX_DEPTH"]

import math
import re
from re import VERBOSE
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from funcparserlib.lexer import TokenSpec
from funcparserlib.parser import (
    NoParseError,
    Parser,
    State,
    forward_decl,
    many,
    some,
    tok,
)

from jsonpp.errors import ErrorKind, ParseError
from jsonpp.lexer import EOF, ERROR, LexerError, Token, make_tokenizer
from jsonpp.values import Array, Bool, Member, Null, Number, Object, String, Value

DEFAULT_MAX_DEPTH = 64

T = TypeVar("T")

_specs = [
    TokenSpec("space", r"[ \t\r\n]+"),
    TokenSpec("string", r'"(?:[^"\\]|\\[\s\S]?)*"?'),
    TokenSpec("number", r"-[0-9A-Za-z_.+\-]*|[0-9][0-9A-Za-z_.+\-]*"),
    TokenSpec("op", r"[{}\[\],:]"),
    TokenSpec("name", r"[A-Za-z_][A-Za-z_0-9]*"),
]
_tokenizer = make_tokenizer(_specs)

re_number = re.compile(
    r"""
    -?                  # Minus
    (0|[1-9][0-9]*)     # Int
    (?P<frac>\.[0-9]+)? # Frac
    (?P<exp>[eE][+-]?[0-9]+)?  # Exp
    """,
    VERBOSE,
)
# noinspection SpellCheckingInspection
re_string_part = re.compile(
    r"""
      (?P<chars>[^"\\\x00-\x1f]+)           # Unescaped: avoid ["\\] and controls
    | \\(?P<standard>["\\/bfnrt])           # Standard escapes
    | \\u(?P<unicode>[0-9A-Fa-f]{4})        # uXXXX
    | (?P<bad_escape>\\[\s\S]?)
    | (?P<control>[\x00-\x1f])
    | (?P<quote>")
    """,
    VERBOSE,
)
re_low_surrogate = re.compile(r"\\u(?P<unicode>[dD][c-fC-F][0-9A-Fa-f]{2})")

_std_escapes = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def tokenize(s: str) -> List[Token]:
    """Split JSON text into tokens, dropping whitespace.

    The last token is either the empty `EOF` token that marks the end of the text, or
    an `ERROR` token holding the first character that cannot start any token.
    """
    useless = ["space"]
    return [x for x in _tokenizer(s) if x.type not in useless]


def _place_at(t: Token, i: int) -> Optional[Tuple[int, int]]:
    if t.start is None:
        return None
    line, pos = t.start
    prefix = t.value[:i]
    nls = prefix.count("\n")
    if nls == 0:
        return line, pos + i
    return line + nls, i - prefix.rfind("\n")


def _error_at(t: Token, kind: ErrorKind, msg: str, i: int = 0) -> ParseError:
    return ParseError(kind, msg, t.offset + i, _place_at(t, i))


def make_number(t: Token) -> Number:
    s = t.value
    m = re_number.fullmatch(s)
    if m is None:
        raise _error_at(t, ErrorKind.INVALID_NUMBER, "invalid number: %r" % s)
    if m.group("frac") is None and m.group("exp") is None:
        try:
            return Number(int(s))
        except ValueError:
            raise _error_at(
                t, ErrorKind.INVALID_NUMBER, "integer has too many digits"
            ) from None
    n = float(s)
    if math.isinf(n):
        raise _error_at(t, ErrorKind.INVALID_NUMBER, "number out of range: %r" % s)
    return Number(n)


def unescape(t: Token) -> str:
    s = t.value
    parts = []
    i = 1
    while i < len(s):
        m: Optional[re.Match] = re_string_part.match(s, i)
        assert m is not None
        if m.group("chars") is not None:
            parts.append(m.group("chars"))
        elif m.group("standard") is not None:
            parts.append(_std_escapes[m.group("standard")])
        elif m.group("unicode") is not None:
            code = int(m.group("unicode"), 16)
            if 0xD800 <= code <= 0xDBFF:
                low = re_low_surrogate.match(s, m.end())
                if low is None:
                    raise _error_at(
                        t,
                        ErrorKind.INVALID_ESCAPE,
                        "unpaired high surrogate: %r" % m.group(),
                        i,
                    )
                low_code = int(low.group("unicode"), 16)
                code = 0x10000 + ((code - 0xD800) << 10) + (low_code - 0xDC00)
                m = low
            elif 0xDC00 <= code <= 0xDFFF:
                raise _error_at(
                    t,
                    ErrorKind.INVALID_ESCAPE,
                    "unpaired low surrogate: %r" % m.group(),
                    i,
                )
            parts.append(chr(code))
        elif m.group("bad_escape") == "\\":
            break
        elif m.group("bad_escape") is not None:
            raise _error_at(
                t,
                ErrorKind.INVALID_ESCAPE,
                "invalid escape: %r" % m.group("bad_escape"),
                i,
            )
        elif m.group("control") is not None:
            raise _error_at(
                t,
                ErrorKind.CONTROL_CHARACTER,
                "unescaped control character %r in string" % m.group("control"),
                i,
            )
        else:
            return "".join(parts)
        i = m.end()
    raise _error_at(t, ErrorKind.UNTERMINATED_STRING, "string is never closed")


def make_string(t: Token) -> String:
    return String(unescape(t))


def make_key(t: Token) -> str:
    return unescape(t)


def make_array(values: Tuple[Value, List[Value]]) -> Array:
    first, rest = values
    return Array(tuple([first] + rest))


def make_object(members: Tuple[Member, List[Member]]) -> Object:
    first, rest = members
    return Object(tuple([first] + rest))


def make_member(values: Tuple[str, Value]) -> Member:
    k, v = values
    return k, v


def _peek(tokens: Sequence[Token], s: State) -> Token:
    return tokens[min(s.pos, len(tokens) - 1)]


def _is_op(t: Token, value: str) -> bool:
    return t.type == "op" and t.value == value


def _unexpected_token(tokens: Sequence[Token], s: State, what: str) -> ParseError:
    t = _peek(tokens, s)
    if t.type == EOF:
        msg = "got unexpected end of input, expected: %s" % what
        return _error_at(t, ErrorKind.UNEXPECTED_EOF, msg)
    if t.type == ERROR:
        assert t.start is not None
        return LexerError(t.start, t.offset, t.value)
    prev = tokens[s.pos - 1] if s.pos > 0 else None
    if prev is not None and _is_op(prev, ",") and t.value in ("]", "}"):
        msg = "trailing comma before %r" % t.value
        return _error_at(prev, ErrorKind.TRAILING_COMMA, msg)
    if t.type == "name":
        return _error_at(t, ErrorKind.INVALID_LITERAL, "invalid literal: %r" % t.value)
    msg = "got unexpected token: %r, expected: %s" % (t.value, what)
    return _error_at(t, ErrorKind.UNEXPECTED_TOKEN, msg)


def parse(tokens: Sequence[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Parse a sequence of tokens produced by `tokenize()` into a `Value`.

    Containers may be nested at most `max_depth` levels deep. Deeper nesting, or
    nesting that would exhaust the Python stack first, is `DEPTH_EXCEEDED`.
    """
    depth = 0

    def const(x: T) -> Callable[[Any], T]:
        return lambda _: x

    def op(s: str) -> Parser[Token, str]:
        return tok("op", s)

    def n(s: str) -> Parser[Token, str]:
        return tok("name", s)

    def token(type: str) -> Parser[Token, Token]:
        return some(lambda t: t.type == type).named(type)

    def expected(what: str) -> Parser[Token, Any]:
        @Parser
        def _expected(tokens: Sequence[Token], s: State) -> Tuple[Any, State]:
            raise _unexpected_token(tokens, s, what)

        _expected.name = what
        return _expected

    def separator(value: str, kind: ErrorKind, what: str) -> Parser[Token, str]:
        @Parser
        def _separator(tokens: Sequence[Token], s: State) -> Tuple[str, State]:
            t = _peek(tokens, s)
            if _is_op(t, value):
                return t.value, State(s.pos + 1, max(s.pos + 1, s.max), s.parser)
            elif t.type == EOF:
                msg = "got unexpected end of input, expected: %s" % what
                raise _error_at(t, ErrorKind.UNEXPECTED_EOF, msg)
            msg = "got unexpected token: %r, expected: %s" % (t.value, what)
            raise _error_at(t, kind, msg)

        _separator.name = what
        return _separator

    def nested(p: Parser[Token, T]) -> Parser[Token, T]:
        @Parser
        def _nested(tokens: Sequence[Token], s: State) -> Tuple[T, State]:
            nonlocal depth
            if depth >= max_depth:
                raise _error_at(
                    tokens[s.pos - 1],
                    ErrorKind.DEPTH_EXCEEDED,
                    "containers nested deeper than %d levels" % max_depth,
                )
            depth += 1
            try:
                return p.run(tokens, s)
            except RecursionError:
                raise _error_at(
                    tokens[s.pos - 1],
                    ErrorKind.DEPTH_EXCEEDED,
                    "containers nested too deeply for the Python stack",
                ) from None
            finally:
                depth -= 1

        _nested.name = p.name
        return _nested

    @Parser
    def end(tokens: Sequence[Token], s: State) -> Tuple[None, State]:
        t = _peek(tokens, s)
        if t.type != EOF:
            msg = "got unexpected data after the value: %r" % t.value
            raise _error_at(t, ErrorKind.TRAILING_DATA, msg)
        return None, s

    end.name = "end of input"

    null = n("null") >> const(Null())
    true = n("true") >> const(Bool(True))
    false = n("false") >> const(Bool(False))
    number = token("number") >> make_number
    string = token("string") >> make_string
    value: Parser[Token, Value] = forward_decl().named("json_value")
    key = (token("string") >> make_key) | expected("string key")
    colon = separator(":", ErrorKind.EXPECTED_COLON, "':'")
    member = key + -colon + value >> make_member
    members = member + many(-op(",") + member) >> make_object
    values = value + many(-op(",") + value) >> make_array
    json_object = (
        -op("{")
        + nested(
            (op("}") >> const(Object()))
            | members + -separator("}", ErrorKind.EXPECTED_COMMA, "',' or '}'")
        )
    ).named("json_object")
    json_array = (
        -op("[")
        + nested(
            (op("]") >> const(Array()))
            | values + -separator("]", ErrorKind.EXPECTED_COMMA, "',' or ']'")
        )
    ).named("json_array")
    scalar = string | number | null | true | false | expected("json_value")
    # Containers stay at most two choice frames deep
    value.define(json_object | (json_array | scalar))
    json_text = value + -end

    try:
        return json_text.parse(tokens)
    except NoParseError as e:
        what = getattr(e.state.parser, "name", "json_value")
        s = State(e.state.max, e.state.max)
        raise _unexpected_token(tokens, s, what) from None


def loads(s: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Parse JSON text into a `Value`.

    Raises `ParseError` if the text is not valid JSON.

    ```pycon
    >>> loads('{"a": [1, true]}')
    Object(members=(('a', Array(items=(Number(value=1), Bool(value=True)))),))

    ```
    """
    return parse(tokenize(s), max_depth)
