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

"""Tokens that know their character offsets.

`make_tokenizer()` wraps the regexp tokenizer of `funcparserlib.lexer`. Each token
keeps the (_line_, _column_) place computed by funcparserlib and gets the 0-based
character offset of its first character. Instead of raising `LexerError` in the
middle of the text, the tokenizer ends the token list with an `ERROR` token at the
first character no spec matches, so the grammar can report whichever problem comes
first. Otherwise the list ends with an empty `EOF` token placed just past the text.
"""

__all__ = ["make_tokenizer", "Token", "LexerError", "EOF", "ERROR"]

from typing import Callable, List, Optional, Sequence, Tuple

import funcparserlib.lexer
from funcparserlib.lexer import TokenSpec

from jsonpp.errors import ErrorKind, ParseError

EOF = "eof"
ERROR = "error"

_Place = Tuple[int, int]


class LexerError(ParseError):
    def __init__(self, place: _Place, offset: int, char: str) -> None:
        super().__init__(
            ErrorKind.INVALID_LITERAL,
            "cannot tokenize data: %r" % char,
            offset,
            place,
        )


class Token(funcparserlib.lexer.Token):
    """A `funcparserlib.lexer.Token` with the `offset` of its first character."""

    def __init__(
        self,
        type: str,
        value: str,
        start: Optional[_Place] = None,
        end: Optional[_Place] = None,
        offset: int = 0,
    ) -> None:
        super().__init__(type, value, start, end)
        self.offset = offset


def make_tokenizer(specs: Sequence[TokenSpec]) -> Callable[[str], List[Token]]:
    """Make a function that splits text into a list of `Token` objects.

    ```pycon
    >>> tokenize = make_tokenizer([
    ...     TokenSpec("space", r"\\s+"),
    ...     TokenSpec("number", r"[0-9]+"),
    ... ])
    >>> [(t.type, t.value, t.offset) for t in tokenize("1 23")]
    [('number', '1', 0), ('space', ' ', 1), ('number', '23', 2), ('eof', '', 4)]
    >>> [(t.type, t.value, t.start) for t in tokenize("1 ?")][-1]
    ('error', '?', (1, 3))

    ```
    """
    tokenize = funcparserlib.lexer.make_tokenizer(specs)

    def f(s: str) -> List[Token]:
        tokens = []
        offset = 0
        line, pos = 1, 0
        try:
            for t in tokenize(s):
                tokens.append(Token(t.type, t.value, t.start, t.end, offset))
                offset += len(t.value)
                line, pos = t.end
        except funcparserlib.lexer.LexerError as e:
            tokens.append(Token(ERROR, s[offset], e.place, e.place, offset))
            return tokens
        place = (line, pos + 1)
        tokens.append(Token(EOF, "", place, place, offset))
        return tokens

    return f
