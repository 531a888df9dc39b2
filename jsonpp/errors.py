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

"""Syntax errors raised while reading JSON text.

Every error carries its `ErrorKind`, a human-readable message, the 0-based character
offset where the problem was detected and the 1-based (_line_, _column_) place of the
same character.
"""

__all__ = ["ErrorKind", "ParseError"]

from enum import Enum
from typing import Optional, Tuple

Place = Tuple[int, int]


class ErrorKind(Enum):
    UNEXPECTED_EOF = "unexpected end of input"
    INVALID_LITERAL = "invalid literal"
    INVALID_NUMBER = "invalid number"
    UNTERMINATED_STRING = "unterminated string"
    INVALID_ESCAPE = "invalid escape sequence"
    CONTROL_CHARACTER = "unescaped control character"
    EXPECTED_COMMA = "expected ','"
    EXPECTED_COLON = "expected ':'"
    TRAILING_COMMA = "trailing comma"
    TRAILING_DATA = "trailing data"
    UNEXPECTED_TOKEN = "unexpected token"
    DEPTH_EXCEEDED = "nesting too deep"


class ParseError(Exception):
    """The JSON text cannot be parsed.

    Attributes:
        kind (ErrorKind): What went wrong
        msg (str): Details of the error
        offset (int): Character offset of the error in the source text
        place (Optional[Tuple[int, int]]): Position (_line_, _column_) of the error
    """

    def __init__(
        self,
        kind: ErrorKind,
        msg: str,
        offset: int,
        place: Optional[Place] = None,
    ) -> None:
        super().__init__(kind, msg, offset, place)
        self.kind = kind
        self.msg = msg
        self.offset = offset
        self.place = place

    @property
    def line(self) -> Optional[int]:
        return self.place[0] if self.place is not None else None

    @property
    def column(self) -> Optional[int]:
        return self.place[1] if self.place is not None else None

    def __str__(self) -> str:
        if self.place is None:
            return "%s (offset %d)" % (self.msg, self.offset)
        line, pos = self.place
        return "%d,%d: %s" % (line, pos, self.msg)
