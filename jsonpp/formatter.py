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

"""Pretty-printing of JSON values.

Containers are laid out one item per line, each nesting level indented by
`indent_width` spaces. Empty containers stay on one line as `[]` and `{}`.
"""

__all__ = ["format", "dumps"]

import math
import re
from typing import List

from jsonpp.values import Array, Bool, Null, Number, Object, String, Value

_escapes = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
re_escape = re.compile(r'["\\\x00-\x1f]')
re_escape_ascii = re.compile(r'["\\\x00-\x1f\x80-\U0010ffff]')


def _escape_char(m: "re.Match[str]") -> str:
    c = m.group()
    try:
        return _escapes[c]
    except KeyError:
        pass
    n = ord(c)
    if n < 0x10000:
        return "\\u%04x" % n
    n -= 0x10000
    return "\\u%04x\\u%04x" % (0xD800 | (n >> 10), 0xDC00 | (n & 0x3FF))


def format_string(s: str, ascii_only: bool = False) -> str:
    r"""Quote and escape a string as a JSON string literal.

    ```pycon
    >>> print(format_string('say "hi"\n'))
    "say \"hi\"\n"
    >>> print(format_string("λ", ascii_only=True))
    "\u03bb"

    ```
    """
    regexp = re_escape_ascii if ascii_only else re_escape
    return '"%s"' % regexp.sub(_escape_char, s)


def format_number(n: Number) -> str:
    """Return the shortest text that reads back as the same number.

    Integral floats below 1e16 are written without a fraction, so `Number(100.0)`
    is `100`.
    """
    x = n.value
    if isinstance(x, float):
        if not math.isfinite(x):
            raise ValueError("%r is not a valid JSON number" % x)
        if x.is_integer() and abs(x) < 1e16:
            return str(int(x))
        return repr(x)
    return str(x)


def format(value: Value, indent_width: int = 2, ascii_only: bool = False) -> str:
    """Render a `Value` as indented JSON text, without a trailing newline.

    ```pycon
    >>> from jsonpp.grammar import loads
    >>> print(format(loads('{"a": [1, {}], "b": null}')))
    {
      "a": [
        1,
        {}
      ],
      "b": null
    }

    ```
    """
    if isinstance(indent_width, bool) or not isinstance(indent_width, int):
        raise ValueError("indent width must be an integer, got %r" % (indent_width,))
    if indent_width < 0:
        raise ValueError("indent width must not be negative, got %d" % indent_width)
    out: List[str] = []

    def rec(x: Value, level: int) -> None:
        if isinstance(x, Null):
            out.append("null")
        elif isinstance(x, Bool):
            out.append("true" if x.value else "false")
        elif isinstance(x, Number):
            out.append(format_number(x))
        elif isinstance(x, String):
            out.append(format_string(x.value, ascii_only))
        elif isinstance(x, Array):
            if not x.items:
                out.append("[]")
                return
            inner = " " * (indent_width * (level + 1))
            out.append("[\n")
            for i, item in enumerate(x.items):
                if i > 0:
                    out.append(",\n")
                out.append(inner)
                rec(item, level + 1)
            out.append("\n%s]" % (" " * (indent_width * level)))
        elif isinstance(x, Object):
            if not x.members:
                out.append("{}")
                return
            inner = " " * (indent_width * (level + 1))
            out.append("{\n")
            for i, (k, v) in enumerate(x.members):
                if i > 0:
                    out.append(",\n")
                out.append(inner)
                out.append(format_string(k, ascii_only))
                out.append(": ")
                rec(v, level + 1)
            out.append("\n%s}" % (" " * (indent_width * level)))
        else:
            raise TypeError("not a JSON value: %r" % (x,))

    rec(value, 0)
    return "".join(out)


def dumps(value: Value, indent_width: int = 2, ascii_only: bool = False) -> str:
    """Render a `Value` as a complete output document ending with a newline."""
    return format(value, indent_width, ascii_only) + "\n"
