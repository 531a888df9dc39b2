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

"""Read JSON documents into immutable values and print them indented.

```pycon
>>> import jsonpp
>>> value = jsonpp.loads('{"key1":10,"key2":[1,2]}')
>>> print(jsonpp.format(value))
{
  "key1": 10,
  "key2": [
    1,
    2
  ]
}

```
"""

from jsonpp.errors import ErrorKind, ParseError
from jsonpp.formatter import dumps, format
from jsonpp.grammar import DEFAULT_MAX_DEPTH, loads, parse, tokenize
from jsonpp.lexer import LexerError
from jsonpp.values import (
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    Value,
    from_python,
    to_python,
)

__all__ = [
    "loads",
    "parse",
    "tokenize",
    "format",
    "dumps",
    "DEFAULT_MAX_DEPTH",
    "ErrorKind",
    "ParseError",
    "LexerError",
    "Value",
    "Null",
    "Bool",
    "Number",
    "String",
    "Array",
    "Object",
    "to_python",
    "from_python",
]
