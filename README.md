# ftkit

A small collection of low-level helpers for single characters, text,
byte buffers, formatted output, singly linked lists and line reading
through a fixed-size buffer. It has no dependencies beyond the standard
library.

## Installation

```
pip install ftkit
```

To run the test suite, install the test extra and run pytest:

```
pip install "ftkit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `ftkit.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_whitespace`, `to_upper`, `to_lower` |
| `ftkit.convert` | `atoi`, `atol`, `itoa` |
| `ftkit.memory` | `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` |
| `ftkit.strings` | `strlcpy`, `strlcat`, `strndup`, `strncmp`, `substr`, `strjoin`, `strtrim`, `strchr`, `strrchr`, `strnstr` |
| `ftkit.transform` | `split`, `strmapi`, `striteri` |
| `ftkit.output` | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` |
| `ftkit.printf` | `render`, `printf` |
| `ftkit.errors` | `print_error` |
| `ftkit.line_reader` | `LineReader`, `read_lines` |
| `ftkit.linked` | `LinkedList` |
| `ftkit.collector` | `Collector` |

## Examples

### Characters

The functions in `ftkit.chars` take a one-character string or an integer
code. The predicates return a bool; `to_upper` and `to_lower` return the
same kind of value they were given and only touch ASCII letters.

```python
from ftkit.chars import is_alnum, to_upper

is_alnum("a")    # True
to_upper("q")    # "Q"
to_upper(97)     # 65
```

### Numbers and text

`atoi` and `atol` skip leading whitespace, accept one sign and stop at the
first non-digit; the result wraps to a signed 32-bit or 64-bit value.
`itoa` renders a signed 32-bit integer and raises `OverflowError` outside
that range.

```python
from ftkit.convert import atoi, itoa

atoi("   -42abc")   # -42
itoa(-2147483648)   # "-2147483648"
```

### Strings

Searches return an index, or `None` when nothing matches. The bounded
copies `strlcpy` and `strlcat` return the new string together with the
length they tried to create, so truncation can be detected.

```python
from ftkit.strings import strchr, strlcpy, strtrim
from ftkit.transform import split

split("  a b  c ", " ")   # ["a", "b", "c"]
strtrim("xxhixx", "x")    # "hi"
strchr("hello", "l")      # 2
strlcpy("hello", 3)       # ("he", 5)
```

### Byte buffers

```python
from ftkit.memory import calloc, memset, memcmp

buf = calloc(2, 3)        # bytearray of 6 zero bytes
memset(buf, 0x41, 3)      # bytearray(b"AAA\x00\x00\x00")
memcmp(b"abc", b"abd", 3) # -1
```

### Formatted output

`render` understands `%c %s %d %i %u %x %X %p %%`; an unknown conversion
becomes a single space. `printf` writes the text to standard output and
returns the number of characters written.

```python
from ftkit.printf import render, printf

render("%d items at %x", 42, 255)   # "42 items at ff"
printf("%s\n", "hello")             # prints "hello", returns 6
```

The `ftkit.output` functions write a character, a string, a string plus
newline, or a number to a given text stream (standard output by default).

### Reading lines

Lines are read from a text or binary stream in chunks of at most
`buffer_size`; each line keeps its trailing newline if it had one.

```python
import io
from ftkit.line_reader import LineReader, read_lines

reader = LineReader(io.StringIO("first\nsecond"), 4)
reader.read_line()   # "first\n"
reader.read_line()   # "second"
reader.read_line()   # None

list(read_lines(io.StringIO("a\nb\n"), 8))   # ["a\n", "b\n"]
```

### Linked lists

```python
from ftkit.linked import LinkedList

items = LinkedList([1, 2])
items.push_front(0)
items.push_back(3)
list(items)                               # [0, 1, 2, 3]
items.last()                              # 3
list(items.map(lambda x: x * 10, None))   # [0, 10, 20, 30]
```

### Tracking objects together

A `Collector` keeps a reference to everything it creates or is handed
through `track`, and drops them all on `free_all` or when its `with`
block ends.

```python
from ftkit.collector import Collector

with Collector() as gc:
    words = gc.split("one two", " ")   # the list and both words are tracked
    joined = gc.strjoin("a", "b")
    len(gc)                            # 4
# everything tracked is dropped on leaving the block
```

### Errors

```python
import sys
from ftkit.errors import print_error

print_error("Invalid map", sys.stderr)   # writes "Error\nInvalid map\n"
```

## What it does not do

ftkit is a library only: it installs no command-line program and
reads, validates or displays no map or scene files of its own.