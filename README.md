# ftkit

Small utilities that follow the behaviour of the classic C character,
string and memory helpers, for Python code that needs those exact rules:
lenient integer parsing with fixed-width wrap-around, NUL-terminated byte
buffers, bounded copies, a singly linked list, line reading from raw file
descriptors and a minimal printf.

It is a library only: there is no command-line program.

## Modules

- `ftkit.chars`: ASCII tests and case conversion. `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print` and `is_space` return `bool`;
  `to_upper` and `to_lower` change only ASCII letters. Each accepts a
  one-character string or an integer code, and the case converters return
  the same kind they were given.
- `ftkit.convert`: `atoi`, `atol` and `atoi_base` skip leading whitespace,
  take one optional sign and stop at the first character that is not a
  digit. `atoi` and `atoi_base` wrap the result to a signed 32-bit value,
  `atol` to 64 bits. `atoi_base` accepts bases 2 to 16 (letters in either
  case) and raises `ValueError` for any other base. `itoa` returns the
  decimal form of an `int`.
- `ftkit.memory`: byte-buffer operations `memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy` and `memmove`. Buffers written to must be a
  `bytearray` or writable `memoryview`. `memchr` returns an index or
  `None`; `memmove(buffer, dest, src, n)` copies between two offsets of one
  buffer and handles overlap. A negative count, or one that runs past a
  buffer, raises `ValueError`; `calloc` raises `OverflowError` when the
  count, size or total exceeds `INT_MAX`.
- `ftkit.lines`: `LineReader(fd, buffer_size)` reads `bytes` lines from a
  file descriptor, keeping the trailing newline, and returns `None` from
  `read_line()` at the end of input; it is also iterable.
  `get_next_line(fd)` keeps a separate reader for each descriptor and drops
  it at the end of input or for a negative descriptor.
- `ftkit.linked`: `Node` and `LinkedList` with `push_front`, `push_back`,
  `last`, `len()`, iteration, `for_each`, `map` and `clear`.
- `ftkit.strings`: `split`, `strchr`, `strrchr`, `strcmp`, `strncmp`,
  `strnstr`, `strtrim`, `substr` and `strjoin`. Searches return indexes or
  `None`; searching for `"\0"` finds the end of the string. `split` never
  yields empty words. Comparisons return the difference of the first
  differing code points, the end of a string counting as 0.
- `ftkit.buffers`: `strlcpy` and `strlcat` work on NUL-terminated
  `bytearray` buffers and return the length of the string they tried to
  build; `strmapi` builds a new string from `func(index, char)`;
  `striteri` calls `func(index, item)` on a mutable sequence and replaces
  an item when `func` returns something other than `None`.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to
  a text stream (standard output by default). `format_string` handles
  `%c %s %d %i %u %x %X %p %%`; integers are taken as 32-bit values, `%s`
  of `None` gives `(null)`, `%p` of `None` or `0` gives `(nil)`, and an
  unknown conversion writes nothing. Too few arguments raise `TypeError`.
  `printf` writes the formatted text to standard output and returns its
  length.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.convert import atoi, atoi_base, itoa
from ftkit.strings import split, strchr, strtrim
from ftkit.output import format_string

atoi("   -42abc")          # -42
atoi("2147483648")         # -2147483648 (32-bit wrap-around)
atoi_base("ff", 16)        # 255
itoa(-2147483648)          # "-2147483648"

split("The-Devil's-Advocate", "-")   # ["The", "Devil's", "Advocate"]
strtrim("xxhelloxx", "x")            # "hello"
strchr("hello", "l")                 # 2

format_string("%d items, %x hex, %s", 3, 255, "done")
# "3 items, ff hex, done"
```

Bounded copies into a byte buffer:

```python
from ftkit.buffers import strlcpy

dst = bytearray(6)
strlcpy(dst, b"hello world", len(dst))   # 11, so the copy was truncated
bytes(dst)                               # b"hello\x00"
```

Reading lines from a file descriptor:

```python
import os
from ftkit.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd, 4096):
        print(line.decode(), end="")
finally:
    os.close(fd)
```

Working with a linked list:

```python
from ftkit.linked import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
list(items)                      # [0, 1, 2, 3, 4]
doubled = items.map(lambda x: x * 2)
list(doubled)                    # [0, 2, 4, 6, 8]
items.clear()
len(items)                       # 0
```