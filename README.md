# minilibc

Pure-Python double-precision math routines that work directly on
IEEE-754 bit patterns, together with a few small runtime helpers:
128-bit integer division, ASCII character classes, conversion of Unix
time to calendar fields, error codes, exit handlers and a page
allocator over an address range. The math routines keep the special
cases of a C math library: signed zeros, infinities and NaN results
instead of Python exceptions.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
|---|---|
| `minilibc.floating` | `copysign`, `fabs`, `frexp`, `fmax`, `fmin`, `fmod`, `ceil`, `floor`, `math_divzero`, `math_invalid`, `math_xflow`, `math_oflow`, `math_uflow` |
| `minilibc.roots` | `hypot`, `cbrt` |
| `minilibc.reduction` | `rem_pio2`, `rem_pio2_large` |
| `minilibc.trig` | `cos`, `kernel_cos`, `kernel_sin`, `kernel_tan` |
| `minilibc.inverse` | `acos`, `asin`, `atan` |
| `minilibc.angles` | `atan2` |
| `minilibc.exponential` | `exp`, `expm1`, `expo2` |
| `minilibc.logarithm` | `log10`, `log1p`, `log2` |
| `minilibc.hyperbolic` | `cosh`, `acosh`, `asinh`, `atanh` |
| `minilibc.int128` | `udivmod128`, `divmod128`, `udiv128`, `umod128`, `div128`, `mod128` |
| `minilibc.ctype` | `isdigit`, `isalpha`, `isspace` |
| `minilibc.timeconv` | `BrokenDownTime`, `secs_to_tm`, `localtime` |
| `minilibc.errcodes` | `Errno`, `strerror` |
| `minilibc.runtime` | `ExitRegistry` |
| `minilibc.heap` | `PageHeap`, `unixtime_nsec`, `HEAP_SIZE` |

## Floating point

```python
from minilibc.floating import frexp, fmod, copysign, fmax

frexp(8.0)            # (0.5, 4)
fmod(7.5, 2.0)        # 1.5
copysign(3.0, -0.0)   # -3.0
fmax(-0.0, 0.0)       # 0.0  (+0 is preferred to -0)
```

`frexp` returns the mantissa and exponent as a tuple. `fmod` of an
infinite `x` or a zero or NaN `y` gives NaN; `fmax` and `fmin` return
the other operand when one of them is NaN.

`rem_pio2(x)` returns `(n, y0, y1)` with `x - n*pi/2 == y0 + y1`; for
very large arguments only the last three bits of `n` are kept.
`rem_pio2_large(xs, e0, prec)` does the reduction for a value given as
24-bit pieces and returns `(n & 7, remainder_parts)`; it raises
`ValueError` for a precision outside 0 to 3, an empty piece list or an
exponent beyond 16360.

Domain errors give NaN and poles give a signed infinity, for example
`log2(0.0)` is `-inf`, `log10(-1.0)` is NaN and `atanh(1.0)` is `inf`.

## 128-bit integers

Signed division truncates toward zero, the remainder takes the sign of
the dividend, and results wrap around as two's-complement 128-bit
values:

```python
from minilibc.int128 import divmod128, udivmod128

divmod128(-7, 2)      # (-3, -1)
udivmod128(7, 2)      # (3, 1)
```

Arguments out of range raise `ValueError`; a zero divisor raises
`ZeroDivisionError`.

## Characters, time and errors

`isdigit`, `isalpha` and `isspace` accept a one-character string or a
character code and look only at ASCII.

```python
from minilibc.timeconv import localtime

tm = localtime(0)
tm.year, tm.mon, tm.mday   # (70, 0, 1)  -> 1970-01-01
```

`BrokenDownTime` is a frozen dataclass with `sec`, `min`, `hour`,
`mday`, `mon` (from 0), `year` (from 1900), `wday`, `yday`, `isdst`,
`gmtoff` and `zone`. Local time is always GMT. `secs_to_tm` and
`localtime` raise `OverflowError` carrying `Errno.EOVERFLOW` when the
year does not fit in a 32-bit signed integer.

`Errno` is an `IntEnum` of error numbers; `strerror(code)` returns the
description and raises `ValueError` for an unknown code.

## Exit handlers

```python
from minilibc.runtime import ExitRegistry

registry = ExitRegistry()
registry.register(lambda: print("second"))
registry.register(lambda: print("first"))
registry.run()        # prints "first", then "second"
```

`register` raises `TypeError` for something that is not callable.
`exit(status)` runs the handlers, flushes standard output and error,
and raises `SystemExit(status)`.

## Page allocation

`PageHeap(size=HEAP_SIZE, base=0)` hands out page-aligned integer
addresses from `[base, base + size)`. `alloc(page_n_bits, n_pages)`
returns the start of `n_pages` pages of `2**page_n_bits` bytes and
raises `MemoryError` when the range is exhausted. Nothing is ever
freed and no real memory is reserved. `unixtime_nsec()` returns the
wall-clock time in nanoseconds since the Unix epoch.

## What this package does not do

It is a set of separate routines, not a complete math library or C
runtime. There is no `sin`, `tan`, natural `log`, `pow`, `sqrt`,
`sinh` or `tanh` of its own (the trigonometric kernels and `cos` are
provided, and some routines use Python's `math.sqrt` and `math.log`
internally). There is no formatted or buffered I/O, no `malloc`, no
threads or mutexes, and no command-line program.