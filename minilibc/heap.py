"""Page-aligned allocation from a bounded, growable heap region, and wall-clock time."""

from __future__ import annotations

import time

HEAP_SIZE = 32 * 1024 * 1024


def unixtime_nsec() -> int:
    """Nanoseconds since the Unix epoch from the real-time clock."""
    return time.time_ns()


class PageHeap:
    """Hands out page-aligned address ranges from ``[base, base + size)``.

    The region grows like a program break that is clamped to its capacity.
    Addresses are plain integers; nothing is ever freed.
    """

    def __init__(self, size: int = HEAP_SIZE, base: int = 0) -> None:
        if size < 0 or base < 0:
            raise ValueError("heap size and base must not be negative")
        self.base = base
        self.size = size
        self._break = base
        self._started = False
        self._heap_end = 0
        self._brk_end = 0

    def _brk(self, addr: int | None = None) -> int:
        if addr is not None:
            self._break = min(max(addr, self.base), self.base + self.size)
        return self._break

    def alloc(self, page_n_bits: int, n_pages: int) -> int:
        """Return the address of ``n_pages`` pages of ``2**page_n_bits`` bytes.

        Raises MemoryError when the region is exhausted; the space that the
        failed request skipped over is not reclaimed.
        """
        if page_n_bits < 0 or n_pages < 0:
            raise ValueError("page size bits and page count must not be negative")
        if not self._started:
            self._heap_end = self._brk_end = self._brk()
            self._started = True

        page_size = 1 << page_n_bits
        ptr = self._heap_end + (-self._heap_end & (page_size - 1))
        self._heap_end = ptr + page_size * n_pages
        if self._heap_end > self._brk_end:
            self._brk_end = self._brk(self._heap_end)
            if self._brk_end < self._heap_end:
                raise MemoryError(
                    f"cannot allocate {n_pages} pages of {page_size} bytes"
                )
        return ptr