"""A simple set-associative TLB with tree pseudo-LRU replacement."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _is_power_of_2(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


@dataclass
class TLBEntry:
    """One translation entry covering a single page."""

    page_size: int
    addr: int = 0
    valid: bool = False
    set_index: int = 0
    way: int = 0

    def __post_init__(self) -> None:
        if not _is_power_of_2(self.page_size):
            raise ValueError(
                f"TLBEntry: Page size must be a power of 2. page_size={self.page_size}"
            )

    def reset(self, addr: int) -> None:
        """Make the entry valid for ``addr``."""
        self.valid = True
        self.addr = addr


class TreePLRU:
    """Tree pseudo-LRU replacement state for one set."""

    def __init__(self, num_ways: int) -> None:
        if not _is_power_of_2(num_ways):
            raise ValueError(f"number of ways must be a power of 2, got {num_ways}")
        self.num_ways = num_ways
        self._levels = num_ways.bit_length() - 1
        self._bits = [0] * (num_ways - 1)

    def touch_mru(self, way: int) -> None:
        """Mark ``way`` as most recently used."""
        if not 0 <= way < self.num_ways:
            raise IndexError(f"way {way} out of range for {self.num_ways} ways")
        node = 0
        for level in range(self._levels):
            direction = (way >> (self._levels - 1 - level)) & 1
            self._bits[node] = 1 - direction
            node = 2 * node + 1 + direction

    def lru_way(self) -> int:
        """Return the way the tree currently points at as least recently used."""
        way = 0
        node = 0
        for _ in range(self._levels):
            direction = self._bits[node]
            way = way * 2 + direction
            node = 2 * node + 1 + direction
        return way


class SimpleTLB:
    """Translation cache of ``num_entries`` pages, ``associativity`` ways per set."""

    name = "tlb"

    def __init__(
        self,
        page_size: int = 4096,
        num_entries: int = 32,
        associativity: int = 32,
    ) -> None:
        if not _is_power_of_2(num_entries):
            raise ValueError(f"number of entries must be a power of 2, got {num_entries}")
        if not _is_power_of_2(associativity) or associativity > num_entries:
            raise ValueError(
                f"associativity must be a power of 2 no larger than {num_entries}, "
                f"got {associativity}"
            )
        self.page_size = page_size
        self.num_sets = num_entries // associativity
        self.associativity = associativity
        self.sets = [
            [
                TLBEntry(page_size, set_index=set_index, way=way)
                for way in range(associativity)
            ]
            for set_index in range(self.num_sets)
        ]
        self.replacement = [TreePLRU(associativity) for _ in range(self.num_sets)]
        self.hits = 0

    def _decode(self, addr: int) -> tuple[int, int]:
        page = addr // self.page_size
        return page % self.num_sets, page // self.num_sets

    def lookup(self, addr: int) -> TLBEntry | None:
        """Return the valid entry that covers ``addr``, or None."""
        set_index, tag = self._decode(addr)
        for entry in self.sets[set_index]:
            if entry.valid and self._decode(entry.addr)[1] == tag:
                return entry
        return None

    def allocate(self, addr: int) -> TLBEntry:
        """Replace the LRU entry of the set for ``addr`` and mark it MRU."""
        set_index, _ = self._decode(addr)
        way = self.replacement[set_index].lru_way()
        entry = self.sets[set_index][way]
        entry.reset(addr)
        self.replacement[set_index].touch_mru(way)
        return entry

    def touch(self, entry: TLBEntry) -> None:
        """Record a hit on ``entry``."""
        logger.debug("TLB HIT")
        self.replacement[entry.set_index].touch_mru(entry.way)
        self.hits += 1