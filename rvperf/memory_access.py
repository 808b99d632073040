"""Per-request memory access state carried through the memory hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class MMUState(IntEnum):
    """Address translation status of a memory access."""

    NO_ACCESS = 0
    MISS = 1
    HIT = 2

    def __str__(self) -> str:
        return self.name.lower()


class CacheState(IntEnum):
    """Data cache access status of a memory access."""

    NO_ACCESS = 0
    RELOAD = 1
    MISS = 2
    HIT = 3

    def __str__(self) -> str:
        return self.name.lower()


class ArchUnit(IntEnum):
    """Architectural unit that sends or receives a memory packet."""

    NO_ACCESS = 0
    ICACHE = 1
    LSU = 2
    DCACHE = 3
    L2CACHE = 4
    BIU = 5

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class MemoryAccessInfo:
    """State of one load/store or fetch request.

    ``inst`` is the associated instruction, or None when unassociated.
    It is expected to expose ``unique_id``, ``mnemonic``, ``raddr`` and
    ``target_vaddr``.
    """

    inst: Any
    phy_addr_ready: bool = False
    mmu_state: MMUState = MMUState.NO_ACCESS
    cache_state: CacheState = CacheState.NO_ACCESS
    data_ready: bool = False
    is_refill: bool = False
    src_unit: ArchUnit = ArchUnit.NO_ACCESS
    dest_unit: ArchUnit = ArchUnit.NO_ACCESS
    next_req: MemoryAccessInfo | None = None
    issue_queue_entry: Any = None
    replay_queue_entry: Any = None
    mshr_entry: Any = None

    @property
    def mnemonic(self) -> str:
        return self.inst.mnemonic if self.inst is not None else "<unassoc>"

    @property
    def inst_unique_id(self) -> int:
        return self.inst.unique_id if self.inst is not None else 0

    @property
    def phy_addr(self) -> int:
        return self.inst.raddr

    @property
    def vaddr(self) -> int:
        return self.inst.target_vaddr

    def is_cache_hit(self) -> bool:
        """Return True if the data cache lookup hit."""
        return self.cache_state == CacheState.HIT

    def pairs(self) -> dict[str, Any]:
        """Return the named values recorded for pipeline collection."""
        uid = self.inst_unique_id
        return {
            "DID": uid,
            "uid": uid,
            "mnemonic": self.mnemonic,
            "mmu": self.mmu_state,
            "dcs": self.cache_state,
        }

    def __str__(self) -> str:
        return f"memptr: {self.inst}"