"""Load/store issue-queue bookkeeping wrapped around a memory access."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from rvperf.memory_access import MemoryAccessInfo


class IssuePriority(IntEnum):
    """Arbitration priority of a load/store; lower values win."""

    HIGHEST = 0
    CACHE_RELOAD = 1
    CACHE_PENDING = 2
    MMU_RELOAD = 3
    MMU_PENDING = 4
    NEW_DISP = 5
    LOWEST = 6

    def __str__(self) -> str:
        return _PRIORITY_NAMES[self]


_PRIORITY_NAMES = {
    IssuePriority.HIGHEST: "(highest)",
    IssuePriority.CACHE_RELOAD: "($_reload)",
    IssuePriority.CACHE_PENDING: "($_pending)",
    IssuePriority.MMU_RELOAD: "(mmu_reload)",
    IssuePriority.MMU_PENDING: "(mmu_pending)",
    IssuePriority.NEW_DISP: "(new_disp)",
    IssuePriority.LOWEST: "(lowest)",
}


class IssueState(IntEnum):
    """Issue state of a load/store in the issue queue."""

    READY = 0
    ISSUED = 1
    NOT_READY = 2

    def __str__(self) -> str:
        return f"({self.name.lower()})"


@dataclass(eq=False)
class LoadStoreInstInfo:
    """Issue-queue view of a load/store memory access.

    ``mem_access_info`` may be None for an unassociated entry.
    """

    mem_access_info: MemoryAccessInfo | None
    priority: IssuePriority = IssuePriority.LOWEST
    state: IssueState = IssueState.NOT_READY
    in_ready_queue: bool = False

    @property
    def inst(self) -> Any:
        return self.mem_access_info.inst

    @property
    def inst_unique_id(self) -> int:
        if self.mem_access_info is None:
            return 0
        return self.mem_access_info.inst_unique_id

    @property
    def mnemonic(self) -> str:
        if self.mem_access_info is None:
            return "<unassoc>"
        return self.mem_access_info.mnemonic

    @property
    def issue_queue_entry(self) -> Any:
        return self.mem_access_info.issue_queue_entry

    @issue_queue_entry.setter
    def issue_queue_entry(self, entry: Any) -> None:
        self.mem_access_info.issue_queue_entry = entry

    @property
    def replay_queue_entry(self) -> Any:
        return self.mem_access_info.replay_queue_entry

    @replay_queue_entry.setter
    def replay_queue_entry(self, entry: Any) -> None:
        self.mem_access_info.replay_queue_entry = entry

    def is_ready(self) -> bool:
        """Return True if the entry is ready to be issued."""
        return self.state == IssueState.READY

    def is_retired(self) -> bool:
        """Return True if the associated instruction has retired."""
        status = self.inst.status
        return getattr(status, "name", status) == "RETIRED"

    def win_arb(self, other: LoadStoreInstInfo | None) -> bool:
        """Return True if this entry wins arbitration against ``other``."""
        if other is None:
            return True
        return self.priority < other.priority

    def pairs(self) -> dict[str, Any]:
        """Return the named values recorded for pipeline collection."""
        uid = self.inst_unique_id
        return {
            "DID": uid,
            "uid": uid,
            "mnemonic": self.mnemonic,
            "pri:": self.priority,
            "state": self.state,
        }

    def __lt__(self, other: LoadStoreInstInfo) -> bool:
        return self.inst_unique_id < other.inst_unique_id

    def __str__(self) -> str:
        return (
            f"lsinfo: uid: {self.inst_unique_id} pri:{self.priority}"
            f" state: {self.state}"
        )