"""Flush requests and the unit that arbitrates and forwards them."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

logger = logging.getLogger(__name__)


class FlushCause(IntEnum):
    """Reason a pipeline flush was requested."""

    TRAP = 0
    MISPREDICTION = 1
    TARGET_MISPREDICTION = 2
    MISFETCH = 3
    POST_SYNC = 4
    UNKNOWN = 5

    def __str__(self) -> str:
        return self.name


_INCLUSIVE = {
    FlushCause.TRAP: True,
    FlushCause.MISFETCH: True,
    FlushCause.MISPREDICTION: False,
    FlushCause.TARGET_MISPREDICTION: False,
    FlushCause.POST_SYNC: False,
}


def determine_inclusive(cause: FlushCause) -> bool:
    """Return True if a flush for ``cause`` also removes the causing instruction."""
    try:
        return _INCLUSIVE[cause]
    except KeyError:
        raise ValueError(f"Unknown flush cause: {int(cause)}") from None


@dataclass(frozen=True)
class FlushingCriteria:
    """What to flush: the causing instruction and whether it is included."""

    cause: FlushCause
    inst: Any
    is_inclusive: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "is_inclusive", determine_inclusive(self.cause))

    @property
    def is_lower_pipe_flush(self) -> bool:
        return self.cause == FlushCause.MISFETCH

    def included_in_flush(self, other: Any) -> bool:
        """Return True if instruction ``other`` is removed by this flush."""
        if self.is_inclusive:
            return self.inst.unique_id <= other.unique_id
        return self.inst.unique_id < other.unique_id

    def __str__(self) -> str:
        return f"{self.inst} {self.cause}"


class FlushManager:
    """Keep the oldest pending flush request and forward it downstream.

    Lower-pipe flushes go to ``lower_listeners``, all others to
    ``upper_listeners``.
    """

    name = "flushmanager"

    def __init__(self) -> None:
        self.lower_listeners: list[Callable[[FlushingCriteria], None]] = []
        self.upper_listeners: list[Callable[[FlushingCriteria], None]] = []
        self.pending: FlushingCriteria | None = None
        self.flush_scheduled = False

    def receive_flush(self, criteria: FlushingCriteria) -> None:
        """Record a flush request, keeping only the oldest one."""
        self.flush_scheduled = True
        if self.pending is not None and self.pending.included_in_flush(criteria.inst):
            return
        self.pending = criteria

    def forward_flush(self) -> FlushingCriteria:
        """Send the pending flush to the matching listeners and clear it."""
        if self.pending is None:
            raise RuntimeError("no flush to forward onwards?")
        criteria = self.pending
        if criteria.is_lower_pipe_flush:
            logger.info("instigating lower pipeline flush for: %s", criteria)
            listeners = self.lower_listeners
        else:
            logger.info("instigating upper pipeline flush for: %s", criteria)
            listeners = self.upper_listeners
        for listener in listeners:
            listener(criteria)
        self.pending = None
        self.flush_scheduled = False
        return criteria