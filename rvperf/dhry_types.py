"""Shared types of the Dhrystone benchmark workload."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any

MIC_SECS_PER_SECOND = 1_000_000.0
"""Microseconds in one second, used when reporting timings."""

STR_30_LEN = 30
"""Largest number of characters a ``Str_30`` string may hold."""


class Enumeration(IntEnum):
    """The five-valued enumeration type used throughout the benchmark."""

    IDENT_1 = 0
    IDENT_2 = 1
    IDENT_3 = 2
    IDENT_4 = 3
    IDENT_5 = 4


@dataclass(eq=False)
class Record:
    """A benchmark record.

    Only the first variant of the record (enumeration, integer and
    string components) is ever used by the benchmark, so it is the one
    held here.  ``ptr_comp`` refers to another record or is None.
    """

    ptr_comp: Record | None = None
    discr: Enumeration = Enumeration.IDENT_1
    enum_comp: Enumeration = Enumeration.IDENT_1
    int_comp: int = 0
    str_comp: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "str_comp" and len(value) > STR_30_LEN:
            raise ValueError(
                f"string component holds at most {STR_30_LEN} characters, "
                f"got {len(value)}"
            )
        super().__setattr__(name, value)

    def copy_from(self, other: Record) -> None:
        """Assign every component of ``other`` to this record."""
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))