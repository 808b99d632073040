"""Benchmark procedures and functions that act on the shared global state."""

from __future__ import annotations

from dataclasses import dataclass, field

from rvperf.dhry_types import Enumeration, Record

ARRAY_DIM = 50
"""Length of each dimension of the global benchmark arrays."""


def _zeros() -> list[int]:
    return [0] * ARRAY_DIM


def _zeros_2d() -> list[list[int]]:
    return [[0] * ARRAY_DIM for _ in range(ARRAY_DIM)]


@dataclass(eq=False)
class GlobalState:
    """The global variables the benchmark procedures read and write."""

    ptr_glob: Record | None = None
    next_ptr_glob: Record | None = None
    int_glob: int = 0
    bool_glob: bool = False
    ch_1_glob: str = "\0"
    ch_2_glob: str = "\0"
    arr_1_glob: list[int] = field(default_factory=_zeros)
    arr_2_glob: list[list[int]] = field(default_factory=_zeros_2d)


def _char_at(text: str, index: int) -> str:
    """Return the character at ``index``, or NUL past the end of ``text``."""
    return text[index] if index < len(text) else "\0"


def proc_6(state: GlobalState, enum_val: Enumeration) -> Enumeration:
    """Return the enumeration value that ``enum_val`` maps to."""
    enum_ref = enum_val
    if not func_3(enum_val):
        enum_ref = Enumeration.IDENT_4
    if enum_val == Enumeration.IDENT_1:
        enum_ref = Enumeration.IDENT_1
    elif enum_val == Enumeration.IDENT_2:
        enum_ref = Enumeration.IDENT_1 if state.int_glob > 100 else Enumeration.IDENT_4
    elif enum_val == Enumeration.IDENT_3:
        enum_ref = Enumeration.IDENT_2
    elif enum_val == Enumeration.IDENT_5:
        enum_ref = Enumeration.IDENT_3
    return enum_ref


def proc_7(int_1: int, int_2: int) -> int:
    """Return ``int_2`` plus ``int_1`` plus two."""
    int_loc = int_1 + 2
    return int_2 + int_loc


def proc_8(
    state: GlobalState,
    arr_1: list[int],
    arr_2: list[list[int]],
    int_1: int,
    int_2: int,
) -> None:
    """Update the two arrays around index ``int_1 + 5`` and reset ``int_glob``."""
    int_loc = int_1 + 5
    arr_1[int_loc] = int_2
    arr_1[int_loc + 1] = arr_1[int_loc]
    arr_1[int_loc + 30] = int_loc
    for int_index in (int_loc, int_loc + 1):
        arr_2[int_loc][int_index] = int_loc
    arr_2[int_loc][int_loc - 1] += 1
    arr_2[int_loc + 20][int_loc] = arr_1[int_loc]
    state.int_glob = 5


def func_1(state: GlobalState, ch_1: str, ch_2: str) -> Enumeration:
    """Compare two characters; on a match store ``ch_1`` in ``ch_1_glob``."""
    ch_1_loc = ch_1
    ch_2_loc = ch_1_loc
    if ch_2_loc != ch_2:
        return Enumeration.IDENT_1
    state.ch_1_glob = ch_1_loc
    return Enumeration.IDENT_2


def func_2(state: GlobalState, str_1: str, str_2: str) -> bool:
    """Compare two strings; True if ``str_1`` sorts after ``str_2``.

    Raises ValueError when the probed characters coincide, since the
    comparison loop could then never finish.
    """
    int_loc = 2
    ch_loc = "\0"
    while int_loc <= 2:
        if func_1(state, _char_at(str_1, int_loc), _char_at(str_2, int_loc + 1)) != Enumeration.IDENT_1:
            raise ValueError(
                f"characters {int_loc} and {int_loc + 1} of the strings match; "
                "the comparison would not terminate"
            )
        ch_loc = "A"
        int_loc += 1
    if "W" <= ch_loc < "Z":
        int_loc = 7
    if ch_loc == "R":
        return True
    if str_1 > str_2:
        int_loc += 7
        state.int_glob = int_loc
        return True
    return False


def func_3(enum_val: Enumeration) -> bool:
    """Return True if ``enum_val`` is IDENT_3."""
    enum_loc = enum_val
    return enum_loc == Enumeration.IDENT_3