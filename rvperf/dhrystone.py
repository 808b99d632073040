"""The Dhrystone benchmark driver, its result and its report."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from rvperf.dhry_procs import GlobalState, func_1, func_2, proc_6, proc_7, proc_8
from rvperf.dhry_types import MIC_SECS_PER_SECOND, Enumeration, Record
from rvperf.markers import START_TRACE_OPC, STOP_TRACE_OPC

TOO_SMALL_TIME = 2.0
"""Measurements shorter than this many seconds are not reported."""

SOME_STRING = "DHRYSTONE PROGRAM, SOME STRING"
FIRST_STRING = "DHRYSTONE PROGRAM, 1'ST STRING"
SECOND_STRING = "DHRYSTONE PROGRAM, 2'ND STRING"
THIRD_STRING = "DHRYSTONE PROGRAM, 3'RD STRING"


def _c_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass
class DhrystoneResult:
    """Final variable values and timing of one benchmark run."""

    number_of_runs: int
    state: GlobalState
    int_1_loc: int
    int_2_loc: int
    int_3_loc: int
    enum_loc: Enumeration
    str_1_loc: str
    str_2_loc: str
    user_time: float

    @property
    def time_too_small(self) -> bool:
        return self.user_time < TOO_SMALL_TIME

    @property
    def microseconds(self) -> float | None:
        """Microseconds for one run, or None when the time was too small."""
        if self.time_too_small:
            return None
        return self.user_time * MIC_SECS_PER_SECOND / self.number_of_runs

    @property
    def dhrystones_per_second(self) -> float | None:
        """Runs per second, or None when the time was too small."""
        if self.time_too_small:
            return None
        return self.number_of_runs / self.user_time


class Dhrystone:
    """Runs the benchmark loop.

    ``clock`` returns process time in seconds.  ``trace_hook``, if given,
    is called with the start and stop trace marker opcodes around the
    measured loop.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.process_time,
        trace_hook: Callable[[int], None] | None = None,
    ) -> None:
        self.clock = clock
        self.trace_hook = trace_hook
        self.state = GlobalState()

    def _proc_1(self, ptr_val: Record) -> None:
        state = self.state
        next_record = ptr_val.ptr_comp
        next_record.copy_from(state.ptr_glob)
        ptr_val.int_comp = 5
        next_record.int_comp = ptr_val.int_comp
        next_record.ptr_comp = ptr_val.ptr_comp
        next_record.ptr_comp = self._proc_3(next_record.ptr_comp)
        if next_record.discr == Enumeration.IDENT_1:
            next_record.int_comp = 6
            next_record.enum_comp = proc_6(state, ptr_val.enum_comp)
            next_record.ptr_comp = state.ptr_glob.ptr_comp
            next_record.int_comp = proc_7(next_record.int_comp, 10)
        else:
            ptr_val.copy_from(ptr_val.ptr_comp)

    def _proc_2(self, int_ref: int) -> int:
        if self.state.ch_1_glob != "A":
            raise RuntimeError("Ch_1_Glob must be 'A' for the loop to terminate")
        int_loc = int_ref + 10
        int_loc -= 1
        return int_loc - self.state.int_glob

    def _proc_3(self, ptr_ref: Record | None) -> Record | None:
        state = self.state
        if state.ptr_glob is not None:
            ptr_ref = state.ptr_glob.ptr_comp
        state.ptr_glob.int_comp = proc_7(10, state.int_glob)
        return ptr_ref

    def _proc_4(self) -> None:
        bool_loc = self.state.ch_1_glob == "A"
        self.state.bool_glob = bool_loc or self.state.bool_glob
        self.state.ch_2_glob = "B"

    def _proc_5(self) -> None:
        self.state.ch_1_glob = "A"
        self.state.bool_glob = False

    def _trace(self, opcode: int) -> None:
        if self.trace_hook is not None:
            self.trace_hook(opcode)

    def run(self, number_of_runs: int) -> DhrystoneResult:
        """Initialise the globals, run the loop ``number_of_runs`` times."""
        state = self.state = GlobalState()
        state.next_ptr_glob = Record()
        state.ptr_glob = Record(
            ptr_comp=state.next_ptr_glob,
            discr=Enumeration.IDENT_1,
            enum_comp=Enumeration.IDENT_3,
            int_comp=40,
            str_comp=SOME_STRING,
        )
        str_1_loc = FIRST_STRING
        str_2_loc = ""
        state.arr_2_glob[8][7] = 10
        int_1_loc = int_2_loc = int_3_loc = 0
        enum_loc = Enumeration.IDENT_1

        begin_time = self.clock()
        self._trace(START_TRACE_OPC)
        for run_index in range(1, number_of_runs + 1):
            self._proc_5()
            self._proc_4()
            int_1_loc = 2
            int_2_loc = 3
            str_2_loc = SECOND_STRING
            enum_loc = Enumeration.IDENT_2
            state.bool_glob = not func_2(state, str_1_loc, str_2_loc)
            while int_1_loc < int_2_loc:
                int_3_loc = 5 * int_1_loc - int_2_loc
                int_3_loc = proc_7(int_1_loc, int_2_loc)
                int_1_loc += 1
            proc_8(state, state.arr_1_glob, state.arr_2_glob, int_1_loc, int_3_loc)
            self._proc_1(state.ptr_glob)
            for code in range(ord("A"), ord(state.ch_2_glob) + 1):
                if enum_loc == func_1(state, chr(code), "C"):
                    enum_loc = proc_6(state, Enumeration.IDENT_1)
                    str_2_loc = THIRD_STRING
                    int_2_loc = run_index
                    state.int_glob = run_index
            int_2_loc = int_2_loc * int_1_loc
            int_1_loc = _c_div(int_2_loc, int_3_loc)
            int_2_loc = 7 * (int_2_loc - int_3_loc) - int_1_loc
            int_1_loc = self._proc_2(int_1_loc)
        self._trace(STOP_TRACE_OPC)
        end_time = self.clock()

        return DhrystoneResult(
            number_of_runs=number_of_runs,
            state=state,
            int_1_loc=int_1_loc,
            int_2_loc=int_2_loc,
            int_3_loc=int_3_loc,
            enum_loc=enum_loc,
            str_1_loc=str_1_loc,
            str_2_loc=str_2_loc,
            user_time=end_time - begin_time,
        )


def format_report(result: DhrystoneResult) -> str:
    """Return the end-of-run report listing final values and timing."""
    s = result.state
    ptr, nxt = s.ptr_glob, s.next_ptr_glob
    lines = [
        "Execution ends",
        "",
        "Final values of the variables used in the benchmark:",
        "",
        f"Int_Glob:            {s.int_glob}",
        "        should be:   5",
        f"Bool_Glob:           {int(s.bool_glob)}",
        "        should be:   1",
        f"Ch_1_Glob:           {s.ch_1_glob}",
        "        should be:   A",
        f"Ch_2_Glob:           {s.ch_2_glob}",
        "        should be:   B",
        f"Arr_1_Glob[8]:       {s.arr_1_glob[8]}",
        "        should be:   7",
        f"Arr_2_Glob[8][7]:    {s.arr_2_glob[8][7]}",
        "        should be:   Number_Of_Runs + 10",
        "Ptr_Glob->",
        f"  Ptr_Comp:          {id(ptr.ptr_comp)}",
        "        should be:   (implementation-dependent)",
        f"  Discr:             {int(ptr.discr)}",
        "        should be:   0",
        f"  Enum_Comp:         {int(ptr.enum_comp)}",
        "        should be:   2",
        f"  Int_Comp:          {ptr.int_comp}",
        "        should be:   17",
        f"  Str_Comp:          {ptr.str_comp}",
        f"        should be:   {SOME_STRING}",
        "Next_Ptr_Glob->",
        f"  Ptr_Comp:          {id(nxt.ptr_comp)}",
        "        should be:   (implementation-dependent), same as above",
        f"  Discr:             {int(nxt.discr)}",
        "        should be:   0",
        f"  Enum_Comp:         {int(nxt.enum_comp)}",
        "        should be:   1",
        f"  Int_Comp:          {nxt.int_comp}",
        "        should be:   18",
        f"  Str_Comp:          {nxt.str_comp}",
        f"        should be:   {SOME_STRING}",
        f"Int_1_Loc:           {result.int_1_loc}",
        "        should be:   5",
        f"Int_2_Loc:           {result.int_2_loc}",
        "        should be:   13",
        f"Int_3_Loc:           {result.int_3_loc}",
        "        should be:   7",
        f"Enum_Loc:            {int(result.enum_loc)}",
        "        should be:   1",
        f"Str_1_Loc:           {result.str_1_loc}",
        f"        should be:   {FIRST_STRING}",
        f"Str_2_Loc:           {result.str_2_loc}",
        f"        should be:   {SECOND_STRING}",
        "",
    ]
    if result.time_too_small:
        lines += [
            "Measured time too small to obtain meaningful results",
            "Please increase number of runs",
            "",
        ]
    else:
        lines += [
            f"Microseconds for one run through Dhrystone: {result.microseconds:6.1f} ",
            f"Dhrystones per Second:                      {result.dhrystones_per_second:6.1f} ",
            "",
        ]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark; the run count comes from ``argv`` or standard input."""
    parser = argparse.ArgumentParser(prog="dhrystone", description="Dhrystone benchmark")
    parser.add_argument("runs", type=int, nargs="?", help="number of runs through the benchmark")
    args = parser.parse_args(argv)

    print()
    print("Dhrystone Benchmark, Version 2.1")
    print()
    runs = args.runs
    if runs is None:
        print("Please give the number of runs through the benchmark: ", end="", flush=True)
        line = sys.stdin.readline()
        try:
            runs = int(line.strip())
        except ValueError:
            parser.error(f"invalid number of runs: {line.strip()!r}")
        print()
    print(f"Execution starts, {runs} runs through Dhrystone")

    result = Dhrystone().run(runs)
    sys.stdout.write(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())