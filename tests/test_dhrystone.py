import io

import pytest

from rvperf.dhry_types import Enumeration
from rvperf.dhrystone import (
    FIRST_STRING,
    SECOND_STRING,
    SOME_STRING,
    Dhrystone,
    format_report,
    main,
)
from rvperf.markers import START_TRACE_OPC, STOP_TRACE_OPC


def _fake_clock(*values):
    it = iter(values)
    return lambda: next(it)


def test_final_values_match_documented_expectations():
    result = Dhrystone().run(1)
    s = result.state
    assert s.int_glob == 5
    assert s.bool_glob is True
    assert s.ch_1_glob == "A"
    assert s.ch_2_glob == "B"
    assert s.arr_1_glob[8] == 7
    assert s.ptr_glob.discr == Enumeration.IDENT_1
    assert s.ptr_glob.enum_comp == Enumeration.IDENT_3
    assert s.ptr_glob.int_comp == 17
    assert s.ptr_glob.str_comp == SOME_STRING
    assert s.next_ptr_glob.discr == Enumeration.IDENT_1
    assert s.next_ptr_glob.enum_comp == Enumeration.IDENT_2
    assert s.next_ptr_glob.int_comp == 18
    assert s.next_ptr_glob.str_comp == SOME_STRING
    assert result.int_1_loc == 5
    assert result.int_2_loc == 13
    assert result.int_3_loc == 7
    assert result.enum_loc == Enumeration.IDENT_2
    assert result.str_1_loc == FIRST_STRING
    assert result.str_2_loc == SECOND_STRING


@pytest.mark.parametrize("runs", [1, 4, 25])
def test_arr_2_element_is_runs_plus_ten(runs):
    result = Dhrystone().run(runs)
    assert result.state.arr_2_glob[8][7] == runs + 10


def test_pointers_are_the_same():
    s = Dhrystone().run(3).state
    assert s.ptr_glob.ptr_comp is s.next_ptr_glob
    assert s.next_ptr_glob.ptr_comp is s.ptr_glob.ptr_comp


def test_results_do_not_depend_on_run_count():
    one = Dhrystone().run(1)
    many = Dhrystone().run(7)
    assert (one.int_1_loc, one.int_2_loc, one.int_3_loc) == (
        many.int_1_loc,
        many.int_2_loc,
        many.int_3_loc,
    )
    assert one.state.ptr_glob.int_comp == many.state.ptr_glob.int_comp


def test_trace_hook_sees_start_then_stop():
    seen = []
    Dhrystone(trace_hook=seen.append).run(2)
    assert seen == [START_TRACE_OPC, STOP_TRACE_OPC]


def test_timing_is_consistent():
    result = Dhrystone(clock=_fake_clock(1.0, 5.0)).run(8)
    assert result.user_time == 4.0
    assert result.microseconds * result.dhrystones_per_second == pytest.approx(1_000_000.0)


def test_time_too_small_has_no_rates():
    result = Dhrystone(clock=_fake_clock(0.0, 0.5)).run(2)
    assert result.time_too_small is True
    assert result.microseconds is None
    report = format_report(result)
    assert "Measured time too small to obtain meaningful results" in report
    assert "Dhrystones per Second" not in report


def test_report_with_rates():
    result = Dhrystone(clock=_fake_clock(0.0, 10.0)).run(5)
    report = format_report(result)
    assert "Microseconds for one run through Dhrystone:" in report
    assert "Measured time too small" not in report
    assert report.startswith("Execution ends\n")
    assert "Int_Glob:            5\n" in report


def test_main_with_argument(capsys):
    assert main(["3"]) == 0
    out = capsys.readouterr().out
    assert "Execution starts, 3 runs through Dhrystone" in out
    assert "Arr_2_Glob[8][7]:    13\n" in out


def test_main_reads_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Please give the number of runs through the benchmark: " in out
    assert "Execution starts, 2 runs through Dhrystone" in out


def test_main_rejects_non_integer():
    with pytest.raises(SystemExit):
        main(["many"])