# rvperf

Pieces of a cycle-level RISC-V core performance model, plus the
Dhrystone 2.1 synthetic benchmark as a workload whose measured loop is
bracketed by trace marker opcodes.

## What is inside

- `rvperf.markers`: the start and stop trace marker opcodes
  (`START_TRACE_OPC`, `STOP_TRACE_OPC`), the checks `is_start_trace` and
  `is_stop_trace`, and an `is_one_of(value, *args)` helper.
- `rvperf.config`: `SimulationConfiguration`, a set of named parameters.
  `post_create()` adds a `workload` parameter (empty string) when it is
  missing.
- `rvperf.allocation`: `InstPtrAllocator`, a callable that creates objects
  through the given type and counts them in `num_allocated`. Used as a
  context manager it prints that count when the block ends.
- `rvperf.memory_access`: `MemoryAccessInfo` with the `MMUState`,
  `CacheState` and `ArchUnit` enums, describing one memory request.
  `is_cache_hit()` and `pairs()` (the values recorded for pipeline
  collection) are provided.
- `rvperf.load_store`: `LoadStoreInstInfo` with `IssuePriority` and
  `IssueState`. `win_arb(other)` is true when this entry has the higher
  priority (lower value) or `other` is None; entries order by
  instruction unique id.
- `rvperf.flush`: `FlushCause`, `FlushingCriteria`, `determine_inclusive`
  and `FlushManager`. The manager keeps the oldest pending flush and, on
  `forward_flush()`, calls its `lower_listeners` (for `MISFETCH`) or
  `upper_listeners` (for every other cause).
- `rvperf.tlb`: `SimpleTLB`, a set-associative TLB of `TLBEntry` items
  with tree pseudo-LRU replacement (`TreePLRU`). `lookup(addr)` returns
  the covering entry or None, `allocate(addr)` fills the LRU way, and
  `touch(entry)` records a hit in `hits`.
- `rvperf.dhry_types`, `rvperf.dhry_procs`, `rvperf.dhrystone`: the
  Dhrystone benchmark (`Enumeration`, `Record`, `GlobalState`, the
  benchmark procedures, `Dhrystone`, `DhrystoneResult`, `format_report`).

Instructions are not defined here: any object with the attributes a
module reads (for example `unique_id`, `mnemonic`, `status`) will do.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running Dhrystone

```
rvperf-dhrystone 100000
```

The number of runs may be given as an argument; without it the command
asks for it on standard input. It runs the benchmark and prints the final
values of the benchmark variables next to the values they should have,
followed by the timing figures. Runs that take less than two seconds of
process time report that the measured time was too small instead.

From Python:

```python
from rvperf.dhrystone import Dhrystone, format_report

result = Dhrystone().run(1000)
print(format_report(result))
```

`Dhrystone` takes an optional `clock` (default `time.process_time`) and
an optional `trace_hook`, which is called with `START_TRACE_OPC` before
the measured loop and `STOP_TRACE_OPC` after it.

## A flush in a few lines

```python
from rvperf.flush import FlushCause, FlushingCriteria, FlushManager

manager = FlushManager()
manager.upper_listeners.append(print)
manager.receive_flush(FlushingCriteria(FlushCause.MISPREDICTION, inst))
manager.forward_flush()
```

Here `inst` is any instruction object that has a `unique_id`.
`forward_flush()` raises `RuntimeError` when no flush is pending.

## What it does not do

There is no complete core model: no fetch, decode, rename, dispatch,
issue queues, execution pipes, reorder buffer or caches, no event
scheduler and no trace reader. The classes here are the pieces such a
model is built from, and they are driven by calling their methods
directly.