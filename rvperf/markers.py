"""Trace start/stop marker opcodes and small comparison helpers."""

START_TRACE_OPC = 0x00004033
"""32-bit opcode of ``xor x0, x0, x0``, which marks the start of a trace region."""

STOP_TRACE_OPC = 0x0010C033
"""32-bit opcode of ``xor x0, x1, x1``, which marks the end of a trace region."""


def is_start_trace(opcode: int) -> bool:
    """Return True if ``opcode`` is the start-of-trace marker."""
    return opcode == START_TRACE_OPC


def is_stop_trace(opcode: int) -> bool:
    """Return True if ``opcode`` is the stop-of-trace marker."""
    return opcode == STOP_TRACE_OPC


def is_one_of(value, *args) -> bool:
    """Return True if ``value`` compares equal to any of ``args``."""
    return any(value == candidate for candidate in args)