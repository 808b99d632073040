"""Allocation wrapper used by the decoder to create instruction objects."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class InstPtrAllocator:
    """Create instruction objects through ``element_type`` and count them.

    Used as a context manager, it prints the number of objects created
    when the block ends.
    """

    def __init__(self, element_type: Callable[..., Any]) -> None:
        self.element_type = element_type
        self.num_allocated = 0

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        obj = self.element_type(*args, **kwargs)
        self.num_allocated += 1
        return obj

    def __str__(self) -> str:
        return f"Inst Allocator: {self.num_allocated} Inst objects allocated/created"

    def __enter__(self) -> InstPtrAllocator:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        print(self)