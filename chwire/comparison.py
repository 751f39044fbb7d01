"""Deep comparison of values and nested containers, reporting where they differ."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sized
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of a comparison with an explanation of any mismatch."""

    success: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.success

    def _with(self, extra: str) -> ComparisonResult:
        return ComparisonResult(self.success, self.message + extra)


def _is_string(value: Any) -> bool:
    return isinstance(value, (str, bytes, bytearray, memoryview))


def is_container(value: Any) -> bool:
    """True for anything that has a size and can be iterated over."""
    return isinstance(value, Sized) and isinstance(value, Iterable)


def _format_element(value: Any) -> str:
    if _is_string(value):
        return f'"{value}"'
    if is_container(value):
        return _format_container(value)
    return str(value)


def _format_container(container: Any) -> str:
    items = ", ".join(_format_element(item) for item in container)
    return f"[{items}] ({len(container)} items)"


def compare_containers_recursive(left: Any, right: Any) -> ComparisonResult:
    """Compare two containers element by element, descending into nested ones."""
    if len(left) != len(right):
        return ComparisonResult(
            False,
            f"\nMismatching containers size, expected: {len(left)} actual: {len(right)}",
        )
    for position, (l_item, r_item) in enumerate(zip(left, right), start=1):
        result = compare_recursive(l_item, r_item)
        if not result:
            return result._with(f"\n\nMismatch at pos: {position}")
    return ComparisonResult(True)


def compare_recursive(left: Any, right: Any) -> ComparisonResult:
    """Compare two values, deep-comparing containers and treating NaN as equal to NaN."""
    if (
        not _is_string(left)
        and not _is_string(right)
        and is_container(left)
        and is_container(right)
    ):
        result = compare_containers_recursive(left, right)
        if result:
            return result
        return result._with(
            f"\nExpected container: {_format_container(left)}"
            f"\nActual container  : {_format_container(right)}"
        )

    if left == right:
        return ComparisonResult(True)

    if (
        isinstance(left, float)
        and isinstance(right, float)
        and math.isnan(left)
        and math.isnan(right)
    ):
        return ComparisonResult(True)

    return ComparisonResult(False, f"\nExpected value: {left}\nActual value  : {right}")