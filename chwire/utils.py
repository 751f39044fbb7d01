"""Helpers for configuration, version numbers and readable value formatting."""

from __future__ import annotations

import os
from fractions import Fraction
from typing import Any, Callable, Optional, Tuple, TypeVar, Union

from chwire.comparison import is_container

T = TypeVar("T")

_UINT64_MAX = (1 << 64) - 1

_PREFIXES = {
    Fraction(1, 1_000_000_000): "n",
    Fraction(1, 1_000_000): "u",
    Fraction(1, 1_000): "m",
    Fraction(1, 100): "c",
    Fraction(1, 10): "d",
    Fraction(1, 1): "",
}

_MINOR_PLACES = 4
_PATCH_PLACES = 4
_REVISION_PLACES = 8


def get_env_or_default(
    name: str,
    default: Optional[str] = None,
    convert: Callable[[str], T] = str,  # type: ignore[assignment]
) -> T:
    """Read an environment variable, falling back to ``default``, then convert it.

    Raises RuntimeError when the variable is unset and no default is given.
    """
    value = os.environ.get(name)
    if value is None:
        if default is None:
            raise RuntimeError(f"Environment var '{name}' is not set.")
        value = default
    return convert(value)


def version_number(major: int, minor: int, patch: int = 0, revision: int = 0) -> int:
    """Pack a server version into one comparable number."""
    return (
        major * 10 ** (_MINOR_PLACES + _PATCH_PLACES + _REVISION_PLACES)
        + minor * 10 ** (_PATCH_PLACES + _REVISION_PLACES)
        + patch * 10 ** _REVISION_PLACES
        + revision
    )


def uuid_to_string(uuid: Tuple[int, int]) -> str:
    """Format a UUID given as two unsigned 64-bit halves in canonical form."""
    first, second = uuid
    for half in (first, second):
        if not 0 <= half <= _UINT64_MAX:
            raise ValueError("Error while converting UUID to string")
    return (
        f"{first >> 32:08x}-{(first >> 16) & 0xFFFF:04x}-{first & 0xFFFF:04x}"
        f"-{second >> 48:04x}-{second & 0xFFFFFFFFFFFF:012x}"
    )


def _format_element(value: Any) -> str:
    if isinstance(value, (str, bytes, bytearray)):
        text = value if isinstance(value, str) else bytes(value).decode("utf-8", "replace")
        return f'"{text}"'
    if is_container(value):
        return format_container(value)
    return str(value)


def format_container(container: Any) -> str:
    """Render a container as ``[a, b, ...] (N items)``, quoting strings and nesting."""
    items = ", ".join(_format_element(item) for item in container)
    return f"[{items}] ({len(container)} items)"


def format_optional(value: Any) -> str:
    """Render a possibly missing value, ``NULL`` when it is None."""
    return "NULL" if value is None else str(value)


def format_pair(pair: Tuple[Any, Any]) -> str:
    """Render a two-element pair as ``{ first, second }``."""
    first, second = pair
    return f"{{ {first}, {second} }}"


def format_duration(count: Any, unit: Union[Fraction, int, float, str] = Fraction(1)) -> str:
    """Render a duration with an SI prefix for its unit given in seconds.

    Units other than seconds, deci-, centi-, milli-, micro- and nanoseconds
    get the prefix ``?``.
    """
    if isinstance(unit, float):
        ratio = Fraction(repr(unit))
    else:
        ratio = Fraction(unit)
    prefix = _PREFIXES.get(ratio, "?")
    return f"{count}{prefix}s"