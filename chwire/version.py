"""Library version information."""

MAJOR = 2
MINOR = 5
PATCH = 1
BUILD = 0


def version_code(major: int = MAJOR, minor: int = MINOR, patch: int = PATCH, build: int = BUILD) -> int:
    """Pack version components into one number, two decimal digits each."""
    return major * 100 * 100 * 100 + minor * 100 * 100 + patch * 100 + build


def version_string() -> str:
    """The version as ``major.minor.patch``."""
    return f"{MAJOR}.{MINOR}.{PATCH}"


VERSION = version_code()