from chwire import version
from chwire.version import VERSION, version_code, version_string


def test_version_constant_matches_components():
    assert VERSION == version_code(version.MAJOR, version.MINOR, version.PATCH, version.BUILD)


def test_default_arguments_give_current_version():
    assert version_code() == VERSION


def test_version_string_components():
    parts = version_string().split(".")
    assert [int(p) for p in parts] == [version.MAJOR, version.MINOR, version.PATCH]


def test_version_string_value():
    assert version_string() == "2.5.1"


def test_build_occupies_lowest_digits():
    assert version_code(0, 0, 0, 7) == 7


def test_ordering_follows_components():
    assert version_code(1, 0, 0, 0) > version_code(0, 99, 99, 99)
    assert version_code(2, 5, 2, 0) > version_code(2, 5, 1, 99)
    assert version_code(2, 6, 0, 0) > version_code(2, 5, 99, 99)


def test_components_recoverable():
    code = version_code(3, 14, 15, 9)
    assert code // 1_000_000 == 3
    assert code // 10_000 % 100 == 14
    assert code // 100 % 100 == 15
    assert code % 100 == 9