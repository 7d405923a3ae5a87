import pytest

from hdpath.errors import HighBitIsSetError
from hdpath.path_value import is_ok
from hdpath.path_value import PathValue


@pytest.mark.parametrize("value", (0, 1, 2, 3, 100, 1000, 10000, 0x80000000 - 1))
def test_ok_for_small_values(value):
    assert is_ok(value)


@pytest.mark.parametrize("value", (0x80000000, 0x80000001, 0xFFFFFFFF, -1))
def test_not_ok_for_large_values(value):
    assert not is_ok(value)


@pytest.mark.parametrize("value", (1.5, 44.0, "44", None))
def test_not_ok_for_non_int(value):
    assert not is_ok(value)


@pytest.mark.parametrize("value", (0x80000000, 0x80000001, 0xFFFFFFFF, 1.5, 0.0, "1"))
def test_high_bit_is_set(value):
    with pytest.raises(HighBitIsSetError):
        PathValue.normal(value)
    with pytest.raises(HighBitIsSetError):
        PathValue.hardened(value)


@pytest.mark.parametrize(
    "raw,expected",
    (
        (0, PathValue.normal(0)),
        (100, PathValue.normal(100)),
        (0xFFFFFF, PathValue.normal(0xFFFFFF)),
        (0x7FFFFFFF, PathValue.normal(0x7FFFFFFF)),
        (0x80000000, PathValue.hardened(0)),
        (0x80000001, PathValue.hardened(1)),
        (0x8000002C, PathValue.hardened(44)),
        (0xFFFFFFFF, PathValue.hardened(0x7FFFFFFF)),
    ),
)
def test_from_raw(raw, expected):
    assert PathValue.from_raw(raw) == expected
    assert expected.to_raw() == raw


@pytest.mark.parametrize("raw", (-1, 0x100000000, 44.0, "44"))
def test_from_raw_out_of_range(raw):
    with pytest.raises(ValueError):
        PathValue.from_raw(raw)


@pytest.mark.parametrize("number", (0, 1, 44, 160720, 0x7FFFFFFF))
def test_raw_round_trip(number):
    for value in (PathValue.normal(number), PathValue.hardened(number)):
        assert PathValue.from_raw(value.to_raw()) == value
        assert value.as_number() == number


def test_to_string():
    assert str(PathValue.normal(0)) == "0"
    assert str(PathValue.normal(11)) == "11"
    assert str(PathValue.hardened(0)) == "0'"
    assert str(PathValue.hardened(11)) == "11'"
    assert f"{PathValue.hardened(44)}" == "44'"


def test_equality_and_hash():
    assert PathValue.hardened(1) == PathValue.hardened(1)
    assert PathValue.hardened(1) != PathValue.normal(1)
    assert len({PathValue.normal(5), PathValue.normal(5), PathValue.hardened(5)}) == 2


def test_order():
    values = [
        PathValue.hardened(0),
        PathValue.normal(10),
        PathValue.hardened(44),
        PathValue.normal(0),
    ]
    assert sorted(values) == [
        PathValue.normal(0),
        PathValue.normal(10),
        PathValue.hardened(0),
        PathValue.hardened(44),
    ]
