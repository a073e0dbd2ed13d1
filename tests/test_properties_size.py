# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import pytest

from dashview_lib.core.error import DVError
from dashview_lib.properties.size import Size


def test_invalid_unit_raises():
    with pytest.raises(DVError):
        Size(5, "xb")


def test_negative_value_raises():
    with pytest.raises(DVError):
        Size(-5, "kb")


def test_init_without_unit():
    assert Size(512) == Size(512, "b")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10kb", Size(10, "kb")),
        ("10 kb", Size(10, "kb")),
        ("10k", Size(10, "kb")),
        ("10K", Size(10, "kb")),
        ("2048KB", Size(2, "mb")),
        ("102400kb", Size(100, "mb")),
        ("5tb", Size(5, "tb")),
        ("1pb", Size(1, "pb")),
        ("0 b", Size(0, "b")),
        ("3b", Size(3, "b")),
        ("  7 GB  ", Size(7, "gb")),
    ],
)
def test_from_string_valid(text, expected):
    assert Size.fromString(text) == expected


@pytest.mark.parametrize("text", ["nonsense", "10", "kb", "1.5gb", "10xb", "-4kb", ""])
def test_from_string_invalid(text):
    with pytest.raises(DVError):
        Size.fromString(text)


@pytest.mark.parametrize(
    "value, unit, expected_value",
    [
        (0, "b", 0),
        (5, "b", 5),
        (1, "kb", 1024),
        (1536, "kb", 1572864),
        (1, "mb", 1048576),
        (6, "gb", 6442450944),
        (2, "tb", 2199023255552),
        (1, "pb", 1125899906842624),
    ],
)
def test_init_conversions(value, unit, expected_value):
    assert Size(value, unit).value == expected_value


@pytest.mark.parametrize(
    "value, expected_string",
    [
        (0, "0b"),
        (1, "1b"),
        (128, "128b"),
        (1024, "1kb"),
        (1536, "1536b"),
        (10240, "10kb"),
        (104857600, "100mb"),
        (1048576, "1mb"),
        (1126 * 1024, "1mb"),
        (1139 * 1024, "1139kb"),
        (337920 * 1024, "330mb"),
        (1073741824, "1gb"),
        (1200000 * 1024, "1172mb"),
        (1099511627776, "1tb"),
    ],
)
def test_str_conversions(value, expected_string):
    assert str(Size(value)) == expected_string
