import pytest

from coords import format_coordinate, parse_coordinate


@pytest.mark.parametrize("raw,expected", [("40.0", 40.0), ("-75", -75.0), ("0.000001", 1e-06), (" 12.5 ", 12.5)])
def test_parse_coordinate(raw, expected):
    assert parse_coordinate(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "40,5", "nan", "-inf", "Infinity", "1_0", "0x1A", "4\u00a00"])
def test_parse_coordinate_rejects(raw):
    with pytest.raises(ValueError):
        parse_coordinate(raw)


@pytest.mark.parametrize("value,expected", [(40.0, "40"), (-75.0, "-75"), (40.5, "40.5"), (-0.1278, "-0.1278"), (1e-05, "0.00001"), (-5e-05, "-0.00005"), (-0.0, "0"), (1e+20, "100000000000000000000")])
def test_format_coordinate(value, expected):
    assert format_coordinate(value) == expected


@pytest.mark.parametrize("raw", ["0.00001", "-0.00005", "40.7128", "-74.006"])
def test_parse_then_format_keeps_fixed_notation(raw):
    assert format_coordinate(parse_coordinate(raw)) == raw
