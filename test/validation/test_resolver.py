#!/usr/bin/env python3
"""Test the config resolver: data parsing, defaults and bounds."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
from pydantic import ValidationError as ModelValidationError
from plotworker.exceptions import ValidationError
from plotworker.validation import ConfigResolver, parse_leading_int, parse_number


@pytest.fixture
def resolver(logger):
    return ConfigResolver(logger=logger)


# ============================================================================
# Data series
# ============================================================================


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("10,5", [10, 5]),
        ("1.5,-2,0", [1.5, -2, 0]),
        (" 3 , 4 ", [3, 4]),
        ("1e3,2.5e-1", [1000, 0.25]),
        ("42", [42]),
    ],
)
def test_data_parsed_in_order(resolver, raw, expected):
    """Valid comma-separated numbers come back as the parsed numbers in order"""
    assert resolver.resolve({"data": raw}).series.values == expected


def test_integral_values_stay_integers(resolver):
    """Whole numbers are kept as ints so the chart description shows 10, not 10.0"""
    values = resolver.resolve({"data": "10,5.0,2.5"}).series.values
    assert [type(v) for v in values] == [int, int, float]


def test_missing_data_uses_default_series(resolver):
    chart = resolver.resolve({})
    assert chart.series.values == [1, 2, 3]
    assert chart.series.labels == ["Item 1", "Item 2", "Item 3"]


@pytest.mark.parametrize(
    "raw",
    [
        "abc",
        "1,two,3",
        "1,,2",
        "",
        "inf",
        "1,nan",
        "NaN",
        "1e400",
        "1_000",
        "0x10",
        "\u0661\u0662",
        "1,\uff13",
    ],
)
def test_non_numeric_token_fails(resolver, raw):
    """Any token that is not a finite number fails the whole request"""
    with pytest.raises(ValidationError) as exc_info:
        resolver.resolve({"data": raw})
    assert exc_info.value.message == "Invalid data - must be numbers"


def test_bad_data_fails_even_with_valid_fields(resolver):
    with pytest.raises(ValidationError):
        resolver.resolve({"data": "1,x", "type": "pie", "width": "400"})


# ============================================================================
# Labels and colors
# ============================================================================


def test_labels_generated_per_value(resolver):
    labels = resolver.resolve({"data": "4,5,6,7"}).series.labels
    assert labels == ["Item 1", "Item 2", "Item 3", "Item 4"]


def test_labels_split_without_trimming(resolver):
    labels = resolver.resolve({"data": "1,2", "names": "Withdraw, Deposit"}).series.labels
    assert labels == ["Withdraw", " Deposit"]


def test_labels_kept_at_full_length(resolver):
    """Extra names are stored; truncation happens when the document is built"""
    series = resolver.resolve({"data": "1,2", "names": "a,b,c,d"}).series
    assert series.labels == ["a", "b", "c", "d"]
    assert series.visible_labels() == ["a", "b"]


def test_colors_trimmed(resolver):
    colors = resolver.resolve({"colors": "#ff0000 , #00ff00"}).series.colors
    assert colors == ["#ff0000", "#00ff00"]


def test_default_palette(resolver):
    colors = resolver.resolve({"data": "1,2,3,4,5"}).series.colors
    assert colors == ["#36a2eb", "#ff6384", "#4bc0c0"]


def test_colors_not_length_checked(resolver):
    """Color count never invalidates the request"""
    chart = resolver.resolve({"data": "1,2,3", "colors": "#111111"})
    assert chart.series.colors == ["#111111"]


# ============================================================================
# Scalar config fields
# ============================================================================


def test_defaults(resolver):
    config = resolver.resolve({}).config
    assert config.type == "bar"
    assert config.title == "My Chart"
    assert config.width == 800
    assert config.height == 600
    assert config.bg_color == "#ffffff"
    assert config.show_grid is True
    assert config.xlabel == "X Axis"
    assert config.ylabel == "Y Axis"


@pytest.mark.parametrize("chart_type", ["line", "bar", "scatter", "pie"])
def test_known_chart_types(resolver, chart_type):
    assert resolver.resolve({"type": chart_type}).config.type == chart_type


@pytest.mark.parametrize("chart_type", ["Pie", "donut", "", "bar "])
def test_unknown_chart_type_defaults_to_bar(resolver, chart_type):
    assert resolver.resolve({"type": chart_type}).config.type == "bar"


def test_title_truncated_to_50(resolver):
    assert resolver.resolve({"title": "t" * 80}).config.title == "t" * 50


def test_empty_title_uses_default(resolver):
    assert resolver.resolve({"title": ""}).config.title == "My Chart"


def test_axis_labels_truncated_to_30(resolver):
    config = resolver.resolve({"xlabel": "x" * 40, "ylabel": "Revenue"}).config
    assert config.xlabel == "x" * 30
    assert config.ylabel == "Revenue"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("640", 640),
        ("640px", 640),
        ("3.7", 3),
        (" 1024", 1024),
        ("2000", 2000),
        ("2001", 2000),
        ("999999999999", 2000),
        ("-5", 1),
        ("0", 800),
        ("wide", 800),
        ("", 800),
    ],
)
def test_width_bounds(resolver, raw, expected):
    assert resolver.resolve({"width": raw}).config.width == expected


@pytest.mark.parametrize("raw", ["300", "abc", "5000", "-1", "0"])
def test_height_always_within_bounds(resolver, raw):
    height = resolver.resolve({"height": raw}).config.height
    assert 1 <= height <= 2000


def test_height_falls_back_to_default(resolver):
    assert resolver.resolve({"height": "tall"}).config.height == 600


@pytest.mark.parametrize("raw", ["#ABCDEF", "#abcdef", "#00fF00"])
def test_valid_bgcolor_kept(resolver, raw):
    assert resolver.resolve({"bgcolor": raw}).config.bg_color == raw


@pytest.mark.parametrize(
    "raw", ["red", "#fff", "#GGGGGG", "ffffff", "#ffffff00", "#ffffff\n", " #ffffff", ""]
)
def test_invalid_bgcolor_defaults(resolver, raw):
    assert resolver.resolve({"bgcolor": raw}).config.bg_color == "#ffffff"


@pytest.mark.parametrize(
    "raw,expected",
    [("false", False), ("true", True), ("False", True), ("0", True), ("", True), (None, True)],
)
def test_grid_only_disabled_by_literal_false(resolver, raw, expected):
    params = {} if raw is None else {"grid": raw}
    assert resolver.resolve(params).config.show_grid is expected


def test_malformed_fields_do_not_affect_each_other(resolver):
    config = resolver.resolve(
        {"type": "bogus", "width": "abc", "height": "300", "bgcolor": "#123456"}
    ).config
    assert config.type == "bar"
    assert config.width == 800
    assert config.height == 300
    assert config.bg_color == "#123456"


def test_resolved_config_is_immutable(resolver):
    config = resolver.resolve({}).config
    with pytest.raises(ModelValidationError):
        config.width = 10


# ============================================================================
# Parsing helpers
# ============================================================================


def test_parse_number():
    assert parse_number("7") == 7
    assert parse_number("-0.5") == -0.5
    assert parse_number("abc") is None
    assert parse_number("  ") is None


def test_parse_leading_int():
    assert parse_leading_int("12abc") == 12
    assert parse_leading_int("+7") == 7
    assert parse_leading_int("abc12") is None
    assert parse_leading_int(None) is None
