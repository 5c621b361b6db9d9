"""Tests for option validation, parsing and the ResizeOptions record."""

import math

import pytest

from resizer.options import (
    DEFAULT_QUALITY,
    Algorithm,
    Fit,
    ResizeOptions,
    parse_resize_options,
    validate_options,
)

# ============================================================================
# validate_options
# ============================================================================


def test_empty_options_are_valid():
    assert validate_options({}) == []


def test_full_valid_options():
    raw = {
        "width": 400,
        "height": 300,
        "scale": 1.5,
        "aspect_ratio": 16 / 9,
        "fit": "contain",
        "algorithm": "bicubic",
        "quality": 0.5,
    }
    assert validate_options(raw) == []


def test_negative_width():
    errors = validate_options({"width": -100})
    assert "width must be a positive number" in errors


@pytest.mark.parametrize("field", ["width", "height", "scale", "aspect_ratio"])
@pytest.mark.parametrize("value", [0, -1, "400", math.nan, math.inf, True])
def test_positive_number_fields(field, value):
    assert validate_options({field: value}) == [f"{field} must be a positive number"]


def test_aspect_ratio_alias():
    assert validate_options({"aspectRatio": -2}) == ["aspect_ratio must be a positive number"]
    assert validate_options({"aspectRatio": 2}) == []


def test_width_must_be_whole():
    assert validate_options({"width": 10.5}) == ["width must be a whole number of pixels"]
    assert validate_options({"height": 10.0}) == []


def test_unknown_algorithm():
    errors = validate_options({"algorithm": "unknown"})
    assert errors == ["algorithm must be one of: nearest, bilinear, bicubic, lanczos"]


def test_unknown_fit():
    assert validate_options({"fit": "stretch"}) == ["fit must be one of: cover, contain, fill"]


@pytest.mark.parametrize("quality", [1.5, -0.1, "high", math.nan])
def test_quality_out_of_range(quality):
    assert validate_options({"quality": quality}) == ["quality must be a number between 0 and 1"]


@pytest.mark.parametrize("quality", [0, 0.0, 0.85, 1])
def test_quality_bounds_inclusive(quality):
    assert validate_options({"quality": quality}) == []


def test_all_rules_reported_in_order():
    raw = {
        "quality": 2,
        "algorithm": "magic",
        "fit": "stretch",
        "aspect_ratio": 0,
        "scale": -1,
        "height": "tall",
        "width": -5,
    }
    assert validate_options(raw) == [
        "width must be a positive number",
        "height must be a positive number",
        "scale must be a positive number",
        "aspect_ratio must be a positive number",
        "fit must be one of: cover, contain, fill",
        "algorithm must be one of: nearest, bilinear, bicubic, lanczos",
        "quality must be a number between 0 and 1",
    ]


def test_none_counts_as_absent():
    assert validate_options({"width": None, "fit": None, "quality": None}) == []


def test_enum_members_accepted():
    assert validate_options({"fit": Fit.FILL, "algorithm": Algorithm.NEAREST}) == []


# ============================================================================
# ResizeOptions
# ============================================================================


def test_defaults():
    opts = ResizeOptions.from_mapping({})

    assert opts.width is None
    assert opts.height is None
    assert opts.scale is None
    assert opts.aspect_ratio is None
    assert opts.fit is Fit.COVER
    assert opts.algorithm is Algorithm.LANCZOS
    assert opts.quality == DEFAULT_QUALITY == 0.85


def test_from_mapping_coerces_types():
    opts = ResizeOptions.from_mapping(
        {"width": 400.0, "aspectRatio": 2, "fit": "fill", "algorithm": "nearest", "quality": 1}
    )

    assert opts.width == 400
    assert isinstance(opts.width, int)
    assert opts.aspect_ratio == 2.0
    assert opts.fit is Fit.FILL
    assert opts.algorithm is Algorithm.NEAREST
    assert opts.quality == 1.0


def test_to_mapping_round_trips_through_validation():
    opts = ResizeOptions(width=10, scale=2.0, fit=Fit.CONTAIN)
    raw = opts.to_mapping()

    assert validate_options(raw) == []
    assert ResizeOptions.from_mapping(raw) == opts


# ============================================================================
# parse_resize_options
# ============================================================================


def test_parse_query_style_params():
    raw = parse_resize_options(
        {
            "width": "400",
            "height": " 300 ",
            "scale": "2.5",
            "aspectRatio": "1.5",
            "fit": "contain",
            "algorithm": "bilinear",
            "quality": "0.5",
        }
    )
    assert raw == {
        "width": 400,
        "height": 300,
        "scale": 2.5,
        "aspect_ratio": 1.5,
        "fit": "contain",
        "algorithm": "bilinear",
        "quality": 0.5,
    }


@pytest.mark.parametrize("text", ["16/9", "16:9"])
def test_parse_ratio_forms(text):
    assert parse_resize_options({"aspect_ratio": text})["aspect_ratio"] == pytest.approx(16 / 9)


def test_parse_skips_empty_and_unknown_keys():
    assert parse_resize_options({"width": "", "url": "http://example.com/a.png"}) == {}


def test_parse_keeps_garbage_for_validator():
    raw = parse_resize_options({"width": "abc", "aspect_ratio": "1/0"})

    assert raw == {"width": "abc", "aspect_ratio": "1/0"}
    assert validate_options(raw) == [
        "width must be a positive number",
        "aspect_ratio must be a positive number",
    ]


def test_parse_passes_non_strings_through():
    assert parse_resize_options({"width": 12, "scale": None}) == {"width": 12}
