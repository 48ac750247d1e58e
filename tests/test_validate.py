import pytest

from nyc_boundaries.errors import SchemaViolation
from nyc_boundaries.formatting import dumps_compact_lines
from nyc_boundaries.validate import (
    assert_valid_boundaries,
    check_borough_coverage,
    check_properties,
    check_single_line_features,
    check_structure,
    check_uniqueness,
    validate_boundaries,
)


def test_clean_boundaries_pass(boundaries):
    text = dumps_compact_lines(boundaries)
    assert validate_boundaries(boundaries, text=text) == []
    assert_valid_boundaries(boundaries, text=text)


def test_structure_rules(boundaries):
    boundaries["metadata"]["features_count"] = 4
    boundaries["features"][0]["type"] = "feature"
    boundaries["features"][1]["geometry"] = None
    boundaries["features"][2]["geometry"] = {"type": "Polygon"}
    errors = check_structure(boundaries)
    assert len(errors) == 4
    assert "features_count is 4" in errors[0]
    assert check_structure({"type": "FeatureCollection", "features": []}) == ["features should be a non-empty list"]


def test_non_numeric_features_count(boundaries):
    boundaries["metadata"]["features_count"] = "5"
    assert check_structure(boundaries) == ["metadata.features_count should be a number"]


def test_property_whitelist_and_required(boundaries):
    props = boundaries["features"][0]["properties"]
    props["Name"] = props.pop("name")
    props["population"] = 10
    errors = check_properties(boundaries["features"])
    assert any("missing properties: name" in e for e in errors)
    assert any("unexpected properties: Name, population" in e for e in errors)


@pytest.mark.parametrize("color", [-1, 5, 2.0, "2", True, None])
def test_color_must_be_int_in_range(boundaries, color):
    boundaries["features"][0]["properties"]["color"] = color
    errors = check_properties(boundaries["features"])
    assert len(errors) == 1
    assert "color" in errors[0]


def test_name_and_borough_values(boundaries):
    boundaries["features"][0]["properties"]["name"] = ""
    boundaries["features"][1]["properties"]["borough"] = "jersey-city"
    errors = check_properties(boundaries["features"])
    assert "Feature 1 name should be a non-empty string" in errors
    assert any("'jersey-city' is not a NYC borough" in e for e in errors)


def test_slug_must_match_name_borough(boundaries):
    boundaries["features"][2]["properties"]["slug"] = "astoria"
    errors = check_properties(boundaries["features"])
    assert errors == ['Feature "Astoria" in "queens" should have slug "astoria-queens", got \'astoria\'']


def test_duplicate_slugs_and_names(boundaries):
    dup = dict(boundaries["features"][2])
    boundaries["features"].append(dup)
    errors = check_uniqueness(boundaries["features"])
    assert "slug 'astoria-queens' is not unique" in errors
    assert "name 'Astoria' appears more than once in queens" in errors


def test_same_name_in_two_boroughs_is_fine(boundaries):
    other = dict(boundaries["features"][2])
    other["properties"] = {"name": "Astoria", "borough": "bronx", "color": 1, "slug": "astoria-bronx"}
    boundaries["features"].append(other)
    assert check_uniqueness(boundaries["features"]) == []


def test_all_boroughs_must_be_present(boundaries):
    del boundaries["features"][3]
    assert check_borough_coverage(boundaries["features"]) == ["no neighborhoods in bronx"]


def test_multiline_feature_detected(boundaries):
    text = dumps_compact_lines(boundaries)
    broken = text.replace('"geometry":{', '"geometry":\n{', 1)
    errors = check_single_line_features(broken, len(boundaries["features"]))
    assert len(errors) == 1
    assert "not complete on one line" in errors[0]
    assert check_single_line_features(text, 3) == ["found 5 feature lines, expected 3"]


def test_min_features(boundaries):
    assert validate_boundaries(boundaries, min_features=250) == ["expected more than 250 features, got 5"]


def test_assert_valid_raises_schema_violation(boundaries):
    boundaries["features"][0]["properties"]["color"] = 9
    with pytest.raises(SchemaViolation) as exc:
        assert_valid_boundaries(boundaries)
    assert len(exc.value.violations) == 1
    assert "1 schema violation(s)" in str(exc.value)
