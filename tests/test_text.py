import pytest

from nyc_boundaries.text import collation_key, kebab_case, make_slug


@pytest.mark.parametrize("name,borough,expected", [
    ("Rego Park", "queens", "rego-park-queens"),
    ("Belle Harbor", "queens", "belle-harbor-queens"),
    ("Roosevelt Island", "manhattan", "roosevelt-island-manhattan"),
    ("Fort Hamilton", "brooklyn", "fort-hamilton-brooklyn"),
    ("South Ozone Park", "queens", "south-ozone-park-queens"),
    ("Bay Terrace", "staten-island", "bay-terrace-staten-island"),
    ("Far Rockaway", "queens", "far-rockaway-queens"),
    ("St. George", "staten-island", "st-george-staten-island"),
    ("Long Island City", "queens", "long-island-city-queens"),
    ("Upper East Side", "manhattan", "upper-east-side-manhattan"),
    ("Co-op City", "bronx", "co-op-city-bronx"),
    ("Two Bridges", "manhattan", "two-bridges-manhattan"),
])
def test_make_slug_name_borough(name, borough, expected):
    assert make_slug(name, borough) == expected


def test_kebab_case_collapses_and_trims():
    assert kebab_case("  --Hell's   Kitchen--  ") == "hells-kitchen"
    assert kebab_case("A -- B") == "a-b"
    assert kebab_case("Café 123") == "caf-123"
    assert kebab_case(None) == ""


def test_collation_key_ignores_case_and_accents_first():
    names = ["bay ridge", "Bayside", "Bay Ridge", "Él Barrio", "East Harlem"]
    ordered = sorted(names, key=collation_key)
    assert ordered.index("Bay Ridge") < ordered.index("Bayside")
    assert ordered.index("bay ridge") < ordered.index("Bayside")
    assert ordered.index("East Harlem") < ordered.index("Él Barrio")
    assert collation_key(None) == ("", "")


def test_collation_key_lower_case_first_on_ties():
    assert sorted(["Bay Ridge", "bay ridge", "BAY RIDGE"], key=collation_key) == ["bay ridge", "Bay Ridge", "BAY RIDGE"]
