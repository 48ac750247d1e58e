from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

from .errors import SchemaViolation
from .text import BOROUGHS, make_slug


REQUIRED_PROPERTIES = ("name", "borough", "color")
ALLOWED_PROPERTIES = frozenset(REQUIRED_PROPERTIES + ("wikipedia_url", "slug"))
COLOR_RANGE = (0, 4)


def _label(i: int) -> str:
    return f"Feature {i + 1}"


def _is_nonempty_str(v: Any) -> bool:
    return isinstance(v, str) and len(v) > 0


def check_structure(collection: Dict[str, Any]) -> List[str]:
    errors: List[str] = []
    if collection.get("type") != "FeatureCollection":
        errors.append(f"type should be 'FeatureCollection', got {collection.get('type')!r}")
    features = collection.get("features")
    if not isinstance(features, list) or not features:
        errors.append("features should be a non-empty list")
        return errors
    metadata = collection.get("metadata")
    if metadata is not None:
        count = metadata.get("features_count") if isinstance(metadata, dict) else None
        if isinstance(count, bool) or not isinstance(count, (int, float)):
            errors.append("metadata.features_count should be a number")
        elif count != len(features):
            errors.append(f"metadata.features_count is {count} but there are {len(features)} features")
    for i, f in enumerate(features):
        if not isinstance(f, dict) or f.get("type") != "Feature":
            errors.append(f"{_label(i)} should have type 'Feature'")
            continue
        if not isinstance(f.get("properties"), dict):
            errors.append(f"{_label(i)} should have properties")
        geom = f.get("geometry")
        if not isinstance(geom, dict):
            errors.append(f"{_label(i)} should have geometry")
        elif geom.get("type") is None or geom.get("coordinates") is None:
            errors.append(f"{_label(i)} should have geometry type and coordinates")
    return errors


def check_properties(features: List[Dict[str, Any]]) -> List[str]:
    """Whitelist, required keys, value types and slug derivation per feature."""
    errors: List[str] = []
    lo, hi = COLOR_RANGE
    for i, f in enumerate(features):
        props = f.get("properties")
        if not isinstance(props, dict):
            continue
        missing = [k for k in REQUIRED_PROPERTIES if k not in props]
        if missing:
            errors.append(f"{_label(i)} is missing properties: {', '.join(missing)}")
        unexpected = sorted(set(props) - ALLOWED_PROPERTIES)
        if unexpected:
            errors.append(f"{_label(i)} has unexpected properties: {', '.join(unexpected)}")

        name, borough = props.get("name"), props.get("borough")
        if "name" in props and not _is_nonempty_str(name):
            errors.append(f"{_label(i)} name should be a non-empty string")
        if "borough" in props:
            if not _is_nonempty_str(borough):
                errors.append(f"{_label(i)} borough should be a non-empty string")
            elif borough not in BOROUGHS:
                errors.append(f"{_label(i)} borough {borough!r} is not a NYC borough")

        if "color" in props:
            color = props["color"]
            if isinstance(color, bool) or not isinstance(color, int):
                errors.append(f"{_label(i)} color should be an integer, got {color!r}")
            elif not lo <= color <= hi:
                errors.append(f"{_label(i)} color should be between {lo}-{hi}, got {color}")

        if _is_nonempty_str(name) and _is_nonempty_str(borough):
            expected = make_slug(name, borough)
            if props.get("slug") != expected:
                errors.append(f'Feature "{name}" in "{borough}" should have slug "{expected}", got {props.get("slug")!r}')
    return errors


def _properties_frame(features: List[Dict[str, Any]]) -> pd.DataFrame:
    records = [
        {k: (f.get("properties") or {}).get(k) for k in ("name", "borough", "slug")}
        for f in features
        if isinstance(f, dict)
    ]
    return pd.DataFrame.from_records(records, columns=["name", "borough", "slug"])


def check_uniqueness(features: List[Dict[str, Any]]) -> List[str]:
    """Slugs unique across the file, names unique within a borough."""
    errors: List[str] = []
    df = _properties_frame(features)
    if df.empty:
        return errors
    dup_slugs = df.loc[df["slug"].notna() & df["slug"].duplicated(keep=False), "slug"].unique()
    for slug in sorted(dup_slugs):
        errors.append(f"slug {slug!r} is not unique")
    named = df[df["name"].notna() & df["borough"].notna()]
    dup_names = named[named.duplicated(subset=["borough", "name"], keep="first")]
    for (borough, name), _ in dup_names.groupby(["borough", "name"]):
        errors.append(f"name {name!r} appears more than once in {borough}")
    return errors


def check_borough_coverage(features: List[Dict[str, Any]]) -> List[str]:
    df = _properties_frame(features)
    present = set(df["borough"].dropna())
    return [f"no neighborhoods in {b}" for b in BOROUGHS if b not in present]


def check_single_line_features(text: str, expected_count: Optional[int] = None) -> List[str]:
    """Every feature occupies exactly one line with balanced braces."""
    errors: List[str] = []
    feature_lines = [line for line in text.split("\n") if '"type":"Feature"' in line]
    if expected_count is not None and len(feature_lines) != expected_count:
        errors.append(f"found {len(feature_lines)} feature lines, expected {expected_count}")
    for i, line in enumerate(feature_lines):
        balance = line.count("{") - line.count("}")
        if balance != 0:
            errors.append(f"{_label(i)} is not complete on one line (brace balance {balance})")
    return errors


def validate_boundaries(
    collection: Dict[str, Any],
    text: Optional[str] = None,
    min_features: int = 0,
) -> List[str]:
    """Run every boundary rule and return the violations (empty when clean).

    Pass the raw file `text` to also check the one-feature-per-line layout.
    """
    errors = check_structure(collection)
    features = collection.get("features")
    if not isinstance(features, list):
        return errors
    if min_features and len(features) <= min_features:
        errors.append(f"expected more than {min_features} features, got {len(features)}")
    features = [f for f in features if isinstance(f, dict)]
    errors += check_properties(features)
    errors += check_uniqueness(features)
    errors += check_borough_coverage(features)
    if text is not None:
        errors += check_single_line_features(text, len(collection["features"]))
    return errors


def assert_valid_boundaries(collection: Dict[str, Any], text: Optional[str] = None, min_features: int = 0) -> None:
    errors = validate_boundaries(collection, text=text, min_features=min_features)
    if errors:
        raise SchemaViolation(errors)
