from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class MergeResult:
    collection: Dict[str, Any]
    matched: int
    unmatched: int


def property_map(boundaries: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """slug -> {name, color} for every boundary feature that has a slug."""
    mapping: Dict[str, Dict[str, Any]] = {}
    for feature in boundaries.get("features") or []:
        props = feature.get("properties") or {}
        slug = props.get("slug")
        if slug:
            mapping[slug] = {"name": props.get("name"), "color": props.get("color")}
    return mapping


def apply_properties(boundaries: Dict[str, Any], centroids: Dict[str, Any]) -> MergeResult:
    """Left join boundary name/color onto centroids by slug.

    Matched centroids end up with exactly {slug, name, color}; unmatched ones
    with {}. The input collections are left untouched.
    """
    mapping = property_map(boundaries)
    matched = 0
    unmatched = 0
    features = []
    for feature in centroids.get("features") or []:
        slug = (feature.get("properties") or {}).get("slug")
        updated = dict(feature)
        if slug and slug in mapping:
            src = mapping[slug]
            updated["properties"] = {"slug": slug, "name": src["name"], "color": src["color"]}
            matched += 1
        else:
            updated["properties"] = {}
            unmatched += 1
        features.append(updated)
    collection = {k: v for k, v in centroids.items() if k != "features"}
    collection["features"] = features
    return MergeResult(collection=collection, matched=matched, unmatched=unmatched)
