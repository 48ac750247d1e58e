"""Deterministic serialization of FeatureCollections.

The compact-lines layout is what the committed data files use: top-level keys
each on their own line and every feature as one single-line JSON value, so
diffs stay one line per neighborhood.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from .text import collation_key


FORMATS = ("compact-lines", "pretty")

_FEATURE_HEAD = ("type", "properties", "geometry")


def _plain_numbers(value: Any) -> Any:
    """Integral floats as ints, so -74.0 is written as -74 like the committed files."""
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return int(value)
        return value
    if isinstance(value, dict):
        return {k: _plain_numbers(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain_numbers(v) for v in value]
    return value


def _compact(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _sort_key(feature: Dict[str, Any]):
    props = feature.get("properties") or {}
    return (collation_key(props.get("borough") or ""), collation_key(props.get("name") or ""))


def sort_features(features: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Stable sort by (borough, name); missing values sort as empty strings."""
    return sorted(features, key=_sort_key)


def reorder_feature(feature: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of `feature` with keys type, properties, geometry first, then the rest in order."""
    out = {k: feature.get(k) for k in _FEATURE_HEAD}
    for k, v in feature.items():
        if k not in _FEATURE_HEAD:
            out[k] = v
    return out


def canonicalize(collection: Dict[str, Any]) -> Dict[str, Any]:
    """Sorted, key-ordered copy: type, other top-level keys, features.

    Integral floats become ints on the way.
    """
    out: Dict[str, Any] = {"type": collection.get("type")}
    for k, v in collection.items():
        if k not in ("type", "features"):
            out[k] = v
    out["features"] = [reorder_feature(f) for f in sort_features(collection.get("features") or [])]
    return _plain_numbers(out)


def render_compact_lines(collection: Dict[str, Any]) -> str:
    """Lay out an already canonicalized collection, one feature per line."""
    lines = ["{", f'  "type": {_compact(collection.get("type"))},']
    for k, v in collection.items():
        if k not in ("type", "features"):
            lines.append(f"  {_compact(k)}: {_compact(v)},")
    features = collection.get("features") or []
    lines.append('  "features": [')
    last = len(features) - 1
    for i, feature in enumerate(features):
        comma = "," if i < last else ""
        lines.append(f"    {_compact(feature)}{comma}")
    lines.append("  ]")
    lines.append("}")
    return "\n".join(lines) + "\n"


def dumps_compact_lines(collection: Dict[str, Any]) -> str:
    return render_compact_lines(canonicalize(collection))


def dumps_pretty(collection: Dict[str, Any]) -> str:
    return json.dumps(canonicalize(collection), ensure_ascii=False, indent=2) + "\n"


def format_collection(collection: Dict[str, Any], fmt: str = "compact-lines") -> str:
    if fmt == "compact-lines":
        return dumps_compact_lines(collection)
    if fmt == "pretty":
        return dumps_pretty(collection)
    raise ValueError(f"unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")
