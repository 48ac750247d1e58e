from __future__ import annotations

import copy
from typing import Any, Dict, Tuple

from .errors import CentroidError, GeometryError
from .geo import centroid_point


MERGED_PROPERTIES: Tuple[str, ...] = ("slug", "name", "color")


def _centroid_properties(properties: Dict[str, Any] | None, keep: str) -> Dict[str, Any]:
    props = copy.deepcopy(properties) if properties else {}
    if keep == "all":
        return props
    if keep == "merge":
        return {k: props[k] for k in MERGED_PROPERTIES if k in props}
    raise ValueError(f"keep must be 'all' or 'merge', got {keep!r}")


def generate_centroids(boundaries: Dict[str, Any], keep: str = "all") -> Dict[str, Any]:
    """Build a FeatureCollection of Point features, one per boundary feature.

    `id` is preserved, properties are copied (all of them, or only
    slug/name/color with keep="merge"), metadata is carried forward with
    `features_count` recomputed. The first geometry failure aborts the run
    with a CentroidError naming the feature.
    """
    out_features = []
    for i, feature in enumerate(boundaries.get("features") or []):
        try:
            point = centroid_point(feature.get("geometry"))
        except GeometryError as e:
            raise CentroidError(i, feature.get("id"), e) from e
        centroid: Dict[str, Any] = {
            "type": "Feature",
            "properties": _centroid_properties(feature.get("properties"), keep),
            "geometry": point,
        }
        if "id" in feature:
            centroid["id"] = feature["id"]
        out_features.append(centroid)

    out: Dict[str, Any] = {"type": "FeatureCollection"}
    if "metadata" in boundaries:
        metadata = copy.deepcopy(boundaries["metadata"])
        if isinstance(metadata, dict) and "features_count" in metadata:
            metadata["features_count"] = len(out_features)
        out["metadata"] = metadata
    out["features"] = out_features
    return out
