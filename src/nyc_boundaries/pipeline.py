from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from .centroids import generate_centroids
from .formatting import format_collection
from .io import load_feature_collection, write_text
from .properties import MergeResult, apply_properties


BOUNDARIES_FILENAME = "nyc-neighborhood-boundaries.geojson"
CENTROIDS_FILENAME = "nyc-neighborhood-boundaries-centroids.geojson"


@dataclass
class Paths:
    boundaries: Path
    centroids: Path

    @classmethod
    def from_data_dir(cls, data_dir: str | Path = "data") -> "Paths":
        base = Path(data_dir)
        return cls(boundaries=base / BOUNDARIES_FILENAME, centroids=base / CENTROIDS_FILENAME)


def run_generate_centroids(paths: Paths, fmt: str = "compact-lines", keep: str = "all") -> Dict:
    """Regenerate the centroid file from the boundary file and return it."""
    boundaries = load_feature_collection(paths.boundaries)
    centroids = generate_centroids(boundaries, keep=keep)
    # render before touching the output so a failure leaves the old file alone
    text = format_collection(centroids, fmt)
    write_text(paths.centroids, text)
    return centroids


def run_apply_properties(paths: Paths, fmt: str = "compact-lines") -> MergeResult:
    """Rewrite centroid properties to {slug, name, color} from the boundary file."""
    boundaries = load_feature_collection(paths.boundaries)
    centroids = load_feature_collection(paths.centroids)
    result = apply_properties(boundaries, centroids)
    text = format_collection(result.collection, fmt)
    write_text(paths.centroids, text)
    return result


def run_format_geojson(path: str | Path, fmt: str = "compact-lines") -> int:
    """Canonicalize one file in place; returns the number of features written."""
    collection = load_feature_collection(path)
    text = format_collection(collection, fmt)
    write_text(path, text)
    return len(collection["features"])


def run_all(paths: Paths, fmt: str = "compact-lines") -> tuple[Dict, MergeResult]:
    """Centroids, then property merge, then formatting of the boundary file.

    The centroid collection is only written once, after the merge.
    """
    boundaries = load_feature_collection(paths.boundaries)
    centroids = generate_centroids(boundaries, keep="all")
    result = apply_properties(boundaries, centroids)
    centroid_text = format_collection(result.collection, fmt)
    boundary_text = format_collection(boundaries, fmt)
    write_text(paths.centroids, centroid_text)
    write_text(paths.boundaries, boundary_text)
    return centroids, result

