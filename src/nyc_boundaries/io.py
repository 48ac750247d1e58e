from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import geopandas as gpd

from .errors import JsonParseError


PathLike = Union[str, Path]


def load_feature_collection(path: PathLike) -> Dict[str, Any]:
    """Load a GeoJSON FeatureCollection as plain dicts, keeping key order.

    Raises FileNotFoundError for a missing file and JsonParseError when the
    content is not JSON or has no `features` list.
    """
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonParseError(f"{p}: invalid JSON ({e})") from e
    if not isinstance(data, dict) or not isinstance(data.get("features"), list):
        raise JsonParseError(f"{p}: expected a FeatureCollection with a 'features' list")
    return data


def read_text(path: PathLike) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_text(path: PathLike, text: str) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


def features_to_gdf(collection: Dict[str, Any]) -> gpd.GeoDataFrame:
    """GeoDataFrame (EPSG:4326) with one row per feature and properties as columns."""
    features = collection.get("features") or []
    if not features:
        return gpd.GeoDataFrame(geometry=[], crs=4326)
    return gpd.GeoDataFrame.from_features(features, crs=4326)
