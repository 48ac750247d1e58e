from __future__ import annotations

import math
from typing import Any, List, Mapping, Sequence

import numpy as np

from .errors import DegenerateGeometryError, GeometryError, UnsupportedGeometryError


Ring = Sequence[Sequence[float]]

# 6 decimals ~ 0.11 m at NYC latitudes
COORD_PRECISION = 6


def _ring_xy(ring: Ring) -> tuple[np.ndarray, np.ndarray]:
    # positions may mix [lon, lat] and [lon, lat, alt]
    try:
        x = np.array([p[0] for p in ring], dtype=float)
        y = np.array([p[1] for p in ring], dtype=float)
    except (TypeError, ValueError, IndexError, KeyError) as e:
        raise GeometryError(f"malformed ring position: {e}") from e
    if x.size < 2:
        empty = np.empty(0, dtype=float)
        return empty, empty
    return x, y


def ring_area(ring: Ring) -> float:
    """Signed shoelace area of a closed ring.

    Positive for counter-clockwise winding, negative for clockwise. Any
    coordinate dimension beyond (x, y) is ignored.
    """
    x, y = _ring_xy(ring)
    if x.size < 2:
        return 0.0
    cross = x[:-1] * y[1:] - x[1:] * y[:-1]
    return float(cross.sum() / 2.0)


def ring_centroid(ring: Ring) -> List[float]:
    """Area centroid of a closed, simple ring as [cx, cy]."""
    area = ring_area(ring)
    if area == 0:
        raise DegenerateGeometryError("ring has zero area; centroid is undefined")
    x, y = _ring_xy(ring)
    cross = x[:-1] * y[1:] - x[1:] * y[:-1]
    cx = float(((x[:-1] + x[1:]) * cross).sum() / (6.0 * area))
    cy = float(((y[:-1] + y[1:]) * cross).sum() / (6.0 * area))
    return [cx, cy]


def _outer_ring(polygon: Sequence[Ring]) -> Ring:
    if not polygon:
        raise DegenerateGeometryError("polygon has no rings")
    return polygon[0]


def largest_polygon(polygons: Sequence[Sequence[Ring]]) -> Sequence[Ring]:
    """Sub-polygon whose outer ring has the largest absolute area (first wins ties)."""
    best = None
    best_area = -1.0
    for polygon in polygons:
        area = abs(ring_area(_outer_ring(polygon)))
        if area > best_area:
            best, best_area = polygon, area
    if best is None:
        raise DegenerateGeometryError("multipolygon has no polygons")
    return best


def geometry_centroid(geometry: Mapping[str, Any] | None) -> List[float]:
    """Centroid of a Polygon or MultiPolygon geometry.

    Holes are ignored. For a MultiPolygon only the largest part counts, so the
    point always falls on the main landmass of an island neighborhood.
    """
    gtype = geometry.get("type") if geometry else None
    if gtype == "Polygon":
        return ring_centroid(_outer_ring(geometry.get("coordinates") or []))
    if gtype == "MultiPolygon":
        return ring_centroid(_outer_ring(largest_polygon(geometry.get("coordinates") or [])))
    raise UnsupportedGeometryError(f"unsupported geometry type: {gtype!r}")


def round_coord(value: float, ndigits: int = COORD_PRECISION) -> float:
    """Round half up to ndigits decimals."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def centroid_point(geometry: Mapping[str, Any] | None) -> dict:
    """GeoJSON Point geometry at the rounded centroid of `geometry`."""
    cx, cy = geometry_centroid(geometry)
    return {"type": "Point", "coordinates": [round_coord(cx), round_coord(cy)]}
