"""NYC neighborhood boundary data-preparation utilities.

Modules:
- geo: shoelace area and polygon/multipolygon centroids
- text: slug derivation and sort keys
- io: load/save helpers for GeoJSON
- centroids, properties: centroid generation and slug-keyed property merge
- formatting: canonical one-feature-per-line serialization
- validate: boundary file rules
"""

from .errors import (
    BoundaryDataError,
    CentroidError,
    DegenerateGeometryError,
    JsonParseError,
    SchemaViolation,
    UnsupportedGeometryError,
)
from .geo import ring_area, ring_centroid, geometry_centroid, round_coord
from .text import kebab_case, make_slug
from .io import load_feature_collection, write_text
from .centroids import generate_centroids
from .properties import MergeResult, apply_properties
from .formatting import dumps_compact_lines, dumps_pretty, format_collection
from .validate import validate_boundaries

__all__ = [
    "BoundaryDataError",
    "CentroidError",
    "DegenerateGeometryError",
    "JsonParseError",
    "SchemaViolation",
    "UnsupportedGeometryError",
    "ring_area",
    "ring_centroid",
    "geometry_centroid",
    "round_coord",
    "kebab_case",
    "make_slug",
    "load_feature_collection",
    "write_text",
    "generate_centroids",
    "MergeResult",
    "apply_properties",
    "dumps_compact_lines",
    "dumps_pretty",
    "format_collection",
    "validate_boundaries",
]
